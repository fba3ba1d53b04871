"""Verify loading `.env` files into the environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from dotenv_ninja import config, loader, resolve_home

# pylint: disable=redefined-outer-name


@pytest.fixture
def store() -> dict[str, str]:
    """Provide an isolated environment store."""
    return {'DB_USER': 'admin'}


def test_config(example_file: Path, store: dict[str, str]) -> None:
    """The file is parsed, and its entries are merged without replacing existing keys."""
    # Act
    result = config(path=example_file, environ=store)

    # Assert
    assert result
    assert result.error is None
    assert {'DB_HOST': 'localhost', 'DB_USER': 'root', 'DB_PASS': 's1mpl3'} == result.parsed
    assert {'DB_USER': 'admin', 'DB_HOST': 'localhost', 'DB_PASS': 's1mpl3'} == store


def test_config_override(example_file: Path, store: dict[str, str]) -> None:
    """With `override=True`, existing keys are replaced."""
    # Act
    config(path=example_file, environ=store, override=True)

    # Assert
    assert 'root' == store['DB_USER']


def test_config_multiline(multiline_file: Path, store: dict[str, str]) -> None:
    """With `multiline=True`, quoted values may span multiple lines."""
    # Act
    result = config(path=multiline_file, environ=store, multiline=True)

    # Assert
    assert {
        'PRIVATE_KEY': '-----BEGIN KEY-----\nabc123\n-----END KEY-----',
        'GREETING': 'hello\nworld',
        'PORT': '8080',
    } == result.parsed


def test_config_default_path(
    example_file: Path, store: dict[str, str], monkeypatch: pytest.MonkeyPatch
) -> None:
    """The `.env` file in the current working directory is read by default."""
    # Arrange
    monkeypatch.chdir(example_file.parent)

    # Act
    result = config(environ=store)

    # Assert
    assert 'localhost' == store['DB_HOST']
    assert result.parsed is not None


def test_config_os_environ(example_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Entries are merged into `os.environ` when no store is given."""
    # Arrange
    for key in ('DB_HOST', 'DB_USER', 'DB_PASS'):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv('DB_HOST', 'db.internal')

    # Act
    config(path=example_file)
    written = {key: os.environ.pop(key) for key in ('DB_USER', 'DB_PASS')}

    # Assert
    assert 'db.internal' == os.environ['DB_HOST']
    assert {'DB_USER': 'root', 'DB_PASS': 's1mpl3'} == written


def test_config_missing_file(tmp_path: Path, store: dict[str, str]) -> None:
    """A missing file is reported as an error, and the store is left untouched."""
    # Act
    result = config(path=tmp_path / 'missing.env', environ=store)

    # Assert
    assert not result
    assert result.parsed is None
    assert isinstance(result.error, FileNotFoundError)
    assert {'DB_USER': 'admin'} == store


def test_config_decode_error(tmp_path: Path, store: dict[str, str]) -> None:
    """A file that cannot be decoded with the given encoding is reported as an error."""
    # Arrange
    path = tmp_path / '.env'
    path.write_bytes(b'A=\xff\xfe\n')

    # Act
    result = config(path=path, environ=store, encoding='utf-8')

    # Assert
    assert isinstance(result.error, UnicodeDecodeError)
    assert {'DB_USER': 'admin'} == store


def test_config_unknown_encoding(example_file: Path, store: dict[str, str]) -> None:
    """An unknown encoding is reported as an error."""
    # Act
    result = config(path=example_file, environ=store, encoding='not-an-encoding')

    # Assert
    assert isinstance(result.error, LookupError)


def test_config_encoding(tmp_path: Path, store: dict[str, str]) -> None:
    """The file is decoded with the given encoding."""
    # Arrange
    path = tmp_path / '.env'
    path.write_bytes('NAME=Zoë\n'.encode('latin-1'))

    # Act
    result = config(path=path, environ=store, encoding='latin-1')

    # Assert
    assert {'NAME': 'Zoë'} == result.parsed


def test_config_debug(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """With `debug=True`, failures to load the file are logged."""
    # Arrange
    path = tmp_path / 'missing.env'

    # Act
    with caplog.at_level(logging.DEBUG, logger=loader.__name__):
        config(path=path, environ={}, debug=True)

    # Assert
    assert any(message.startswith(f'Failed to load {path}') for message in caplog.messages), caplog.text


def test_resolve_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """A leading `~` is replaced with the home directory."""
    # Arrange
    monkeypatch.setattr(Path, 'home', lambda: tmp_path)

    # Act
    resolved = [resolve_home(p) for p in ('~/.env', '~', '~.env', 'dir/~/.env', Path('/abs/.env'))]

    # Assert
    assert [tmp_path / '.env', tmp_path, tmp_path / '.env', Path('dir/~/.env'), Path('/abs/.env')] == resolved


def test_config_resolves_home(
    example_file: Path, store: dict[str, str], monkeypatch: pytest.MonkeyPatch
) -> None:
    """The path given to `config()` may start with `~`."""
    # Arrange
    monkeypatch.setattr(Path, 'home', lambda: example_file.parent)

    # Act
    result = config(path='~/.env', environ=store)

    # Assert
    assert result.parsed is not None
    assert 'localhost' == store['DB_HOST']


def test_config_byte_order_mark(tmp_path: Path, store: dict[str, str]) -> None:
    """The first entry of a file saved with a UTF-8 byte-order mark is kept."""
    # Arrange
    path = tmp_path / '.env'
    path.write_bytes(b'\xef\xbb\xbfFIRST=1\nSECOND=2\n')

    # Act
    result = config(path=path, environ=store)

    # Assert
    assert {'FIRST': '1', 'SECOND': '2'} == result.parsed


def test_config_null_byte(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A value containing a null byte does not stop the other entries from reaching `os.environ`."""
    # Arrange
    path = tmp_path / '.env'
    path.write_bytes(b'DOTENV_NINJA_TEST_NUL=a\x00b\nDOTENV_NINJA_TEST_AFTER=ok\n')
    for key in ('DOTENV_NINJA_TEST_NUL', 'DOTENV_NINJA_TEST_AFTER'):
        monkeypatch.delenv(key, raising=False)

    # Act
    result = config(path=path)
    after = os.environ.pop('DOTENV_NINJA_TEST_AFTER', None)

    # Assert
    assert result
    assert {'DOTENV_NINJA_TEST_NUL': 'a\x00b', 'DOTENV_NINJA_TEST_AFTER': 'ok'} == result.parsed
    assert 'ok' == after
    assert 'DOTENV_NINJA_TEST_NUL' not in os.environ
