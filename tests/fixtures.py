"""Define fixtures for the test suite."""

from __future__ import annotations

from pathlib import Path
from unittest import mock

import pytest
import pytest_mock

# pylint: disable=redefined-outer-name

MOCK_DOTENV = b"""# database settings
DB_HOST=localhost
DB_USER="root"
DB_PASS='s1mpl3'
"""

MOCK_DOTENV_MULTILINE = b"""# keys span multiple lines
PRIVATE_KEY="-----BEGIN KEY-----
abc123
-----END KEY-----"
GREETING='hello
world'
PORT=8080
"""

MOCK_SETTINGS = b"""
DOTENV_NINJA_OPTIONS:
  path: .env.example
  multiline: true

DOTENV_NINJA_LOGGING:
  root:
    level: DEBUG
""".lstrip()


@pytest.fixture(autouse=True)
def monkeypatch_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    """Monkeypatch environment variables for all tests."""
    monkeypatch.setenv('TERM', 'dumb')
    monkeypatch.setenv('NO_COLOR', '1')


@pytest.fixture
def example_file(tmp_path: Path) -> Path:
    """Write the test `.env` file to the temporary directory."""
    path = tmp_path / '.env'
    path.write_bytes(MOCK_DOTENV)
    return path


example_file.__doc__ = f"""Write the test `.env` file to the temporary directory.

```sh
{MOCK_DOTENV.decode('utf-8')}
```
"""


@pytest.fixture
def multiline_file(tmp_path: Path) -> Path:
    """Write a `.env` file with values spanning multiple lines to the temporary directory."""
    path = tmp_path / '.env.multiline'
    path.write_bytes(MOCK_DOTENV_MULTILINE)
    return path


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Write a `dotenv-ninja` settings file to the temporary directory."""
    path = tmp_path / 'dotenv-ninja-settings.yaml'
    path.write_bytes(MOCK_SETTINGS)
    return path


@pytest.fixture
def no_settings(mocker: pytest_mock.MockerFixture) -> None:
    """Ensure no settings file is found in any of the default locations."""
    mocker.patch('dotenv_ninja.settings.DEFAULT_PATHS', new=[Path('does not'), Path('exist')])


@pytest.fixture(autouse=True)
def mock_logging_dict_config(mocker: pytest_mock.MockerFixture) -> mock.MagicMock:
    """Mock the `logging.config.dictConfig()` function."""
    return mocker.patch('logging.config.dictConfig')
