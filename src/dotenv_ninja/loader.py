"""Load a `.env` file and merge its entries into the environment.

>>> environ = {'DB_USER': 'admin'}
>>> result = config(path=example_file, environ=environ)
>>> result.parsed
{'DB_HOST': 'localhost', 'DB_USER': 'root', 'DB_PASS': 's1mpl3'}
>>> environ
{'DB_USER': 'admin', 'DB_HOST': 'localhost', 'DB_PASS': 's1mpl3'}

Failures to read the file are returned instead of raised, and the environment is left alone:

>>> result = config(path='does/not/exist.env', environ=environ)
>>> result.parsed is None, type(result.error)
(True, <class 'FileNotFoundError'>)
"""

from __future__ import annotations

import dataclasses
import logging
import os
from pathlib import Path

from dotenv_ninja.contrib.local import LocalBackend
from dotenv_ninja.environ import EnvironT, merge
from dotenv_ninja.parser import parse

__all__ = ['DEFAULT_ENCODING', 'DEFAULT_FILENAME', 'LoadResult', 'config', 'resolve_home']

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = 'utf-8'
"""Decode the `.env` file with this encoding unless told otherwise."""

DEFAULT_FILENAME = '.env'
"""Look for this file in the current working directory unless a path is given."""


@dataclasses.dataclass(frozen=True)
class LoadResult:
    """The outcome of `config()`: either the parsed entries or the error raised while reading the file."""

    parsed: dict[str, str] | None = None
    """Every entry parsed from the file (including those that were not written to the environment)."""

    error: Exception | None = None
    """The error raised while reading or decoding the file."""

    def __bool__(self) -> bool:
        """A result is truthy when the file was loaded.

        >>> bool(LoadResult(parsed={})), bool(LoadResult(error=OSError()))
        (True, False)
        """
        return self.error is None


def resolve_home(path: str | os.PathLike[str]) -> Path:
    """Expand a leading `~` to the current user's home directory.

    >>> resolve_home('~/.env.local') == Path.home() / '.env.local'
    True
    >>> resolve_home('relative/.env') == Path('relative/.env')
    True
    """
    raw = os.fspath(path)
    if raw.startswith('~'):
        return Path.home() / raw[1:].lstrip('/\\')

    return Path(raw)


def config(  # noqa: PLR0913
    *,
    path: str | os.PathLike[str] | None = None,
    encoding: str | None = None,
    debug: bool = False,
    override: bool = False,
    multiline: bool = False,
    environ: EnvironT | None = None,
) -> LoadResult:
    """Read the `.env` file at `path`, parse it, and merge the entries into `environ`.

    `path` defaults to `.env` in the current working directory, and `environ` to `os.environ`.
    """
    dotenv_path = resolve_home(path) if path is not None else Path.cwd() / DEFAULT_FILENAME
    backend = LocalBackend(dotenv_path, encoding or DEFAULT_ENCODING)

    try:
        src = backend.get()
    except (OSError, UnicodeError, LookupError) as exc:
        if debug:
            logger.debug('Failed to load %s: %s', dotenv_path, exc)
        return LoadResult(error=exc)

    parsed = parse(src, debug=debug, multiline=multiline)
    merge(parsed, environ, override=override, debug=debug)

    return LoadResult(parsed=parsed)


logger.debug('successfully imported %s', __name__)
