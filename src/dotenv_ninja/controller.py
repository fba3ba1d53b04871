"""Define a controller class for operating on a `.env` source."""

from __future__ import annotations

import logging
import typing

from dotenv_ninja.backend import Backend, FormatT, dumps
from dotenv_ninja.parser import parse
from dotenv_ninja.settings.schema import Options

__all__ = ['ActionType', 'DotenvController']

logger = logging.getLogger(__name__)

ActionType: typing.TypeAlias = typing.Callable[[str], typing.Any]


class DotenvController:
    """Parse the contents of a `dotenv_ninja.backend.Backend` with a set of `Options`.

    >>> ctrl = DotenvController(LocalBackend(example_file), {'debug': True})
    >>> ctrl.get(print, 'dotenv', ['DB_HOST'])
    DB_HOST="localhost"
    """

    backend: Backend
    """Read the `.env` source from this backend."""

    logger: logging.Logger
    """Each `DotenvController` has its own logger (named `"dotenv_ninja.controller:{backend}"`)."""

    options: Options
    """Parse (and merge) the source with these options."""

    def __init__(self, backend: Backend, options: Options | None = None) -> None:
        """Initialize a logger for the given backend."""
        self.backend = backend
        self.options = options or {}
        self.logger = logging.getLogger(f'{__name__}:{backend}')

    def __str__(self) -> str:
        """Represent the controller as its backend."""
        return f'{self.backend}'

    def _parse(self, content: str, keys: typing.Sequence[str] | None = None) -> dict[str, str]:
        parsed = parse(
            content,
            debug=self.options.get('debug', False),
            multiline=self.options.get('multiline', False),
        )
        if not keys:
            return parsed

        missing = [key for key in keys if key not in parsed]
        if missing:
            self.logger.warning('undefined key(s): %s', ', '.join(missing))
        return {key: parsed[key] for key in keys if key in parsed}

    def get(self, do_print: ActionType, fmt: FormatT = 'json', keys: typing.Sequence[str] | None = None) -> None:
        """Parse the source, and print the entries (optionally only those named by `keys`)."""
        do_print(dumps(fmt, self._parse(self.backend.get(), keys)))

    async def aget(
        self, do_print: ActionType, fmt: FormatT = 'json', keys: typing.Sequence[str] | None = None
    ) -> None:
        """Poll the source, and print the entries on each update."""
        async for content in self.backend.poll():
            do_print(dumps(fmt, self._parse(content, keys)))


logger.debug('successfully imported %s', __name__)
