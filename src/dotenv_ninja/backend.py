"""Define the API for `.env` source backends, and the output formats for parsed entries."""

from __future__ import annotations

import abc
import json
import logging
import typing
from typing import Any, AsyncIterator, Callable, Dict

import tomlkit as toml
import yaml

__all__ = ['Backend', 'FormatT', 'dumps']

logger = logging.getLogger(__name__)

FormatT = typing.Literal['dotenv', 'json', 'toml', 'yaml', 'yml']
"""The supported output formats for parsed entries."""

DumpT = Callable[[Dict[str, str]], str]


def dump_dotenv(data: dict[str, str]) -> str:
    """Render each entry as a double-quoted `KEY="VALUE"` line.

    Newlines are written as `\\n` escapes, which the parser expands again:

    >>> print(dump_dotenv({'A': 'plain', 'B': 'two\\nlines'}))
    A="plain"
    B="two\\nlines"
    """
    return '\n'.join(f'{key}="{value}"'.replace('\n', '\\n') for key, value in data.items())


def dump_json(data: dict[str, str]) -> str:
    """Serialize to JSON, preserving non-ASCII characters."""
    return json.dumps(data, ensure_ascii=False)


def dump_yaml(data: dict[str, str]) -> str:
    """Serialize to YAML, preserving the order of the entries."""
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


DUMPERS: dict[FormatT, DumpT] = {
    'dotenv': dump_dotenv,
    'json': dump_json,
    'toml': toml.dumps,  # pyright: ignore[reportUnknownMemberType]
    'yaml': dump_yaml,
    'yml': dump_yaml,
}


def dumps(fmt: FormatT, data: dict[str, str]) -> str:
    """Serialize the given `data` object to the given `FormatT`.

    >>> dumps('json', {'A': '1'})
    '{"A": "1"}'
    >>> dumps('xml', {'A': '1'})
    Traceback (most recent call last):
    ...
    ValueError: unsupported format: 'xml'
    """
    try:
        dump = DUMPERS[fmt]
    except KeyError as exc:
        raise ValueError(f"unsupported format: '{fmt}'") from exc

    return dump(data)


class Backend(abc.ABC):
    """Define the API for backend implementations."""

    def __repr__(self) -> str:
        """Represent the backend object as its invocation.

        >>> example = ExampleBackend('an example')
        >>> example
        ExampleBackend(source='an example')
        """
        annotations = dict((klass := self.__class__).__annotations__)
        annotations.pop('return', None)

        args = ', '.join(f'{key}={getattr(self, key)!r}' for key in annotations if hasattr(self, key))
        return f'{klass.__name__}({args})'

    @abc.abstractmethod
    def __str__(self) -> str:
        """When formatted as a string, represent the backend as the identifier of its source."""

    @abc.abstractmethod
    def get(self) -> str:
        """Retrieve the `.env` source as a string."""

    @abc.abstractmethod
    async def poll(self) -> AsyncIterator[str]:
        """Poll the source for changes."""
        yield ''  # pragma: no cover


logger.debug('successfully imported %s', __name__)
