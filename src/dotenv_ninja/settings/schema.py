"""Define the schema of `dotenv-ninja`'s settings file.

The `typing.TypedDict` classes in this module describe the structure of the settings file:

```yaml
DOTENV_NINJA_OPTIONS:
  path: ~/.env.local
  multiline: true
  override: false

DOTENV_NINJA_LOGGING:
  root:
    level: DEBUG
```

- `DOTENV_NINJA_OPTIONS:`  (`Options`)
- `DOTENV_NINJA_LOGGING:`  (`DictConfig`)
"""

from __future__ import annotations

import logging
import typing
from typing import Literal, NotRequired, TypeAlias, TypedDict

__all__ = ['DictConfig', 'DictConfigDefault', 'Options']

logger = logging.getLogger(__name__)


FilterId: TypeAlias = str
FormatterId: TypeAlias = str
HandlerId: TypeAlias = str
LoggerName: TypeAlias = str


class Formatter(TypedDict):
    """Structure of the `logging.Formatter` parameters in `DictConfig`."""

    datefmt: str
    format: str
    style: Literal['%', '{', '$']
    validate: bool


class Filter(TypedDict):
    """Structure of the `logging.Filter` parameters in `DictConfig`."""

    name: LoggerName


Handler = TypedDict(
    'Handler',
    {
        'class': str,
        'filters': NotRequired[typing.List[FilterId]],
        'formatter': FormatterId,
        'level': NotRequired[typing.Union[str, int]],
        'rich_tracebacks': NotRequired[bool],
    },
)
"""Structure of the `logging.Handler` parameters in `DictConfig`."""


class Logger(TypedDict):
    """Structure of the `logging.Logger` parameters in `DictConfig`."""

    filters: NotRequired[list[FilterId]]
    handlers: list[HandlerId]
    level: NotRequired[str | int]
    propagate: NotRequired[bool]


class DictConfig(TypedDict):
    """Type annotations for the `logging configuration dictionary schema`_.

    .. _logging configuration dictionary schema: https://docs.python.org/3/library/logging.config.html#logging-config-dictschema
    """

    disable_existing_loggers: NotRequired[bool]
    filters: NotRequired[dict[FilterId, Filter]]
    formatters: NotRequired[dict[FormatterId, Formatter]]
    handlers: NotRequired[dict[HandlerId, Handler]]
    incremental: NotRequired[bool]
    loggers: NotRequired[dict[LoggerName, Logger]]
    root: NotRequired[Logger]
    version: NotRequired[Literal[1]]


class DictConfigDefault(TypedDict):
    """Like `DictConfig`, but with every key defined."""

    disable_existing_loggers: bool
    filters: dict[FilterId, Filter]
    formatters: dict[FormatterId, Formatter]
    handlers: dict[HandlerId, Handler]
    incremental: bool
    loggers: dict[LoggerName, Logger]
    root: Logger
    version: Literal[1]


class Options(TypedDict, total=False):
    """Defaults for loading `.env` files; each is overridden by the matching CLI option.

    ```yaml
    DOTENV_NINJA_OPTIONS:
      path: .env.production
      encoding: latin-1
      debug: false
      override: true
      multiline: true
    ```
    """

    path: str
    """Read this `.env` file (a leading `~` is expanded to the home directory)."""

    encoding: str
    """Decode the file with this encoding (default: `utf-8`)."""

    debug: bool
    """Log lines that fail to parse, and keys that are already defined."""

    override: bool
    """Replace variables that are already defined in the environment."""

    multiline: bool
    """Allow quoted values to span multiple lines."""


logger.debug('successfully imported %s', __name__)
