"""Read and deserialize configuration for the `dotenv-ninja` CLI.

## Schema

See `dotenv_ninja.settings.schema` for the schema of the `dotenv-ninja` settings file.
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from pathlib import Path

import pyspry

from dotenv_ninja.settings.schema import DictConfig, DictConfigDefault, Options

__all__ = [
    'DEFAULT_LOGGING_CONFIG',
    'DEFAULT_PATHS',
    'PREFIX',
    'Config',
    'load',
    'resolve_path',
]

logger = logging.getLogger(__name__)

DEFAULT_PATHS = [
    Path.cwd() / 'dotenv-ninja-settings.yaml',
    Path.home() / 'dotenv-ninja-settings.yaml',
    Path('/etc/dotenv-ninja/settings.yaml'),
]
"""Check each of these locations for `dotenv-ninja`'s settings file.

The following locations are checked (ordered by priority):

1. `./dotenv-ninja-settings.yaml`
2. `~/dotenv-ninja-settings.yaml`
3. `/etc/dotenv-ninja/settings.yaml`
"""


DEFAULT_LOGGING_CONFIG: DictConfigDefault = {
    'version': 1,
    'formatters': {
        'simple': {
            'datefmt': logging.Formatter.default_time_format,
            'format': '%(message)s',
            'style': '%',
            'validate': False,
        },
    },
    'filters': {},
    'handlers': {
        'rich': {
            'class': 'rich.logging.RichHandler',
            'formatter': 'simple',
            'rich_tracebacks': True,
        },
    },
    'loggers': {},
    'root': {
        'handlers': ['rich'],
        'level': logging.INFO,
        'propagate': False,
    },
    'disable_existing_loggers': False,
    'incremental': False,
}
"""Default logging configuration passed to `logging.config.dictConfig()`."""

PREFIX = 'DOTENV_NINJA'
"""Each of `dotenv-ninja`'s settings must be prefixed with this string."""


@dataclasses.dataclass
class Config:
    """Wrap the `pyspry.Settings` object, exposing its sections with defaults applied."""

    settings: pyspry.Settings
    """The settings loaded from the file."""

    path: Path | None = None
    """The file the settings were loaded from."""

    @property
    def logging_config(self) -> DictConfig:
        """The `DOTENV_NINJA_LOGGING` section (empty when undefined)."""
        return typing.cast(DictConfig, getattr(self.settings, 'LOGGING', None) or {})

    @property
    def options(self) -> Options:
        """The `DOTENV_NINJA_OPTIONS` section (empty when undefined).

        >>> options = load(settings_file).options
        >>> options['path'], options['multiline']
        ('.env.example', True)

        Unknown options are logged as a warning and ignored.
        """
        options = dict(getattr(self.settings, 'OPTIONS', None) or {})
        unknown = [key for key in options if key not in Options.__annotations__]
        if unknown:
            logger.warning(
                'Ignoring unknown option(s) in %s: %s', self.path or 'settings', ', '.join(map(str, unknown))
            )

        return typing.cast(Options, {key: value for key, value in options.items() if key not in unknown})


def load(path: Path) -> Config:
    """Load the settings from the given path."""
    logger.debug("Load settings: '%s'", path)
    return Config(settings=pyspry.Settings.load(path, PREFIX), path=Path(path))


def resolve_path() -> Path:
    """Return the first path in `DEFAULT_PATHS` that exists."""
    for path in DEFAULT_PATHS:
        if path.is_file():
            return path

    raise FileNotFoundError('Could not find dotenv-ninja settings', DEFAULT_PATHS)


logger.debug('successfully imported %s', __name__)
