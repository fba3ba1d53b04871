"""Create `dotenv-ninja`'s CLI with `typer`_.

## Examples

Print the entries of `./.env` as JSON:

```sh
dotenv-ninja get
```

Print two entries of another file as `KEY="VALUE"` lines, and keep printing them whenever the file changes:

```sh
dotenv-ninja get DB_HOST DB_USER --file ~/.env.local --format dotenv --poll
```

Run a command with the entries added to its environment:

```sh
dotenv-ninja run --override -- python manage.py runserver
```

.. note:: `typer`_ does not support `from __future__ import annotations` as of 2023-12-31

.. _typer: https://typer.tiangolo.com/
"""

import asyncio
import contextlib
import copy
import logging
import logging.config
import os
import shlex
import subprocess
import typing
from pathlib import Path
from typing import Annotated, TypeAlias

import rich
import typer
from rich.markup import escape

from dotenv_ninja import __version__, controller, loader, settings
from dotenv_ninja.backend import DUMPERS, FormatT
from dotenv_ninja.contrib.local import LocalBackend
from dotenv_ninja.settings import schema


# ruff: noqa: PLR0913
# pylint: disable=redefined-outer-name,unused-argument,too-many-arguments

__all__ = ['app', 'get', 'main', 'run', 'version']

LOG_MISSING_SETTINGS_MESSAGE = "Could not find [bold blue]dotenv-ninja[/]'s settings file"
LOG_VERBOSITY_MESSAGE = 'logging verbosity set to [green]%s[/green]'

logger = logging.getLogger(__name__)

app_kwargs: typing.Dict[str, typing.Any] = {
    'context_settings': {'help_option_names': ['-h', '--help']},
    'no_args_is_help': True,
    'rich_markup_mode': 'rich',
}

app = typer.Typer(**app_kwargs)
"""The root `typer`_ application.

.. _typer: https://typer.tiangolo.com/
"""


def help_callback(ctx: typer.Context, value: typing.Optional[bool] = None) -> None:
    """Print the help message for the command."""
    if ctx.resilient_parsing:  # pragma: no cover
        return

    if value:
        rich.print(ctx.get_help())
        raise typer.Exit()


HelpAnnotation: TypeAlias = Annotated[
    typing.Optional[bool],
    typer.Option(
        '-h',
        '--help',
        callback=help_callback,
        rich_help_panel='Global',
        show_default=False,
        is_eager=True,
        help='Show this message and exit.',
    ),
]
KeysAnnotation: TypeAlias = Annotated[
    typing.Optional[typing.List[str]],
    typer.Argument(
        help='Print the entries with matching key(s) (multiple values may be provided).'
        ' If unspecified, all entries will be printed',
        show_default=False,
        metavar='[KEY...]',
    ),
]
CommandAnnotation: TypeAlias = Annotated[
    typing.List[str],
    typer.Argument(
        help='The command to run (use [bold]--[/] to separate it from the options of [bold blue]dotenv-ninja[/]).',
        show_default=False,
        metavar='COMMAND [ARGS...]',
    ),
]
FileAnnotation: TypeAlias = Annotated[
    typing.Optional[Path],
    typer.Option(
        '-f',
        '--file',
        help='Read this [yellow].env[/] file (default: [yellow].env[/] in the current directory).',
        show_default=False,
    ),
]
EncodingAnnotation: TypeAlias = Annotated[
    typing.Optional[str],
    typer.Option('--encoding', help='Decode the file with this encoding (default: utf-8).', show_default=False),
]
MultilineAnnotation: TypeAlias = Annotated[
    typing.Optional[bool],
    typer.Option(
        '-m/-M',
        '--multiline/--no-multiline',
        help='Allow quoted values to span multiple lines.',
        show_default=False,
    ),
]
DebugAnnotation: TypeAlias = Annotated[
    typing.Optional[bool],
    typer.Option(
        '-d/-D',
        '--debug/--no-debug',
        help='Log lines that fail to parse, and variables that are already defined.',
        show_default=False,
    ),
]
OverrideAnnotation: TypeAlias = Annotated[
    typing.Optional[bool],
    typer.Option(
        '-o/-O',
        '--override/--no-override',
        help='Replace variables that are already defined in the environment.',
        show_default=False,
    ),
]
PollAnnotation: TypeAlias = Annotated[
    typing.Optional[bool],
    typer.Option(
        '-p',
        '--poll',
        help='Enable polling; print the entries on changes.',
        show_default=False,
    ),
]


def validate_format(ctx: typer.Context, value: str) -> str:
    """Ensure the `--format` option names one of the supported output formats."""
    if ctx.resilient_parsing:  # pragma: no cover
        return value

    if value not in DUMPERS:
        raise typer.BadParameter(f"unsupported format: '{value}' (options: {', '.join(DUMPERS)})")
    return value


FormatAnnotation: TypeAlias = Annotated[
    str,
    typer.Option(
        '-F',
        '--format',
        callback=validate_format,
        help=f'Print the entries in this format ({", ".join(DUMPERS)}).',
    ),
]


def load_settings(ctx: typer.Context, value: typing.Optional[Path]) -> None:
    """Load the settings file from the given path."""
    if ctx.resilient_parsing:  # pragma: no cover
        return

    ctx.ensure_object(dict)
    if not value and 'settings' in ctx.obj:
        logger.debug('already loaded settings')
        return

    try:
        settings_file = value or settings.resolve_path()
    except FileNotFoundError as exc:
        logger.debug(
            '%s%s',
            LOG_MISSING_SETTINGS_MESSAGE,
            (' at any of the following locations:\n  - ' + '\n  - '.join(f'{p}' for p in exc.args[1]))
            if len(exc.args) > 1
            else '',
            extra={'markup': True},
        )
        ctx.obj['settings'] = None
        return

    conf: settings.Config = settings.load(settings_file)
    ctx.obj['settings'] = conf
    ctx.obj['settings_file'] = settings_file

    if 'logging_config' in ctx.obj and conf.logging_config:
        configure_logging(ctx, None)


SettingsAnnotation: TypeAlias = Annotated[
    typing.Optional[Path],
    typer.Option(
        '-c',
        '--config',
        callback=load_settings,
        help="Path to [bold blue]dotenv-ninja[/]'s own settings file.",
        rich_help_panel='Global',
        show_default=False,
    ),
]


def configure_logging(ctx: typer.Context, verbose: typing.Optional[bool] = None) -> None:
    """Callback for the `--verbose` option to configure logging verbosity.

    By default, log messages at the `logging.INFO` level:

    >>> configure_logging(ctx)
    >>> caplog.messages
    ['logging verbosity set to [green]INFO[/green]']

    <!-- Clear the `caplog` fixture for the `doctest`, but exclude this from the docs
    >>> caplog.clear()

    -->
    When `verbose` is `True`, log messages at the `logging.DEBUG` level:

    >>> configure_logging(ctx, True)
    >>> caplog.messages
    ['logging verbosity set to [green]DEBUG[/green]']
    """
    if ctx.resilient_parsing:  # pragma: no cover  # this is for tab completions
        return

    ctx.ensure_object(dict)

    # the `--verbose` argument always overrides previous verbosity settings
    verbose = verbose or ctx.obj.get('verbose')
    verbosity = logging.DEBUG if verbose else logging.INFO

    logging_config: schema.DictConfigDefault = ctx.obj.get(
        'logging_config', copy.deepcopy(settings.DEFAULT_LOGGING_CONFIG)
    )

    conf: typing.Optional[settings.Config] = ctx.obj.get('settings')
    new_logging_config: schema.DictConfig = conf.logging_config if conf else {}

    for key, value in new_logging_config.items():
        base = logging_config.get(key, {})
        if isinstance(base, dict):
            base.update(value)  # type: ignore[call-overload]
        else:
            logging_config[key] = value  # type: ignore[literal-required]

    if verbose:
        logging_config['root']['level'] = verbosity
        ctx.obj['verbose'] = verbose

    logging.config.dictConfig(logging_config)  # type: ignore[arg-type]

    ctx.obj['logging_config'] = logging_config

    logger.debug(LOG_VERBOSITY_MESSAGE, logging.getLevelName(verbosity), extra={'markup': True})


VerbosityAnnotation = Annotated[
    typing.Optional[bool],
    typer.Option(
        '-v',
        '--verbose',
        callback=configure_logging,
        rich_help_panel='Global',
        help='Log messages at the [black]DEBUG[/] level.',
        is_eager=True,
        show_default=False,
    ),
]


def version_callback(ctx: typer.Context, value: typing.Optional[bool] = None) -> None:
    """Print the version of the package."""
    if ctx.resilient_parsing:  # pragma: no cover  # this is for tab completions
        return

    if value:
        rich.print(__version__)
        raise typer.Exit()


VersionAnnotation = Annotated[
    typing.Optional[bool],
    typer.Option(
        '-V',
        '--version',
        callback=version_callback,
        rich_help_panel='Global',
        show_default=False,
        is_eager=True,
        help='Print the version and exit.',
    ),
]


def resolve_options(ctx: typer.Context, **flags: typing.Any) -> schema.Options:
    """Combine the settings file's `DOTENV_NINJA_OPTIONS` with the options given on the command line.

    Options that were not given on the command line (`None`) fall back to the settings file:

    >>> ctx.obj = {'settings': None}
    >>> resolve_options(ctx, path=Path('.env.test'), multiline=None, debug=False)
    {'path': '.env.test', 'debug': False}
    """
    ctx.ensure_object(dict)
    conf: typing.Optional[settings.Config] = ctx.obj.get('settings')
    options: schema.Options = conf.options if conf else {}

    for key, value in flags.items():
        if value is not None:
            options[key] = os.fspath(value) if isinstance(value, Path) else value  # type: ignore[literal-required]

    if options.get('debug'):
        if 'logging_config' not in ctx.obj:
            configure_logging(ctx, None)
        logging.getLogger('dotenv_ninja').setLevel(logging.DEBUG)

    return options


@contextlib.contextmanager
def handle_load_errors(source: typing.Any) -> typing.Iterator[None]:
    """Handle errors raised while reading the `.env` file within the managed context."""
    try:
        yield
    except (OSError, UnicodeError, LookupError) as exc:
        rich.print(f'[red]ERROR[/]: Failed to load [purple]{escape(str(source))}[/]: {escape(str(exc))}')
        raise typer.Exit(1) from exc


# ⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯⎯
#                                             command definitions


@app.command()
def get(
    ctx: typer.Context,
    keys: KeysAnnotation = None,
    dotenv_file: FileAnnotation = None,
    encoding: EncodingAnnotation = None,
    multiline: MultilineAnnotation = None,
    debug: DebugAnnotation = None,
    fmt: FormatAnnotation = 'json',
    poll: PollAnnotation = False,
    get_help: HelpAnnotation = None,
    config: SettingsAnnotation = None,
    verbose: VerbosityAnnotation = None,
    version: VersionAnnotation = None,
) -> None:
    """Print the entries parsed from the [yellow].env[/] file."""
    options = resolve_options(ctx, path=dotenv_file, encoding=encoding, multiline=multiline, debug=debug)
    backend = LocalBackend(
        loader.resolve_home(options.get('path', loader.DEFAULT_FILENAME)),
        options.get('encoding', loader.DEFAULT_ENCODING),
    )
    ctrl = controller.DotenvController(backend, options)
    output_format = typing.cast(FormatT, fmt)

    with handle_load_errors(backend):
        if poll:
            logger.debug('Begin monitoring (read-only): [yellow]%s[/yellow]', ctrl, extra={'markup': True})
            asyncio.run(ctrl.aget(typer.echo, output_format, keys))
            return

        logger.debug('Get [yellow]%s[/yellow]', ctrl, extra={'markup': True})
        ctrl.get(typer.echo, output_format, keys)


@app.command()
def run(
    ctx: typer.Context,
    command: CommandAnnotation,
    dotenv_file: FileAnnotation = None,
    encoding: EncodingAnnotation = None,
    multiline: MultilineAnnotation = None,
    debug: DebugAnnotation = None,
    override: OverrideAnnotation = None,
    get_help: HelpAnnotation = None,
    config: SettingsAnnotation = None,
    verbose: VerbosityAnnotation = None,
    version: VersionAnnotation = None,
) -> None:
    """Run a command with the entries of the [yellow].env[/] file added to its environment.

    Example:
            dotenv-ninja run --file .env.test -- pytest -x
    """
    options = resolve_options(
        ctx, path=dotenv_file, encoding=encoding, multiline=multiline, debug=debug, override=override
    )
    environ = dict(os.environ)

    result = loader.config(environ=environ, **options)
    if result.error:
        source = options.get('path', loader.DEFAULT_FILENAME)
        rich.print(f'[red]ERROR[/]: Failed to load [purple]{escape(source)}[/]: {escape(str(result.error))}')
        raise typer.Exit(1)

    logger.debug('Run [yellow]%s[/yellow]', escape(shlex.join(command)), extra={'markup': True})
    try:
        proc = subprocess.run(command, env=environ, check=False)  # noqa: S603
    except FileNotFoundError as exc:
        rich.print(f'[red]ERROR[/]: Command not found: [purple]{escape(command[0])}[/]')
        raise typer.Exit(127) from exc

    raise typer.Exit(proc.returncode)


@app.command()
def version(
    ctx: typer.Context,
    get_help: HelpAnnotation = None,
    config: SettingsAnnotation = None,
    verbose: VerbosityAnnotation = None,
    version: VersionAnnotation = None,
) -> None:
    """Print the version and exit."""
    version_callback(ctx, True)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    get_help: HelpAnnotation = None,
    config: SettingsAnnotation = None,
    verbose: VerbosityAnnotation = None,
    version: VersionAnnotation = None,
) -> None:
    """Load [yellow].env[/] files into the environment of a command, or print their entries."""
    ctx.ensure_object(dict)

    if not ctx.invoked_subcommand:  # pragma: no cover
        rich.print(ctx.get_help())


logger.debug('successfully imported %s', __name__)
