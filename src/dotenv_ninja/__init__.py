"""Parse `.env` files, and load their entries into the environment.

```python
import dotenv_ninja

result = dotenv_ninja.config(path='~/.env.local', multiline=True)
if result.error:
    raise SystemExit(f'could not load .env file: {result.error}')
```

# Navigation

## `dotenv_ninja.parser`

The line scanner that turns `.env` source text into a `dict`.

## `dotenv_ninja.decoder`

Quoting styles, and how each one is decoded.

## `dotenv_ninja.environ`

Merge parsed entries into an environment variable store.

## `dotenv_ninja.loader`

Read a `.env` file, parse it, and merge it into `os.environ`.

## `dotenv_ninja.cli`

Commands and CLI documentation.

## `dotenv_ninja.contrib`

For supported backends.

## `dotenv_ninja.settings`

For settings and configuration.
"""  # noqa: D415

from __future__ import annotations

import sys
from typing import Any

__version__ = '0.0.0'

from dotenv_ninja.environ import merge
from dotenv_ninja.loader import LoadResult, config, resolve_home
from dotenv_ninja.parser import DebugEvent, parse

__all__ = ['DebugEvent', 'LoadResult', 'config', 'merge', 'parse', 'resolve_home']


def main(*args: Any) -> None:  # pylint: disable=missing-function-docstring
    """Entrypoint for the `dotenv-ninja` CLI.

    When arguments are provided, they are used to replace `sys.argv[1:]`.
    """
    if args:
        sys.argv[1:] = list(args)

    from dotenv_ninja.cli import app

    app(prog_name='dotenv-ninja')
