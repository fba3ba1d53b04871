"""Backend implementations for reading `.env` sources.

Each backend is implemented as a subclass of `dotenv_ninja.backend.Backend` in a module of this package.

## Available Backends

- `dotenv_ninja.contrib.local`
"""

from __future__ import annotations

from dotenv_ninja.contrib.local import LocalBackend

__all__ = ['LocalBackend']
