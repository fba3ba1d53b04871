"""Use a local `.env` file as the backend.

## Example

```sh
dotenv-ninja get --file ~/.env.local --poll
```
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import AsyncIterator

from watchfiles import awatch  # pyright: ignore[reportUnknownVariableType]

from dotenv_ninja.backend import Backend

__all__ = ['LocalBackend']

logger = logging.getLogger(__name__)


class LocalBackend(Backend):
    """Read the `.env` source from a local file.

    ## Usage

    >>> backend = LocalBackend(example_file)
    >>> print(backend.get())
    # database settings
    DB_HOST=localhost
    DB_USER="root"
    DB_PASS='s1mpl3'
    <BLANKLINE>
    """

    path: Path
    """Read the `.env` source from this file."""

    encoding: str
    """Decode the file with this text encoding."""

    def __init__(self, path: str | Path, encoding: str = 'utf-8') -> None:
        """Set attributes to initialize the backend; the file is not read until `LocalBackend.get()`."""
        logger.debug("Initialize: %s('%s')", self.__class__.__name__, path)
        self.path = Path(path)
        self.encoding = encoding

    def __str__(self) -> str:
        """Return the source file's path as the string representation of the backend."""
        return f'{self.path}'

    def get(self) -> str:
        """Read the contents of the `.env` file as a string."""
        logger.debug("Read file: '%s' (%s)", self.path, self.encoding)
        return self.path.read_text(encoding=self.encoding)

    async def poll(self) -> AsyncIterator[str]:
        """Yield the file contents, then yield them again each time the file changes."""
        yield self.get()
        async for _ in awatch(self.path):
            logger.info("Detected change to '%s'", self.path)
            yield self.get()


logger.debug('successfully imported %s', __name__)
