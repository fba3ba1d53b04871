"""Split `.env` source text into physical lines, and walk them with a cursor.

The parser consumes lines through a `LineCursor` so that a quoted value spanning several lines can pull its
continuation lines from the same cursor that drives the main loop:

>>> cursor = LineCursor(split_lines('A="first\\nsecond"\\nB=2'))
>>> next(cursor), cursor.lineno
('A="first', 1)
>>> cursor.peek()
'second"'
>>> cursor.advance(), cursor.lineno
('second"', 2)
>>> list(cursor)
['B=2']
"""

from __future__ import annotations

import logging
import re
import typing

__all__ = ['LineCursor', 'split_lines']

logger = logging.getLogger(__name__)

NEWLINES_MATCH = re.compile(r'\r\n|\n|\r')
"""Any of the three common line-ending conventions."""

BOM = '\ufeff'


def split_lines(src: str | bytes) -> list[str]:
    r"""Split the given source into physical lines.

    Empty lines are preserved, and whitespace within each line is left alone:

    >>> split_lines('A=1\r\n\rB=2\n  C = 3 ')
    ['A=1', '', 'B=2', '  C = 3 ']

    `bytes` are decoded as UTF-8; undecodable sequences become replacement characters instead of raising:

    >>> split_lines(b'A=caf\xc3\xa9\nB=\xff')
    ['A=café', 'B=�']

    A leading byte-order mark is dropped:

    >>> split_lines('\ufeffA=1')
    ['A=1']
    """
    if isinstance(src, (bytes, bytearray)):
        src = bytes(src).decode('utf-8', errors='replace')

    return NEWLINES_MATCH.split(src.removeprefix(BOM))


class LineCursor:
    """Iterate over lines while allowing a consumer to look ahead or consume extra lines."""

    lines: typing.Sequence[str]
    """The lines being scanned."""

    position: int
    """Index of the next line to consume."""

    def __init__(self, lines: typing.Iterable[str]) -> None:
        """Start the cursor before the first line."""
        self.lines = list(lines)
        self.position = 0

    def __iter__(self) -> LineCursor:
        """Iterating the cursor consumes its remaining lines."""
        return self

    def __next__(self) -> str:
        """Alias for `LineCursor.advance()`."""
        return self.advance()

    def __repr__(self) -> str:
        """Show how far the cursor has advanced.

        >>> LineCursor(['A=1', 'B=2'])
        <LineCursor: 0/2>
        """
        return f'<{self.__class__.__name__}: {self.position}/{len(self.lines)}>'

    @property
    def exhausted(self) -> bool:
        """Whether every line has been consumed."""
        return self.position >= len(self.lines)

    @property
    def lineno(self) -> int:
        """The 1-based line number of the most recently consumed line (`0` before the first)."""
        return self.position

    def advance(self) -> str:
        """Consume and return the next line; raise `StopIteration` when there are no more lines."""
        if self.exhausted:
            raise StopIteration

        line = self.lines[self.position]
        self.position += 1
        return line

    def peek(self) -> str | None:
        """Return the next line without consuming it (`None` when exhausted)."""
        if self.exhausted:
            return None
        return self.lines[self.position]


logger.debug('successfully imported %s', __name__)
