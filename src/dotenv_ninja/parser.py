"""Parse `.env` source text into a `dict` of keys and decoded values.

## Grammar

Each line is matched against the pattern `KEY=VALUE[#comment]`, with optional whitespace around each part:

>>> parse('DB_HOST=localhost\\nDB_USER="root"  # inline comment\\nDB_PASS=\\'s1mpl3\\'')
{'DB_HOST': 'localhost', 'DB_USER': 'root', 'DB_PASS': 's1mpl3'}

Blank lines, comments, and lines that do not match the grammar are skipped:

>>> parse('# comment\\n\\nnot an assignment\\nB=ok')
{'B': 'ok'}

## Multiline values

When `multiline=True`, a value that opens a quote without closing it on the same line continues onto the
following lines until a line ending with the same quote character:

>>> parse('KEY="first\\nsecond\\nthird"\\nOTHER=1', multiline=True)
{'KEY': 'first\\nsecond\\nthird', 'OTHER': '1'}
"""

from __future__ import annotations

import dataclasses
import logging
import re
import typing

from dotenv_ninja.decoder import NEWLINE, classify, decode
from dotenv_ninja.lines import LineCursor, split_lines

__all__ = ['RE_KEY_VAL', 'DebugEvent', 'DebugSink', 'Parser', 'parse']

logger = logging.getLogger(__name__)

RE_KEY_VAL = re.compile(r"""^\s*([A-Za-z0-9_.-]+)\s*=\s*("[^"]*"|'[^']*'|[^#]*)?(\s*|\s*#.*)?$""")
"""Match a `KEY=VALUE` assignment, capturing the key and the raw (still quoted) value."""


@dataclasses.dataclass(frozen=True)
class DebugEvent:
    """Describe a non-blank, non-comment line that failed to match the assignment grammar."""

    lineno: int
    """The 1-based number of the line."""

    line: str
    """The raw content of the line."""

    def __str__(self) -> str:
        """Format the event as a diagnostic message.

        >>> print(DebugEvent(3, 'oops'))
        Failed to match key and value when parsing line 3: oops
        """
        return f'Failed to match key and value when parsing line {self.lineno}: {self.line}'


DebugSink = typing.Callable[[DebugEvent], typing.Any]


def log_event(event: DebugEvent) -> None:
    """Write the `DebugEvent` to this module's logger."""
    logger.debug('%s', event)


class Parser:
    """Scan lines one at a time, accumulating the parsed entries.

    >>> parser = Parser(multiline=True)
    >>> parser.feed(['A="one', 'two"', 'B=3'])
    {'A': 'one\\ntwo', 'B': '3'}
    """

    debug: bool
    """Report unmatched lines to `Parser.sink`."""

    multiline: bool
    """Allow open quotes to continue onto the following lines."""

    sink: DebugSink
    """Receives a `DebugEvent` for each unmatched line (when `Parser.debug` is enabled)."""

    def __init__(self, debug: bool = False, multiline: bool = False, sink: DebugSink | None = None) -> None:
        """Configure the parser; each call to `Parser.feed()` builds a new result."""
        self.debug = debug
        self.multiline = multiline
        self.sink = sink or log_event

    def _report(self, cursor: LineCursor, line: str) -> None:
        trimmed = line.strip()
        if trimmed and not trimmed.startswith('#'):
            self.sink(DebugEvent(cursor.lineno, line))

    @staticmethod
    def _accumulate(cursor: LineCursor, value: str, quote: str) -> str:
        """Consume lines from the cursor until one ends with the closing `quote`."""
        for line in cursor:
            if line.endswith(quote):
                return value + NEWLINE + line[:-1]
            value += NEWLINE + line

        # input ended before the closing quote
        return value

    def feed(self, lines: typing.Iterable[str]) -> dict[str, str]:
        """Parse the given lines into a `dict`."""
        result: dict[str, str] = {}
        cursor = LineCursor(lines)

        for line in cursor:
            match = RE_KEY_VAL.match(line)
            if match is None:
                if self.debug:
                    self._report(cursor, line)
                continue

            key, raw = match.group(1), match.group(2) or ''
            quoting = classify(raw)

            if self.multiline and quoting.is_open:
                result[key] = self._accumulate(cursor, raw[1:], typing.cast(str, quoting.quote_char))
            else:
                result[key] = decode(raw, quoting)

        logger.debug('parsed %d key(s) from %d line(s)', len(result), cursor.lineno)
        return result


def parse(
    src: str | bytes, *, debug: bool = False, multiline: bool = False, sink: DebugSink | None = None
) -> dict[str, str]:
    """Parse the given source text into a `dict`.

    This function never raises: lines that do not match the grammar are skipped. When `debug` is set, each
    skipped line (other than blank lines and comments) is reported to `sink`:

    >>> events = []
    >>> parse('A=1\\n# comment\\noops\\n', debug=True, sink=events.append)
    {'A': '1'}
    >>> events
    [DebugEvent(lineno=3, line='oops')]

    Later assignments to the same key win:

    >>> parse('A=1\\nA=2')
    {'A': '2'}
    """
    return Parser(debug=debug, multiline=multiline, sink=sink).feed(split_lines(src))


logger.debug('successfully imported %s', __name__)
