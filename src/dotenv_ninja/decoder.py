"""Classify the quoting style of a raw value, and decode it accordingly.

| `QuoteState`  | example        | decoded            |
|---------------|----------------|--------------------|
| `DOUBLE`      | `"a\\nb"`      | `a`, newline, `b`  |
| `SINGLE`      | `'a\\nb'`      | `a\\nb`            |
| `UNQUOTED`    | `  a b  `      | `a b`              |
| `OPEN_DOUBLE` | `"a b  `       | `"a b`             |
| `OPEN_SINGLE` | `'a b  `       | `'a b`             |

The `OPEN_*` states are only decoded here when multiline parsing is disabled; otherwise the parser
accumulates the following lines into the value (see `dotenv_ninja.parser`).
"""

from __future__ import annotations

import enum
import logging

__all__ = ['QuoteState', 'classify', 'decode']

logger = logging.getLogger(__name__)

NEWLINE = '\n'
ESCAPED_NEWLINE = '\\n'


class QuoteState(enum.Enum):
    """The quoting style of a raw value token."""

    UNQUOTED = None
    SINGLE = "'"
    DOUBLE = '"'
    OPEN_SINGLE = "'..."
    OPEN_DOUBLE = '"...'

    @property
    def is_open(self) -> bool:
        """Whether the value opens a quote that is not closed on the same line."""
        return self in (QuoteState.OPEN_SINGLE, QuoteState.OPEN_DOUBLE)

    @property
    def quote_char(self) -> str | None:
        """The quote character that opened the value, if any.

        >>> QuoteState.OPEN_DOUBLE.quote_char
        '"'
        >>> QuoteState.UNQUOTED.quote_char is None
        True
        """
        return self.value[0] if self.value else None


def classify(raw: str) -> QuoteState:
    """Inspect the first and last characters of the raw value to determine its quoting style.

    >>> classify('"quoted"'), classify("'quoted'"), classify('plain')
    (<QuoteState.DOUBLE: '"'>, <QuoteState.SINGLE: "'">, <QuoteState.UNQUOTED: None>)

    >>> classify('"open'), classify("'open")
    (<QuoteState.OPEN_DOUBLE: '"...'>, <QuoteState.OPEN_SINGLE: "'...">)

    A lone quote character is both the first and the last character:

    >>> classify('"'), classify('')
    (<QuoteState.DOUBLE: '"'>, <QuoteState.UNQUOTED: None>)
    """
    if not raw:
        return QuoteState.UNQUOTED

    first, last = raw[0], raw[-1]
    if first == '"':
        return QuoteState.DOUBLE if last == '"' else QuoteState.OPEN_DOUBLE
    if first == "'":
        return QuoteState.SINGLE if last == "'" else QuoteState.OPEN_SINGLE

    return QuoteState.UNQUOTED


def decode(raw: str, state: QuoteState | None = None) -> str:
    """Decode the raw value token according to its quoting style.

    Double-quoted values have their quotes removed, and each literal `\\n` is expanded to a newline:

    >>> decode('"line1\\\\nline2"')
    'line1\\nline2'

    Single-quoted values only have their quotes removed:

    >>> decode("'line1\\\\nline2'")
    'line1\\\\nline2'

    Everything else is stripped of surrounding whitespace:

    >>> decode('   hello   '), decode('"open  ')
    ('hello', '"open')
    """
    if state is None:
        state = classify(raw)

    if state is QuoteState.DOUBLE:
        return raw[1:-1].replace(ESCAPED_NEWLINE, NEWLINE)

    if state is QuoteState.SINGLE:
        return raw[1:-1]

    return raw.strip()


logger.debug('successfully imported %s', __name__)
