"""Token types, source spans, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Generic, TypeVar

T = TypeVar("T")


class TokenType(Enum):
    # Terminal / error markers
    EOS = auto()  # end of stream
    MALFORMED = auto()  # '/' not followed by '>'

    # Markup delimiters
    ELEMENT_OPEN = auto()  # <
    ELEMENT_CLOSE = auto()  # >
    SELF_CLOSING_CLOSE = auto()  # />
    CLOSING_ELEMENT_OPEN = auto()  # </
    FRAGMENT_OPEN = auto()  # < >
    FRAGMENT_CLOSE = auto()  # </>

    # Content
    IDENTIFIER = auto()  # XID_Start XID_Continue*
    STRING = auto()  # "..." | '...'

    # Punctuation
    ASSIGN = auto()  # =
    COLON = auto()  # :
    DOT = auto()  # .
    COMMA = auto()  # ,
    SPREAD = auto()  # ...
    BRACE_OPEN = auto()  # {
    BRACE_CLOSE = auto()  # }


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Loc(Generic[T]):
    """A value tagged with the half-open source range [start, end) it came from.

    Spans are provenance, not identity: two Locs compare equal whenever
    their values do, wherever they were found.
    """

    start: int = field(compare=False)
    end: int = field(compare=False)
    value: T

    def slice(self, source: str) -> str:
        """Return the exact source text covered by this span."""
        return source[self.start : self.end]


def is_ident_start(ch: str) -> bool:
    """Return True if ch may begin an identifier (XID_Start or '_')."""
    return ch.isidentifier()


def is_ident_continue(ch: str) -> bool:
    """Return True if ch may continue an identifier (XID_Continue)."""
    return ("a" + ch).isidentifier()


def position_at(source: str, offset: int) -> Position:
    """Translate a character offset into a line/column Position."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start + 1, offset)
