"""
Lexical Scanner
===============

Answers the two questions the comment engine asks about a buffer position:
"is this inside a string?" and "is this inside a comment?".

The engines depend only on the SyntaxState protocol, so a host editor with
its own incremental tokenizer can supply that instead. BufferSyntaxState is
the reference implementation used by the command line and the tests; it
scans one line at a time with scan_line().

Lexical Rules
-------------
- Strings are delimited by ``"``, ``'`` or a backquote. Backslash escapes
  are recognised only inside backquoted strings, as in NASM.
- A ``;`` outside a string starts a comment that runs to end of line.
- Strings never span lines. An unterminated string ends at end of line.

Position Semantics
------------------
A position (character index) is inside a span when it lies strictly after
the opening delimiter and not after the closing one. The end-of-line
position counts as inside a comment, and inside an unterminated string:

    mov al, 'x'  ; note
           ^ ^        positions 8 and 10 are outside / inside the string
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from nasmkit.syntax.categories import Category, Region


# =============================================================================
# Oracle Protocol
# =============================================================================

class SyntaxState(Protocol):
    """Per-position lexical facts about a buffer."""

    def in_string(self, row: int, index: int) -> bool:
        ...

    def in_comment(self, row: int, index: int) -> bool:
        ...


# =============================================================================
# Line Scanning
# =============================================================================

QUOTES = "\"'`"
COMMENT_START = ";"


@dataclass(frozen=True)
class LexicalSpan:
    """
    A string or comment span of one line.

    Attributes:
        region: Character range and category (STRING or COMMENT)
        terminated: False for a string that runs off the end of the line
    """
    region: Region
    terminated: bool = True

    def covers(self, index: int) -> bool:
        """Return True if the position is inside this span."""
        if index <= self.region.start:
            return False
        if self.terminated and self.region.category is Category.STRING:
            return index < self.region.end
        return index <= self.region.end


def scan_line(text: str) -> list[LexicalSpan]:
    """
    Find the string and comment spans of a line.

    Args:
        text: One line of source, without its newline

    Returns:
        Spans in line order; at most one COMMENT span, always last
    """
    spans = []
    pos = 0
    length = len(text)

    while pos < length:
        char = text[pos]

        if char == COMMENT_START:
            spans.append(LexicalSpan(Region(pos, length, Category.COMMENT)))
            break

        if char in QUOTES:
            end = _string_end(text, pos)
            if end is None:
                spans.append(LexicalSpan(Region(pos, length, Category.STRING), terminated=False))
                break
            spans.append(LexicalSpan(Region(pos, end, Category.STRING)))
            pos = end
            continue

        pos += 1

    return spans


def _string_end(text: str, start: int) -> Optional[int]:
    """Index one past the closing quote, or None if unterminated."""
    quote = text[start]
    pos = start + 1
    while pos < len(text):
        char = text[pos]
        if char == "\\" and quote == "`":
            pos += 2
            continue
        if char == quote:
            return pos + 1
        pos += 1
    return None


def line_comment_start(text: str) -> Optional[int]:
    """Return the index of the line's comment delimiter, or None."""
    for span in scan_line(text):
        if span.region.category is Category.COMMENT:
            return span.region.start
    return None


# =============================================================================
# Buffer-backed Oracle
# =============================================================================

class BufferSyntaxState:
    """
    SyntaxState answered by scanning the lines of a text buffer.

    Nothing is cached: lines are short and re-scanned on every query, so
    the answers always reflect the current buffer text.

    Args:
        buffer: Any object with a ``line(row)`` method returning text
    """

    def __init__(self, buffer):
        self.buffer = buffer

    def spans(self, row: int) -> list[LexicalSpan]:
        return scan_line(self.buffer.line(row))

    def in_string(self, row: int, index: int) -> bool:
        return any(
            span.region.category is Category.STRING and span.covers(index)
            for span in self.spans(row)
        )

    def in_comment(self, row: int, index: int) -> bool:
        return any(
            span.region.category is Category.COMMENT and span.covers(index)
            for span in self.spans(row)
        )
