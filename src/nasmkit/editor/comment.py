"""
Comment Engine
==============

Context-sensitive handling of the comment key (``;``).

The right-hand comment gutter is far from the code, so the engine keeps a
stack of saved cursor positions to move back and forth between the code
and the gutter:

| # | Situation                                         | Action                  |
|---|---------------------------------------------------|-------------------------|
| 1 | blank line, or cursor inside a string             | insert ``;``            |
| 2 | cursor within the leading indentation             | insert ``;`` (comment   |
|   |                                                   | out the line)           |
| 3 | line has code and a comment, cursor in comment    | pop saved position,     |
|   |                                                   | return to the code      |
| 4 | line has code                                     | push position, jump to  |
|   |                                                   | the gutter              |
| 5 | anything else                                     | insert ``;``            |

The rules are tried in order; the first that applies wins.

With ``kill=True`` the comment on the current line is removed instead,
together with the whitespace separating it from the code.
"""

from collections import deque
from enum import Enum
import logging
import re
from typing import Optional

from nasmkit.config import EditorConfig
from nasmkit.editor.buffer import Position, TextBuffer, visual_width
from nasmkit.syntax.scanner import COMMENT_START, BufferSyntaxState, SyntaxState, line_comment_start

logger = logging.getLogger(__name__)

# Padding between the comment delimiter and the comment text in the gutter
COMMENT_PADDING = " "

# Delimiter run and padding in front of the comment text
COMMENT_BODY = re.compile(r";+[ \t]*")


class CommentAction(Enum):
    """What a comment request did to the buffer."""

    INSERTED = "inserted"                  # a single delimiter inserted at point
    JUMPED_TO_GUTTER = "jumped-to-gutter"  # position saved, point in the gutter
    RETURNED = "returned"                  # saved position restored
    KILLED = "killed"                      # comment removed
    NOOP = "noop"                          # nothing to return to, or to kill


# =============================================================================
# Saved Position Stack
# =============================================================================

class CommentPositionStack:
    """
    Saved cursor positions for gutter jump and return.

    In practice one frame is pushed per jump and popped on the matching
    return. The stack is bounded; the oldest frames are dropped when it
    overflows. Popping an empty stack returns None.

    Args:
        maxlen: Maximum number of frames kept
    """

    def __init__(self, maxlen: int = 16):
        self._frames: deque[Position] = deque(maxlen=maxlen)

    def push(self, position: Position) -> None:
        self._frames.append(position)

    def pop(self) -> Optional[Position]:
        if not self._frames:
            return None
        return self._frames.pop()

    def peek(self) -> Optional[Position]:
        return self._frames[-1] if self._frames else None

    def clear(self) -> None:
        self._frames.clear()

    def __len__(self) -> int:
        return len(self._frames)


# =============================================================================
# Engine
# =============================================================================

class CommentEngine:
    """
    Implements the comment key.

    Args:
        config: Editor configuration (comment column, tabs)
        syntax: String/comment oracle (default: scan the buffer itself)
        stack: Saved-position stack (default: a new one)
    """

    def __init__(
        self,
        config: EditorConfig,
        syntax: Optional[SyntaxState] = None,
        stack: Optional[CommentPositionStack] = None,
    ):
        self.config = config
        self.syntax = syntax
        self.stack = stack if stack is not None else CommentPositionStack()

    def comment(self, buffer: TextBuffer, kill: bool = False) -> CommentAction:
        """
        Handle the comment key at the buffer's point.

        Args:
            buffer: Buffer to edit
            kill: Remove the line's comment instead

        Returns:
            The action taken
        """
        if kill:
            return self.kill_comment(buffer)

        syntax = self.syntax or BufferSyntaxState(buffer)
        row, index = buffer.point
        line = buffer.line(row)

        if not line.strip() or syntax.in_string(row, index):
            return self._insert_delimiter(buffer)

        if index <= buffer.indentation_index(row):
            return self._insert_delimiter(buffer)

        has_code = _has_code(line)
        has_comment = syntax.in_comment(row, len(line))

        if has_comment and has_code and syntax.in_comment(row, index):
            return self._return_to_code(buffer)

        if has_code:
            self.stack.push(buffer.point)
            self.indent_comment(buffer)
            logger.debug(f"Jumped to comment gutter from {tuple(self.stack.peek())}")
            return CommentAction.JUMPED_TO_GUTTER

        return self._insert_delimiter(buffer)

    def _insert_delimiter(self, buffer: TextBuffer) -> CommentAction:
        buffer.insert(COMMENT_START)
        return CommentAction.INSERTED

    def _return_to_code(self, buffer: TextBuffer) -> CommentAction:
        saved = self.stack.pop()
        if saved is None:
            logger.debug("No saved position to return to")
            return CommentAction.NOOP
        buffer.goto(*saved)
        logger.debug(f"Returned from comment gutter to {tuple(buffer.point)}")
        return CommentAction.RETURNED

    # =========================================================================
    # Gutter Primitives
    # =========================================================================

    def comment_column_for(self, code: str, tab_width: int) -> int:
        """
        Column where a comment following the given code should start.

        The configured gutter column, or one column past the end of the
        code when the code reaches into the gutter.
        """
        if not code.strip():
            return self.config.comment_column
        return max(self.config.comment_column, visual_width(code, tab_width) + 1)

    def indent_comment(self, buffer: TextBuffer) -> None:
        """
        Align the line's comment to the gutter, creating it if missing.

        Point ends up at the start of the comment text, after the
        delimiter and its padding.
        """
        row = buffer.point.row
        line = buffer.line(row)
        start = line_comment_start(line)

        if start is None:
            code = line.rstrip(" \t")
            comment = COMMENT_START + COMMENT_PADDING
        else:
            code = line[:start].rstrip(" \t")
            comment = line[start:]

        column = self.comment_column_for(code, buffer.tab_width)
        padding = self._padding(code, column, buffer.tab_width)
        buffer.replace(row, len(code), len(line), padding + comment)
        buffer.goto(row, len(code) + len(padding) + COMMENT_BODY.match(comment).end())

    def _padding(self, code: str, column: int, tab_width: int) -> str:
        code_end = visual_width(code, tab_width)
        if not self.config.indent_tabs:
            return " " * (column - code_end)
        # Tabs up to the last tab stop not past the column, then spaces
        padding = ""
        current = code_end
        while current + (tab_width - current % tab_width) <= column:
            padding += "\t"
            current += tab_width - current % tab_width
        return padding + " " * (column - current)

    def kill_comment(self, buffer: TextBuffer) -> CommentAction:
        """Remove the current line's comment and the whitespace before it."""
        row = buffer.point.row
        line = buffer.line(row)
        start = line_comment_start(line)
        if start is None:
            return CommentAction.NOOP

        code_end = len(line[:start].rstrip(" \t"))
        buffer.replace(row, code_end, len(line), "")
        logger.debug(f"Killed comment on line {row}")
        return CommentAction.KILLED


def _has_code(line: str) -> bool:
    """Return True if the first non-blank character is not a comment."""
    stripped = line.lstrip()
    return bool(stripped) and not stripped.startswith(COMMENT_START)
