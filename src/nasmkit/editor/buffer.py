"""
Text Buffer
===========

A small line-oriented text buffer with a single point (cursor). It stands
in for the host editor's buffer so the editing engines can run, and be
tested, outside an editor.

Positions
---------
A Position is a (row, index) pair: ``row`` is the 0-indexed line and
``index`` a character offset into that line. Visual columns, where a tab
advances to the next multiple of ``tab_width``, are computed on demand with
column_at().

Every position taken from outside is clamped to the buffer, so a cursor past
the end of a line or of the buffer never raises; it lands on the nearest
valid position.
"""

from typing import NamedTuple, Optional


class Position(NamedTuple):
    """A point in the buffer: line number and character index."""
    row: int
    index: int


def visual_width(text: str, tab_width: int, start_column: int = 0) -> int:
    """Return the column reached after displaying text from start_column."""
    column = start_column
    for char in text:
        if char == "\t":
            column += tab_width - column % tab_width
        else:
            column += 1
    return column


def indentation_string(column: int, use_tabs: bool, tab_width: int) -> str:
    """Build leading whitespace reaching a visual column."""
    if not use_tabs:
        return " " * column
    tabs, spaces = divmod(column, tab_width)
    return "\t" * tabs + " " * spaces


class TextBuffer:
    """
    Line-oriented text with a single point.

    Args:
        text: Initial contents; lines are split on ``\\n``
        tab_width: Display width of a tab character

    Usage:
        buffer = TextBuffer("    mov eax, 1\\n")
        buffer.goto(0, 7)
        buffer.insert("\\t")
    """

    def __init__(self, text: str = "", tab_width: int = 8):
        self._lines = text.split("\n")
        self.tab_width = tab_width
        self._point = Position(0, 0)

    # =========================================================================
    # Contents
    # =========================================================================

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line(self, row: int) -> str:
        """Return the text of a line; an out-of-range row reads as empty."""
        if 0 <= row < len(self._lines):
            return self._lines[row]
        return ""

    @property
    def current_line(self) -> str:
        return self._lines[self._point.row]

    # =========================================================================
    # Point
    # =========================================================================

    @property
    def point(self) -> Position:
        return self._point

    def clamp(self, row: int, index: int) -> Position:
        """Return the nearest valid position."""
        row = min(max(row, 0), len(self._lines) - 1)
        index = min(max(index, 0), len(self._lines[row]))
        return Position(row, index)

    def goto(self, row: int, index: int) -> Position:
        """Move point, clamping to the buffer."""
        self._point = self.clamp(row, index)
        return self._point

    def column_at(self, row: int, index: int) -> int:
        """Return the visual column of a position."""
        row, index = self.clamp(row, index)
        return visual_width(self._lines[row][:index], self.tab_width)

    def current_column(self) -> int:
        return self.column_at(*self._point)

    def indentation_index(self, row: Optional[int] = None) -> int:
        """Return the index of the first non-blank character of a line."""
        text = self.line(self._point.row if row is None else row)
        return len(text) - len(text.lstrip(" \t"))

    def back_to_indentation(self) -> Position:
        """Move point to the first non-blank character of its line."""
        return self.goto(self._point.row, self.indentation_index())

    # =========================================================================
    # Editing Primitives
    # =========================================================================

    def replace(self, row: int, start: int, end: int, text: str) -> None:
        """
        Replace a range of one line with text (no newlines).

        Point is adjusted like an editor marker: positions after the range
        shift with it, positions inside it collapse to its start, and a
        position at the start stays before the new text.
        """
        row, start = self.clamp(row, start)
        end = min(max(end, start), len(self._lines[row]))
        old = self._lines[row]
        self._lines[row] = old[:start] + text + old[end:]

        point_row, index = self._point
        if point_row == row:
            if index >= end and index > start:
                index += len(text) - (end - start)
            elif index > start:
                index = start
            self._point = Position(row, index)

    def insert(self, text: str) -> None:
        """Insert text at point and move point past it."""
        row, index = self._point
        pieces = text.split("\n")
        if len(pieces) == 1:
            self.replace(row, index, index, text)
            self._point = Position(row, index + len(text))
            return

        line = self._lines[row]
        tail = line[index:]
        self._lines[row] = line[:index] + pieces[0]
        new_lines = pieces[1:]
        new_lines[-1] += tail
        self._lines[row + 1:row + 1] = new_lines
        self._point = Position(row + len(pieces) - 1, len(pieces[-1]))

    def delete_forward(self, count: int = 1) -> str:
        """Delete up to count characters after point on its line."""
        row, index = self._point
        deleted = self._lines[row][index:index + count]
        self.replace(row, index, index + len(deleted), "")
        return deleted

    def delete_backward(self, count: int = 1) -> str:
        """Delete up to count characters before point on its line."""
        row, index = self._point
        start = max(index - count, 0)
        deleted = self._lines[row][start:index]
        self.replace(row, start, index, "")
        self._point = Position(row, start)
        return deleted

    def indent_line_to(self, column: int, use_tabs: bool = False, row: Optional[int] = None) -> None:
        """
        Replace a line's leading whitespace so its text starts at a column.

        Point inside the old indentation moves to the end of the new one;
        point within the text keeps its place in the text.
        """
        row = self._point.row if row is None else row
        indent_end = self.indentation_index(row)
        whitespace = indentation_string(column, use_tabs, self.tab_width)
        point_row, index = self._point
        in_indentation = point_row == row and index <= indent_end

        if self.line(row)[:indent_end] != whitespace:
            self.replace(row, 0, indent_end, whitespace)
        if in_indentation:
            self._point = Position(row, len(whitespace))

    def join_line(self, following: bool = False) -> bool:
        """
        Join the current line to the previous one (or the next one).

        The line break and the horizontal whitespace around it are removed
        and replaced with a single space, unless either side is empty or the
        seam is an opening/closing bracket. Point is left at the seam,
        before the space.

        Returns:
            False if there is no line to join with
        """
        row = self._point.row + 1 if following else self._point.row
        if row <= 0 or row >= len(self._lines):
            return False

        left = self._lines[row - 1].rstrip(" \t")
        right = self._lines[row].lstrip(" \t")
        if not left or not right or left[-1] in "([" or right[0] in ")]":
            separator = ""
        else:
            separator = " "

        self._lines[row - 1] = left + separator + right
        del self._lines[row]
        self._point = Position(row - 1, len(left))
        return True
