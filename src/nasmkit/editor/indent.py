"""
Indentation Engine
==================

Decides what the indent key does on a line of NASM source.

Two Behaviours
--------------
1. **Post-mnemonic whitespace.** When the text between the indentation and
   the cursor is exactly an instruction field (an optional prefix and one
   mnemonic, nothing else) and no text follows the cursor, the key inserts
   operand-alignment whitespace instead of re-indenting: a tab,
   ``basic_offset`` spaces, or nothing, per ``EditorConfig.after_mnemonic``.

       "    rep movsb|"  --TAB-->  "    rep movsb\\t|"

2. **Re-indentation.** Anywhere else the whole line is moved to one of two
   columns:

   | Leading token                        | Column          |
   |--------------------------------------|-----------------|
   | directive, %directive, ``[``, ``;;`` | 0               |
   | label (``name:`` or ``.local``)      | 0               |
   | anything else                        | ``basic_offset``|

   The cursor keeps its distance from the end of the line, so typing is
   not disturbed when only the leading whitespace changes. A cursor inside
   the indentation ends up on the first non-blank character.

The engine keeps no state between calls.
"""

from enum import Enum
import logging
from typing import Optional

from nasmkit.config import AfterMnemonic, EditorConfig
from nasmkit.editor.buffer import TextBuffer
from nasmkit.syntax.classifier import LineClassifier

logger = logging.getLogger(__name__)


class IndentAction(Enum):
    """What an indent request did to the buffer."""

    INSERTED = "inserted"      # post-mnemonic whitespace inserted
    REINDENTED = "reindented"  # line moved to its column
    NOOP = "noop"              # post-mnemonic state with mode NONE


class IndentationEngine:
    """
    Indents lines of NASM source.

    Args:
        config: Editor configuration
        classifier: Line classifier (default: built-in NASM tables)
    """

    def __init__(self, config: EditorConfig, classifier: Optional[LineClassifier] = None):
        self.config = config
        self.classifier = classifier or LineClassifier()

    def indent(self, buffer: TextBuffer) -> IndentAction:
        """
        Handle the indent key at the buffer's point.

        Returns:
            The action taken
        """
        row, index = buffer.point
        line = buffer.line(row)
        start = buffer.indentation_index(row)
        before = line[start:index] if index > start else ""
        after = line[index:]

        if not after.strip() and self.classifier.is_instruction_field(before):
            return self._insert_after_mnemonic(buffer)

        self.reindent_line(buffer)
        return IndentAction.REINDENTED

    def _insert_after_mnemonic(self, buffer: TextBuffer) -> IndentAction:
        mode = self.config.after_mnemonic
        logger.debug(f"Post-mnemonic state at {tuple(buffer.point)}, mode {mode.value}")

        if mode is AfterMnemonic.TAB:
            buffer.insert("\t")
        elif mode is AfterMnemonic.SPACE:
            buffer.insert(" " * self.config.basic_offset)
        else:
            return IndentAction.NOOP
        return IndentAction.INSERTED

    def target_column(self, line: str) -> int:
        """Return the column a line's leading token belongs at."""
        if self.classifier.wants_column_zero(line):
            return 0
        return self.config.basic_offset

    def reindent_line(self, buffer: TextBuffer, row: Optional[int] = None) -> int:
        """
        Move a line to its column, preserving point's distance from the end.

        Args:
            buffer: Buffer to edit
            row: Line to re-indent (default: the point's line)

        Returns:
            The column the line was indented to
        """
        point_row, index = buffer.point
        row = point_row if row is None else row
        column = self.target_column(buffer.line(row))

        if row != point_row:
            buffer.indent_line_to(column, self.config.indent_tabs, row=row)
            return column

        from_end = len(buffer.line(row)) - index
        buffer.indent_line_to(column, self.config.indent_tabs, row=row)

        indent_end = buffer.indentation_index(row)
        restored = len(buffer.line(row)) - from_end
        buffer.goto(row, max(restored, indent_end))

        logger.debug(f"Re-indented line {row} to column {column}")
        return column

    def reindent_all(self, buffer: TextBuffer) -> int:
        """
        Re-indent every line of the buffer.

        Blank lines are left empty rather than padded with whitespace.

        Returns:
            Number of lines whose text changed
        """
        changed = 0
        for row in range(buffer.line_count):
            original = buffer.line(row)
            if not original.strip():
                if original:
                    buffer.replace(row, 0, len(original), "")
                    changed += 1
                continue
            self.reindent_line(buffer, row)
            if buffer.line(row) != original:
                changed += 1
        logger.debug(f"Re-indented buffer: {changed} of {buffer.line_count} lines changed")
        return changed
