"""
Line-Join Engine
================

Joins the current line to the previous one (or the next one) and tidies the
seam when the join puts a label directly in front of code.

After the generic join the cursor sits at the seam, before the single
joining space. If the text before the cursor ends in a label:

| Label end column            | Result                               |
|-----------------------------|--------------------------------------|
| < basic_offset              | joining space replaced with a tab    |
| == basic_offset, ends ``:`` | joining space removed                |
| otherwise                   | joining space kept                   |

    ".loop"  +  "    inc eax"   -->  ".loop\\tinc eax"

If the join does not end in a label, the joined line is re-indented like
any other line.
"""

from enum import Enum
import logging
from typing import Optional

from nasmkit.config import EditorConfig
from nasmkit.editor.buffer import TextBuffer
from nasmkit.editor.indent import IndentationEngine
from nasmkit.syntax.classifier import LineClassifier

logger = logging.getLogger(__name__)


class JoinAction(Enum):
    """What a join request did to the buffer."""

    TABBED = "tabbed"                # label seam: space replaced with a tab
    SPACE_REMOVED = "space-removed"  # label seam: space removed
    KEPT = "kept"                    # label seam: space left as-is
    REINDENTED = "reindented"        # no label: joined line re-indented
    NOOP = "noop"                    # no adjacent line to join


class LineJoinEngine:
    """
    Label-aware line joining.

    Args:
        config: Editor configuration
        classifier: Line classifier (default: built-in NASM tables)
        indenter: Indentation engine used for non-label joins
    """

    def __init__(
        self,
        config: EditorConfig,
        classifier: Optional[LineClassifier] = None,
        indenter: Optional[IndentationEngine] = None,
    ):
        self.config = config
        self.classifier = classifier or LineClassifier()
        self.indenter = indenter or IndentationEngine(config, self.classifier)

    def join(self, buffer: TextBuffer, following: bool = False) -> JoinAction:
        """
        Join lines at the buffer's point.

        Args:
            buffer: Buffer to edit
            following: Join the next line onto this one instead of this
                line onto the previous one

        Returns:
            The action taken
        """
        if not buffer.join_line(following):
            return JoinAction.NOOP

        row, index = buffer.point
        line = buffer.line(row)
        label = self.classifier.label_before(line, index)

        if label is None:
            self.indenter.reindent_line(buffer)
            return JoinAction.REINDENTED

        column = buffer.current_column()
        logger.debug(f"Joined label {label!r} ending at column {column}")

        if line[index:index + 1] != " ":
            # Nothing was joined after the label
            return JoinAction.KEPT

        if column < self.config.basic_offset:
            buffer.delete_forward(1)
            buffer.insert("\t")
            return JoinAction.TABBED

        if column == self.config.basic_offset and line[index - 1:index] == ":":
            buffer.delete_forward(1)
            return JoinAction.SPACE_REMOVED

        return JoinAction.KEPT
