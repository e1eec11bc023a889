"""
Editing Session
===============

Binds one text buffer to the classifier and the three editing engines, and
owns the saved-position stack the comment engine uses for gutter jumps.

Each session has its own stack; the compiled patterns are shared by every
session in the process. Closing the session (or leaving its ``with``
block) clears the stack.

Example
-------
>>> from nasmkit.editor import EditingSession, TextBuffer
>>> buffer = TextBuffer("mov")
>>> buffer.goto(0, 3)
Position(row=0, index=3)
>>> with EditingSession(buffer) as session:
...     session.tab()
<IndentAction.INSERTED: 'inserted'>
>>> buffer.text
'mov\\t'
"""

import logging
from typing import Optional

from nasmkit.config import EditorConfig
from nasmkit.editor.buffer import TextBuffer
from nasmkit.editor.comment import CommentAction, CommentEngine, CommentPositionStack
from nasmkit.editor.indent import IndentAction, IndentationEngine
from nasmkit.editor.join import JoinAction, LineJoinEngine
from nasmkit.syntax.classifier import LineClassifier
from nasmkit.syntax.patterns import CompiledPatternSet
from nasmkit.syntax.scanner import SyntaxState

logger = logging.getLogger(__name__)


class EditingSession:
    """
    Key handlers for one NASM buffer.

    Args:
        buffer: The buffer being edited
        config: Editor configuration (default: EditorConfig())
        patterns: Compiled pattern set (default: built-in NASM tables)
        syntax: String/comment oracle (default: scan the buffer)
    """

    def __init__(
        self,
        buffer: TextBuffer,
        config: Optional[EditorConfig] = None,
        patterns: Optional[CompiledPatternSet] = None,
        syntax: Optional[SyntaxState] = None,
    ):
        self.buffer = buffer
        self.config = config or EditorConfig()
        self.buffer.tab_width = self.config.tab_width

        self.classifier = LineClassifier(patterns)
        self.stack = CommentPositionStack()
        self.indenter = IndentationEngine(self.config, self.classifier)
        self.commenter = CommentEngine(self.config, syntax, self.stack)
        self.joiner = LineJoinEngine(self.config, self.classifier, self.indenter)

    # =========================================================================
    # Key Handlers
    # =========================================================================

    def tab(self) -> IndentAction:
        """Indent key."""
        return self.indenter.indent(self.buffer)

    def semicolon(self, kill: bool = False) -> CommentAction:
        """Comment key; with kill, remove the line's comment."""
        return self.commenter.comment(self.buffer, kill=kill)

    def colon(self) -> IndentAction:
        """Insert a colon, then indent so a new label moves to column 0."""
        self.buffer.insert(":")
        return self.indenter.indent(self.buffer)

    def join_line(self, following: bool = False) -> JoinAction:
        """Join with the previous line, or the next one with following."""
        return self.joiner.join(self.buffer, following)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """End the session, dropping saved comment positions."""
        if len(self.stack):
            logger.debug(f"Discarding {len(self.stack)} saved comment position(s)")
        self.stack.clear()

    def __enter__(self) -> "EditingSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
