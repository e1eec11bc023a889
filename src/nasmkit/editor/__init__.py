"""
NASM Editing Engines
====================

Interactive editing behaviour for NASM source, driven by the syntax layer:

- **buffer**: TextBuffer, the line-oriented buffer the engines edit
- **indent**: IndentationEngine (post-mnemonic whitespace, re-indentation)
- **comment**: CommentEngine and CommentPositionStack (gutter jump/return)
- **join**: LineJoinEngine (label-aware line joining)
- **session**: EditingSession wiring everything to one buffer
"""

from nasmkit.editor.buffer import Position, TextBuffer, indentation_string, visual_width
from nasmkit.editor.indent import IndentAction, IndentationEngine
from nasmkit.editor.comment import CommentAction, CommentEngine, CommentPositionStack
from nasmkit.editor.join import JoinAction, LineJoinEngine
from nasmkit.editor.session import EditingSession

__all__ = [
    # Buffer
    "Position",
    "TextBuffer",
    "indentation_string",
    "visual_width",
    # Indentation
    "IndentAction",
    "IndentationEngine",
    # Comments
    "CommentAction",
    "CommentEngine",
    "CommentPositionStack",
    # Line joining
    "JoinAction",
    "LineJoinEngine",
    # Session
    "EditingSession",
]
