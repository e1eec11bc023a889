"""
nasmkit - NASM Source Classifier and Editing Engine
===================================================

This package classifies NASM-dialect x86 assembly source line by line and
uses that classification to drive interactive editing behaviour.

Main Components
---------------
- **syntax**: Keyword tables, pattern compiler, line classifier,
  string/comment scanner and outline builder
- **editor**: Text buffer plus the indentation, comment and line-join
  engines, bundled per buffer in an EditingSession
- **cli**: The ``nasmed`` command-line tool

Quick Start
-----------
Classify a line:
    >>> from nasmkit import LineClassifier
    >>> classifier = LineClassifier()
    >>> classifier.classify_token(".loop")
    <Category.LOCAL_LABEL: 'local-label'>

Re-indent a file:
    >>> from nasmkit import EditorConfig, IndentationEngine, TextBuffer
    >>> buffer = TextBuffer(open("boot.asm").read())
    >>> IndentationEngine(EditorConfig()).reindent_all(buffer)

Or use the command-line tool:
    $ nasmed indent boot.asm --in-place
    $ nasmed outline boot.asm
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from nasmkit.config import AfterMnemonic, EditorConfig
from nasmkit.errors import (
    NasmKitError,
    KeywordTableError,
    ConfigurationError,
    SourceFileError,
)
from nasmkit.syntax import (
    Category,
    Region,
    KeywordSet,
    KeywordTables,
    DEFAULT_TABLES,
    CompiledPatternSet,
    compile_patterns,
    default_patterns,
    LineClassifier,
    SyntaxState,
    BufferSyntaxState,
    OutlineEntry,
    build_outline,
)
from nasmkit.editor import (
    Position,
    TextBuffer,
    IndentAction,
    IndentationEngine,
    CommentAction,
    CommentEngine,
    CommentPositionStack,
    JoinAction,
    LineJoinEngine,
    EditingSession,
)

__all__ = [
    "__version__",
    # Configuration
    "AfterMnemonic",
    "EditorConfig",
    # Exception hierarchy
    "NasmKitError",
    "KeywordTableError",
    "ConfigurationError",
    "SourceFileError",
    # Syntax
    "Category",
    "Region",
    "KeywordSet",
    "KeywordTables",
    "DEFAULT_TABLES",
    "CompiledPatternSet",
    "compile_patterns",
    "default_patterns",
    "LineClassifier",
    "SyntaxState",
    "BufferSyntaxState",
    "OutlineEntry",
    "build_outline",
    # Editor
    "Position",
    "TextBuffer",
    "IndentAction",
    "IndentationEngine",
    "CommentAction",
    "CommentEngine",
    "CommentPositionStack",
    "JoinAction",
    "LineJoinEngine",
    "EditingSession",
]
