"""
NASM Syntax Layer
=================

Lexical knowledge of NASM-dialect x86 assembly:

- **keywords**: Immutable keyword tables (registers, prefixes, types,
  instructions, directives, preprocessor directives)
- **patterns**: Pattern compiler turning the tables into matchers
- **classifier**: LineClassifier deciding what each region of a line is
- **scanner**: String/comment detection (the SyntaxState oracle)
- **outline**: Label and definition index of a document
"""

from nasmkit.syntax.categories import Category, Region
from nasmkit.syntax.keywords import DEFAULT_TABLES, KeywordSet, KeywordTables
from nasmkit.syntax.patterns import CompiledPatternSet, compile_patterns, default_patterns
from nasmkit.syntax.classifier import LineClassifier
from nasmkit.syntax.scanner import (
    BufferSyntaxState,
    LexicalSpan,
    SyntaxState,
    line_comment_start,
    scan_line,
)
from nasmkit.syntax.outline import OutlineEntry, build_outline

__all__ = [
    # Categories
    "Category",
    "Region",
    # Keyword tables
    "DEFAULT_TABLES",
    "KeywordSet",
    "KeywordTables",
    # Patterns
    "CompiledPatternSet",
    "compile_patterns",
    "default_patterns",
    # Classifier
    "LineClassifier",
    # Scanner
    "BufferSyntaxState",
    "LexicalSpan",
    "SyntaxState",
    "line_comment_start",
    "scan_line",
    # Outline
    "OutlineEntry",
    "build_outline",
]
