"""
Outline Builder
===============

Produces the index of a NASM document: every nonlocal label declared at the
start of a line, and every ``%define`` / ``%macro`` definition, with its
position. Editors use this for a "go to symbol" list; the command line
prints it with ``nasmed outline``.

Matches that start inside a comment or a string are skipped, so
``; see loop:`` or ``db "%define x"`` do not produce entries.
"""

from dataclasses import dataclass
import logging
from typing import Iterable, Optional

from nasmkit.syntax.patterns import CompiledPatternSet, default_patterns
from nasmkit.syntax.scanner import scan_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutlineEntry:
    """
    One entry of the document outline.

    Attributes:
        name: Label or defined symbol name
        kind: "label", "define" or "macro"
        row: Line number (0-indexed)
        column: Character index of the name (0-indexed)
    """
    name: str
    kind: str
    row: int
    column: int


def build_outline(
    lines: Iterable[str],
    patterns: Optional[CompiledPatternSet] = None,
) -> list[OutlineEntry]:
    """
    Scan a document for label declarations and macro/constant definitions.

    Args:
        lines: Document lines, without newlines
        patterns: Compiled pattern set (default: built-in NASM tables)

    Returns:
        Entries in document order
    """
    patterns = patterns or default_patterns()
    entries = []

    for row, line in enumerate(lines):
        spans = scan_line(line)

        def lexical(index: int) -> bool:
            return any(span.region.start <= index < span.region.end for span in spans)

        indent = len(line) - len(line.lstrip(" \t"))
        match = patterns.nonlocal_label.match(line, indent)
        if match and not lexical(match.start(1)):
            entries.append(OutlineEntry(match.group(1), "label", row, match.start(1)))

        for match in patterns.definition.finditer(line):
            if lexical(match.start()):
                continue
            kind = match.group(1).lower().lstrip("%")
            entries.append(OutlineEntry(match.group(2), kind, row, match.start(2)))

    logger.debug(f"Outline: {len(entries)} entries")
    return entries
