"""
NASM Line Classifier
====================

Decides what kind of syntactic element occupies each part of a line of
NASM source, using the compiled pattern set.

Precedence
----------
Categories are tried in a fixed order and the first match wins:

    section-name > register > prefix > type > instruction >
    preprocessor > nonlocal label > local label > constant > directive

Comments and strings are claimed before any keyword, so a mnemonic inside
a comment is never reported as an instruction.

Labels Versus Macro Invocations
-------------------------------
A bare identifier with no colon and no keyword membership (``foo``) is not
a label. Telling it apart from a macro invocation would need full
preprocessor expansion, so such lines are ordinary code. Only local labels
(``.loop``) are recognised without a colon, since they are commonly
referenced before or without re-declaration.

Example
-------
>>> from nasmkit.syntax import LineClassifier
>>> classifier = LineClassifier()
>>> [(r.text(line), r.category.value)
...  for line in ["start: mov eax, 10h"]
...  for r in classifier.regions(line)]
[('start', 'nonlocal-label'), ('mov', 'instruction'), ('eax', 'register'), ('10h', 'constant')]
"""

from typing import Optional

from nasmkit.syntax.categories import Category, Region
from nasmkit.syntax.patterns import CompiledPatternSet, default_patterns
from nasmkit.syntax.scanner import scan_line


# Categories whose pattern only counts at the start of the line
_LINE_START_CATEGORIES = (Category.NONLOCAL_LABEL, Category.LOCAL_LABEL)

# Categories whose region is a capture group rather than the whole match
_GROUP_CATEGORIES = (Category.SECTION_NAME, Category.NONLOCAL_LABEL, Category.LOCAL_LABEL)


class LineClassifier:
    """
    Classifies tokens and regions of single lines.

    The classifier holds no per-line state; one instance can serve any
    number of buffers.

    Args:
        patterns: Compiled pattern set (default: the built-in NASM tables)
    """

    def __init__(self, patterns: Optional[CompiledPatternSet] = None):
        self.patterns = patterns or default_patterns()

    # =========================================================================
    # Token Classification
    # =========================================================================

    def classify_token(self, token: str) -> Optional[Category]:
        """
        Classify a single token in isolation.

        Args:
            token: Token text such as ``mov``, ``.loop:`` or ``0x1A``

        Returns:
            The first category in precedence order matching the whole
            token, or None for ordinary code (including bare identifiers)
        """
        for category, pattern in self.patterns.ordered():
            if category is Category.SECTION_NAME:
                continue
            if pattern.fullmatch(token):
                return category
        return None

    def classify_at(self, line: str, column: int) -> Optional[Category]:
        """
        Classify the token at, or immediately before, a column.

        Args:
            line: Line text
            column: Character index used as the anchor

        Returns:
            Category of the region containing the column, else of the
            region ending exactly at it, else None
        """
        regions = self.regions(line)
        for region in regions:
            if column in region:
                return region.category
        for region in regions:
            if region.end == column:
                return region.category
        return None

    # =========================================================================
    # Region Classification
    # =========================================================================

    def regions(self, line: str) -> list[Region]:
        """
        Classify every recognisable region of a line.

        Comment and string spans are claimed first. Each category is then
        matched in precedence order; a match overlapping an earlier region
        is dropped.

        Returns:
            Non-overlapping regions sorted by start
        """
        claimed = [span.region for span in scan_line(line)]

        for category, pattern in self.patterns.ordered():
            if category in _LINE_START_CATEGORIES:
                matches = self._leading_matches(pattern, line)
            else:
                matches = pattern.finditer(line)

            for match in matches:
                if category in _GROUP_CATEGORIES:
                    start, end = match.span(1)
                else:
                    start, end = match.span()
                if start == end:
                    continue
                if any(region.overlaps(start, end) for region in claimed):
                    continue
                claimed.append(Region(start, end, category))

        return sorted(claimed, key=lambda region: region.start)

    def _leading_matches(self, pattern, line: str):
        """Match a pattern only at the first non-blank character."""
        start = _indentation_end(line)
        match = pattern.match(line, start)
        return [match] if match else []

    # =========================================================================
    # Queries Used by the Editing Engines
    # =========================================================================

    def wants_column_zero(self, line: str) -> bool:
        """
        Return True if the line's leading token belongs at column 0.

        Directives, preprocessor directives, memory-style bracket
        directives (``[bits 32]``), ``;;`` comments and labels of either
        kind stay flush left; everything else is indented.
        """
        start = _indentation_end(line)
        patterns = self.patterns
        return bool(
            patterns.directives.match(line, start)
            or patterns.preprocessor.match(line, start)
            or line.startswith("[", start)
            or line.startswith(";;", start)
            or patterns.label.match(line, start)
        )

    def label_before(self, line: str, index: int) -> Optional[str]:
        """
        Return the line's leading label if its match ends exactly at an index.

        Only a label at the first non-blank character counts; a label
        referenced in an operand (``jmp .done``) does not.

        Args:
            line: Line text
            index: Character index, usually the cursor

        Returns:
            The matched label text (including any colon) or None
        """
        head = line[:index]
        match = self.patterns.label.match(head, _indentation_end(head))
        if match and match.end() == len(head):
            return match.group(0)
        return None

    def is_instruction_field(self, text: str) -> bool:
        """Return True if text is exactly an optional prefix plus a mnemonic."""
        return self.patterns.instruction_field.fullmatch(text) is not None


def _indentation_end(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))
