"""
Syntactic Categories
====================

The kinds of region the line classifier reports for a line of NASM source.
The ten keyword and rule categories are listed in classification
precedence; COMMENT and STRING come from the lexical scanner and are never
produced by keyword matching.
"""

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Category of a classified region."""

    SECTION_NAME = "section-name"
    REGISTER = "register"
    PREFIX = "prefix"
    TYPE = "type"
    INSTRUCTION = "instruction"
    PREPROCESSOR = "preprocessor"
    NONLOCAL_LABEL = "nonlocal-label"
    LOCAL_LABEL = "local-label"
    CONSTANT = "constant"
    DIRECTIVE = "directive"

    # Lexical regions
    COMMENT = "comment"
    STRING = "string"

    @property
    def is_label(self) -> bool:
        return self in (Category.NONLOCAL_LABEL, Category.LOCAL_LABEL)


@dataclass(frozen=True)
class Region:
    """
    A classified, half-open character range of one line.

    Attributes:
        start: Index of the first character
        end: Index one past the last character
        category: What the text in the range is
    """
    start: int
    end: int
    category: Category

    def __contains__(self, index: int) -> bool:
        return self.start <= index < self.end

    def overlaps(self, start: int, end: int) -> bool:
        return start < self.end and self.start < end

    def text(self, line: str) -> str:
        """Slice this region out of its line."""
        return line[self.start:self.end]
