"""
nasmkit Error Hierarchy
=======================

This module defines the exception hierarchy for nasmkit. All exceptions
inherit from NasmKitError, so callers can catch every library error with a
single except clause.

Exception Hierarchy
-------------------
NasmKitError (base)
├── KeywordTableError - malformed keyword while building a keyword table
├── ConfigurationError - invalid editor configuration value
└── SourceFileError - an input file cannot be read as assembly source

Where Errors Happen
-------------------
The editing engines themselves never raise on odd input: a cursor past the
end of the buffer, an empty line or an empty saved-position stack all
degrade to a no-op. Errors are raised only at the boundaries: when tables
are built, when configuration is read, and when the command line loads a
file.

Error messages follow this format:
    error: description
    hint: suggestion for fixing (when available)
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class NasmKitError(Exception):
    """
    Base exception for all nasmkit errors.

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the message with its optional hint.

        Example output:
            error: keyword in table 'registers' must not be empty
            hint: remove the empty entry from the table
        """
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Specific Exceptions
# =============================================================================

class KeywordTableError(NasmKitError):
    """
    A keyword table contains an entry that can never match.

    Raised at table construction time, so a bad table is caught at
    startup rather than silently compiled into a pattern that matches
    empty text.

    Attributes:
        category: Name of the table being built
        keyword: The offending entry
    """

    def __init__(self, category: str, keyword: object, reason: str):
        self.category = category
        self.keyword = keyword
        super().__init__(
            f"keyword {keyword!r} in table '{category}' {reason}",
            hint="keywords must be non-empty strings without whitespace",
        )


class ConfigurationError(NasmKitError):
    """
    An editor configuration value is out of range or malformed.

    Attributes:
        field: Name of the configuration field
        value: The rejected value
    """

    def __init__(self, field: str, value: object, reason: str, hint: Optional[str] = None):
        self.field = field
        self.value = value
        super().__init__(f"invalid {field} {value!r}: {reason}", hint=hint)


class SourceFileError(NasmKitError):
    """
    An assembly source file cannot be loaded.

    Attributes:
        filename: Path of the file that failed to load
    """

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        super().__init__(f"{filename}: {reason}", hint="source files must be UTF-8 or ASCII text")
