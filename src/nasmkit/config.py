"""
nasmkit - Editor Configuration
==============================

Settings the editing engines read. Configuration can come from:
- Default values (defined here)
- Keyword arguments (host editor or command-line options)
- Environment variables (EditorConfig.from_env)

The configuration is read-only during an editing session; engines receive
it at construction time and never modify it.

Environment Variables
---------------------
    NASMKIT_BASIC_OFFSET: Indentation width for instruction lines
    NASMKIT_AFTER_MNEMONIC: Whitespace after a mnemonic (tab, space, none)
    NASMKIT_COMMENT_COLUMN: Column of the right-hand comment gutter
    NASMKIT_INDENT_TABS: Indent with tab characters (1/0, true/false)
    NASMKIT_TAB_WIDTH: Display width of a tab character
"""

from dataclasses import dataclass
from enum import Enum
import os

from nasmkit.errors import ConfigurationError


class AfterMnemonic(Enum):
    """What the indent key inserts right after a complete mnemonic."""

    TAB = "tab"
    SPACE = "space"
    NONE = "none"

    @classmethod
    def parse(cls, value: str) -> "AfterMnemonic":
        """
        Parse a mode name, case-insensitively.

        Raises:
            ConfigurationError: If the name is not a known mode
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ConfigurationError(
                "after_mnemonic", value, "unknown whitespace mode", hint=f"use one of: {choices}"
            ) from None


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class EditorConfig:
    """
    Configuration for the indentation, comment and line-join engines.

    Attributes:
        basic_offset: Column that instruction lines are indented to (default: 8)
        after_mnemonic: Whitespace inserted by the indent key right after a
            mnemonic (default: TAB)
        comment_column: Column of the right-hand comment gutter (default: 32)
        indent_tabs: Build indentation from tab characters where possible
            (default: False, spaces only)
        tab_width: Display width of a tab character (default: 8)
    """

    basic_offset: int = 8
    after_mnemonic: AfterMnemonic = AfterMnemonic.TAB
    comment_column: int = 32
    indent_tabs: bool = False
    tab_width: int = 8

    def __post_init__(self) -> None:
        if isinstance(self.after_mnemonic, str):
            self.after_mnemonic = AfterMnemonic.parse(self.after_mnemonic)
        self.validate()

    def validate(self) -> None:
        """
        Check every field is in range.

        Raises:
            ConfigurationError: On the first invalid field
        """
        if not isinstance(self.basic_offset, int) or self.basic_offset <= 0:
            raise ConfigurationError("basic_offset", self.basic_offset, "must be a positive integer")
        if not isinstance(self.comment_column, int) or self.comment_column < 0:
            raise ConfigurationError("comment_column", self.comment_column, "must be zero or positive")
        if not isinstance(self.tab_width, int) or self.tab_width <= 0:
            raise ConfigurationError("tab_width", self.tab_width, "must be a positive integer")
        if not isinstance(self.after_mnemonic, AfterMnemonic):
            raise ConfigurationError("after_mnemonic", self.after_mnemonic, "must be an AfterMnemonic")

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def from_env(cls) -> "EditorConfig":
        """
        Create an EditorConfig from environment variables.

        Unset variables keep their defaults.

        Returns:
            EditorConfig with values from the environment

        Raises:
            ConfigurationError: If a variable holds a malformed value
        """
        values = {}

        if offset := os.environ.get("NASMKIT_BASIC_OFFSET"):
            values["basic_offset"] = _parse_int("basic_offset", offset)

        if mode := os.environ.get("NASMKIT_AFTER_MNEMONIC"):
            values["after_mnemonic"] = AfterMnemonic.parse(mode)

        if column := os.environ.get("NASMKIT_COMMENT_COLUMN"):
            values["comment_column"] = _parse_int("comment_column", column)

        if tabs := os.environ.get("NASMKIT_INDENT_TABS"):
            values["indent_tabs"] = _parse_bool("indent_tabs", tabs)

        if width := os.environ.get("NASMKIT_TAB_WIDTH"):
            values["tab_width"] = _parse_int("tab_width", width)

        return cls(**values)


def _parse_int(field: str, text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ConfigurationError(field, text, "not an integer") from None


def _parse_bool(field: str, text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(field, text, "not a boolean", hint="use 1/0, true/false, yes/no or on/off")
