# =============================================================================
# test_config.py - Editor Configuration Tests
# =============================================================================
# Tests for EditorConfig defaults, validation and environment loading.
# =============================================================================

import pytest

from nasmkit.config import AfterMnemonic, EditorConfig
from nasmkit.errors import ConfigurationError, NasmKitError


class TestDefaults:
    """Default values."""

    def test_defaults(self):
        config = EditorConfig()
        assert config.basic_offset == 8
        assert config.after_mnemonic is AfterMnemonic.TAB
        assert config.comment_column == 32
        assert config.indent_tabs is False
        assert config.tab_width == 8


class TestValidation:
    """Out-of-range values are rejected at construction."""

    @pytest.mark.parametrize("field, value", [
        ("basic_offset", 0),
        ("basic_offset", -4),
        ("comment_column", -1),
        ("tab_width", 0),
    ])
    def test_rejected(self, field, value):
        with pytest.raises(ConfigurationError) as exc_info:
            EditorConfig(**{field: value})
        assert exc_info.value.field == field
        assert exc_info.value.value == value

    def test_message_format(self):
        with pytest.raises(ConfigurationError) as exc_info:
            EditorConfig(basic_offset=0)
        assert str(exc_info.value) == "error: invalid basic_offset 0: must be a positive integer"

    def test_is_library_error(self):
        with pytest.raises(NasmKitError):
            EditorConfig(tab_width=-1)

    def test_comment_column_zero_allowed(self):
        assert EditorConfig(comment_column=0).comment_column == 0


class TestAfterMnemonic:
    """Parsing the post-mnemonic whitespace mode."""

    @pytest.mark.parametrize("text, mode", [
        ("tab", AfterMnemonic.TAB),
        ("Space", AfterMnemonic.SPACE),
        (" NONE ", AfterMnemonic.NONE),
    ])
    def test_parse(self, text, mode):
        assert AfterMnemonic.parse(text) is mode

    def test_string_in_constructor(self):
        assert EditorConfig(after_mnemonic="space").after_mnemonic is AfterMnemonic.SPACE

    def test_unknown_mode(self):
        with pytest.raises(ConfigurationError) as exc_info:
            AfterMnemonic.parse("newline")
        assert "tab, space, none" in exc_info.value.hint


class TestFromEnv:
    """Loading configuration from NASMKIT_* variables."""

    def test_unset_keeps_defaults(self):
        assert EditorConfig.from_env() == EditorConfig()

    def test_all_variables(self, monkeypatch):
        monkeypatch.setenv("NASMKIT_BASIC_OFFSET", "4")
        monkeypatch.setenv("NASMKIT_AFTER_MNEMONIC", "space")
        monkeypatch.setenv("NASMKIT_COMMENT_COLUMN", "40")
        monkeypatch.setenv("NASMKIT_INDENT_TABS", "yes")
        monkeypatch.setenv("NASMKIT_TAB_WIDTH", "4")

        config = EditorConfig.from_env()
        assert config == EditorConfig(
            basic_offset=4,
            after_mnemonic=AfterMnemonic.SPACE,
            comment_column=40,
            indent_tabs=True,
            tab_width=4,
        )

    def test_empty_variable_ignored(self, monkeypatch):
        monkeypatch.setenv("NASMKIT_BASIC_OFFSET", "")
        assert EditorConfig.from_env().basic_offset == 8

    @pytest.mark.parametrize("text, expected", [("1", True), ("off", False), ("TRUE", True)])
    def test_booleans(self, monkeypatch, text, expected):
        monkeypatch.setenv("NASMKIT_INDENT_TABS", text)
        assert EditorConfig.from_env().indent_tabs is expected

    def test_malformed_integer(self, monkeypatch):
        monkeypatch.setenv("NASMKIT_COMMENT_COLUMN", "forty")
        with pytest.raises(ConfigurationError, match="not an integer"):
            EditorConfig.from_env()

    def test_malformed_boolean(self, monkeypatch):
        monkeypatch.setenv("NASMKIT_INDENT_TABS", "maybe")
        with pytest.raises(ConfigurationError, match="not a boolean"):
            EditorConfig.from_env()

    def test_out_of_range(self, monkeypatch):
        monkeypatch.setenv("NASMKIT_TAB_WIDTH", "0")
        with pytest.raises(ConfigurationError):
            EditorConfig.from_env()
