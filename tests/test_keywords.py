# =============================================================================
# test_keywords.py - Keyword Table Tests
# =============================================================================
# Tests for KeywordSet validation and the built-in NASM keyword tables.
# =============================================================================

import dataclasses

import pytest

from nasmkit.errors import KeywordTableError, NasmKitError
from nasmkit.syntax.keywords import DEFAULT_TABLES, KeywordSet


# =============================================================================
# KeywordSet Construction
# =============================================================================

class TestKeywordSet:
    """Test KeywordSet normalisation and validation."""

    def test_membership_is_case_insensitive(self):
        """Stored words are lower-cased; lookups ignore case."""
        words = KeywordSet.of("instructions", ["MOV", "add"])
        assert "mov" in words
        assert "MOV" in words
        assert "Add" in words
        assert "sub" not in words

    def test_non_string_is_not_member(self):
        words = KeywordSet.of("instructions", ["mov"])
        assert 42 not in words

    def test_iteration_is_sorted(self):
        words = KeywordSet.of("registers", ["ebx", "EAX", "ecx"])
        assert list(words) == ["eax", "ebx", "ecx"]
        assert len(words) == 3

    def test_empty_keyword_rejected(self):
        """An empty keyword would compile into a pattern matching nothing."""
        with pytest.raises(KeywordTableError) as exc_info:
            KeywordSet.of("registers", ["eax", ""])
        assert exc_info.value.category == "registers"
        assert "must not be empty" in str(exc_info.value)

    def test_whitespace_keyword_rejected(self):
        with pytest.raises(KeywordTableError):
            KeywordSet.of("prefixes", ["rep ne"])

    def test_non_string_keyword_rejected(self):
        with pytest.raises(KeywordTableError) as exc_info:
            KeywordSet.of("types", ["byte", 4])
        assert exc_info.value.keyword == 4

    def test_error_is_library_error(self):
        """KeywordTableError belongs to the nasmkit hierarchy."""
        with pytest.raises(NasmKitError):
            KeywordSet.of("types", [""])

    def test_frozen(self):
        words = KeywordSet.of("types", ["byte"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            words.category = "other"


# =============================================================================
# Built-in Tables
# =============================================================================

class TestDefaultTables:
    """Spot-check the built-in NASM data."""

    @pytest.mark.parametrize("word", ["eax", "RAX", "r15d", "r8b", "xmm31", "ymm0", "k7", "cr3", "st0", "fs"])
    def test_registers(self, word):
        assert word in DEFAULT_TABLES.registers

    @pytest.mark.parametrize("word", ["lock", "rep", "repne", "times", "o16", "xacquire"])
    def test_prefixes(self, word):
        assert word in DEFAULT_TABLES.prefixes

    @pytest.mark.parametrize("word", ["byte", "dword", "qword", "near", "strict", "wrt"])
    def test_types(self, word):
        assert word in DEFAULT_TABLES.types

    @pytest.mark.parametrize("word", ["mov", "jnz", "cmovge", "setb", "fldz", "vpaddd", "syscall", "db", "resq", "equ"])
    def test_instructions(self, word):
        assert word in DEFAULT_TABLES.instructions

    @pytest.mark.parametrize("word", ["section", "segment", "global", "extern", "bits", "org", "default"])
    def test_directives(self, word):
        assert word in DEFAULT_TABLES.directives

    @pytest.mark.parametrize("word", ["%define", "%macro", "%endmacro", "%include", "%ifdef", "%assign"])
    def test_preprocessor(self, word):
        assert word in DEFAULT_TABLES.preprocessor

    def test_label_like_word_in_no_table(self):
        """Ordinary identifiers are not keywords of any category."""
        tables = [getattr(DEFAULT_TABLES, f.name) for f in dataclasses.fields(DEFAULT_TABLES)]
        assert all("print_string" not in table for table in tables)
