# =============================================================================
# test_classifier.py - Line Classifier Tests
# =============================================================================
# Tests for token classification, region classification with precedence,
# and the queries the editing engines rely on.
# =============================================================================

import pytest

from nasmkit.syntax.categories import Category, Region


# =============================================================================
# Token Classification
# =============================================================================

class TestClassifyToken:
    """Classify isolated tokens."""

    @pytest.mark.parametrize("token, category", [
        ("foo:", Category.NONLOCAL_LABEL),
        (".loop:", Category.LOCAL_LABEL),
        (".loop", Category.LOCAL_LABEL),
        ("mov", Category.INSTRUCTION),
        ("db", Category.INSTRUCTION),
        ("eax", Category.REGISTER),
        ("lock", Category.PREFIX),
        ("dword", Category.TYPE),
        ("%define", Category.PREPROCESSOR),
        ("section", Category.DIRECTIVE),
        ("0x1A", Category.CONSTANT),
        ("10h", Category.CONSTANT),
    ])
    def test_categories(self, classifier, token, category):
        assert classifier.classify_token(token) is category

    def test_bare_identifier_is_ordinary_code(self, classifier):
        """A name with no colon could be a macro call: never a label."""
        assert classifier.classify_token("foo") is None

    def test_prefix_beats_instruction(self, classifier):
        """'wait' is both a prefix and an instruction; prefix comes first."""
        assert classifier.classify_token("wait") is Category.PREFIX

    def test_mnemonic_with_colon_is_label(self, classifier):
        assert classifier.classify_token("mov:") is Category.NONLOCAL_LABEL


# =============================================================================
# Region Classification
# =============================================================================

def summarize(line, regions):
    return [(region.text(line), region.category) for region in regions]


class TestRegions:
    """Classify every region of a line."""

    def test_instruction_line(self, classifier):
        line = "start: mov eax, 10h"
        assert classifier.regions(line) == [
            Region(0, 5, Category.NONLOCAL_LABEL),
            Region(7, 10, Category.INSTRUCTION),
            Region(11, 14, Category.REGISTER),
            Region(16, 19, Category.CONSTANT),
        ]

    def test_section_declaration(self, classifier):
        line = "section .text"
        assert summarize(line, classifier.regions(line)) == [
            ("section", Category.DIRECTIVE),
            (".text", Category.SECTION_NAME),
        ]

    def test_type_and_register(self, classifier):
        line = "    mov dword [ebp-4], 0"
        assert summarize(line, classifier.regions(line)) == [
            ("mov", Category.INSTRUCTION),
            ("dword", Category.TYPE),
            ("ebp", Category.REGISTER),
            ("4", Category.CONSTANT),
            ("0", Category.CONSTANT),
        ]

    def test_prefixed_instruction(self, classifier):
        line = "    rep movsb"
        assert summarize(line, classifier.regions(line)) == [
            ("rep", Category.PREFIX),
            ("movsb", Category.INSTRUCTION),
        ]

    def test_preprocessor_line(self, classifier):
        line = "%define BUFSZ 64"
        assert summarize(line, classifier.regions(line)) == [
            ("%define", Category.PREPROCESSOR),
            ("64", Category.CONSTANT),
        ]

    def test_local_label_with_colon(self, classifier):
        line = ".done: ret"
        assert summarize(line, classifier.regions(line)) == [
            (".done", Category.LOCAL_LABEL),
            ("ret", Category.INSTRUCTION),
        ]

    def test_labels_only_at_line_start(self, classifier):
        """A local label used as an operand is a reference, not a declaration."""
        line = "    jmp .done"
        categories = [region.category for region in classifier.regions(line)]
        assert categories == [Category.INSTRUCTION]

    def test_comment_claims_keywords(self, classifier):
        line = "    mov eax, 1 ; mov ebx"
        regions = classifier.regions(line)
        assert regions[-1] == Region(15, 24, Category.COMMENT)
        assert [r.category for r in regions].count(Category.INSTRUCTION) == 1

    def test_string_claims_keywords(self, classifier):
        line = '    db "mov", 0'
        assert summarize(line, classifier.regions(line)) == [
            ("db", Category.INSTRUCTION),
            ('"mov"', Category.STRING),
            ("0", Category.CONSTANT),
        ]

    def test_empty_line(self, classifier):
        assert classifier.regions("") == []


class TestClassifyAt:
    """Classify the token at or just before an anchor column."""

    def test_inside_token(self, classifier):
        assert classifier.classify_at("    mov eax, 1", 5) is Category.INSTRUCTION

    def test_immediately_after_token(self, classifier):
        assert classifier.classify_at("    mov eax, 1", 7) is Category.INSTRUCTION

    def test_between_tokens(self, classifier):
        assert classifier.classify_at("    mov eax, 1", 12) is None

    def test_section_name_needs_line_context(self, classifier):
        assert classifier.classify_at("section .bss", 10) is Category.SECTION_NAME


# =============================================================================
# Engine Queries
# =============================================================================

class TestWantsColumnZero:
    """Leading tokens that belong flush left."""

    @pytest.mark.parametrize("line", [
        "section .text",
        "  global main",
        "%include 'io.inc'",
        "    %macro print 1",
        "[bits 64]",
        ";; file header",
        "foo:",
        "  .loop",
        ".loop: inc eax",
        "_start: mov eax, 1",
    ])
    def test_flush_left(self, classifier, line):
        assert classifier.wants_column_zero(line)

    @pytest.mark.parametrize("line", [
        "mov eax, 1",
        "  inc eax",
        "foo",
        "print_string msg",
        "; single comment",
        "",
    ])
    def test_indented(self, classifier, line):
        assert not classifier.wants_column_zero(line)


class TestLabelBefore:
    """Label ending exactly at an index."""

    def test_local_label(self, classifier):
        assert classifier.label_before("  .loop inc eax", 7) == ".loop"

    def test_nonlocal_label(self, classifier):
        assert classifier.label_before("foo: mov eax, 1", 4) == "foo:"

    def test_mnemonic_is_not_label(self, classifier):
        assert classifier.label_before("    mov eax", 7) is None

    def test_label_not_ending_at_index(self, classifier):
        assert classifier.label_before("foo: mov", 8) is None

    def test_operand_reference_is_not_label(self, classifier):
        assert classifier.label_before("  jmp .done", 11) is None


class TestInstructionField:
    def test_field(self, classifier):
        assert classifier.is_instruction_field("lock add")
        assert not classifier.is_instruction_field("add eax")
