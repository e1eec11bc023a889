# =============================================================================
# test_buffer.py - Text Buffer Tests
# =============================================================================
# Tests for point handling, editing primitives, indentation and the generic
# line join.
# =============================================================================

from nasmkit.editor.buffer import Position, TextBuffer, indentation_string, visual_width


class TestPoint:
    """Point movement and clamping."""

    def test_initial_point(self):
        assert TextBuffer("abc").point == Position(0, 0)

    def test_goto_clamps(self):
        """Out-of-range positions land on the nearest valid one."""
        buffer = TextBuffer("abc\nde")
        assert buffer.goto(5, 99) == Position(1, 2)
        assert buffer.goto(-1, -4) == Position(0, 0)

    def test_empty_buffer(self):
        buffer = TextBuffer("")
        assert buffer.line_count == 1
        assert buffer.goto(3, 3) == Position(0, 0)

    def test_visual_columns(self):
        buffer = TextBuffer("\tab", tab_width=8)
        assert buffer.column_at(0, 1) == 8
        assert buffer.column_at(0, 2) == 9

    def test_indentation_index(self):
        buffer = TextBuffer(" \t mov")
        assert buffer.indentation_index(0) == 3
        assert buffer.back_to_indentation() == Position(0, 3)


class TestEditing:
    """Editing primitives."""

    def test_insert_moves_point(self):
        buffer = TextBuffer("mov")
        buffer.goto(0, 3)
        buffer.insert(" eax")
        assert buffer.text == "mov eax"
        assert buffer.point == Position(0, 7)

    def test_insert_newline(self):
        buffer = TextBuffer("movax")
        buffer.goto(0, 3)
        buffer.insert("\n  ")
        assert buffer.lines == ["mov", "  ax"]
        assert buffer.point == Position(1, 2)

    def test_replace_shifts_point_after_range(self):
        buffer = TextBuffer("  mov eax")
        buffer.goto(0, 5)
        buffer.replace(0, 0, 2, "\t\t")
        assert buffer.point == Position(0, 5)
        buffer.replace(0, 0, 2, "")
        assert buffer.point == Position(0, 3)

    def test_replace_collapses_point_inside_range(self):
        buffer = TextBuffer("mov eax")
        buffer.goto(0, 5)
        buffer.replace(0, 3, 7, "")
        assert buffer.point == Position(0, 3)

    def test_delete(self):
        buffer = TextBuffer("mov eax")
        buffer.goto(0, 3)
        assert buffer.delete_forward() == " "
        assert buffer.delete_backward(2) == "ov"
        assert buffer.text == "meax"
        assert buffer.point == Position(0, 1)


class TestIndentLineTo:
    """Replace leading whitespace."""

    def test_spaces(self):
        buffer = TextBuffer("\tmov")
        buffer.indent_line_to(4)
        assert buffer.text == "    mov"

    def test_tabs(self):
        buffer = TextBuffer("mov")
        buffer.indent_line_to(12, use_tabs=True)
        assert buffer.text == "\t    mov"

    def test_point_in_text_follows_text(self):
        buffer = TextBuffer("  mov eax")
        buffer.goto(0, 6)
        buffer.indent_line_to(8)
        assert buffer.point == Position(0, 12)

    def test_point_in_indentation_moves_to_text(self):
        buffer = TextBuffer("  mov eax")
        buffer.goto(0, 1)
        buffer.indent_line_to(8)
        assert buffer.point == Position(0, 8)

    def test_helpers(self):
        assert indentation_string(10, True, 8) == "\t  "
        assert visual_width("ab\tc", 4) == 5


class TestJoinLine:
    """The generic join primitive."""

    def test_join_previous(self):
        buffer = TextBuffer("  .loop\n    inc eax")
        buffer.goto(1, 6)
        assert buffer.join_line()
        assert buffer.text == "  .loop inc eax"
        assert buffer.point == Position(0, 7)

    def test_join_following(self):
        buffer = TextBuffer("  .loop   \n    inc eax\nret")
        buffer.goto(0, 0)
        assert buffer.join_line(following=True)
        assert buffer.lines == ["  .loop inc eax", "ret"]
        assert buffer.point == Position(0, 7)

    def test_first_line_is_noop(self):
        buffer = TextBuffer("mov\nret")
        assert not buffer.join_line()
        assert buffer.text == "mov\nret"

    def test_last_line_following_is_noop(self):
        buffer = TextBuffer("mov\nret")
        buffer.goto(1, 0)
        assert not buffer.join_line(following=True)

    def test_no_space_with_empty_side(self):
        buffer = TextBuffer("\n    inc eax")
        buffer.goto(1, 0)
        buffer.join_line()
        assert buffer.text == "inc eax"
        assert buffer.point == Position(0, 0)

    def test_no_space_inside_brackets(self):
        buffer = TextBuffer("mov eax, [\n  ebx]")
        buffer.goto(1, 0)
        buffer.join_line()
        assert buffer.text == "mov eax, [ebx]"
