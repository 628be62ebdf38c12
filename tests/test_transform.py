"""Tests for the line transform — selections, planning and applying edits."""

from __future__ import annotations

import pytest

from fibtab.ladder import Ladder
from fibtab.model import Direction
from fibtab.model.edit import LineEdit, Selection
from fibtab.transform import (
    apply_edits,
    leading_whitespace,
    plan_edits,
    reindent_text,
    selected_lines,
    split_lines,
)


class TestLeadingWhitespace:
    def test_spaces(self) -> None:
        assert leading_whitespace("    x") == "    "

    def test_tabs_and_spaces(self) -> None:
        assert leading_whitespace("\t  x") == "\t  "

    def test_no_indent(self) -> None:
        assert leading_whitespace("x = 1\n") == ""

    def test_terminator_not_counted(self) -> None:
        assert leading_whitespace("   \n") == "   "
        assert leading_whitespace("\r\n") == ""


class TestSelectedLines:
    def test_none_selects_everything(self) -> None:
        assert selected_lines(3) == [0, 1, 2]

    def test_overlapping_selections_deduplicated(self) -> None:
        sels = [Selection(1, 3), Selection(2, 4)]
        assert selected_lines(10, sels) == [1, 2, 3, 4]

    def test_out_of_range_dropped(self) -> None:
        assert selected_lines(3, [Selection(1, 8)]) == [1, 2]

    def test_reversed_selection(self) -> None:
        assert selected_lines(5, [Selection(3, 1)]) == [1, 2, 3]

    def test_negative_selection_rejected(self) -> None:
        with pytest.raises(ValueError):
            Selection(-1, 2)


class TestReindentText:
    """reindent_text applies one ladder step per affected line."""

    def test_indent_whole_document(self) -> None:
        text = "a\n  b\n    c\n"
        new, edits = reindent_text(text, Direction.INDENT)
        assert new == "  a\n    b\n      c\n"
        assert [e.new_width for e in edits] == [2, 4, 6]

    def test_outdent_whole_document(self) -> None:
        text = "a\n  b\n      c\n"
        new, edits = reindent_text(text, Direction.OUTDENT)
        # "a" is already at depth 0 and produces no edit
        assert new == "a\nb\n    c\n"
        assert [e.index for e in edits] == [1, 2]

    def test_indent_then_outdent_round_trips(self) -> None:
        text = "def f():\n  if x:\n    return 1\n          deep\n"
        indented, _ = reindent_text(text, Direction.INDENT)
        restored, _ = reindent_text(indented, Direction.OUTDENT)
        assert restored == text

    def test_misaligned_indent_floors_before_stepping(self) -> None:
        new, edits = reindent_text("       x\n", Direction.INDENT)
        assert new == " " * 10 + "x\n"
        assert edits[0].old_depth == 3
        assert edits[0].new_depth == 4

    def test_tabs_replaced_with_spaces(self) -> None:
        # a tab counts as one character of width, like the editor measure
        new, _ = reindent_text("\t\tx\n", Direction.INDENT)
        assert new == "    x\n"

    def test_selection_limits_affected_lines(self) -> None:
        text = "a\nb\nc\nd\n"
        new, edits = reindent_text(text, Direction.INDENT, [Selection(1, 2)])
        assert new == "a\n  b\n  c\nd\n"
        assert [e.index for e in edits] == [1, 2]

    def test_multiple_selections(self) -> None:
        text = "a\nb\nc\nd\n"
        new, _ = reindent_text(
            text, Direction.INDENT, [Selection(0, 0), Selection(3, 3)]
        )
        assert new == "  a\nb\nc\n  d\n"

    def test_overlapping_selections_rewrite_once(self) -> None:
        new, edits = reindent_text(
            "x\n", Direction.INDENT, [Selection(0, 0), Selection(0, 0)]
        )
        assert new == "  x\n"
        assert len(edits) == 1

    def test_crlf_preserved(self) -> None:
        new, _ = reindent_text("a\r\n  b\r\n", Direction.INDENT)
        assert new == "  a\r\n    b\r\n"

    def test_no_trailing_newline(self) -> None:
        new, _ = reindent_text("  a", Direction.INDENT)
        assert new == "    a"

    def test_blank_lines_rewritten_by_default(self) -> None:
        new, _ = reindent_text("a\n\nb\n", Direction.INDENT)
        assert new == "  a\n  \n  b\n"

    def test_skip_blank_lines(self) -> None:
        new, _ = reindent_text("a\n   \nb\n", Direction.INDENT, skip_blank_lines=True)
        assert new == "  a\n   \n  b\n"

    def test_normalize_snaps_to_floor(self) -> None:
        new, edits = reindent_text("   a\n    b\n         c\n", Direction.NORMALIZE)
        assert new == "  a\n    b\n      c\n"
        assert [e.index for e in edits] == [0, 2]

    def test_normalize_on_ladder_is_noop(self) -> None:
        text = "a\n  b\n    c\n      d\n          e\n"
        new, edits = reindent_text(text, Direction.NORMALIZE)
        assert new == text
        assert edits == []

    def test_custom_ladder(self) -> None:
        new, _ = reindent_text("x\n", Direction.INDENT, ladder=Ladder(multiplier=4))
        assert new == "    x\n"

    def test_empty_text(self) -> None:
        assert reindent_text("", Direction.INDENT) == ("", [])

    def test_outdent_floor_at_zero(self) -> None:
        new, edits = reindent_text(" x\n", Direction.OUTDENT)
        assert new == "x\n"
        assert edits[0].new_depth == 0

    def test_form_feed_stays_inside_its_line(self) -> None:
        text = "def f():\n\x0c\n    pass\n"
        new, edits = reindent_text(text, Direction.INDENT)
        assert new == "  def f():\n  \x0c\n      pass\n"
        assert len(edits) == 3
        assert len(split_lines(new)) == len(split_lines(text))

    def test_unicode_line_separator_not_a_line_break(self) -> None:
        text = 'x = "a\u2028b"\n'
        new, edits = reindent_text(text, Direction.INDENT)
        assert new == "  " + text
        assert [e.index for e in edits] == [0]

    def test_selection_index_after_form_feed_line(self) -> None:
        text = "a\n\x0c\nb\nc\n"
        new, edits = reindent_text(text, Direction.INDENT, [Selection(2, 2)])
        assert new == "a\n\x0c\n  b\nc\n"
        assert [e.index for e in edits] == [2]

    def test_lone_cr_terminators_preserved(self) -> None:
        new, _ = reindent_text("a\r  b\r", Direction.INDENT)
        assert new == "  a\r    b\r"


class TestSplitLines:
    def test_only_real_terminators_split(self) -> None:
        text = "a\x0bb\x0cc\x1cd\x85e\u2028f\u2029g\n"
        assert split_lines(text) == [text]

    def test_mixed_terminators_kept(self) -> None:
        assert split_lines("a\r\nb\rc\nd") == ["a\r\n", "b\r", "c\n", "d"]

    def test_empty(self) -> None:
        assert split_lines("") == []


class TestApplyEdits:
    def test_stale_edit_rejected(self) -> None:
        edit = LineEdit(index=0, old_indent="  ", new_indent="    ", old_depth=1, new_depth=2)
        with pytest.raises(ValueError):
            apply_edits(["x\n"], [edit])

    def test_plan_then_apply(self) -> None:
        lines = ["  a\n", "b\n"]
        edits = plan_edits(lines, Direction.INDENT)
        assert apply_edits(lines, edits) == ["    a\n", "  b\n"]
        # input is not mutated
        assert lines == ["  a\n", "b\n"]

    def test_edit_to_dict_is_one_based(self) -> None:
        edits = plan_edits(["a\n", "b\n"], Direction.INDENT, [Selection(1, 1)])
        assert edits[0].to_dict() == {
            "line": 2,
            "old_width": 0,
            "new_width": 2,
            "old_depth": 0,
            "new_depth": 1,
        }
