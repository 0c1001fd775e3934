#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_render_context.py
"""Unit tests for RenderContext."""

import pytest

from html2plain.options import RenderOptions
from html2plain.renderers.context import RenderContext


@pytest.mark.unit
class TestEmit:
    """Tests for routing fragments through the context."""

    def test_empty_string_is_noop(self) -> None:
        """Test that emitting an empty string writes nothing."""
        context = RenderContext(RenderOptions())
        context.emit("")
        assert context.getvalue() == ""

    def test_line_break_requests_are_capped(self) -> None:
        """Test that newline control strings never stack up."""
        context = RenderContext(RenderOptions())
        context.emit("one")
        context.emit("\n\n")
        context.emit("\n")
        context.emit("\n\n")
        context.emit("two")
        assert context.getvalue() == "one\n\ntwo"

    def test_text_is_wrapped(self) -> None:
        """Test that ordinary text goes through the line wrapper."""
        context = RenderContext(RenderOptions(line_width=10))
        context.emit("aaa bbb ccc ddd")
        assert context.getvalue() == "aaa bbb\nccc ddd"

    def test_explicit_width_overrides_options(self) -> None:
        """Test that the width argument wins over options.line_width."""
        context = RenderContext(RenderOptions(line_width=78), width=3)
        context.emit("aa bb")
        assert context.getvalue() == "aa\nbb"

    def test_table_content_bypasses_wrapper(self) -> None:
        """Test that inside a table fragments are written verbatim."""
        context = RenderContext(RenderOptions(line_width=5))
        with context.table_scope():
            context.emit("a very long cell value")
            context.emit("\n\n")
        assert context.getvalue() == "\na very long cell value\n\n"

    def test_preformatted_inside_table_is_raw(self) -> None:
        """Test that preformatted text in a table is appended unchanged."""
        context = RenderContext(RenderOptions())
        context.emit("x")
        with context.table_scope():
            context.emit_preformatted("  keep  ")
        assert context.getvalue() == "x\n  keep  "


@pytest.mark.unit
class TestSubContext:
    """Tests for isolated sub-contexts."""

    def test_sub_has_fresh_buffer(self) -> None:
        """Test that a sub-context does not see or write the parent buffer."""
        context = RenderContext(RenderOptions())
        context.emit("parent")
        sub = context.sub()
        sub.emit("child")
        assert sub.getvalue() == "child"
        assert context.getvalue() == "parent"

    def test_sub_keeps_options_and_width(self) -> None:
        """Test that a sub-context inherits options and width."""
        options = RenderOptions(text_only=True)
        context = RenderContext(options, width=12)
        sub = context.sub()
        assert sub.options is options
        assert sub.wrapper.width == 12

    def test_sub_does_not_inherit_table_state(self) -> None:
        """Test that nesting counters start at zero in a sub-context."""
        context = RenderContext(RenderOptions())
        with context.table_scope():
            sub = context.sub()
        assert not sub.in_table
        assert sub.blockquote_depth == 0


@pytest.mark.unit
class TestNestingState:
    """Tests for blockquote, table and preformatted bookkeeping."""

    def test_blockquote_prefix_tracks_depth(self) -> None:
        """Test that the quote marker follows the nesting depth."""
        context = RenderContext(RenderOptions())
        context.enter_blockquote()
        assert context.line_prefix == "> "
        context.enter_blockquote()
        assert context.line_prefix == ">> "
        context.leave_blockquote()
        assert context.line_prefix == "> "
        context.leave_blockquote()
        assert context.line_prefix == ""
        assert context.blockquote_depth == 0

    def test_blockquote_prefix_not_applied_to_output(self) -> None:
        """Test that the quote marker is tracked but never written."""
        context = RenderContext(RenderOptions())
        context.enter_blockquote()
        context.emit("quoted")
        context.leave_blockquote()
        assert context.getvalue() == "quoted"

    def test_text_only_keeps_prefix_unset(self) -> None:
        """Test that text-only mode does not build a quote marker."""
        context = RenderContext(RenderOptions(text_only=True))
        context.enter_blockquote()
        assert context.line_prefix == ""

    def test_table_depth_restored_after_error(self) -> None:
        """Test that the table counter is decremented even when rendering fails."""
        context = RenderContext(RenderOptions())
        with pytest.raises(RuntimeError):
            with context.table_scope():
                assert context.table_depth == 1
                raise RuntimeError("boom")
        assert context.table_depth == 0
        assert not context.in_table

    def test_preformatted_restores_previous_mode(self) -> None:
        """Test that nested preformatted blocks restore the outer mode."""
        context = RenderContext(RenderOptions())
        with context.preformatted():
            with context.preformatted():
                assert context.in_preformatted
            assert context.in_preformatted
        assert not context.in_preformatted

    def test_collecting_table_stack(self) -> None:
        """Test that nested accumulators shadow and then restore the outer one."""
        context = RenderContext(RenderOptions())
        assert context.current_table is None
        with context.collecting_table() as outer:
            outer.start_row()
            with context.collecting_table() as inner:
                assert context.current_table is inner
                assert inner.body == []
            assert context.current_table is outer
            assert outer.body == [[]]
        assert context.current_table is None
