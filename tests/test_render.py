"""Tests for the canvas, painter and output renderers."""

import re

import pytest

from file_viewer.core import color
from file_viewer.core.color import Color
from file_viewer.core.document import Document
from file_viewer.core.state import Capturing, ViewportState, ViewSize
from file_viewer.render import Canvas, TerminalRenderer, TextRenderer, paint, project

_SGR = re.compile(r'\x1b\[[0-9;]*m')


def screen(state: ViewportState, doc: Document, view: ViewSize) -> Canvas:
    return paint(project(state, doc, view))


def text_of(canvas: Canvas) -> list[str]:
    return TextRenderer().render(canvas).split("\n")


class TestColor:
    """Tests for Color."""

    def test_sgr(self) -> None:
        assert Color.CYAN1.to_sgr_fg() == "38;5;51"
        assert Color(196).to_sgr_fg() == "38;5;196"

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Color(256)


class TestCanvas:
    """Pixel-addressed drawing."""

    def test_dimensions(self) -> None:
        canvas = Canvas.of_cells(10, 2)
        assert (canvas.width, canvas.height) == (20, 8)
        assert (canvas.columns, canvas.rows) == (10, 2)

    def test_draw_text_scales_coordinates(self) -> None:
        canvas = Canvas.of_cells(10, 2)
        canvas.draw_text(4, 4, "hi", Color.YELLOW1)
        assert canvas.row_text(1) == "  hi      "
        assert canvas.get(2, 1).fg == Color.YELLOW1

    def test_negative_x_is_clipped(self) -> None:
        canvas = Canvas.of_cells(10, 1)
        canvas.draw_text(-4, 0, "hello")
        assert canvas.row_text(0) == "llo       "

    def test_right_edge_is_clipped(self) -> None:
        canvas = Canvas.of_cells(4, 1)
        canvas.draw_text(0, 0, "abcdefgh")
        assert canvas.row_text(0) == "abcd"

    def test_rows_outside_are_ignored(self) -> None:
        canvas = Canvas.of_cells(4, 1)
        canvas.draw_text(0, 4, "x")
        canvas.draw_text(0, -4, "y")
        assert canvas.row_text(0) == "    "

    def test_get_out_of_bounds(self) -> None:
        canvas = Canvas.of_cells(4, 1)
        with pytest.raises(IndexError):
            canvas.get(4, 0)

    def test_paste(self) -> None:
        target = Canvas.of_cells(6, 2)
        source = Canvas.of_cells(2, 1)
        source.draw_text(0, 0, "ab", Color.CYAN1)
        target.paste(source, 3, 1)
        assert target.row_text(1) == "   ab "
        assert target.get(4, 1).fg == Color.CYAN1

    def test_bad_factors(self) -> None:
        with pytest.raises(ValueError):
            Canvas(10, 10, x_factor=0)


class TestPaint:
    """Frame descriptions drawn onto a screen canvas."""

    def test_layout(self, alpha_doc: Document) -> None:
        lines = text_of(screen(ViewportState(), alpha_doc, ViewSize(20, 3)))
        assert lines == ["1       alpha", "2       beta", "1/5"]

    def test_canvas_matches_view(self, alpha_doc: Document) -> None:
        canvas = screen(ViewportState(), alpha_doc, ViewSize(20, 3))
        assert (canvas.columns, canvas.rows) == (20, 3)

    def test_no_line_numbers(self, alpha_doc: Document) -> None:
        state = ViewportState(show_line_numbers=False)
        lines = text_of(screen(state, alpha_doc, ViewSize(20, 3)))
        assert lines[:2] == ["alpha", "beta"]

    def test_scrolled_text_stays_out_of_margin(self, alpha_doc: Document) -> None:
        canvas = screen(ViewportState(left_edge=2), alpha_doc, ViewSize(20, 3))
        assert canvas.row_text(0)[:11] == "1       pha"

    def test_filtered_rows(self, alpha_doc: Document) -> None:
        state = ViewportState(pattern="alpha", filtering=True)
        lines = text_of(screen(state, alpha_doc, ViewSize(20, 4)))
        assert lines[:3] == ["1       alpha", "3       alpha2", "5       alpha3"]

    def test_line_number_colors(self, alpha_doc: Document) -> None:
        canvas = screen(ViewportState(pattern="alpha"), alpha_doc, ViewSize(20, 3))
        assert canvas.get(0, 0).fg == color.LINE_NUMBER_MATCH
        assert canvas.get(0, 1).fg == color.LINE_NUMBER

    def test_highlights(self, alpha_doc: Document) -> None:
        canvas = screen(ViewportState(pattern="alp"), alpha_doc, ViewSize(20, 4))
        assert [canvas.get(8 + i, 0).fg for i in range(4)] == [
            color.HIGHLIGHT, color.HIGHLIGHT, color.HIGHLIGHT, None,
        ]
        assert canvas.get(8, 1).fg is None

    def test_highlight_follows_scroll(self) -> None:
        doc = Document.from_lines(["xxxxfind"])
        state = ViewportState(pattern="find", left_edge=2, show_line_numbers=False)
        canvas = screen(state, doc, ViewSize(20, 2))
        assert canvas.row_text(0)[:6] == "xxfind"
        assert canvas.get(2, 0).fg == color.HIGHLIGHT
        assert canvas.get(1, 0).fg is None

    def test_status_while_capturing(self, alpha_doc: Document) -> None:
        state = ViewportState(pattern="al", mode=Capturing(2))
        canvas = screen(state, alpha_doc, ViewSize(30, 3))
        assert canvas.row_text(2).rstrip() == "1/5" + " " * 12 + "/al"
        assert canvas.get(0, 2).fg == color.STATUS
        assert canvas.get(15, 2).fg == color.PATTERN

    def test_status_with_committed_pattern(self, alpha_doc: Document) -> None:
        canvas = screen(ViewportState(pattern="al"), alpha_doc, ViewSize(30, 3))
        assert canvas.row_text(2).rstrip() == "1/5" + " " * 13 + "al"

    def test_narrow_view_does_not_fail(self, alpha_doc: Document) -> None:
        canvas = screen(ViewportState(), alpha_doc, ViewSize(4, 2))
        assert canvas.columns == 4
        assert canvas.row_text(1) == "1/5 "


class TestTerminalRenderer:
    """ANSI output."""

    def test_rows_have_exact_width(self, alpha_doc: Document) -> None:
        canvas = screen(ViewportState(pattern="alpha"), alpha_doc, ViewSize(20, 3))
        lines = TerminalRenderer().render_lines(canvas)
        assert len(lines) == 3
        assert all(len(_SGR.sub('', line)) == 20 for line in lines)

    def test_color_codes(self, alpha_doc: Document) -> None:
        canvas = screen(ViewportState(pattern="alpha"), alpha_doc, ViewSize(20, 3))
        first = TerminalRenderer().render_lines(canvas)[0]
        assert first.startswith("\x1b[38;5;51m1")
        assert "\x1b[38;5;226malpha" in first

    def test_codes_only_on_change(self) -> None:
        canvas = Canvas.of_cells(4, 1)
        canvas.draw_text(0, 0, "abcd", Color.CYAN1)
        assert TerminalRenderer().render_lines(canvas) == ["\x1b[38;5;51mabcd\x1b[0m"]

    def test_plain_row_has_no_codes(self) -> None:
        canvas = Canvas.of_cells(3, 1)
        canvas.draw_text(0, 0, "abc")
        assert TerminalRenderer().render_lines(canvas) == ["abc"]

    def test_render_resets_at_end(self) -> None:
        canvas = Canvas.of_cells(2, 2)
        assert TerminalRenderer().render(canvas) == "  \n  \x1b[0m"
        assert TerminalRenderer(reset_at_end=False).render(canvas) == "  \n  "


class TestControlCharacters:
    """Nothing from a document reaches the terminal as a control code."""

    def test_no_raw_escape_or_tab(self) -> None:
        doc = Document.from_lines(["ok", "evil\x1b[2Jafter", "tab\there"])
        canvas = screen(ViewportState(show_line_numbers=False), doc, ViewSize(30, 4))
        lines = TerminalRenderer().render_lines(canvas)
        assert "\x1b[2J" not in lines[1]
        assert "\t" not in lines[2]
        plain = [_SGR.sub('', line) for line in lines]
        assert plain[1].rstrip() == "evil?[2Jafter"
        assert plain[2].rstrip() == "tab     here"

    def test_highlight_after_tab(self) -> None:
        doc = Document.from_lines(["\there"])
        state = ViewportState(pattern="here", show_line_numbers=False)
        canvas = screen(state, doc, ViewSize(20, 2))
        assert canvas.get(8, 0).fg == color.HIGHLIGHT
        assert canvas.get(7, 0).fg is None

    def test_canvas_replaces_control_characters(self) -> None:
        canvas = Canvas.of_cells(3, 1)
        canvas.draw_text(0, 0, "a\x07\n")
        assert canvas.row_text(0) == "a??"
