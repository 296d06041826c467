"""Tests for projecting state onto a frame description."""

from file_viewer.core.document import Document
from file_viewer.core.state import Capturing, ViewportState, ViewSize
from file_viewer.render.projector import Highlight, StatusLine, project


def indexes(frame) -> list[int]:
    return [row.index for row in frame.rows]


class TestRows:
    """Which lines become rows."""

    def test_fills_content_area(self, alpha_doc: Document) -> None:
        frame = project(ViewportState(), alpha_doc, ViewSize(40, 4))
        assert indexes(frame) == [0, 1, 2]
        assert [row.number for row in frame.rows] == [1, 2, 3]
        assert frame.content_height == 3

    def test_starts_at_top_line(self, alpha_doc: Document) -> None:
        frame = project(ViewportState(top_line=3), alpha_doc, ViewSize(40, 10))
        assert indexes(frame) == [3, 4]

    def test_filtering_skips_non_matching(self, alpha_doc: Document) -> None:
        state = ViewportState(pattern="alpha", filtering=True)
        frame = project(state, alpha_doc, ViewSize(40, 4))
        assert indexes(frame) == [0, 2, 4]

    def test_filtering_with_empty_pattern_shows_everything(self, alpha_doc: Document) -> None:
        frame = project(ViewportState(filtering=True), alpha_doc, ViewSize(40, 10))
        assert indexes(frame) == [0, 1, 2, 3, 4]

    def test_match_flag(self, alpha_doc: Document) -> None:
        frame = project(ViewportState(pattern="alpha"), alpha_doc, ViewSize(40, 4))
        assert [row.matches for row in frame.rows] == [True, False, True]

    def test_no_pattern_no_matches(self, alpha_doc: Document) -> None:
        frame = project(ViewportState(), alpha_doc, ViewSize(40, 4))
        assert not any(row.matches or row.highlights for row in frame.rows)

    def test_empty_document(self, empty_doc: Document) -> None:
        frame = project(ViewportState(), empty_doc, ViewSize(40, 4))
        assert frame.rows == ()
        assert frame.status.position == "1/0"

    def test_single_row_view_has_no_content(self, alpha_doc: Document) -> None:
        frame = project(ViewportState(), alpha_doc, ViewSize(40, 1))
        assert frame.rows == ()


class TestVisibleText:
    """Horizontal scroll and clipping."""

    def test_left_edge_shifts_text(self, alpha_doc: Document) -> None:
        frame = project(ViewportState(left_edge=2), alpha_doc, ViewSize(40, 2))
        assert frame.rows[0].visible_text == "pha"
        assert frame.rows[0].text == "alpha"
        assert frame.left_edge == 2

    def test_clipped_to_content_width(self, alpha_doc: Document) -> None:
        frame = project(ViewportState(), alpha_doc, ViewSize(12, 2))
        assert frame.margin == 8
        assert frame.content_width == 4
        assert frame.rows[0].visible_text == "alph"

    def test_hidden_line_numbers_free_the_margin(self, alpha_doc: Document) -> None:
        state = ViewportState(show_line_numbers=False)
        frame = project(state, alpha_doc, ViewSize(12, 2))
        assert frame.margin == 0
        assert frame.rows[0].visible_text == "alpha"

    def test_custom_margin(self, alpha_doc: Document) -> None:
        frame = project(ViewportState(), alpha_doc, ViewSize(12, 2), line_number_margin=10)
        assert frame.rows[0].visible_text == "al"


class TestHighlights:
    """Occurrences of the pattern within a row."""

    def test_every_occurrence(self) -> None:
        doc = Document.from_lines(["alpha and alpha"])
        frame = project(ViewportState(pattern="alpha"), doc, ViewSize(40, 2))
        assert frame.rows[0].highlights == (Highlight(0, 5), Highlight(10, 15))

    def test_occurrences_do_not_overlap(self) -> None:
        doc = Document.from_lines(["aaaaa"])
        frame = project(ViewportState(pattern="aa"), doc, ViewSize(40, 2))
        assert frame.rows[0].highlights == (Highlight(0, 2), Highlight(2, 4))

    def test_shifted(self) -> None:
        assert Highlight(10, 15).shifted(4) == Highlight(6, 11)


class TestStatusLine:
    """Position indicator and pattern."""

    def test_position(self, alpha_doc: Document) -> None:
        frame = project(ViewportState(top_line=2), alpha_doc, ViewSize(40, 4))
        assert frame.status.position == "3/5"
        assert frame.status.text == "3/5"

    def test_capturing_shows_prompt(self, alpha_doc: Document) -> None:
        state = ViewportState(pattern="al", mode=Capturing(2))
        frame = project(state, alpha_doc, ViewSize(40, 4))
        assert frame.status.capturing is True
        assert frame.status.text == "1/5  /al"

    def test_capturing_empty_pattern(self) -> None:
        assert StatusLine("1/5", True, "").text == "1/5  /"

    def test_committed_pattern_without_prompt(self, alpha_doc: Document) -> None:
        frame = project(ViewportState(pattern="alpha"), alpha_doc, ViewSize(40, 4))
        assert frame.status.prompt == ""
        assert frame.status.text == "1/5  alpha"


class TestDisplayedText:
    """Rows carry screen-safe text."""

    def test_tab_expanded(self) -> None:
        doc = Document.from_lines(["tab\there"])
        frame = project(ViewportState(), doc, ViewSize(40, 2))
        assert frame.rows[0].text == "tab\there"
        assert frame.rows[0].display_text == "tab     here"
        assert frame.rows[0].visible_text == "tab     here"

    def test_highlight_after_tab_uses_display_columns(self) -> None:
        doc = Document.from_lines(["\there"])
        frame = project(ViewportState(pattern="here"), doc, ViewSize(40, 2))
        assert frame.rows[0].highlights == (Highlight(8, 12),)

    def test_escape_replaced(self) -> None:
        doc = Document.from_lines(["a\x1b[2Jb"])
        frame = project(ViewportState(), doc, ViewSize(40, 2))
        assert frame.rows[0].visible_text == "a?[2Jb"
