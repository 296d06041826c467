"""Project viewer state onto a description of the frame to draw."""

from __future__ import annotations

from dataclasses import dataclass

from file_viewer.core.constants import LINE_NUMBER_MARGIN
from file_viewer.core.display import display_text
from file_viewer.core.document import Document
from file_viewer.core.search import is_visible, iter_occurrences
from file_viewer.core.state import ViewportState, ViewSize


@dataclass(frozen=True)
class Highlight:
    """One occurrence of the pattern, in display columns [start, end)."""
    start: int
    end: int

    def shifted(self, left_edge: int) -> "Highlight":
        """The same span in content-area columns."""
        return Highlight(self.start - left_edge, self.end - left_edge)


@dataclass(frozen=True)
class Row:
    """
    A document line that occupies one row of the content area.

    ``text`` is the line as stored; ``display_text`` is what goes on
    screen, with tabs expanded and control characters replaced.
    """
    index: int
    text: str
    display_text: str
    visible_text: str
    matches: bool
    highlights: tuple[Highlight, ...] = ()

    @property
    def number(self) -> int:
        """1-based line number shown in the margin."""
        return self.index + 1


@dataclass(frozen=True)
class StatusLine:
    """Bottom row: position indicator plus the search pattern."""
    position: str
    capturing: bool
    pattern: str

    @property
    def prompt(self) -> str:
        return "/" if self.capturing else ""

    @property
    def text(self) -> str:
        parts = [self.position]
        if self.capturing or self.pattern:
            parts.append(f"{self.prompt}{self.pattern}")
        return "  ".join(parts)


@dataclass(frozen=True)
class FrameDescription:
    """Everything needed to draw one frame, independent of any terminal."""
    view: ViewSize
    margin: int
    left_edge: int
    pattern: str
    rows: tuple[Row, ...]
    status: StatusLine

    @property
    def content_height(self) -> int:
        return self.view.content_height

    @property
    def content_width(self) -> int:
        return max(0, self.view.width - self.margin)


def project(
    state: ViewportState,
    document: Document,
    view: ViewSize,
    *,
    line_number_margin: int = LINE_NUMBER_MARGIN,
) -> FrameDescription:
    """
    Describe the frame for ``state`` without touching any output device.

    Lines are taken from ``top_line`` downwards; when filtering with a
    pattern, lines without it are skipped and take no row.
    """
    margin = line_number_margin if state.show_line_numbers else 0
    content_width = max(0, view.width - margin)
    pattern = state.pattern

    rows: list[Row] = []
    index = state.top_line
    while len(rows) < view.content_height and index < document.size():
        text = document.line(index)
        if is_visible(text, pattern, state.filtering):
            shown, columns = display_text(text)
            highlights = tuple(
                Highlight(columns[start], columns[start + len(pattern)])
                for start in iter_occurrences(text, pattern)
            )
            rows.append(Row(
                index=index,
                text=text,
                display_text=shown,
                visible_text=shown[state.left_edge:state.left_edge + content_width],
                matches=bool(highlights),
                highlights=highlights,
            ))
        index += 1

    status = StatusLine(
        position=f"{state.top_line + 1}/{document.size()}",
        capturing=state.is_capturing,
        pattern=pattern,
    )
    return FrameDescription(
        view=view,
        margin=margin,
        left_edge=state.left_edge,
        pattern=pattern,
        rows=tuple(rows),
        status=status,
    )
