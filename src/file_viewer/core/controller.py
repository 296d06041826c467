"""Viewport state machine: (state, key event, view size) -> new state."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from file_viewer.core.constants import LINE_NUMBER_MARGIN
from file_viewer.core.display import display_width
from file_viewer.core.document import Document
from file_viewer.core.keys import Key, KeyEvent
from file_viewer.core.search import is_visible
from file_viewer.core.state import Browsing, Capturing, ViewportState, ViewSize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Context:
    """Everything a command may read besides the state itself."""
    document: Document
    view: ViewSize
    line_number_margin: int

    @property
    def page(self) -> int:
        return self.view.height - 1


Command = Callable[[ViewportState, _Context], ViewportState]


# Capture

def _start_capture(state: ViewportState, ctx: _Context) -> ViewportState:
    logger.debug("capture started at line %d", state.top_line)
    return state.with_changes(mode=Capturing(), pattern="")


def _with_pattern(state: ViewportState, ctx: _Context, pattern: str) -> ViewportState:
    found = ctx.document.find_next_matching_line(state.top_line, pattern)
    return state.with_changes(
        pattern=pattern,
        mode=Capturing(-1 if found is None else found),
    )


def _end_capture(state: ViewportState, ctx: _Context) -> ViewportState:
    if not state.is_capturing:
        return state
    target = state.matching_line
    logger.debug("capture committed: pattern=%r target=%d", state.pattern, target)
    if target == -1:
        return state.with_changes(mode=Browsing())
    return state.with_changes(mode=Browsing(), top_line=target)


def _cancel_capture(state: ViewportState, ctx: _Context) -> ViewportState:
    if not state.is_capturing:
        return state
    logger.debug("capture cancelled")
    return state.with_changes(mode=Browsing(), pattern="")


def _backspace_capture(state: ViewportState, ctx: _Context) -> ViewportState:
    if not state.is_capturing or not state.pattern:
        return state
    return _with_pattern(state, ctx, state.pattern[:-1])


# Vertical movement

def _previous_match(state: ViewportState, ctx: _Context) -> ViewportState:
    return state.with_changes(
        top_line=ctx.document.locate_previous_match(state.top_line, state.pattern)
    )


def _next_match(state: ViewportState, ctx: _Context) -> ViewportState:
    return state.with_changes(
        top_line=ctx.document.locate_next_match(state.top_line, state.pattern)
    )


def _previous_line(state: ViewportState, ctx: _Context) -> ViewportState:
    if state.filtering and state.pattern:
        return _previous_match(state, ctx)
    return state.with_changes(top_line=state.top_line - 1)


def _next_line(state: ViewportState, ctx: _Context) -> ViewportState:
    if state.filtering and state.pattern:
        return _next_match(state, ctx)
    return state.with_changes(top_line=state.top_line + 1)


def _start_of_document(state: ViewportState, ctx: _Context) -> ViewportState:
    return state.with_changes(top_line=0)


def _end_of_document(state: ViewportState, ctx: _Context) -> ViewportState:
    return state.with_changes(top_line=ctx.document.size() - ctx.page)


def _previous_filtered_page(state: ViewportState, ctx: _Context) -> ViewportState:
    hits = 0
    line: Optional[int] = state.top_line
    while line is not None and line >= 0 and hits < ctx.page:
        line = ctx.document.find_previous_matching_line(line - 1, state.pattern)
        if line is not None:
            hits += 1
    if hits == ctx.page and line is not None:
        return state.with_changes(top_line=line)
    return state


def _next_filtered_page(state: ViewportState, ctx: _Context) -> ViewportState:
    hits = 0
    line: Optional[int] = state.top_line
    size = ctx.document.size()
    while line is not None and line < size and hits < ctx.page:
        line = ctx.document.find_next_matching_line(line + 1, state.pattern)
        if line is not None:
            hits += 1
    if hits == ctx.page and line is not None:
        return state.with_changes(top_line=line)
    return state


def _previous_page(state: ViewportState, ctx: _Context) -> ViewportState:
    if state.filtering and state.pattern:
        return _previous_filtered_page(state, ctx)
    return state.with_changes(top_line=state.top_line - ctx.page)


def _next_page(state: ViewportState, ctx: _Context) -> ViewportState:
    if state.filtering and state.pattern:
        return _next_filtered_page(state, ctx)
    return state.with_changes(top_line=state.top_line + ctx.page)


# Horizontal movement

def _previous_column(state: ViewportState, ctx: _Context) -> ViewportState:
    return state.with_changes(left_edge=state.left_edge - 1)


def _next_column(state: ViewportState, ctx: _Context) -> ViewportState:
    return state.with_changes(left_edge=state.left_edge + 1)


def _leftmost_column(state: ViewportState, ctx: _Context) -> ViewportState:
    return state.with_changes(left_edge=0)


def _rightmost_column(state: ViewportState, ctx: _Context) -> ViewportState:
    length = 0
    rows = ctx.view.height
    line = state.top_line
    size = ctx.document.size()
    while rows > 0 and line < size:
        text = ctx.document.line(line)
        if is_visible(text, state.pattern, state.filtering):
            length = max(length, display_width(text))
            rows -= 1
        line += 1
    margin = ctx.line_number_margin if state.show_line_numbers else 0
    if length > ctx.view.width - margin:
        return state.with_changes(left_edge=length - ctx.view.width + margin)
    return state.with_changes(left_edge=0)


# Toggles

def _toggle_line_numbers(state: ViewportState, ctx: _Context) -> ViewportState:
    return state.with_changes(show_line_numbers=not state.show_line_numbers)


def _toggle_filtering(state: ViewportState, ctx: _Context) -> ViewportState:
    logger.debug("filtering %s", "off" if state.filtering else "on")
    return state.with_changes(filtering=not state.filtering)


def _ignore(state: ViewportState, ctx: _Context) -> ViewportState:
    return state


KEY_COMMANDS: dict[Key, Command] = {
    Key.ENTER: _end_capture,
    Key.ESCAPE: _cancel_capture,
    Key.BACKSPACE: _backspace_capture,
    Key.UP: _previous_line,
    Key.DOWN: _next_line,
    Key.LEFT: _previous_column,
    Key.RIGHT: _next_column,
    Key.HOME: _leftmost_column,
    Key.END: _rightmost_column,
    Key.CTRL_HOME: _start_of_document,
    Key.CTRL_END: _end_of_document,
    Key.PAGE_UP: _previous_page,
    Key.PAGE_DOWN: _next_page,
    # Recognised so they never fall through as text; they do nothing.
    Key.CTRL_PAGE_UP: _ignore,
    Key.CTRL_PAGE_DOWN: _ignore,
    Key.CTRL_L: _toggle_line_numbers,
    Key.CTRL_T: _toggle_filtering,
}

CHAR_COMMANDS: dict[str, Command] = {
    "/": _start_capture,
    "n": _next_match,
    "p": _previous_match,
}


def transition(
    state: ViewportState,
    event: KeyEvent,
    document: Document,
    view: ViewSize,
    *,
    line_number_margin: int = LINE_NUMBER_MARGIN,
) -> ViewportState:
    """
    Compute the state that follows ``event``.

    Printable characters extend the pattern while capturing and are
    commands otherwise; named keys act in both modes. Whatever ran,
    ``left_edge`` and ``top_line`` are clamped into range afterwards.
    """
    ctx = _Context(document, view, line_number_margin)

    if event.char is not None:
        if state.is_capturing:
            state = _with_pattern(state, ctx, state.pattern + event.char)
        else:
            state = CHAR_COMMANDS.get(event.char, _ignore)(state, ctx)
    elif event.key is not None:
        state = KEY_COMMANDS.get(event.key, _ignore)(state, ctx)

    return state.clamped(view, document.size())


class ViewportController:
    """
    Owns the state of a single view onto a shared, read-only Document.

    The controller never queries the terminal: the caller supplies the
    current view size with every event.
    """

    def __init__(
        self,
        document: Document,
        state: Optional[ViewportState] = None,
        line_number_margin: int = LINE_NUMBER_MARGIN,
    ) -> None:
        self._document = document
        self._state = state or ViewportState()
        self.line_number_margin = line_number_margin

    @property
    def document(self) -> Document:
        return self._document

    @property
    def state(self) -> ViewportState:
        return self._state

    def handle(self, event: KeyEvent, view: ViewSize) -> ViewportState:
        """Apply one input event and return the new state."""
        self._state = transition(
            self._state,
            event,
            self._document,
            view,
            line_number_margin=self.line_number_margin,
        )
        return self._state

    def handle_all(self, events: list[KeyEvent], view: ViewSize) -> ViewportState:
        """Apply a sequence of events in order."""
        for event in events:
            self.handle(event, view)
        return self._state
