"""Interactive full-screen viewer for a single Document."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from file_viewer.cli.core.input import InputReader
from file_viewer.cli.core.terminal import Terminal
from file_viewer.config import ViewerConfig
from file_viewer.core.constants import CLEAR_EOL
from file_viewer.core.controller import ViewportController
from file_viewer.core.document import Document
from file_viewer.core.keys import Key, KeyEvent
from file_viewer.core.state import ViewportState, ViewSize
from file_viewer.log import console_suspended
from file_viewer.render.painter import paint
from file_viewer.render.projector import project
from file_viewer.render.terminal import TerminalRenderer

logger = logging.getLogger(__name__)


class ViewerApp:
    """
    Interactive text viewer.

    One key event in, one state transition, one redraw:
    - Arrows/PgUp/PgDn/Home/End scroll, Ctrl+Home/End jump to the ends
    - / starts a search, n/p go to the next/previous match
    - Ctrl+T toggles filtering, Ctrl+L toggles line numbers
    - Esc (or q) quits when no search is being typed
    """

    def __init__(
        self,
        document: Document,
        config: Optional[ViewerConfig] = None,
        initial_state: Optional[ViewportState] = None,
        input_reader: Optional[InputReader] = None,
    ) -> None:
        self.config = config or ViewerConfig()
        self.running = False
        self.input = input_reader
        self.renderer = TerminalRenderer(reset_at_end=False)

        state = initial_state or ViewportState(
            show_line_numbers=self.config.show_line_numbers,
            filtering=self.config.filtering,
        )
        self.controller = ViewportController(
            document,
            state,
            line_number_margin=self.config.line_number_margin,
        )

    @property
    def state(self) -> ViewportState:
        return self.controller.state

    def run(self) -> ViewportState:
        """Main application loop. Returns the final state."""
        self.running = True
        reader = self.input or InputReader()
        logger.info("viewing %s (%d lines)", self.controller.document.title,
                    self.controller.document.size())

        with console_suspended(), Terminal.managed_mode():
            while self.running:
                self._render(Terminal.size())
                self._handle_input(reader)

        logger.info("viewer closed at line %d", self.state.top_line + 1)
        return self.state

    def frame_lines(self, view: ViewSize) -> list[str]:
        """Produce the ANSI lines of one frame."""
        frame = project(
            self.state,
            self.controller.document,
            view,
            line_number_margin=self.config.line_number_margin,
        )
        canvas = paint(frame, self.config.x_factor, self.config.y_factor)
        return self.renderer.render_lines(canvas)

    def _render(self, view: ViewSize) -> None:
        """Render the full screen without flicker."""
        # Move to home instead of clearing - prevents flicker
        Terminal.move_to(1, 1)
        lines = [line + CLEAR_EOL for line in self.frame_lines(view)]
        sys.stdout.write('\r\n'.join(lines))
        sys.stdout.flush()

    def _handle_input(self, reader: InputReader) -> None:
        """Handle keyboard input; closed input ends the session."""
        try:
            event = reader.read(timeout=0.05)
        except EOFError:
            logger.info("input closed, leaving viewer")
            self.running = False
            return
        if event is None:
            return
        self.dispatch(event, Terminal.size())

    def dispatch(self, event: KeyEvent, view: ViewSize) -> None:
        """Route one event: quit gestures stop the loop, the rest go to the controller."""
        if self.is_quit(event):
            self.running = False
            return
        self.controller.handle(event, view)

    def is_quit(self, event: KeyEvent) -> bool:
        """Esc or q quit, but only while browsing."""
        if self.state.is_capturing:
            return False
        return event.key == Key.ESCAPE or (event.is_char and event.char == "q")


def run_viewer(
    document: Document,
    config: Optional[ViewerConfig] = None,
    initial_state: Optional[ViewportState] = None,
) -> ViewportState:
    """Launch the viewer application."""
    app = ViewerApp(document, config, initial_state)
    return app.run()
