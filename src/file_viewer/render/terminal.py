"""Render a Canvas to terminal-compatible escape sequences."""

from file_viewer.core.constants import CSI, RESET
from file_viewer.render.canvas import Canvas


class TerminalRenderer:
    """
    Render a Canvas to ANSI escape sequences for terminal display.

    Optimizes output by only emitting SGR codes when the color changes.
    Every row comes out exactly ``canvas.columns`` characters wide.
    """

    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end

    def render_lines(self, canvas: Canvas) -> list[str]:
        """Render canvas to one ANSI string per row."""
        lines: list[str] = []

        for row in canvas.iter_rows():
            line_parts: list[str] = []
            last_fg = None

            for cell in row:
                if cell.fg != last_fg:
                    if cell.fg is None:
                        line_parts.append(f"{CSI}39m")
                    else:
                        line_parts.append(f"{CSI}{cell.fg.to_sgr_fg()}m")
                    last_fg = cell.fg
                line_parts.append(cell.char)

            # Reset at end of each line to prevent color bleeding into clear-to-EOL
            if last_fg is not None:
                line_parts.append(RESET)

            lines.append(''.join(line_parts))

        return lines

    def render(self, canvas: Canvas) -> str:
        """Render canvas to a single ANSI string."""
        result = '\n'.join(self.render_lines(canvas))

        if self.reset_at_end:
            result += RESET

        return result
