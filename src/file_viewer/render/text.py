"""Render a Canvas to plain text (strip colors)."""

from file_viewer.render.canvas import Canvas


class TextRenderer:
    """Render a Canvas to plain text without any styling."""

    def render(self, canvas: Canvas) -> str:
        """Render canvas to plain text, trailing blanks trimmed."""
        lines: list[str] = []

        for row in canvas.iter_rows():
            lines.append(''.join(cell.char for cell in row).rstrip())

        return '\n'.join(lines)
