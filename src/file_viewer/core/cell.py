"""Cell - one character position on the drawing surface."""

from dataclasses import dataclass

from file_viewer.core.color import Color


@dataclass(slots=True)
class Cell:
    """A single character cell and its foreground color (None = terminal default)."""
    char: str = ' '
    fg: Color | None = None
