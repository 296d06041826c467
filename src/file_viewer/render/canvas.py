"""Canvas - fixed-size grid of cells addressed in magnified units."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from file_viewer.core.cell import Cell
from file_viewer.core.color import Color
from file_viewer.core.constants import CONTROL_PLACEHOLDER, X_FACTOR, Y_FACTOR


@dataclass
class Canvas:
    """
    A drawing surface backed by a grid of Cells.

    Coordinates passed to ``draw_text`` are in canvas units: each
    character cell is ``x_factor`` units wide and ``y_factor`` units tall.
    Anything drawn outside the grid, including at negative x, is clipped.
    """
    width: int
    height: int
    x_factor: int = X_FACTOR
    y_factor: int = Y_FACTOR
    _buffer: list[list[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.x_factor <= 0 or self.y_factor <= 0:
            raise ValueError("cell magnification factors must be positive")
        if not self._buffer:
            self._buffer = [
                [Cell() for _ in range(self.columns)] for _ in range(self.rows)
            ]

    @classmethod
    def of_cells(
        cls, columns: int, rows: int, x_factor: int = X_FACTOR, y_factor: int = Y_FACTOR
    ) -> "Canvas":
        """Create a canvas sized in character cells."""
        return cls(max(0, columns) * x_factor, max(0, rows) * y_factor, x_factor, y_factor)

    @property
    def columns(self) -> int:
        return max(0, self.width) // self.x_factor

    @property
    def rows(self) -> int:
        return max(0, self.height) // self.y_factor

    def get(self, col: int, row: int) -> Cell:
        """Get the cell at character position (col, row)."""
        if not (0 <= col < self.columns and 0 <= row < self.rows):
            raise IndexError(f"({col}, {row}) out of bounds ({self.columns}x{self.rows})")
        return self._buffer[row][col]

    def put_char(self, col: int, row: int, char: str, fg: Color | None = None) -> None:
        """
        Put a character at a cell position, silently clipping.

        Control characters are stored as CONTROL_PLACEHOLDER so that no
        cell can emit a terminal control sequence.
        """
        if not char.isprintable():
            char = CONTROL_PLACEHOLDER
        if 0 <= col < self.columns and 0 <= row < self.rows:
            cell = self._buffer[row][col]
            cell.char = char
            cell.fg = fg

    def draw_text(self, x: int, y: int, text: str, color: Color | None = None) -> None:
        """Draw text with its first character at canvas units (x, y)."""
        col = x // self.x_factor
        row = y // self.y_factor
        if not 0 <= row < self.rows:
            return
        for i, char in enumerate(text):
            if col + i >= self.columns:
                break
            self.put_char(col + i, row, char, color)

    def paste(self, other: "Canvas", col: int, row: int) -> None:
        """Copy another canvas onto this one with its origin at (col, row)."""
        for y, source_row in enumerate(other.iter_rows()):
            for x, cell in enumerate(source_row):
                self.put_char(col + x, row + y, cell.char, cell.fg)

    def iter_rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def row_text(self, row: int) -> str:
        """Plain characters of one row."""
        return ''.join(cell.char for cell in self._buffer[row])
