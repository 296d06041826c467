"""Document - immutable line-oriented text being viewed."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

from file_viewer.core.search import line_matches


@dataclass(frozen=True)
class Document:
    """
    An ordered, read-only sequence of text lines.

    The document never changes after construction, so any number of
    viewers may hold a reference to the same instance. All search
    primitives treat an empty pattern as "no search" and report a miss
    as ``None`` rather than raising.

    Two families of search are provided:
    - ``find_*`` scan strictly in one direction and stop at the document
      boundary (no wrap).
    - ``locate_*`` wrap around to the opposite boundary when the first
      scan misses, and return the starting index unchanged when nothing
      matches at all.
    """
    lines: tuple[str, ...] = ()
    source_path: Path | None = None

    @classmethod
    def from_lines(cls, lines: Iterable[str], source_path: Path | None = None) -> "Document":
        """Build a document from any iterable of lines."""
        return cls(tuple(lines), source_path)

    @classmethod
    def load(cls, path: str | Path, encoding: str = "utf-8") -> "Document":
        """Load a document from disk."""
        from file_viewer.io.reader import load
        return load(path, encoding=encoding)

    def size(self) -> int:
        """Number of lines."""
        return len(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def line(self, index: int) -> str:
        """Get the text of line ``index`` (0-based)."""
        if index < 0 or index >= len(self.lines):
            raise IndexError(f"line {index} out of range (size={len(self.lines)})")
        return self.lines[index]

    def contains(self, index: int, pattern: str) -> bool:
        """Check whether line ``index`` contains a non-empty pattern."""
        return line_matches(self.line(index), pattern)

    @property
    def longest_line(self) -> int:
        """Length of the longest line, 0 for an empty document."""
        return max((len(line) for line in self.lines), default=0)

    def find_next_matching_line(self, current: int, pattern: str) -> Optional[int]:
        """
        Find the first line after ``current`` containing ``pattern``.

        Pass ``current=-1`` to include line 0. Does not wrap.
        """
        if not pattern or current >= len(self.lines) - 1:
            return None
        for index in range(max(current + 1, 0), len(self.lines)):
            if pattern in self.lines[index]:
                return index
        return None

    def find_previous_matching_line(self, current: int, pattern: str) -> Optional[int]:
        """
        Find the last line before ``current`` containing ``pattern``.

        Pass ``current=size()`` to include the final line. Does not wrap.
        """
        if not pattern or current < 1:
            return None
        for index in range(min(current - 1, len(self.lines) - 1), -1, -1):
            if pattern in self.lines[index]:
                return index
        return None

    def locate_next_match(self, current: int, pattern: str) -> int:
        """Next matching line after ``current``, wrapping to the top."""
        if not pattern:
            return current
        found = self.find_next_matching_line(current, pattern)
        if found is None:
            found = self.find_next_matching_line(-1, pattern)
        return current if found is None else found

    def locate_previous_match(self, current: int, pattern: str) -> int:
        """Previous matching line before ``current``, wrapping to the bottom."""
        if not pattern:
            return current
        found = self.find_previous_matching_line(current, pattern)
        if found is None:
            found = self.find_previous_matching_line(len(self.lines), pattern)
        return current if found is None else found

    def count_matches(self, pattern: str) -> int:
        """Number of lines containing ``pattern``."""
        return sum(1 for line in self.lines if line_matches(line, pattern))

    @property
    def title(self) -> str:
        """File name, or "Untitled" for documents not read from disk."""
        if self.source_path:
            return self.source_path.name
        return "Untitled"
