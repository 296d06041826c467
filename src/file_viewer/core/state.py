"""Viewport state - where the viewer is looking and what it is searching for."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union


@dataclass(frozen=True)
class ViewSize:
    """Size of the drawing surface in character cells."""
    width: int
    height: int

    @property
    def content_height(self) -> int:
        """Rows available for document text (one row is the status line)."""
        return max(0, self.height - 1)


@dataclass(frozen=True)
class Browsing:
    """Keys navigate the document."""


@dataclass(frozen=True)
class Capturing:
    """Keys build a new search pattern."""
    matching_line: int = -1  # Where Return would jump, -1 for nowhere


Mode = Union[Browsing, Capturing]


@dataclass(frozen=True)
class ViewportState:
    """
    Complete navigation, search and filter state of one viewer.

    ``mode`` is either ``Browsing()`` or ``Capturing(matching_line)``, so
    the candidate jump target only exists while a pattern is being typed.
    ``pattern`` lives outside the mode: it is the in-progress pattern while
    capturing and the committed one afterwards (used by ``n``/``p`` and
    filtering).
    """
    top_line: int = 0
    left_edge: int = 0
    pattern: str = ""
    show_line_numbers: bool = True
    filtering: bool = False
    mode: Mode = field(default_factory=Browsing)

    @property
    def is_capturing(self) -> bool:
        return isinstance(self.mode, Capturing)

    @property
    def matching_line(self) -> int:
        if isinstance(self.mode, Capturing):
            return self.mode.matching_line
        return -1

    def with_changes(self, **changes: object) -> "ViewportState":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def clamped(self, view: ViewSize, size: int) -> "ViewportState":
        """Pull ``left_edge`` and ``top_line`` back inside their valid ranges."""
        left_edge = max(0, min(self.left_edge, view.width - 1))
        top_line = max(0, min(self.top_line, size - 1))
        if left_edge == self.left_edge and top_line == self.top_line:
            return self
        return replace(self, left_edge=left_edge, top_line=top_line)
