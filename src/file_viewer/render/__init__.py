"""Frame projection and output for the viewer."""

from file_viewer.render.projector import (
    FrameDescription,
    Highlight,
    Row,
    StatusLine,
    project,
)
from file_viewer.render.canvas import Canvas
from file_viewer.render.painter import paint
from file_viewer.render.terminal import TerminalRenderer
from file_viewer.render.text import TextRenderer

__all__ = [
    "FrameDescription",
    "Highlight",
    "Row",
    "StatusLine",
    "project",
    "Canvas",
    "paint",
    "TerminalRenderer",
    "TextRenderer",
]
