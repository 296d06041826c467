"""
file-viewer: scrollable, searchable terminal viewer for text files

Quick Start:
    >>> import file_viewer as fv
    >>> doc = fv.load("server.log")
    >>> doc.locate_next_match(0, "ERROR")
    42

Features:
    - Immutable line documents with forward/backward substring search
    - Wrap-around "next/previous match" navigation
    - Filtered mode that pages through matching lines only
    - Pure state machine: (state, key, view size) -> state
    - Terminal-independent frame projection, painted onto a cell canvas
"""

__version__ = "0.1.0"

# Core types
from file_viewer.core.document import Document
from file_viewer.core.errors import ConfigError, DocumentLoadError, FileViewerError
from file_viewer.core.keys import Key, KeyEvent
from file_viewer.core.state import Browsing, Capturing, ViewportState, ViewSize
from file_viewer.core.controller import ViewportController, transition

# Rendering
from file_viewer.render.projector import FrameDescription, project

# Convenience functions
from file_viewer.io.reader import load, load_text

__all__ = [
    # Version
    "__version__",
    # Core types
    "Document",
    "Key",
    "KeyEvent",
    "Browsing",
    "Capturing",
    "ViewportState",
    "ViewSize",
    "ViewportController",
    "transition",
    # Errors
    "FileViewerError",
    "DocumentLoadError",
    "ConfigError",
    # Rendering
    "FrameDescription",
    "project",
    # I/O
    "load",
    "load_text",
]
