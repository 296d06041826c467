"""Core viewer model: document, state and the state machine."""

from file_viewer.core.document import Document
from file_viewer.core.errors import ConfigError, DocumentLoadError, FileViewerError
from file_viewer.core.keys import Key, KeyEvent
from file_viewer.core.state import Browsing, Capturing, ViewportState, ViewSize
from file_viewer.core.controller import ViewportController, transition

__all__ = [
    "Document",
    "FileViewerError",
    "DocumentLoadError",
    "ConfigError",
    "Key",
    "KeyEvent",
    "Browsing",
    "Capturing",
    "ViewportState",
    "ViewSize",
    "ViewportController",
    "transition",
]
