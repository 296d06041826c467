"""Terminal plumbing for the interactive viewer - terminal I/O and input handling."""

from file_viewer.cli.core.terminal import Terminal
from file_viewer.cli.core.input import InputReader

__all__ = [
    "Terminal",
    "InputReader",
]
