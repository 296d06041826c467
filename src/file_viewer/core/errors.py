"""Exception types raised by file-viewer."""

from __future__ import annotations

from pathlib import Path


class FileViewerError(Exception):
    """Base class for all file-viewer errors."""


class DocumentLoadError(FileViewerError):
    """The line source could not be opened or read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot load {self.path}: {reason}")


class ConfigError(FileViewerError, ValueError):
    """A configuration file or override holds an invalid value."""
