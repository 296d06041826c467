"""Load text files as Documents."""

from __future__ import annotations

import logging
from pathlib import Path

from file_viewer.core.document import Document
from file_viewer.core.errors import DocumentLoadError

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """
    Split text into lines on newline characters.

    A trailing newline does not start an extra empty line, and the
    carriage return of a CRLF ending is dropped.
    """
    if not text:
        return []
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def load(path: str | Path, encoding: str = "utf-8", errors: str = "replace") -> Document:
    """
    Load a text file from disk.

    Raises DocumentLoadError if the file is missing, is a directory,
    cannot be read, or cannot be decoded with ``errors="strict"``.
    """
    path = Path(path)

    try:
        with open(path, 'rb') as f:
            data = f.read()
    except FileNotFoundError as e:
        raise DocumentLoadError(path, "no such file") from e
    except IsADirectoryError as e:
        raise DocumentLoadError(path, "is a directory") from e
    except OSError as e:
        raise DocumentLoadError(path, e.strerror or type(e).__name__) from e

    try:
        text = data.decode(encoding, errors=errors)
    except UnicodeDecodeError as e:
        raise DocumentLoadError(path, f"not valid {encoding}: {e.reason}") from e
    except LookupError as e:
        raise DocumentLoadError(path, f"unknown encoding {encoding!r}") from e

    doc = Document.from_lines(split_lines(text), source_path=path)
    logger.info("loaded %s: %d lines, %d bytes", path, doc.size(), len(data))
    return doc


def load_text(text: str) -> Document:
    """Build a Document from an in-memory string."""
    return Document.from_lines(split_lines(text))
