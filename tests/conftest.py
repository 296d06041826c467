"""Shared fixtures for the viewer tests."""

from pathlib import Path

import pytest

from file_viewer.core.document import Document
from file_viewer.core.keys import Key, KeyEvent

ALPHA_LINES = ["alpha", "beta", "alpha2", "gamma", "alpha3"]


def ch(char: str) -> KeyEvent:
    """A printable-character event."""
    return KeyEvent.text(char)


def key(k: Key) -> KeyEvent:
    """A named-key event."""
    return KeyEvent.of(k)


def typed(text: str) -> list[KeyEvent]:
    """Events for typing a string."""
    return [ch(c) for c in text]


@pytest.fixture
def alpha_doc() -> Document:
    """Five lines, "alpha" on lines 0, 2 and 4."""
    return Document.from_lines(ALPHA_LINES)


@pytest.fixture
def numbered_doc() -> Document:
    """Ten lines: "line 1" .. "line 10"."""
    return Document.from_lines(f"line {i}" for i in range(1, 11))


@pytest.fixture
def empty_doc() -> Document:
    return Document()


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """The alpha document written to disk."""
    path = tmp_path / "sample.txt"
    path.write_text("\n".join(ALPHA_LINES) + "\n", encoding="utf-8")
    return path
