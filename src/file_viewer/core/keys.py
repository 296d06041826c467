"""Key events delivered to the viewer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    CTRL_HOME = auto()
    CTRL_END = auto()
    CTRL_PAGE_UP = auto()
    CTRL_PAGE_DOWN = auto()
    CTRL_L = auto()
    CTRL_T = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw escape sequence

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None

    @classmethod
    def of(cls, key: Key) -> "KeyEvent":
        """Shorthand for a named-key event."""
        return cls(key=key)

    @classmethod
    def text(cls, char: str) -> "KeyEvent":
        """Shorthand for a printable-character event."""
        return cls(char=char, raw=char)
