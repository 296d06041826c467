"""Colors used by the viewer."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    """
    A foreground color from the xterm 256-color palette.

    The viewer only paints foregrounds, so a color is just a palette
    index plus the SGR parameter that selects it.
    """
    index: int

    # Palette entries the viewer paints with
    CYAN1: ClassVar["Color"]
    DARK_CYAN: ClassVar["Color"]
    YELLOW1: ClassVar["Color"]
    AQUAMARINE1: ClassVar["Color"]
    DARK_GOLDENROD: ClassVar["Color"]

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {self.index}")

    def to_sgr_fg(self) -> str:
        """Return SGR parameter for this foreground color."""
        return f"38;5;{self.index}"


Color.CYAN1 = Color(51)
Color.DARK_CYAN = Color(36)
Color.YELLOW1 = Color(226)
Color.AQUAMARINE1 = Color(122)
Color.DARK_GOLDENROD = Color(136)

# What each part of the frame is painted with
LINE_NUMBER = Color.DARK_CYAN
LINE_NUMBER_MATCH = Color.CYAN1
HIGHLIGHT = Color.YELLOW1
STATUS = Color.AQUAMARINE1
PATTERN = Color.DARK_GOLDENROD
