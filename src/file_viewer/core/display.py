"""How document text occupies screen columns."""

from __future__ import annotations

from file_viewer.core.constants import CONTROL_PLACEHOLDER, TAB_WIDTH


def display_text(line: str) -> tuple[str, list[int]]:
    """
    Make a line safe to put on screen.

    Tabs expand to the next multiple of TAB_WIDTH and any other
    non-printable character becomes CONTROL_PLACEHOLDER, so nothing in a
    document can move the cursor or start an escape sequence.

    Returns the displayed text and, for every index ``i`` in ``line``
    (plus ``len(line)``), the display column where character ``i`` starts.
    """
    out: list[str] = []
    columns: list[int] = []
    width = 0
    for char in line:
        columns.append(width)
        if char == '\t':
            pad = TAB_WIDTH - width % TAB_WIDTH
            out.append(' ' * pad)
            width += pad
        elif char.isprintable():
            out.append(char)
            width += 1
        else:
            out.append(CONTROL_PLACEHOLDER)
            width += 1
    columns.append(width)
    return ''.join(out), columns


def display_width(line: str) -> int:
    """Number of columns a line takes once displayed."""
    return display_text(line)[1][-1]
