"""Shared constants for the viewer."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
CLEAR_EOL = f"{CSI}K"

# Width of the line-number column, in character cells
LINE_NUMBER_MARGIN = 8

# Each character cell spans this many canvas units
X_FACTOR = 2
Y_FACTOR = 4

# Status row layout, in canvas units
STATUS_PROMPT_X = 30
STATUS_PATTERN_X = 32

# Used when the terminal cannot report its size
DEFAULT_COLUMNS = 80
DEFAULT_ROWS = 24

# Tabs expand to the next multiple of this many columns
TAB_WIDTH = 8

# Shown in place of control characters found in a document
CONTROL_PLACEHOLDER = "?"
