"""Low-level terminal operations."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from typing import Iterator

from file_viewer.core.constants import CSI, DEFAULT_COLUMNS, DEFAULT_ROWS, RESET
from file_viewer.core.state import ViewSize


class Terminal:
    """Terminal I/O abstraction for the full-screen viewer."""

    @staticmethod
    def size() -> ViewSize:
        """Get current terminal dimensions in character cells."""
        try:
            size = os.get_terminal_size()
            return ViewSize(size.columns, size.lines)
        except OSError:
            return ViewSize(DEFAULT_COLUMNS, DEFAULT_ROWS)

    @staticmethod
    def reset() -> None:
        """Reset all terminal attributes."""
        sys.stdout.write(RESET)
        sys.stdout.flush()

    @staticmethod
    def hide_cursor() -> None:
        """Hide the cursor."""
        sys.stdout.write(f'{CSI}?25l')
        sys.stdout.flush()

    @staticmethod
    def show_cursor() -> None:
        """Show the cursor."""
        sys.stdout.write(f'{CSI}?25h')
        sys.stdout.flush()

    @staticmethod
    def move_to(row: int, col: int) -> None:
        """Move cursor to position (1-indexed)."""
        sys.stdout.write(f'{CSI}{row};{col}H')
        sys.stdout.flush()

    @staticmethod
    def write(text: str) -> None:
        """Write text to terminal."""
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows or no termios - just yield
            yield
            return
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        sys.stdout.write(f'{CSI}?1049h')
        sys.stdout.flush()
        try:
            yield
        finally:
            sys.stdout.write(f'{CSI}?1049l')
            sys.stdout.flush()

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """Full TUI mode: alternate screen, hidden cursor, raw input."""
        with Terminal.alternate_screen():
            Terminal.hide_cursor()
            try:
                with Terminal.raw_mode():
                    yield
            finally:
                Terminal.show_cursor()
                Terminal.reset()
