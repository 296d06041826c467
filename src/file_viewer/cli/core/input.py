"""Keyboard input handling: raw terminal bytes to KeyEvents."""

from __future__ import annotations

import codecs
import os
import select
import sys
import time
from typing import Optional

from file_viewer.core.keys import Key, KeyEvent


class InputReader:
    """
    Non-blocking keyboard input reader.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
        'OH': Key.HOME,
        'OF': Key.END,
        # Navigation
        '[H': Key.HOME,
        '[F': Key.END,
        '[1~': Key.HOME,
        '[4~': Key.END,
        '[7~': Key.HOME,
        '[8~': Key.END,
        '[5~': Key.PAGE_UP,
        '[6~': Key.PAGE_DOWN,
        # Ctrl-modified navigation
        '[1;5H': Key.CTRL_HOME,
        '[1;5F': Key.CTRL_END,
        '[7^': Key.CTRL_HOME,
        '[8^': Key.CTRL_END,
        '[5;5~': Key.CTRL_PAGE_UP,
        '[6;5~': Key.CTRL_PAGE_DOWN,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\t': Key.TAB,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
        '\x0c': Key.CTRL_L,
        '\x14': Key.CTRL_T,
    }

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """
        Read a single key event.

        Returns None if no input available within timeout. Raises
        EOFError once the input has been closed and everything read
        before that has been returned.
        """
        # Process any buffered input first
        if self._buffer:
            return self._process_buffer()

        if not self._has_input(timeout):
            return None

        # Read all available input using os.read to bypass Python buffering
        self._read_available()

        if self._buffer:
            return self._process_buffer()

        return None

    def _feed(self, data: bytes) -> None:
        self._buffer += self._decoder.decode(data)

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        try:
            # Read up to 1024 bytes at once - gets everything available
            data = os.read(self._fd, 1024)
        except (BlockingIOError, InterruptedError):
            return
        if not data:
            # Readable but empty: the other end is closed
            raise EOFError("input closed")
        self._feed(data)

        # If buffer is just escape, wait for potential sequence
        if self._buffer == '\x1b':
            self._wait_for_escape_sequence()

    def _wait_for_escape_sequence(self) -> None:
        """Wait for escape sequence to complete with proper timeouts."""
        deadline = time.monotonic() + 0.1  # 100ms total wait

        while time.monotonic() < deadline:
            remaining = deadline - time.monotonic()
            wait_time = min(remaining, 0.025)  # 25ms intervals

            if wait_time <= 0:
                break

            if self._has_input(wait_time):
                try:
                    data = os.read(self._fd, 1024)
                except (BlockingIOError, InterruptedError):
                    continue
                if not data:
                    return
                self._feed(data)

                # Check if sequence looks complete
                if len(self._buffer) > 1:
                    rest = self._buffer[1:]
                    if rest in self.SEQUENCES:
                        return
                    # Sequence ends with letter or ~, past the introducer
                    if len(rest) > 1 and (rest[-1].isalpha() or rest[-1] in '~^'):
                        return

    def _process_buffer(self) -> Optional[KeyEvent]:
        """Process buffered input and return next key event."""
        if not self._buffer:
            return None

        # Simple keys
        if self._buffer[0] in self.SIMPLE_KEYS:
            key = self.SIMPLE_KEYS[self._buffer[0]]
            raw = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(key=key, raw=raw)

        # Escape sequence
        if self._buffer[0] == '\x1b':
            return self._parse_escape_sequence()

        # Printable character
        if self._buffer[0].isprintable():
            ch = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(char=ch, raw=ch)

        # Unknown control character - report it so the caller can ignore it
        raw = self._buffer[0]
        self._buffer = self._buffer[1:]
        return KeyEvent(raw=raw)

    def _parse_escape_sequence(self) -> KeyEvent:
        """Parse an escape sequence from the buffer."""
        # Buffer starts with \x1b
        rest = self._buffer[1:]
        if not rest or rest[0] == '\x1b':
            # Just escape, no sequence
            self._buffer = rest
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        if rest[0] == 'O':
            # SS3: exactly one final character
            end_idx = min(2, len(rest))
        elif rest[0] == '[':
            # CSI: parameters, then a letter, ~ or ^
            end_idx = len(rest)
            for i in range(1, len(rest)):
                ch = rest[i]
                if ch == '\x1b':
                    end_idx = i
                    break
                if ch.isalpha() or ch in '~^':
                    end_idx = i + 1
                    break
        else:
            # Alt+key
            end_idx = 1

        seq = rest[:end_idx]
        self._buffer = rest[end_idx:]
        raw = '\x1b' + seq

        if seq in self.SEQUENCES:
            return KeyEvent(key=self.SEQUENCES[seq], raw=raw)

        # Unknown sequence
        return KeyEvent(raw=raw)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
