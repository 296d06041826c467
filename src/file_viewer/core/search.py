"""Plain substring scanning used by search and highlighting."""

from __future__ import annotations

from typing import Iterator


def line_matches(line: str, pattern: str) -> bool:
    """True if a non-empty pattern occurs in line."""
    return bool(pattern) and pattern in line


def iter_occurrences(line: str, pattern: str) -> Iterator[int]:
    """
    Yield the start column of every non-overlapping occurrence of pattern.

    Each search resumes just past the end of the previous match, so
    "aaaa" holds two occurrences of "aa" (at 0 and 2), not three.
    """
    if not pattern:
        return
    where = line.find(pattern)
    while where != -1:
        yield where
        where = line.find(pattern, where + len(pattern))


def is_visible(line: str, pattern: str, filtering: bool) -> bool:
    """Whether a line occupies a row given the filter settings."""
    return not filtering or not pattern or pattern in line
