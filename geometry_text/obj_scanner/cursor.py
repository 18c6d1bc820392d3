"""Cursor validation and the mutable line counter shared with ``skip_line``."""
from __future__ import annotations

from dataclasses import dataclass

SENTINEL = "\0"


class CursorError(ValueError):
    """Raised when a cursor lies outside the buffer it scans."""


def check_cursor(buffer: str, it: int, end: int) -> None:
    if end < 0 or end > len(buffer):
        raise CursorError(f"end {end} outside buffer of length {len(buffer)}")
    if it < 0 or it > end:
        raise CursorError(f"cursor {it} outside range [0, {end}]")


def with_sentinel(text: str) -> str:
    """Append the reserved final character the boundary check never scans.

    The sentinel classifies as a line end, so ``tools.has_line_end`` finds it
    even when ``text`` has no terminator of its own.
    """
    return text + SENTINEL


@dataclass
class LineCounter:
    """Caller-owned line count, bumped once per line crossed."""

    value: int = 0

    def increment(self) -> int:
        self.value += 1
        return self.value
