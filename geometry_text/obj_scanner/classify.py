"""Character classification used by the scanning primitives."""
from __future__ import annotations

SPACE_CHARS = frozenset(" \t")
LINE_END_CHARS = frozenset("\r\n\0\f")


def is_space(char: str) -> bool:
    return char in SPACE_CHARS


def is_line_end(char: str) -> bool:
    return char in LINE_END_CHARS


def is_space_or_newline(char: str) -> bool:
    return is_space(char) or is_line_end(char)
