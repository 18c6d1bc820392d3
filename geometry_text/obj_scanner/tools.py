"""Cursor primitives for whitespace and line delimited text formats.

Every function takes the scanned ``buffer``, a cursor ``it`` and the exclusive
``end`` offset, and returns the advanced cursor. The boundary check reports
exhaustion one character early, so the final character of a buffer is never
visited by a scanning loop. Buffers built with ``cursor.with_sentinel`` carry
a reserved trailing character for that slot.
"""
from __future__ import annotations

import logging
import os

from .classify import is_line_end, is_space, is_space_or_newline
from .cursor import LineCounter, check_cursor
from .numeric import fast_atof

logger = logging.getLogger(__name__)

DEFAULT_SCRATCH_SIZE = 1024
MIN_SCRATCH_SIZE = 2


def resolve_scratch_size(value: int | None) -> int:
    if value is not None:
        return max(value, MIN_SCRATCH_SIZE)
    env_value = os.environ.get("OBJ_SCANNER_SCRATCH_SIZE")
    if env_value:
        try:
            return max(int(env_value), MIN_SCRATCH_SIZE)
        except ValueError:
            logger.debug("Invalid OBJ_SCANNER_SCRATCH_SIZE value: %s", env_value)
    return DEFAULT_SCRATCH_SIZE


def is_end_of_buffer(it: int, end: int) -> bool:
    """Return True at ``end`` and at the last character before it."""
    if it == end:
        return True
    end -= 1
    return it == end


def get_next_word(buffer: str, it: int, end: int) -> int:
    """Skip separators up to the next content, line end or boundary."""
    check_cursor(buffer, it, end)
    while not is_end_of_buffer(it, end):
        char = buffer[it]
        if not is_space_or_newline(char) or is_line_end(char):
            break
        it += 1
    return it


def get_next_token(buffer: str, it: int, end: int) -> int:
    """Skip the rest of the current token, then move to the next one."""
    check_cursor(buffer, it, end)
    while not is_end_of_buffer(it, end):
        if is_space_or_newline(buffer[it]):
            break
        it += 1
    return get_next_word(buffer, it, end)


def skip_line(buffer: str, it: int, end: int, lines: LineCounter) -> int:
    """Move past the next line end and any indentation after it.

    ``lines`` is incremented once when the cursor steps over a line end, or
    over the reserved final character of the buffer. A ``\\r\\n`` pair counts
    as a single line end.
    """

    check_cursor(buffer, it, end)
    if it >= end:
        return it

    while not is_end_of_buffer(it, end) and not is_line_end(buffer[it]):
        it += 1

    if it != end:
        it += 1
        lines.increment()
        if buffer[it - 1] == "\r" and it != end and buffer[it] == "\n":
            it += 1

    # material and group lines are sometimes indented
    while it != end and is_space(buffer[it]):
        it += 1

    return it


def get_name(buffer: str, it: int, end: int) -> tuple[int, str]:
    """Read the rest of the line, keeping inner spaces but not trailing ones."""
    check_cursor(buffer, it, end)
    if is_end_of_buffer(it, end):
        return end, ""

    start = it
    while not is_end_of_buffer(it, end) and not is_line_end(buffer[it]):
        it += 1

    while it > start and is_space(buffer[it - 1]):
        it -= 1

    return it, buffer[start:it]


def get_name_no_space(buffer: str, it: int, end: int) -> tuple[int, str]:
    """Read a single run of non-separator characters."""
    check_cursor(buffer, it, end)
    if is_end_of_buffer(it, end):
        return end, ""

    start = it
    while not is_end_of_buffer(it, end) and not is_space_or_newline(buffer[it]):
        it += 1

    back = it
    while back >= start and (
        is_end_of_buffer(back, end) or is_space_or_newline(buffer[back])
    ):
        back -= 1
    it = max(back + 1, start)

    return it, buffer[start:it]


def copy_next_word(buffer: str, it: int, end: int, capacity: int) -> tuple[int, str]:
    """Copy the next token, keeping at most ``capacity - 1`` characters.

    When the limit is hit the returned cursor stays on the last copied
    character rather than stepping past it.
    """

    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")
    limit = capacity - 1
    it = get_next_word(buffer, it, end)
    chars: list[str] = []
    while (
        len(chars) < limit
        and not is_end_of_buffer(it, end)
        and not is_space_or_newline(buffer[it])
    ):
        chars.append(buffer[it])
        if len(chars) == limit:
            break
        it += 1
    return it, "".join(chars)


def get_float(
    buffer: str, it: int, end: int, *, scratch_size: int | None = None
) -> tuple[int, float]:
    it, text = copy_next_word(buffer, it, end, resolve_scratch_size(scratch_size))
    return it, fast_atof(text)


def has_line_end(buffer: str, it: int, end: int) -> bool:
    """Look ahead for a line end after ``it`` without moving the caller.

    The ``'\\0'`` appended by ``cursor.with_sentinel`` is itself a line end,
    so this is always True on a sentinel buffer short of its final slot.
    """
    check_cursor(buffer, it, end)
    while not is_end_of_buffer(it, end):
        it += 1
        if is_line_end(buffer[it]):
            return True
    return False
