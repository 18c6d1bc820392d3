"""Stateful scanning over one in-memory buffer."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import cast

from . import tools
from .classify import is_line_end
from .cursor import LineCounter, check_cursor, with_sentinel

logger = logging.getLogger(__name__)


@dataclass
class ScannedRecord:
    """One line split into its leading keyword and the fields after it."""

    line: int
    keyword: str
    fields: list[str] = field(default_factory=list)

    @property
    def is_blank(self) -> bool:
        return not self.keyword and not self.fields

    def to_dict(self) -> dict[str, object]:
        return {"line": self.line, "keyword": self.keyword, "fields": list(self.fields)}


@dataclass
class ScanSession:
    """A cursor and line counter threaded through the scanning primitives.

    ``end`` defaults to the length of ``buffer``. The session only ever reads
    the buffer; each method moves ``position`` and returns what it read.
    """

    buffer: str
    position: int = 0
    end: int | None = None
    lines: LineCounter = field(default_factory=LineCounter)

    def __post_init__(self) -> None:
        if self.end is None:
            self.end = len(self.buffer)
        check_cursor(self.buffer, self.position, self.end)

    @classmethod
    def from_text(cls, text: str) -> ScanSession:
        return cls(with_sentinel(text))

    @property
    def stop(self) -> int:
        return cast(int, self.end)

    def at_end(self) -> bool:
        return tools.is_end_of_buffer(self.position, self.stop)

    def next_word(self) -> int:
        self.position = tools.get_next_word(self.buffer, self.position, self.stop)
        return self.position

    def next_token(self) -> int:
        self.position = tools.get_next_token(self.buffer, self.position, self.stop)
        return self.position

    def skip_line(self) -> int:
        self.position = tools.skip_line(self.buffer, self.position, self.stop, self.lines)
        return self.position

    def name(self) -> str:
        self.position, value = tools.get_name(self.buffer, self.position, self.stop)
        return value

    def name_no_space(self) -> str:
        self.position, value = tools.get_name_no_space(self.buffer, self.position, self.stop)
        return value

    def copy_word(self, capacity: int) -> str:
        self.position, value = tools.copy_next_word(
            self.buffer, self.position, self.stop, capacity
        )
        return value

    def float_value(self, *, scratch_size: int | None = None) -> float:
        self.position, value = tools.get_float(
            self.buffer, self.position, self.stop, scratch_size=scratch_size
        )
        return value

    def has_line_end(self) -> bool:
        return tools.has_line_end(self.buffer, self.position, self.stop)

    def _at_line_end(self) -> bool:
        return self.at_end() or is_line_end(self.buffer[self.position])

    def read_record(self) -> ScannedRecord:
        """Read the keyword and fields of the current line, then skip it."""
        line = self.lines.value + 1
        self.next_word()
        keyword = self.name_no_space()
        fields: list[str] = []
        while True:
            self.next_word()
            if self._at_line_end():
                break
            # one more than the remaining span, so a field is never truncated
            fields.append(self.copy_word(self.stop - self.position + 1))
        self.skip_line()
        return ScannedRecord(line=line, keyword=keyword, fields=fields)

    def iter_records(self) -> Iterator[ScannedRecord]:
        count = 0
        while not self.at_end():
            yield self.read_record()
            count += 1
        logger.debug("Scanned %d records over %d lines", count, self.lines.value)
