"""Cursor-based scanning toolkit for Wavefront-style text buffers."""
from __future__ import annotations

from . import classify, cursor, numeric, session, tools
from .cursor import CursorError, LineCounter, with_sentinel
from .session import ScannedRecord, ScanSession

__all__ = [
    "classify",
    "cursor",
    "numeric",
    "session",
    "tools",
    "CursorError",
    "LineCounter",
    "ScanSession",
    "ScannedRecord",
    "scan_text",
    "with_sentinel",
]


def scan_text(text: str) -> list[ScannedRecord]:
    """Convenience wrapper returning the non-blank records of ``text``."""
    return [record for record in ScanSession.from_text(text).iter_records() if not record.is_blank]
