"""Lenient string-to-float conversion for scanned fields."""
from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

REAL_PREFIX_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|infinity|inf|nan)",
    re.IGNORECASE,
)


def fast_atof(text: str) -> float:
    """Convert the leading numeric prefix of ``text``.

    Trailing garbage is ignored, so ``"2.5abc"`` yields ``2.5``. Text with no
    numeric prefix at all yields ``0.0``.
    """

    match = REAL_PREFIX_RE.match(text)
    if match is None:
        if text:
            logger.debug("No numeric prefix in %r, using 0.0", text)
        return 0.0
    return float(match.group(0))


def is_real(text: str) -> bool:
    """Return True when all of ``text`` converts without leftovers."""
    return REAL_PREFIX_RE.fullmatch(text) is not None
