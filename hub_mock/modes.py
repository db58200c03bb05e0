"""Query-string outcome selectors (``?mode=`` and ``?fail=``).

Parsing is lenient: unknown or malformed values never raise, they fall back
to the default outcome.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Mapping


class Mode(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    PARTIAL = "partial"
    ERROR = "error"


def parse_mode(value: str | None) -> Mode:
    """Case-insensitive mode lookup; absent or unknown values mean ``ok``."""

    v = (value or "").lower()
    try:
        return Mode(v)
    except ValueError:
        return Mode.OK


def parse_fail(value: str | None) -> int | None:
    """Parse ``?fail=n``.

    Returns None when the value is absent or not a finite number, so the
    caller applies its default. Fractions truncate toward zero and negatives
    clamp to 0.
    """

    if value is None or not value.strip():
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return max(0, int(number))


def mode_from_query(query: Mapping[str, str]) -> Mode:
    return parse_mode(query.get("mode"))
