"""
Input checks shared by the question and answer features.
"""

from __future__ import annotations

import re
from typing import Any

_NUMERIC_ID = re.compile(r"\d+", re.ASCII)

ALLOWED_VOTES = (1, -1)


def is_numeric_id(raw: str | None) -> bool:
    return bool(raw) and _NUMERIC_ID.fullmatch(raw) is not None


def parse_vote(value: Any) -> int | None:
    """
    Return the vote as an int when it is exactly 1 or -1, else None.

    JSON booleans are rejected even though `True == 1` in Python.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value not in ALLOWED_VOTES:
        return None
    return int(value)


_STORE_ID = re.compile(r"[+-]?\d+", re.ASCII)


def parse_store_id(raw: str) -> int:
    """
    Integer id as the store would read it: optional sign, ASCII digits,
    surrounding whitespace ignored. Raises ValueError otherwise.
    """
    text = (raw or "").strip()
    if _STORE_ID.fullmatch(text) is None:
        raise ValueError(f"invalid integer id: {raw!r}")
    return int(text)


def utf16_length(text: str) -> int:
    # Astral characters count as two units, like a JavaScript string length.
    return len(text.encode("utf-16-le")) // 2
