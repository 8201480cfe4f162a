"""Domain helpers for joke index validation."""
from __future__ import annotations

import re

INDEX_PATTERN = re.compile(r"-?[0-9]+")


def is_valid_index_token(value: str | None) -> bool:
    """Return True when value is a plain base-10 integer (ASCII digits, optional minus)."""
    if not value:
        return False
    return bool(INDEX_PATTERN.fullmatch(value))


def parse_index(value: str | None, size: int) -> int | None:
    """
    Resolve a token against a sequence of ``size`` entries.

    Raises ValueError when the token is not a base-10 integer and returns None
    when it is one but names no entry. Tokens longer than ``size`` allows are
    rejected by digit count, so int() never sees them.
    """
    if not is_valid_index_token(value):
        raise ValueError(f"not a base-10 integer: {value!r}")
    digits = value.lstrip("-").lstrip("0")
    if not digits:
        index = 0
    elif value.startswith("-") or len(digits) > len(str(size)):
        return None
    else:
        index = int(digits)
    return index if in_bounds(index, size) else None


def in_bounds(index: int, size: int) -> bool:
    return 0 <= index < size
