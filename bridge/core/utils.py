"""Small validation utilities."""

from __future__ import annotations

import math
from typing import Any, Mapping, Sequence


def is_number(x: Any) -> bool:
    """True for finite ints/floats. ``bool`` is not a number here."""
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return False
    try:
        return math.isfinite(x)
    except OverflowError:
        # int too large for a float
        return False


def is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and x != ""


def invalid_fields(
    payload: Mapping[str, Any],
    text_fields: Sequence[str] = (),
    number_fields: Sequence[str] = (),
) -> list[str]:
    """Return the names of fields that are absent or have the wrong type."""
    bad = [f for f in text_fields if not is_non_empty_str(payload.get(f))]
    bad += [f for f in number_fields if not is_number(payload.get(f))]
    return bad
