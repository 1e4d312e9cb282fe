"""Coercion helpers for untrusted JSON values."""
from __future__ import annotations

import math
import re
from typing import Any, Optional

_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_HEX_RE = re.compile(r"^0[xX][0-9a-fA-F]+$")


def to_safe_string(value: Any) -> str:
    """Coerce a JSON value to text; missing/null values become ``""``."""
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(to_safe_string(v) for v in value)
    return str(value)


def to_number(value: Any) -> float:
    """Loose numeric coercion; returns NaN when *value* is not numeric.

    bool -> 0/1, null -> 0, blank string -> 0, decimal or hex strings are
    parsed. Containers never coerce.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if value is None:
        return 0.0
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if _DECIMAL_RE.match(text):
            return float(text)
        if _HEX_RE.match(text):
            return to_number(int(text, 16))
    return math.nan


def to_finite_number(value: Any) -> Optional[float]:
    number = to_number(value)
    if math.isfinite(number):
        return number
    return None


def to_index(value: Any, count: int) -> Optional[int]:
    """Return *value* as an item index in ``[0, count)``, else None."""
    number = to_finite_number(value)
    if number is None or not number.is_integer():
        return None
    index = int(number)
    if index < 0 or index >= count:
        return None
    return index


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
