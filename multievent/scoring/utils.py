"""
Numeric Utilities - Multi-Event Scoring
multievent/scoring/utils.py

Half-up rounding and lenient number parsing shared by the scoring engine
and the unit converter.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

# Leading decimal number, as accepted by a browser number parser ("10.45s" -> 10.45)
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (10.5 -> 11)."""
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def clamp(value: float, min_val: float = 0.0, max_val: float = math.inf) -> float:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def parse_leading_float(text: Optional[str]) -> Optional[float]:
    """
    Parse the leading decimal number of a string.

    Returns None when the string does not start with a number.
    Trailing garbage after the number is ignored.
    """
    if not isinstance(text, str):
        return None
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return None
    return float(match.group(1))


def parse_leading_int(text: Optional[str]) -> Optional[int]:
    """Parse the leading integer of a string ("2.5" -> 2), or None."""
    if not isinstance(text, str):
        return None
    match = _INT_PREFIX.match(text)
    if not match:
        return None
    return int(match.group(1))


def is_positive_finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value > 0
