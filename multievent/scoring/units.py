"""
Unit Converter - Multi-Event Scoring
multievent/scoring/units.py

Bridges display units and the engine's metric/seconds inputs:

    feet_to_meters / meters_to_feet     imperial field results
    parse_time_to_seconds               "10.45", "2:10.50" -> seconds
    format_seconds_as_time              seconds -> "SS.CC" / "M:SS.CC"

The time parse/format pair is shared by both scoring directions so that a
formatted estimate parses back to the same number of seconds.
"""

import math

from multievent.models.enumerations import EventKind, UnitSystem
from multievent.scoring.utils import parse_leading_float, parse_leading_int, round_half_up

METERS_PER_FOOT = 0.3048


def feet_to_meters(value: float) -> float:
    return value * METERS_PER_FOOT


def meters_to_feet(value: float) -> float:
    return value / METERS_PER_FOOT


def parse_time_to_seconds(time_string: str) -> float:
    """
    Parse a track time into seconds.

    Accepts "SS.cc" or "M:SS.cc". An unparseable segment counts as 0, and
    anything with more than one colon is 0.

    Examples:
        >>> parse_time_to_seconds("10.45")
        10.45
        >>> parse_time_to_seconds("2:10.50")
        130.5
        >>> parse_time_to_seconds("abc")
        0.0
    """
    if not isinstance(time_string, str):
        return 0.0

    parts = time_string.split(":")
    if len(parts) == 1:
        return parse_leading_float(parts[0]) or 0.0

    if len(parts) == 2:
        minutes = parse_leading_int(parts[0]) or 0
        seconds = parse_leading_float(parts[1]) or 0.0
        return minutes * 60 + seconds

    return 0.0


def format_seconds_as_time(seconds: float) -> str:
    """
    Format seconds as "SS.CC" below one minute, else "M:SS.CC".

    Rounds half-up to hundredths before splitting off minutes so 59.996 renders as
    "1:00.00" rather than "60.00".
    """
    hundredths = round_half_up(seconds * 100)
    total = hundredths / 100
    if total < 60:
        return f"{total:.2f}"

    minutes, rem_hundredths = divmod(hundredths, 6000)
    return f"{minutes}:{rem_hundredths / 100:05.2f}"


def to_metric_result(raw_result: str, kind: EventKind, unit_system: UnitSystem) -> str:
    """
    Convert a user-entered result to the engine's metric form.

    Only imperial measurements change (feet -> meters). Times, metric input,
    and strings that are not numbers pass through untouched.
    """
    if unit_system != UnitSystem.IMPERIAL or kind != EventKind.MEASUREMENT:
        return raw_result

    feet = parse_leading_float(raw_result)
    if feet is None or not math.isfinite(feet):
        return raw_result
    return f"{feet_to_meters(feet):.4f}"


def from_metric_result(result: str, kind: EventKind, unit_system: UnitSystem) -> str:
    """Convert an estimated metric result back to the display unit system."""
    if unit_system != UnitSystem.IMPERIAL or kind != EventKind.MEASUREMENT or not result:
        return result

    meters = parse_leading_float(result)
    if meters is None or not math.isfinite(meters):
        return result
    return f"{meters_to_feet(meters):.2f}"
