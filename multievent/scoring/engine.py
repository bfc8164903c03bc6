# multievent/scoring/engine.py
"""
Scoring Engine
--------------
Converts a raw result to points and points back to an estimated result.

Formulas:
    time:         points = A × (B − T)^C        T = B − (points / A)^(1/C)
    measurement:  points = A × (M − B)^C        M = B + (points / A)^(1/C)

Failure policy: the engine never raises. An unknown event, a kind that does
not match the event, unparseable input, a result at or beyond the baseline,
or any non-finite intermediate gives 0 points (forward) or "" (inverse).
Users type results one keystroke at a time; "not scoreable yet" is normal.

Rounding is half-up to the nearest integer, floored at 0.
"""

import math
from typing import Optional

import structlog

from multievent.models.enumerations import EventKind, FormulaUnit
from multievent.scoring.formulas import DEFAULT_SCORING_TABLE, ScoringFormula, ScoringTable
from multievent.scoring.units import format_seconds_as_time, parse_time_to_seconds
from multievent.scoring.utils import clamp, is_positive_finite, parse_leading_float, round_half_up

logger = structlog.get_logger(__name__)

CM_PER_METER = 100


class ScoringEngine:
    """Stateless points calculator over an injected, read-only ScoringTable."""

    def __init__(self, table: ScoringTable = DEFAULT_SCORING_TABLE):
        self.table = table

    def _resolve(self, event_type, event_name, kind) -> Optional[ScoringFormula]:
        formula = self.table.lookup(event_type, event_name)
        if formula is None:
            return None
        if kind is not None and kind != formula.kind:
            return None
        return formula

    def calculate_points(
        self,
        event_type,
        event_name: str,
        raw_result: str,
        kind: Optional[EventKind] = None,
    ) -> int:
        """
        Score a raw result.

        Args:
            event_type: EventType or its value ("decathlon", ...)
            event_name: Event name, e.g. "100m" or "Long Jump"
            raw_result: Result as typed: "10.45", "2:10.50", "7.50"
            kind: "time" or "measurement"; None uses the event's own kind

        Returns:
            Points >= 0

        Examples:
            >>> ScoringEngine().calculate_points("decathlon", "100m", "10.45", "time")
            987
            >>> ScoringEngine().calculate_points("decathlon", "Triple Jump", "15.00")
            0
        """
        formula = self._resolve(event_type, event_name, kind)
        if formula is None:
            return 0

        if formula.kind == EventKind.TIME:
            seconds = parse_time_to_seconds(raw_result)
            if not is_positive_finite(seconds):
                return 0
            base = formula.B - seconds
        else:
            measurement = parse_leading_float(raw_result)
            if not is_positive_finite(measurement):
                return 0
            if formula.unit == FormulaUnit.CM:
                measurement *= CM_PER_METER
            base = measurement - formula.B

        # Result at or past the baseline: a fractional power of a negative
        # number has no real value
        if base <= 0:
            return 0

        try:
            raw_points = formula.A * math.pow(base, formula.C)
        except OverflowError:
            return 0
        if not math.isfinite(raw_points):
            return 0

        points = int(clamp(round_half_up(raw_points), 0))
        logger.debug(
            "points_calculated",
            event_type=str(event_type),
            event_name=event_name,
            raw_result=raw_result,
            points=points,
        )
        return points

    def estimate_result(
        self,
        event_type,
        event_name: str,
        points: float,
        kind: Optional[EventKind] = None,
    ) -> str:
        """
        Estimate the result needed for a points value.

        Returns:
            "SS.CC" / "M:SS.CC" for track events, meters to 2 decimals for
            field events, or "" when there is no valid estimate.

        Examples:
            >>> ScoringEngine().estimate_result("heptathlon", "Shot Put", 0)
            '1.50'
        """
        formula = self._resolve(event_type, event_name, kind)
        if formula is None:
            return ""

        try:
            points = float(points)
            if not math.isfinite(points) or points < 0:
                return ""
            delta = math.pow(points / formula.A, 1 / formula.C)
        except (TypeError, ValueError, OverflowError, ZeroDivisionError):
            return ""

        if formula.kind == EventKind.TIME:
            seconds = formula.B - delta
            if not is_positive_finite(seconds):
                return ""
            return format_seconds_as_time(seconds)

        measurement = formula.B + delta
        if formula.unit == FormulaUnit.CM:
            measurement /= CM_PER_METER
        if not is_positive_finite(measurement):
            return ""
        return f"{measurement:.2f}"


_default_engine = ScoringEngine()


def calculate_points(event_type, event_name: str, raw_result: str, kind: Optional[EventKind] = None) -> int:
    """calculate_points() on the default World Athletics table."""
    return _default_engine.calculate_points(event_type, event_name, raw_result, kind)


def estimate_result(event_type, event_name: str, points: float, kind: Optional[EventKind] = None) -> str:
    """estimate_result() on the default World Athletics table."""
    return _default_engine.estimate_result(event_type, event_name, points, kind)
