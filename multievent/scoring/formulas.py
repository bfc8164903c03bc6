# multievent/scoring/formulas.py
"""
Scoring Formulas
----------------
World Athletics combined-events coefficients, one formula per
(event type, event name).

    Track events: points = A × (B − T)^C   T = time in seconds
    Field events: points = A × (M − B)^C   M = measurement (m, or cm for jumps)

Jump formulas are calibrated in centimeters; results are still entered
in meters and converted by the engine.

The table is read-only. Build it once with build_scoring_table() and pass it
to ScoringEngine.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from multievent.models.enumerations import EventKind, EventType, FormulaUnit


@dataclass(frozen=True)
class ScoringFormula:
    """Coefficients for one event."""
    A: float           # scale
    B: float           # baseline: zero-point time or distance
    C: float           # curvature exponent
    unit: FormulaUnit

    def __post_init__(self):
        for name in ("A", "B", "C"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value!r}")
        if self.A <= 0 or self.C <= 0:
            raise ValueError(f"A and C must be positive, got A={self.A}, C={self.C}")

    @property
    def kind(self) -> EventKind:
        """Kind implied by the formula unit."""
        if self.unit == FormulaUnit.SECONDS:
            return EventKind.TIME
        return EventKind.MEASUREMENT


_S = FormulaUnit.SECONDS
_M = FormulaUnit.METERS
_CM = FormulaUnit.CM

_HEPTATHLON: Dict[str, ScoringFormula] = {
    "100m Hurdles": ScoringFormula(9.23076, 26.7, 1.835, _S),
    "High Jump":    ScoringFormula(1.84523, 75, 1.348, _CM),
    "Shot Put":     ScoringFormula(56.0211, 1.5, 1.05, _M),
    "200m":         ScoringFormula(4.99087, 42.5, 1.81, _S),
    "Long Jump":    ScoringFormula(0.188807, 210, 1.41, _CM),
    "Javelin":      ScoringFormula(15.9803, 3.8, 1.04, _M),
    "800m":         ScoringFormula(0.11193, 254, 1.88, _S),
}

_PENTATHLON_EVENTS = ("100m Hurdles", "High Jump", "Shot Put", "200m", "800m")

DEFAULT_FORMULAS: Dict[EventType, Dict[str, ScoringFormula]] = {
    EventType.DECATHLON: {
        "100m":         ScoringFormula(25.4347, 18, 1.81, _S),
        "Long Jump":    ScoringFormula(0.14354, 220, 1.4, _CM),
        "Shot Put":     ScoringFormula(51.39, 1.5, 1.05, _M),
        "High Jump":    ScoringFormula(0.8465, 75, 1.42, _CM),
        "400m":         ScoringFormula(1.53775, 82, 1.81, _S),
        "110m Hurdles": ScoringFormula(5.74352, 28.5, 1.92, _S),
        "Discus":       ScoringFormula(12.91, 4, 1.1, _M),
        "Pole Vault":   ScoringFormula(0.2797, 100, 1.35, _CM),
        "Javelin":      ScoringFormula(10.14, 7, 1.08, _M),
        "1500m":        ScoringFormula(0.03768, 480, 1.85, _S),
    },
    EventType.HEPTATHLON: _HEPTATHLON,
    # Pentathlon shares the heptathlon coefficients
    EventType.PENTATHLON: {name: _HEPTATHLON[name] for name in _PENTATHLON_EVENTS},
}


def _coerce_event_type(event_type) -> Optional[EventType]:
    try:
        return EventType(event_type)
    except ValueError:
        return None


class ScoringTable:
    """Immutable event type → event name → ScoringFormula mapping."""

    def __init__(self, formulas: Mapping[EventType, Mapping[str, ScoringFormula]]):
        self._tables: Mapping[EventType, Mapping[str, ScoringFormula]] = MappingProxyType(
            {EventType(t): MappingProxyType(dict(events)) for t, events in formulas.items()}
        )

    def lookup(self, event_type, event_name) -> Optional[ScoringFormula]:
        """
        Find the formula for an event.

        Args:
            event_type: EventType or its string value
            event_name: Event name as configured (e.g. "Long Jump")

        Returns:
            ScoringFormula, or None for an unknown type or event
        """
        events = self.events_for(event_type)
        if events is None or not isinstance(event_name, str):
            return None
        return events.get(event_name)

    def events_for(self, event_type) -> Optional[Mapping[str, ScoringFormula]]:
        key = _coerce_event_type(event_type)
        if key is None:
            return None
        return self._tables.get(key)

    def event_names(self, event_type) -> Tuple[str, ...]:
        events = self.events_for(event_type)
        return tuple(events) if events else ()

    def __contains__(self, event_type) -> bool:
        return self.events_for(event_type) is not None

    def __iter__(self) -> Iterator[EventType]:
        return iter(self._tables)

    def as_dict(self) -> Dict[str, Dict[str, Dict[str, object]]]:
        """Plain-dict view for serialization."""
        return {
            event_type.value: {
                name: {"A": f.A, "B": f.B, "C": f.C, "unit": f.unit.value}
                for name, f in events.items()
            }
            for event_type, events in self._tables.items()
        }


def build_scoring_table(
    formulas: Optional[Mapping[EventType, Mapping[str, ScoringFormula]]] = None,
) -> ScoringTable:
    """Build the scoring table (defaults to the World Athletics coefficients)."""
    return ScoringTable(formulas if formulas is not None else DEFAULT_FORMULAS)


DEFAULT_SCORING_TABLE = build_scoring_table()
