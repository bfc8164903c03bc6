"""
Event Configuration - Multi-Event Scoring
multievent/scoring/events.py

Static per-competition event lists: display order, kind, display unit,
input placeholder and competition day (two-day competitions only).
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from multievent.models.enumerations import EventKind, EventType

_TIME = EventKind.TIME
_MEAS = EventKind.MEASUREMENT


@dataclass(frozen=True)
class EventDefinition:
    name: str
    kind: EventKind
    unit: str                  # display unit: "seconds" or "meters"
    placeholder: str           # example input shown in an empty field
    day: Optional[int] = None  # 1 or 2; None for single-day competitions


@dataclass(frozen=True)
class EventConfig:
    event_type: EventType
    name: str
    events: Tuple[EventDefinition, ...]

    @property
    def event_names(self) -> List[str]:
        return [e.name for e in self.events]

    @property
    def days(self) -> List[int]:
        return sorted({e.day for e in self.events if e.day is not None})

    def get_event(self, name: str) -> Optional[EventDefinition]:
        for event in self.events:
            if event.name == name:
                return event
        return None


EVENT_CONFIGS: Dict[EventType, EventConfig] = {
    EventType.PENTATHLON: EventConfig(
        event_type=EventType.PENTATHLON,
        name="Pentathlon",
        events=(
            EventDefinition("100m Hurdles", _TIME, "seconds", "13.24"),
            EventDefinition("High Jump", _MEAS, "meters", "1.85"),
            EventDefinition("Shot Put", _MEAS, "meters", "14.50"),
            EventDefinition("200m", _TIME, "seconds", "23.45"),
            EventDefinition("800m", _TIME, "seconds", "2:10.50"),
        ),
    ),
    EventType.HEPTATHLON: EventConfig(
        event_type=EventType.HEPTATHLON,
        name="Heptathlon",
        events=(
            EventDefinition("100m Hurdles", _TIME, "seconds", "13.24", day=1),
            EventDefinition("High Jump", _MEAS, "meters", "1.85", day=1),
            EventDefinition("Shot Put", _MEAS, "meters", "14.50", day=1),
            EventDefinition("200m", _TIME, "seconds", "23.45", day=1),
            EventDefinition("Long Jump", _MEAS, "meters", "6.50", day=2),
            EventDefinition("Javelin", _MEAS, "meters", "55.20", day=2),
            EventDefinition("800m", _TIME, "seconds", "2:10.50", day=2),
        ),
    ),
    EventType.DECATHLON: EventConfig(
        event_type=EventType.DECATHLON,
        name="Decathlon",
        events=(
            EventDefinition("100m", _TIME, "seconds", "10.45", day=1),
            EventDefinition("Long Jump", _MEAS, "meters", "7.50", day=1),
            EventDefinition("Shot Put", _MEAS, "meters", "16.20", day=1),
            EventDefinition("High Jump", _MEAS, "meters", "2.10", day=1),
            EventDefinition("400m", _TIME, "seconds", "48.25", day=1),
            EventDefinition("110m Hurdles", _TIME, "seconds", "13.80", day=2),
            EventDefinition("Discus", _MEAS, "meters", "48.50", day=2),
            EventDefinition("Pole Vault", _MEAS, "meters", "5.20", day=2),
            EventDefinition("Javelin", _MEAS, "meters", "65.40", day=2),
            EventDefinition("1500m", _TIME, "seconds", "4:25.50", day=2),
        ),
    ),
}


def get_event_config(event_type) -> Optional[EventConfig]:
    """Configuration for an event type (enum or value), or None."""
    try:
        return EVENT_CONFIGS.get(EventType(event_type))
    except ValueError:
        return None


def blank_results(event_type) -> List[Dict[str, object]]:
    """
    Initial EventResult dicts for a newly selected competition:
    empty result, 0 points, in event order.
    """
    config = get_event_config(event_type)
    if config is None:
        return []
    results = []
    for event in config.events:
        result: Dict[str, object] = {
            "name": event.name,
            "result": "",
            "points": 0,
            "type": event.kind.value,
            "unit": event.unit,
        }
        if event.day is not None:
            result["day"] = event.day
        results.append(result)
    return results
