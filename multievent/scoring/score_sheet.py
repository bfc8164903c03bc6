"""
Score Sheet - Multi-Event Scoring
multievent/scoring/score_sheet.py

Scores a whole performance: converts each submitted result to metric,
scores it with the engine, and totals the points overall and per day.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

import structlog

from multievent.models.enumerations import EventType, UnitSystem
from multievent.scoring.engine import ScoringEngine
from multievent.scoring.events import get_event_config
from multievent.scoring.units import to_metric_result

logger = structlog.get_logger(__name__)


@dataclass
class ScoredEvent:
    name: str
    result: str          # metric result as scored ("" when not entered)
    points: int
    type: str
    unit: str
    day: Optional[int] = None


@dataclass
class ScoreSheet:
    """Output of score_performance()."""
    event_type: EventType
    results: List[ScoredEvent]
    total_score: int
    day_subtotals: Dict[int, int] = field(default_factory=dict)
    events_scored: int = 0   # events with points > 0


def score_performance(
    event_type,
    results: Mapping[str, str],
    unit_system: UnitSystem = UnitSystem.METRIC,
    engine: Optional[ScoringEngine] = None,
) -> ScoreSheet:
    """
    Score every event of a competition.

    Args:
        event_type: Competition type (enum or value)
        results: event name -> raw result as typed; missing events score 0
        unit_system: Unit system the measurements were typed in
        engine: Engine to score with (default table when None)

    Returns:
        ScoreSheet with results in configured event order

    Raises:
        ValueError: unknown event type, or an event name not in the competition
    """
    config = get_event_config(event_type)
    if config is None:
        raise ValueError(f"Unknown event type: {event_type}")

    unknown = [name for name in results if config.get_event(name) is None]
    if unknown:
        raise ValueError(f"Events not part of {config.name}: {', '.join(unknown)}")

    engine = engine or ScoringEngine()
    scored: List[ScoredEvent] = []
    day_subtotals: Dict[int, int] = {}

    for event in config.events:
        raw = (results.get(event.name) or "").strip()
        metric = to_metric_result(raw, event.kind, unit_system)
        points = engine.calculate_points(config.event_type, event.name, metric, event.kind)
        scored.append(
            ScoredEvent(
                name=event.name,
                result=metric,
                points=points,
                type=event.kind.value,
                unit=event.unit,
                day=event.day,
            )
        )
        if event.day is not None:
            day_subtotals[event.day] = day_subtotals.get(event.day, 0) + points

    total = sum(e.points for e in scored)
    sheet = ScoreSheet(
        event_type=config.event_type,
        results=scored,
        total_score=total,
        day_subtotals=day_subtotals,
        events_scored=sum(1 for e in scored if e.points > 0),
    )

    logger.info(
        "score_sheet_calculated",
        event_type=config.event_type.value,
        unit_system=UnitSystem(unit_system).value,
        total_score=total,
        day_subtotals=day_subtotals,
        events_scored=sheet.events_scored,
    )
    return sheet


def day_subtotals(event_results: List[Mapping[str, object]]) -> Dict[int, int]:
    """Per-day point subtotals for stored EventResult dicts (day-less events skipped)."""
    subtotals: Dict[int, int] = {}
    for result in event_results:
        day = result.get("day")
        if day is None:
            continue
        subtotals[int(day)] = subtotals.get(int(day), 0) + int(result.get("points") or 0)
    return subtotals
