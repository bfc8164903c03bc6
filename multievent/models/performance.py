from pydantic import BaseModel, ConfigDict, Field, model_validator
from datetime import datetime, timezone
from typing import Dict, List, Optional

from multievent.models.achievement import AchievementResponse
from multievent.models.enumerations import EventKind, EventType
from multievent.scoring.events import get_event_config


class EventResult(BaseModel):
    """
    One event within a performance.

    `result` is the raw string as entered and may be empty. `points` is the
    value last derived from it, or typed directly by the user.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Event name (e.g. 100m, Long Jump)"
    )

    result: str = Field(
        default="",
        max_length=20,
        description="Raw result: seconds, M:SS.cc, or meters"
    )

    points: int = Field(
        default=0,
        ge=0,
        le=5000,
        description="Points for this event"
    )

    type: EventKind = Field(
        ...,
        description="time or measurement"
    )

    unit: str = Field(
        default="",
        max_length=20,
        description="Display unit (seconds, meters)"
    )

    day: Optional[int] = Field(
        default=None,
        ge=1,
        le=2,
        description="Competition day for two-day events"
    )


class PerformanceBase(BaseModel):
    """
    Base Pydantic model for Performance.
    """

    event_type: EventType = Field(
        ...,
        description="Competition type (decathlon, heptathlon, pentathlon)"
    )

    event_results: List[EventResult] = Field(
        ...,
        min_length=1,
        description="Per-event results in competition order"
    )

    label: Optional[str] = Field(
        default=None,
        max_length=100,
        description="Optional label (meet name, venue)"
    )


class PerformanceCreate(PerformanceBase):
    """
    Model for creating or replacing a performance.

    total_score is derived from the event points when omitted and must match
    their sum when given.
    """

    total_score: Optional[int] = Field(
        default=None,
        ge=0,
        description="Sum of event points"
    )

    @model_validator(mode="after")
    def validate_events_and_total(self):
        """
        Event names and kinds must match the competition; total must match.

        unit and day are taken from the event configuration.
        """
        config = get_event_config(self.event_type)
        names = [r.name for r in self.event_results]

        unknown = [n for n in names if config.get_event(n) is None]
        if unknown:
            raise ValueError(
                f"Events not part of {config.name}: {', '.join(unknown)}"
            )
        if len(set(names)) != len(names):
            raise ValueError("Each event may appear only once")

        for result in self.event_results:
            definition = config.get_event(result.name)
            if result.type != definition.kind:
                raise ValueError(
                    f"{result.name} is a {definition.kind.value} event, not {result.type.value}"
                )
            result.unit = definition.unit
            result.day = definition.day

        points_sum = sum(r.points for r in self.event_results)
        if self.total_score is None:
            self.total_score = points_sum
        elif self.total_score != points_sum:
            raise ValueError(
                f"total_score {self.total_score} does not equal the sum of event points {points_sum}"
            )
        return self


class PerformanceResponse(PerformanceBase):
    """
    Model returned in API responses.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Performance identifier")

    total_score: int = Field(..., ge=0, description="Sum of event points")

    date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the performance was first saved (UTC)"
    )

    day_subtotals: Dict[int, int] = Field(
        default_factory=dict,
        description="Points per competition day"
    )

    unlocked_achievements: List[AchievementResponse] = Field(
        default_factory=list,
        description="Achievements unlocked by this save (create only)"
    )


class PerformanceListResponse(BaseModel):
    """
    Response for listing performances, newest first.
    """

    items: List[PerformanceResponse]
    total: int
    event_type: Optional[EventType] = None
