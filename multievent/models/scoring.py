from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from multievent.models.enumerations import EventType, UnitSystem
from multievent.models.performance import EventResult


class PointsRequest(BaseModel):
    """
    Result -> points request.

    event_type and kind are free strings: an unknown competition, event or
    kind scores 0 rather than failing validation.
    """

    event_type: str = Field(..., max_length=50, description="decathlon, heptathlon or pentathlon")
    event_name: str = Field(..., max_length=50, description="Event name (e.g. Long Jump)")
    result: str = Field(default="", max_length=20, description="Raw result as typed")
    kind: Optional[str] = Field(default=None, description="time or measurement; defaults to the event's kind")
    unit_system: Optional[UnitSystem] = Field(default=None, description="metric or imperial")


class PointsResponse(BaseModel):
    event_type: str
    event_name: str
    result: str
    metric_result: str
    unit_system: UnitSystem
    points: int


class EstimateRequest(BaseModel):
    """
    Points -> estimated result request.
    """

    event_type: str = Field(..., max_length=50)
    event_name: str = Field(..., max_length=50)
    points: float = Field(..., description="Target points")
    kind: Optional[str] = None
    unit_system: Optional[UnitSystem] = None


class EstimateResponse(BaseModel):
    event_type: str
    event_name: str
    points: float
    unit_system: UnitSystem
    estimated_result: str = Field(..., description="Empty when there is no valid estimate")
    valid: bool


class ScoreSheetRequest(BaseModel):
    """
    Score a whole competition at once.
    """

    event_type: EventType
    results: Dict[str, str] = Field(
        default_factory=dict,
        description="Event name -> raw result; omitted events score 0",
    )
    unit_system: Optional[UnitSystem] = None


class ScoreSheetResponse(BaseModel):
    event_type: EventType
    unit_system: UnitSystem
    event_results: List[EventResult]
    total_score: int
    day_subtotals: Dict[int, int]
    events_scored: int


class EventDefinitionResponse(BaseModel):
    name: str
    type: str
    unit: str
    placeholder: str
    day: Optional[int] = None
    formula: Dict[str, Any] = Field(default_factory=dict, description="A, B, C and formula unit")


class CacheInfo(BaseModel):
    """Cache metadata for debugging - shows if Redis is working."""
    hit: bool                          # True = data from cache, False = computed
    source: str                        # "redis" or "config"
    key: str                           # Redis key used
    latency_ms: float
    ttl_seconds: int
    message: str


class EventConfigResponse(BaseModel):
    event_type: EventType
    name: str
    events: List[EventDefinitionResponse]
    days: List[int]
    blank_results: List[EventResult]
    cache: Optional[CacheInfo] = None


class EventConfigListResponse(BaseModel):
    items: List[EventConfigResponse]
    total: int
    cache: Optional[CacheInfo] = None
