"""
Events Router - Multi-Event Scoring
multievent/routers/events.py

Static competition configuration: events in order, kinds, display units,
placeholders, days and scoring coefficients. Served through the Redis cache
when one is available.
"""

import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.exceptions import HTTPException

from multievent.core.dependencies import get_scoring_engine
from multievent.models.enumerations import EventType
from multievent.models.errors import ErrorResponse
from multievent.models.performance import EventResult
from multievent.models.scoring import (
    CacheInfo,
    EventConfigListResponse,
    EventConfigResponse,
    EventDefinitionResponse,
)
from multievent.scoring.engine import ScoringEngine
from multievent.scoring.events import EVENT_CONFIGS, blank_results, get_event_config
from multievent.services.cache import EVENT_KEY_PREFIX, EVENTS_KEY, TTL_EVENTS, get_cache

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Events"])



#  Exception Helpers


def raise_error(status_code: int, error_code: str, message: str):
    raise HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error_code=error_code, message=message).model_dump(mode="json"),
    )

def raise_event_type_not_found(event_type: str):
    raise_error(
        status.HTTP_404_NOT_FOUND,
        "EVENT_TYPE_NOT_FOUND",
        f"Unknown event type '{event_type}'. Expected one of: "
        + ", ".join(t.value for t in EventType),
    )



#  Cache Helpers


def create_cache_info(hit: bool, key: str, latency_ms: float, ttl: int) -> CacheInfo:
    if hit:
        return CacheInfo(
            hit=True,
            source="redis",
            key=key,
            latency_ms=round(latency_ms, 3),
            ttl_seconds=ttl,
            message=f"Cache HIT - served from Redis in {latency_ms:.3f}ms",
        )
    return CacheInfo(
        hit=False,
        source="config",
        key=key,
        latency_ms=round(latency_ms, 3),
        ttl_seconds=ttl,
        message=f"Cache MISS - built from configuration in {latency_ms:.3f}ms",
    )


def _cache_get(key: str, model):
    cache = get_cache()
    if not cache:
        return None
    try:
        return cache.get(key, model)
    except Exception as e:
        logger.warning("Cache read failed for %s: %s", key, e)
        return None


def _cache_set(key: str, value) -> None:
    cache = get_cache()
    if not cache:
        return
    try:
        cache.set(key, value, TTL_EVENTS)
    except Exception as e:
        logger.warning("Cache write failed for %s: %s", key, e)



#  Helper Functions


def build_event_config_response(event_type: EventType, engine: ScoringEngine) -> EventConfigResponse:
    config = EVENT_CONFIGS[event_type]
    events = []
    for event in config.events:
        formula = engine.table.lookup(event_type, event.name)
        events.append(
            EventDefinitionResponse(
                name=event.name,
                type=event.kind.value,
                unit=event.unit,
                placeholder=event.placeholder,
                day=event.day,
                formula=(
                    {"A": formula.A, "B": formula.B, "C": formula.C, "unit": formula.unit.value}
                    if formula else {}
                ),
            )
        )
    return EventConfigResponse(
        event_type=event_type,
        name=config.name,
        events=events,
        days=config.days,
        blank_results=[EventResult(**r) for r in blank_results(event_type)],
    )



#  Routes


@router.get(
    "/events",
    response_model=EventConfigListResponse,
    summary="List competition configurations",
    description="All competitions with their events in order. Cached for 24 hours.",
)
async def list_event_configs(
    engine: ScoringEngine = Depends(get_scoring_engine),
) -> EventConfigListResponse:
    start_time = time.time()

    cached = _cache_get(EVENTS_KEY, EventConfigListResponse)
    if cached:
        latency = (time.time() - start_time) * 1000
        cached.cache = create_cache_info(True, EVENTS_KEY, latency, TTL_EVENTS)
        return cached

    items = [build_event_config_response(t, engine) for t in EVENT_CONFIGS]
    response = EventConfigListResponse(items=items, total=len(items))
    _cache_set(EVENTS_KEY, response)

    latency = (time.time() - start_time) * 1000
    response.cache = create_cache_info(False, EVENTS_KEY, latency, TTL_EVENTS)
    return response


@router.get(
    "/events/{event_type}",
    response_model=EventConfigResponse,
    responses={
        404: {
            "model": ErrorResponse,
            "description": "Unknown event type",
            "content": {
                "application/json": {
                    "example": {
                        "error_code": "EVENT_TYPE_NOT_FOUND",
                        "message": "Unknown event type 'triathlon'. Expected one of: decathlon, heptathlon, pentathlon",
                        "details": None,
                        "timestamp": "2026-01-01T00:00:00Z",
                    }
                }
            },
        },
    },
    summary="Get one competition configuration",
    description="Events, days and the blank result list used to start a new performance.",
)
async def get_event_config_by_type(
    event_type: str,
    engine: ScoringEngine = Depends(get_scoring_engine),
) -> EventConfigResponse:
    config = get_event_config(event_type)
    if config is None:
        raise_event_type_not_found(event_type)

    cache_key = f"{EVENT_KEY_PREFIX}{config.event_type.value}"
    start_time = time.time()

    cached: Optional[EventConfigResponse] = _cache_get(cache_key, EventConfigResponse)
    if cached:
        latency = (time.time() - start_time) * 1000
        cached.cache = create_cache_info(True, cache_key, latency, TTL_EVENTS)
        return cached

    response = build_event_config_response(config.event_type, engine)
    _cache_set(cache_key, response)

    latency = (time.time() - start_time) * 1000
    response.cache = create_cache_info(False, cache_key, latency, TTL_EVENTS)
    return response
