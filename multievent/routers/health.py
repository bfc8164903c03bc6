"""
Health Check Router - Multi-Event Scoring
multievent/routers/health.py

Returns service health, including a live Redis check when caching is enabled.
"""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Dict
from datetime import datetime, timezone

import redis

from multievent.config import settings
from multievent.services.redis_cache import RedisCache

router = APIRouter(tags=["Health"])



#  Schemas


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]



#  Dependency Health Checks


def _truncate(message: str, limit: int = 100) -> str:
    return message[:limit] + "..." if len(message) > limit else message


async def check_redis() -> str:
    """Check Redis connection health."""
    if not settings.CACHE_ENABLED:
        return "disabled"
    try:
        cache = RedisCache()
        cache.ping()
        cache.client.close()
        return f"healthy (URL: {settings.REDIS_URL})"
    except (redis.RedisError, ConnectionError) as e:
        return f"unhealthy: {_truncate(str(e))}"



#  Routes


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        200: {"description": "Service healthy"},
        503: {"description": "One or more dependencies unhealthy"},
    },
    summary="Health check",
    description="Check health of the service and its optional Redis cache.",
)
async def health_check():
    dependencies = {
        "redis": await check_redis(),
    }

    all_healthy = all(not v.startswith("unhealthy") for v in dependencies.values())

    response = HealthResponse(
        status="healthy" if all_healthy else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        dependencies=dependencies,
    )

    if all_healthy:
        return response
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=response.model_dump(mode="json"),
    )
