"""
Performance Router - Multi-Event Scoring
multievent/routers/performances.py

Handles performance CRUD operations. Saving a new performance evaluates the
achievement rules for the configured user.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.responses import JSONResponse

from multievent.config import settings
from multievent.core.dependencies import get_achievement_service, get_performance_repository
from multievent.core.exceptions import EntityNotFoundException
from multievent.models.achievement import AchievementResponse
from multievent.models.enumerations import EventType
from multievent.models.errors import ErrorResponse
from multievent.models.performance import (
    PerformanceCreate,
    PerformanceListResponse,
    PerformanceResponse,
)
from multievent.repositories.performance_repository import PerformanceRepository
from multievent.scoring.score_sheet import day_subtotals
from multievent.services.achievement_service import AchievementService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Performances"])



#  Validation Error Messages


FIELD_MESSAGES = {
    "event_type": {
        "missing": "Event type is required",
        "enum": "Event type must be one of: decathlon, heptathlon, pentathlon",
    },
    "event_results": {
        "missing": "Event results are required",
        "too_short": "At least one event result is required",
        "list_type": "Event results must be a list",
    },
    "label": {
        "string_too_long": "Label must not exceed 100 characters",
        "string_type": "Label must be a string",
    },
    "total_score": {
        "greater_than_equal": "Total score cannot be negative",
        "int_type": "Total score must be an integer",
        "int_parsing": "Total score must be a valid integer",
    },
}

DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "string_too_short": "Field '{field}' is too short",
    "string_too_long": "Field '{field}' is too long",
    "less_than_equal": "Field '{field}' exceeds maximum allowed value",
    "greater_than_equal": "Field '{field}' is below minimum allowed value",
    "enum": "Field '{field}' has an unsupported value",
    "string_type": "Field '{field}' must be a string",
    "float_type": "Field '{field}' must be a number",
    "float_parsing": "Field '{field}' must be a valid number",
    "int_type": "Field '{field}' must be an integer",
    "int_parsing": "Field '{field}' must be a valid integer",
    "json_invalid": "Malformed JSON request body",
    "extra_forbidden": "Unknown field '{field}' is not allowed",
}


def get_validation_message(field: str, error_type: str) -> str:
    if field in FIELD_MESSAGES:
        for key in FIELD_MESSAGES[field]:
            if key in error_type:
                return FIELD_MESSAGES[field][key]
    for key, template in DEFAULT_MESSAGES.items():
        if key in error_type:
            return template.format(field=field)
    return f"Invalid value for field '{field}'"


def _error_content(error_code: str, message: str, details: Optional[dict] = None) -> dict:
    return ErrorResponse(error_code=error_code, message=message, details=details).model_dump(mode="json")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_content("VALIDATION_ERROR", "Request validation failed"),
        )
    err = errors[0]
    error_type = err.get("type", "")
    loc = err.get("loc", [])
    if "json_invalid" in error_type:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_content("INVALID_REQUEST", "Malformed JSON request body"),
        )
    field = ".".join(str(part) for part in loc if part not in ("body", "query", "path"))
    if error_type == "value_error":
        # Model-level checks carry their own message
        message = str(err.get("msg", "")).removeprefix("Value error, ")
    else:
        message = get_validation_message(field, error_type)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_content(
            "VALIDATION_ERROR",
            message,
            {"field": field, "type": error_type} if field else None,
        ),
    )



#  Exception Helpers


def raise_error(status_code: int, error_code: str, message: str):
    raise HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error_code=error_code, message=message).model_dump(mode="json"),
    )

def raise_performance_not_found():
    raise_error(status.HTTP_404_NOT_FOUND, "PERFORMANCE_NOT_FOUND", "Performance not found")

def raise_validation_error(msg: str):
    raise_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", msg)



#  Helper Functions


def row_to_response(row: dict, unlocked: Optional[list] = None) -> PerformanceResponse:
    return PerformanceResponse(
        id=row["id"],
        event_type=row["event_type"],
        event_results=row["event_results"],
        label=row.get("label"),
        total_score=row["total_score"],
        date=row["date"],
        day_subtotals=day_subtotals(row["event_results"]),
        unlocked_achievements=[AchievementResponse(**a) for a in unlocked or []],
    )


_NOT_FOUND_RESPONSE = {
    404: {
        "model": ErrorResponse,
        "description": "Performance not found",
        "content": {
            "application/json": {
                "example": {
                    "error_code": "PERFORMANCE_NOT_FOUND",
                    "message": "Performance not found",
                    "details": None,
                    "timestamp": "2026-01-01T00:00:00Z",
                }
            }
        },
    },
}



#  Routes


@router.post(
    "/performances",
    response_model=PerformanceResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed JSON"},
        422: {"model": ErrorResponse, "description": "Validation failed"},
    },
    summary="Save a performance",
    description=(
        "Saves a performance. total_score is derived from the event points when omitted. "
        "Returns the saved performance with any achievements it unlocked."
    ),
)
async def create_performance(
    performance: PerformanceCreate,
    performance_repo: PerformanceRepository = Depends(get_performance_repository),
    achievement_service: AchievementService = Depends(get_achievement_service),
) -> PerformanceResponse:
    row = performance_repo.create(
        event_type=performance.event_type,
        event_results=[r.model_dump(mode="json") for r in performance.event_results],
        total_score=performance.total_score,
        label=performance.label,
    )
    unlocked = achievement_service.check_and_unlock(settings.DEFAULT_USER_ID, new_performance=row)
    return row_to_response(row, unlocked)


@router.get(
    "/performances",
    response_model=PerformanceListResponse,
    summary="List performances",
    description="Saved performances, newest first. event_type filters; 'all' or omitted returns everything.",
)
async def list_performances(
    event_type: Optional[str] = Query(None, description="decathlon, heptathlon, pentathlon or all"),
    performance_repo: PerformanceRepository = Depends(get_performance_repository),
) -> PerformanceListResponse:
    type_filter: Optional[EventType] = None
    if event_type and event_type != "all":
        try:
            type_filter = EventType(event_type)
        except ValueError:
            raise_validation_error(
                "event_type must be one of: all, " + ", ".join(t.value for t in EventType)
            )

    rows = performance_repo.get_all(type_filter.value if type_filter else None)
    return PerformanceListResponse(
        items=[row_to_response(r) for r in rows],
        total=len(rows),
        event_type=type_filter,
    )


@router.get(
    "/performances/{performance_id}",
    response_model=PerformanceResponse,
    responses=_NOT_FOUND_RESPONSE,
    summary="Get a performance by ID",
)
async def get_performance(
    performance_id: int,
    performance_repo: PerformanceRepository = Depends(get_performance_repository),
) -> PerformanceResponse:
    row = performance_repo.get_by_id(performance_id)
    if row is None:
        raise_performance_not_found()
    return row_to_response(row)


@router.put(
    "/performances/{performance_id}",
    response_model=PerformanceResponse,
    responses=_NOT_FOUND_RESPONSE,
    summary="Replace a performance",
    description="Replaces the event results, total and label. The original save date is kept.",
)
async def update_performance(
    performance_id: int,
    performance: PerformanceCreate,
    performance_repo: PerformanceRepository = Depends(get_performance_repository),
) -> PerformanceResponse:
    try:
        row = performance_repo.update(
            performance_id,
            event_type=performance.event_type,
            event_results=[r.model_dump(mode="json") for r in performance.event_results],
            total_score=performance.total_score,
            label=performance.label,
        )
    except EntityNotFoundException:
        raise_performance_not_found()
    return row_to_response(row)


@router.delete(
    "/performances/{performance_id}",
    responses=_NOT_FOUND_RESPONSE,
    summary="Delete a performance",
)
async def delete_performance(
    performance_id: int,
    performance_repo: PerformanceRepository = Depends(get_performance_repository),
) -> dict:
    if not performance_repo.delete(performance_id):
        raise_performance_not_found()
    return {
        "message": "Performance deleted successfully",
        "id": performance_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
