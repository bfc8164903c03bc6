"""
Scoring Router - Multi-Event Scoring
multievent/routers/scoring.py

Endpoints:
  POST /api/v1/scoring/points    - raw result -> points
  POST /api/v1/scoring/estimate  - target points -> estimated result
  POST /api/v1/scoring/sheet     - score every event of a competition

Unknown events and unscoreable results are not errors here: they score 0
(or an empty estimate), the same answer a half-typed result gets.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.exceptions import HTTPException

from multievent.config import settings
from multievent.core.dependencies import get_scoring_engine
from multievent.models.errors import ErrorResponse
from multievent.models.performance import EventResult
from multievent.models.scoring import (
    EstimateRequest,
    EstimateResponse,
    PointsRequest,
    PointsResponse,
    ScoreSheetRequest,
    ScoreSheetResponse,
)
from multievent.scoring.engine import ScoringEngine
from multievent.scoring.score_sheet import score_performance
from multievent.scoring.units import from_metric_result, to_metric_result

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/scoring", tags=["Scoring"])


def raise_error(status_code: int, error_code: str, message: str):
    raise HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error_code=error_code, message=message).model_dump(mode="json"),
    )


@router.post(
    "/points",
    response_model=PointsResponse,
    summary="Calculate points for a result",
    description=(
        "Converts a raw result to points. Times accept SS.cc or M:SS.cc; "
        "imperial measurements are given in feet. Returns 0 for anything not scoreable."
    ),
)
async def calculate_points(
    request: PointsRequest,
    engine: ScoringEngine = Depends(get_scoring_engine),
) -> PointsResponse:
    unit_system = request.unit_system or settings.DEFAULT_UNIT_SYSTEM
    formula = engine.table.lookup(request.event_type, request.event_name)

    metric_result = request.result
    if formula is not None:
        metric_result = to_metric_result(request.result, formula.kind, unit_system)

    points = engine.calculate_points(
        request.event_type, request.event_name, metric_result, request.kind
    )
    return PointsResponse(
        event_type=request.event_type,
        event_name=request.event_name,
        result=request.result,
        metric_result=metric_result,
        unit_system=unit_system,
        points=points,
    )


@router.post(
    "/estimate",
    response_model=EstimateResponse,
    summary="Estimate the result for a points target",
    description="Inverse of /points. estimated_result is empty when no valid result exists.",
)
async def estimate_result(
    request: EstimateRequest,
    engine: ScoringEngine = Depends(get_scoring_engine),
) -> EstimateResponse:
    unit_system = request.unit_system or settings.DEFAULT_UNIT_SYSTEM
    estimate = engine.estimate_result(
        request.event_type, request.event_name, request.points, request.kind
    )

    formula = engine.table.lookup(request.event_type, request.event_name)
    if formula is not None:
        estimate = from_metric_result(estimate, formula.kind, unit_system)

    return EstimateResponse(
        event_type=request.event_type,
        event_name=request.event_name,
        points=request.points,
        unit_system=unit_system,
        estimated_result=estimate,
        valid=bool(estimate),
    )


@router.post(
    "/sheet",
    response_model=ScoreSheetResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Event not part of the competition"},
    },
    summary="Score a whole competition",
    description="Scores each event of the competition in order and totals overall and per day.",
)
async def score_sheet(
    request: ScoreSheetRequest,
    engine: ScoringEngine = Depends(get_scoring_engine),
) -> ScoreSheetResponse:
    unit_system = request.unit_system or settings.DEFAULT_UNIT_SYSTEM
    try:
        sheet = score_performance(request.event_type, request.results, unit_system, engine)
    except ValueError as e:
        raise_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", str(e))

    return ScoreSheetResponse(
        event_type=sheet.event_type,
        unit_system=unit_system,
        event_results=[
            EventResult(
                name=e.name,
                result=e.result,
                points=e.points,
                type=e.type,
                unit=e.unit,
                day=e.day,
            )
            for e in sheet.results
        ],
        total_score=sheet.total_score,
        day_subtotals=sheet.day_subtotals,
        events_scored=sheet.events_scored,
    )
