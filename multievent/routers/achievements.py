"""
Achievements Router - Multi-Event Scoring
multievent/routers/achievements.py

Read-only views of unlocked achievements and the rule catalogue.
Achievements are unlocked by saving performances.
"""

from typing import List

from fastapi import APIRouter, Depends

from multievent.config import settings
from multievent.core.dependencies import get_achievement_service
from multievent.models.achievement import (
    AchievementDefinitionResponse,
    AchievementListResponse,
    AchievementPointsResponse,
    AchievementResponse,
)
from multievent.services.achievement_service import AchievementService

router = APIRouter(prefix="/api/v1/achievements", tags=["Achievements"])


@router.get(
    "",
    response_model=AchievementListResponse,
    summary="List unlocked achievements",
)
async def list_achievements(
    service: AchievementService = Depends(get_achievement_service),
) -> AchievementListResponse:
    achievements = service.get_user_achievements(settings.DEFAULT_USER_ID)
    return AchievementListResponse(
        items=[AchievementResponse(**a) for a in achievements],
        total=len(achievements),
        total_points=sum(a["points"] for a in achievements),
    )


@router.get(
    "/definitions",
    response_model=List[AchievementDefinitionResponse],
    summary="Achievement catalogue",
    description="Every achievement that can be unlocked, in evaluation order.",
)
async def list_definitions(
    service: AchievementService = Depends(get_achievement_service),
) -> List[AchievementDefinitionResponse]:
    return [
        AchievementDefinitionResponse(
            type=d.type,
            title=d.title,
            description=d.description,
            points=d.points,
            icon=d.icon,
            color=d.color,
        )
        for d in service.definitions
    ]


@router.get(
    "/points",
    response_model=AchievementPointsResponse,
    summary="Total achievement points",
)
async def get_achievement_points(
    service: AchievementService = Depends(get_achievement_service),
) -> AchievementPointsResponse:
    user_id = settings.DEFAULT_USER_ID
    return AchievementPointsResponse(
        user_id=user_id,
        total_points=service.get_total_points(user_id),
        unlocked=len(service.get_user_achievements(user_id)),
        available=len(service.definitions),
    )
