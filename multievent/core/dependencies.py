"""
Dependencies - Multi-Event Scoring
multievent/core/dependencies.py

FastAPI dependency injection for repositories and services.
"""

from functools import lru_cache

from fastapi import Depends

from multievent.repositories.achievement_repository import AchievementRepository
from multievent.repositories.performance_repository import PerformanceRepository
from multievent.scoring.engine import ScoringEngine
from multievent.services.achievement_service import AchievementService


@lru_cache()
def get_performance_repository() -> PerformanceRepository:
    """Get cached PerformanceRepository instance."""
    return PerformanceRepository()


@lru_cache()
def get_achievement_repository() -> AchievementRepository:
    """Get cached AchievementRepository instance."""
    return AchievementRepository()


@lru_cache()
def get_scoring_engine() -> ScoringEngine:
    """Get cached ScoringEngine over the default scoring table."""
    return ScoringEngine()


def get_achievement_service(
    performance_repo: PerformanceRepository = Depends(get_performance_repository),
    achievement_repo: AchievementRepository = Depends(get_achievement_repository),
) -> AchievementService:
    """AchievementService over the request's repositories."""
    return AchievementService(performance_repo, achievement_repo)
