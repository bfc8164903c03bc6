"""
Services module for the Multi-Event Scoring API.
"""

from multievent.services.achievement_service import (
    ACHIEVEMENT_DEFINITIONS,
    AchievementDefinition,
    AchievementService,
)
from multievent.services.cache import get_cache, reset_cache
from multievent.services.redis_cache import RedisCache

__all__ = [
    "ACHIEVEMENT_DEFINITIONS",
    "AchievementDefinition",
    "AchievementService",
    "get_cache",
    "reset_cache",
    "RedisCache",
]
