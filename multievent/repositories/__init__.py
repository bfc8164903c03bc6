"""
Repositories Package - Multi-Event Scoring
multievent/repositories/__init__.py

Data access layer over process-local in-memory stores.
"""

from multievent.repositories.base import BaseRepository
from multievent.repositories.achievement_repository import AchievementRepository
from multievent.repositories.performance_repository import PerformanceRepository

__all__ = [
    "BaseRepository",
    "AchievementRepository",
    "PerformanceRepository",
]
