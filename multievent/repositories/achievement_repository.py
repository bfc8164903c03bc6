"""
Achievement Repository - Multi-Event Scoring
multievent/repositories/achievement_repository.py

Data access layer for unlocked achievements. One record per
(user, achievement type).
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from multievent.core.exceptions import DuplicateEntityException
from multievent.models.enumerations import AchievementType
from multievent.repositories.base import BaseRepository


class AchievementRepository(BaseRepository):
    """Repository for Achievement operations."""

    ENTITY_NAME = "Achievement"

    def create(
        self,
        user_id: int,
        achievement_type: AchievementType,
        title: str,
        description: str,
        points: int,
        metadata: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Record an unlocked achievement.

        Raises:
            DuplicateEntityException: the user already holds this achievement
        """
        achievement_type = AchievementType(achievement_type)
        with self.transaction() as records:
            for record in records.values():
                if record["user_id"] == user_id and record["achievement_type"] == achievement_type.value:
                    raise DuplicateEntityException(
                        f"User {user_id} already has achievement {achievement_type.value}"
                    )
            achievement_id = self._allocate_id()
            record = {
                "id": achievement_id,
                "user_id": user_id,
                "achievement_type": achievement_type.value,
                "title": title,
                "description": description,
                "points": points,
                "metadata": dict(metadata or {}),
                "unlocked_at": datetime.now(timezone.utc),
            }
            records[achievement_id] = record
            return dict(record, metadata=dict(record["metadata"]))

    def has_achievement(self, user_id: int, achievement_type: AchievementType) -> bool:
        wanted = AchievementType(achievement_type).value
        return any(
            r["user_id"] == user_id and r["achievement_type"] == wanted
            for r in self._all()
        )

    def get_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        """Achievements for a user, in unlock order."""
        rows = [r for r in self._all() if r["user_id"] == user_id]
        return sorted(rows, key=lambda r: (r["unlocked_at"], r["id"]))
