"""
Achievement Service - Multi-Event Scoring
multievent/services/achievement_service.py

Evaluates the achievement rules against the saved performance history and
records newly unlocked achievements. Each achievement unlocks at most once
per user.

Rules (history oldest first):
  first_performance      exactly one performance saved
  score_milestone_N      new total >= N (any saved total when no new one)
  event_specialist       10+ performances of one competition type
  multi_event_master     every competition type recorded
  consistency_champion   last 5 totals within 200 points of each other
  improvement_streak     last 3 totals strictly increasing
  perfect_ten            10+ performances
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import structlog

from multievent.core.exceptions import DuplicateEntityException
from multievent.models.enumerations import AchievementType, EventType
from multievent.repositories.achievement_repository import AchievementRepository
from multievent.repositories.performance_repository import PerformanceRepository

logger = structlog.get_logger(__name__)

Performance = Dict[str, Any]
Condition = Callable[[List[Performance], Optional[Performance]], bool]


@dataclass(frozen=True)
class AchievementDefinition:
    type: AchievementType
    title: str
    description: str
    points: int
    icon: str
    color: str           # gradient classes, "from-X to-Y"
    condition: Condition


def _score_milestone(threshold: int) -> Condition:
    def check(history: List[Performance], new: Optional[Performance]) -> bool:
        if new is not None:
            return new["total_score"] >= threshold
        return any(p["total_score"] >= threshold for p in history)
    return check


def _event_specialist(history, new) -> bool:
    counts = Counter(p["event_type"] for p in history)
    return any(count >= 10 for count in counts.values())


def _multi_event_master(history, new) -> bool:
    recorded = {p["event_type"] for p in history}
    return all(t.value in recorded for t in EventType)


def _consistency_champion(history, new) -> bool:
    if len(history) < 5:
        return False
    scores = [p["total_score"] for p in history[-5:]]
    return max(scores) - min(scores) < 200


def _improvement_streak(history, new) -> bool:
    if len(history) < 3:
        return False
    a, b, c = (p["total_score"] for p in history[-3:])
    return a < b < c


ACHIEVEMENT_DEFINITIONS: List[AchievementDefinition] = [
    AchievementDefinition(
        AchievementType.FIRST_PERFORMANCE, "First Steps",
        "Record your first performance", 50,
        "🏃", "from-green-400 to-emerald-600",
        lambda history, new: len(history) == 1,
    ),
    AchievementDefinition(
        AchievementType.SCORE_MILESTONE_5000, "Rising Star",
        "Achieve a score of 5000+ points", 100,
        "⭐", "from-yellow-400 to-orange-600",
        _score_milestone(5000),
    ),
    AchievementDefinition(
        AchievementType.SCORE_MILESTONE_6000, "Skilled Athlete",
        "Achieve a score of 6000+ points", 150,
        "🏅", "from-blue-400 to-indigo-600",
        _score_milestone(6000),
    ),
    AchievementDefinition(
        AchievementType.SCORE_MILESTONE_7000, "Elite Performer",
        "Achieve a score of 7000+ points", 200,
        "🥉", "from-amber-400 to-orange-600",
        _score_milestone(7000),
    ),
    AchievementDefinition(
        AchievementType.SCORE_MILESTONE_8000, "World Class",
        "Achieve a score of 8000+ points", 300,
        "🏆", "from-purple-400 to-pink-600",
        _score_milestone(8000),
    ),
    AchievementDefinition(
        AchievementType.EVENT_SPECIALIST, "Event Specialist",
        "Complete 10 performances in the same event type", 100,
        "🎯", "from-red-400 to-rose-600",
        _event_specialist,
    ),
    AchievementDefinition(
        AchievementType.MULTI_EVENT_MASTER, "Multi-Event Master",
        "Complete performances in all three event types", 200,
        "🏃‍♂️", "from-teal-400 to-cyan-600",
        _multi_event_master,
    ),
    AchievementDefinition(
        AchievementType.CONSISTENCY_CHAMPION, "Consistency Champion",
        "Record 5 performances with less than 200 points difference", 150,
        "📊", "from-violet-400 to-purple-600",
        _consistency_champion,
    ),
    AchievementDefinition(
        AchievementType.IMPROVEMENT_STREAK, "Improvement Streak",
        "Achieve 3 consecutive performance improvements", 100,
        "📈", "from-emerald-400 to-green-600",
        _improvement_streak,
    ),
    AchievementDefinition(
        AchievementType.PERFECT_TEN, "Perfect Ten",
        "Complete 10 total performances", 150,
        "🔟", "from-pink-400 to-rose-600",
        lambda history, new: len(history) >= 10,
    ),
]


class AchievementService:
    """
    Unlocks achievements from the performance history.

    Every saved performance belongs to the single configured user.
    """

    def __init__(
        self,
        performance_repo: PerformanceRepository,
        achievement_repo: AchievementRepository,
        definitions: Optional[List[AchievementDefinition]] = None,
    ):
        self.performance_repo = performance_repo
        self.achievement_repo = achievement_repo
        self.definitions = definitions if definitions is not None else ACHIEVEMENT_DEFINITIONS

    def check_and_unlock(
        self,
        user_id: int,
        new_performance: Optional[Performance] = None,
    ) -> List[Dict[str, Any]]:
        """
        Evaluate every rule the user has not unlocked yet.

        Args:
            user_id: Achievement owner
            new_performance: The performance just saved, if any

        Returns:
            Achievements unlocked by this call, in rule order
        """
        history = self.performance_repo.get_history()
        unlocked: List[Dict[str, Any]] = []

        for definition in self.definitions:
            if self.achievement_repo.has_achievement(user_id, definition.type):
                continue
            if not definition.condition(history, new_performance):
                continue
            try:
                achievement = self.achievement_repo.create(
                    user_id=user_id,
                    achievement_type=definition.type,
                    title=definition.title,
                    description=definition.description,
                    points=definition.points,
                    metadata={"icon": definition.icon, "color": definition.color},
                )
            except DuplicateEntityException:
                # Unlocked by a concurrent request since has_achievement()
                continue
            unlocked.append(achievement)
            logger.info(
                "achievement_unlocked",
                user_id=user_id,
                achievement_type=definition.type.value,
                points=definition.points,
            )

        return unlocked

    def get_user_achievements(self, user_id: int) -> List[Dict[str, Any]]:
        return self.achievement_repo.get_by_user(user_id)

    def get_total_points(self, user_id: int) -> int:
        return sum(a["points"] for a in self.achievement_repo.get_by_user(user_id))

    def get_definition(self, achievement_type) -> Optional[AchievementDefinition]:
        """Rule definition for a type (enum or value), or None."""
        try:
            wanted = AchievementType(achievement_type)
        except ValueError:
            return None
        for definition in self.definitions:
            if definition.type == wanted:
                return definition
        return None
