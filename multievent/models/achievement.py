from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime, timezone
from typing import Dict, List

from multievent.models.enumerations import AchievementType


class AchievementResponse(BaseModel):
    """
    An unlocked achievement.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    achievement_type: AchievementType
    title: str
    description: str
    points: int = Field(..., ge=0, description="Achievement points awarded")
    metadata: Dict[str, str] = Field(default_factory=dict, description="icon and color")
    unlocked_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Unlock timestamp (UTC)"
    )


class AchievementListResponse(BaseModel):
    items: List[AchievementResponse]
    total: int
    total_points: int


class AchievementDefinitionResponse(BaseModel):
    type: AchievementType
    title: str
    description: str
    points: int
    icon: str
    color: str


class AchievementPointsResponse(BaseModel):
    user_id: int
    total_points: int
    unlocked: int
    available: int
