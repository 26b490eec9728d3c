"""User aggregate root.

Users accumulate StackPoints, a level and achievements through their
questions, answers and the votes those receive.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import Field, computed_field, model_validator

from stackit.domain.model.common import DomainModel, utc_now
from stackit.domain.value import (
    AchievementName,
    Handle,
    Level,
    UserId,
    UserRole,
    level_for_points,
)
from stackit.domain.value.common import ValueObject


class UserStats(ValueObject):
    """Activity counters maintained by the scoring ledger."""

    questions_asked: int = Field(default=0, ge=0)
    answers_given: int = Field(default=0, ge=0)
    accepted_answers: int = Field(default=0, ge=0)
    answer_streak: int = Field(default=0, ge=0)
    last_answer_date: Optional[date] = None
    total_upvotes: int = Field(default=0, ge=0)
    total_downvotes: int = Field(default=0, ge=0)
    total_views: int = Field(default=0, ge=0)


class EarnedAchievement(ValueObject):
    """An achievement and when it was earned."""

    name: AchievementName
    earned_at: datetime = Field(default_factory=utc_now)


class User(DomainModel):
    """User aggregate root.

    ``level`` is computed from ``points`` on every read, so it can never be
    set directly or go stale. ``achievements`` is append-only.
    """

    id: UserId
    handle: Handle
    email: Optional[str] = None
    role: UserRole = UserRole.USER
    allow_anonymous: bool = True
    points: int = Field(default=0, ge=0)
    achievements: list[EarnedAchievement] = Field(default_factory=list)
    stats: UserStats = Field(default_factory=UserStats)
    confidence_booster_badge_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @computed_field
    @property
    def level(self) -> Level:
        """Level for the current point total."""
        return level_for_points(self.points)

    @model_validator(mode="after")
    def validate_unique_achievements(self) -> "User":
        """Validate that each achievement is held at most once."""
        names = [achievement.name for achievement in self.achievements]
        if len(names) != len(set(names)):
            raise ValueError("Each achievement can only be earned once")
        return self

    def has_achievement(self, name: AchievementName) -> bool:
        """Whether the user already holds the achievement."""
        return any(achievement.name == name for achievement in self.achievements)
