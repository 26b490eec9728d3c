"""Domain value objects for StackIt."""

from stackit.domain.value.identifiers import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    UserId,
)
from stackit.domain.value.level import Level, level_for_points
from stackit.domain.value.types import (
    AchievementName,
    Actor,
    Handle,
    LeaderboardMetric,
    NotificationType,
    Priority,
    QuestionCategory,
    QuestionStatus,
    UserRole,
    VotableType,
    VoteDirection,
    VoteKind,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "NotificationId",
    "CommentId",
    # Levels
    "Level",
    "level_for_points",
    # Types
    "AchievementName",
    "Actor",
    "Handle",
    "LeaderboardMetric",
    "NotificationType",
    "Priority",
    "QuestionCategory",
    "QuestionStatus",
    "UserRole",
    "VotableType",
    "VoteDirection",
    "VoteKind",
]
