"""Domain model entities for StackIt."""

from stackit.domain.model.answer import Answer
from stackit.domain.model.comment import Comment
from stackit.domain.model.content import VotableContent
from stackit.domain.model.notification import (
    Notification,
    NotificationData,
    NotificationEvent,
)
from stackit.domain.model.question import Question
from stackit.domain.model.user import EarnedAchievement, User, UserStats
from stackit.domain.model.vote import VoteOutcome

__all__ = [
    "Answer",
    "Comment",
    "EarnedAchievement",
    "Notification",
    "NotificationData",
    "NotificationEvent",
    "Question",
    "User",
    "UserStats",
    "VotableContent",
    "VoteOutcome",
]
