"""Domain value objects for StackIt.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from stackit.domain.value.common import RootValueObject, ValueObject
from stackit.domain.value.identifiers import UserId


class VoteKind(str, Enum):
    """Direction of a single vote."""

    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "VoteKind":
        """The other vote kind."""
        return VoteKind.DOWN if self is VoteKind.UP else VoteKind.UP


class VoteDirection(str, Enum):
    """What a toggle did to the voter's membership."""

    ADDED = "added"
    RETRACTED = "retracted"
    FLIPPED = "flipped"


class VotableType(str, Enum):
    """Type of content that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class AchievementName(str, Enum):
    """One-time badges a user can earn."""

    ANSWER_STREAK = "Answer Streak"
    PROBLEM_SOLVER = "Problem Solver"
    FIRST_QUESTION = "First Question"
    HELPER = "Helper"
    CONFIDENCE_BOOSTER = "Confidence Booster"


class QuestionStatus(str, Enum):
    """Lifecycle status of a question."""

    OPEN = "open"
    ANSWERED = "answered"
    CLOSED = "closed"
    DUPLICATE = "duplicate"
    OFF_TOPIC = "off-topic"

    @property
    def accepts_answers(self) -> bool:
        """Whether new answers may be posted."""
        return self in (QuestionStatus.OPEN, QuestionStatus.ANSWERED)


class QuestionCategory(str, Enum):
    """Topic category of a question."""

    PROGRAMMING = "programming"
    DESIGN = "design"
    BUSINESS = "business"
    MARKETING = "marketing"
    GENERAL = "general"
    EDUCATION = "education"
    TECHNOLOGY = "technology"
    HEALTH = "health"
    FINANCE = "finance"
    LIFESTYLE = "lifestyle"


class Priority(str, Enum):
    """Priority shared by questions and notifications."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class NotificationType(str, Enum):
    """Kinds of user-visible notifications."""

    QUESTION_ANSWERED = "question_answered"
    ANSWER_ACCEPTED = "answer_accepted"
    ANSWER_UPVOTED = "answer_upvoted"
    QUESTION_UPVOTED = "question_upvoted"
    ACHIEVEMENT_EARNED = "achievement_earned"
    LEVEL_UP = "level_up"


class UserRole(str, Enum):
    """Platform role of a user."""

    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"

    @property
    def can_moderate(self) -> bool:
        """Whether the role may remove other users' content."""
        return self in (UserRole.MODERATOR, UserRole.ADMIN)


class LeaderboardMetric(str, Enum):
    """Columns a leaderboard can be ranked by."""

    POINTS = "points"
    QUESTIONS_ASKED = "questions_asked"
    ANSWERS_GIVEN = "answers_given"


class Handle(RootValueObject[str]):
    """Unique public username.

    3-30 characters: letters, digits, underscores, dots and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle length and characters."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,30}$", v):
            raise ValueError(
                "Handle must be 3-30 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class Actor(ValueObject):
    """Authenticated user performing an operation."""

    user_id: UserId
    role: UserRole = UserRole.USER
