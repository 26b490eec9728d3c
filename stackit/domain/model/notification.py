"""Notification entity and the event descriptor handed to dispatchers."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel, utc_now
from stackit.domain.value import (
    AchievementName,
    AnswerId,
    Level,
    NotificationId,
    NotificationType,
    Priority,
    QuestionId,
    UserId,
)
from stackit.domain.value.common import ValueObject


class NotificationData(ValueObject):
    """Structured payload linking a notification to what triggered it."""

    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    achievement: Optional[AchievementName] = None
    level: Optional[Level] = None
    points: Optional[int] = None


class NotificationEvent(ValueObject):
    """Descriptor of a user-visible message, pushed to a dispatcher.

    Dispatch is fire-and-forget: building or delivering an event must never
    affect the scoring event that produced it.
    """

    recipient_id: UserId
    sender_id: Optional[UserId] = None
    type: NotificationType
    title: str = Field(max_length=100)
    message: str = Field(max_length=500)
    data: NotificationData = Field(default_factory=NotificationData)
    priority: Priority = Priority.MEDIUM

    @classmethod
    def achievement_earned(
        cls, recipient_id: UserId, achievement: AchievementName
    ) -> "NotificationEvent":
        """Tell a user they unlocked an achievement."""
        return cls(
            recipient_id=recipient_id,
            type=NotificationType.ACHIEVEMENT_EARNED,
            title="Achievement Unlocked! 🎉",
            message=f'You\'ve earned the "{achievement.value}" achievement!',
            data=NotificationData(achievement=achievement),
            priority=Priority.HIGH,
        )

    @classmethod
    def level_up(
        cls, recipient_id: UserId, level: Level, points: int
    ) -> "NotificationEvent":
        """Tell a user they reached a new level."""
        return cls(
            recipient_id=recipient_id,
            type=NotificationType.LEVEL_UP,
            title="Level Up! ⬆️",
            message=(
                f"Congratulations! You've reached {level.value} level "
                f"with {points} StackPoints!"
            ),
            data=NotificationData(level=level, points=points),
            priority=Priority.HIGH,
        )

    @classmethod
    def answer_accepted(
        cls,
        recipient_id: UserId,
        sender_id: UserId,
        question_id: QuestionId,
        answer_id: AnswerId,
        points: int,
    ) -> "NotificationEvent":
        """Tell an answer author their answer was accepted."""
        return cls(
            recipient_id=recipient_id,
            sender_id=sender_id,
            type=NotificationType.ANSWER_ACCEPTED,
            title="Answer Accepted! ✅",
            message="Your answer has been accepted as the best solution!",
            data=NotificationData(
                question_id=question_id, answer_id=answer_id, points=points
            ),
            priority=Priority.HIGH,
        )

    @classmethod
    def question_answered(
        cls,
        recipient_id: UserId,
        sender_id: Optional[UserId],
        question_id: QuestionId,
        answer_id: AnswerId,
    ) -> "NotificationEvent":
        """Tell a question author someone answered."""
        return cls(
            recipient_id=recipient_id,
            sender_id=sender_id,
            type=NotificationType.QUESTION_ANSWERED,
            title="New Answer Received! 💡",
            message="Someone has answered your question!",
            data=NotificationData(question_id=question_id, answer_id=answer_id),
        )

    @classmethod
    def question_upvoted(
        cls,
        recipient_id: UserId,
        sender_id: UserId,
        question_id: QuestionId,
        points: int,
    ) -> "NotificationEvent":
        """Tell a question author their question was upvoted."""
        return cls(
            recipient_id=recipient_id,
            sender_id=sender_id,
            type=NotificationType.QUESTION_UPVOTED,
            title="Question Upvoted! 👍",
            message="Someone found your question useful!",
            data=NotificationData(question_id=question_id, points=points),
            priority=Priority.LOW,
        )

    @classmethod
    def answer_upvoted(
        cls,
        recipient_id: UserId,
        sender_id: UserId,
        question_id: QuestionId,
        answer_id: AnswerId,
        points: int,
    ) -> "NotificationEvent":
        """Tell an answer author their answer was upvoted."""
        return cls(
            recipient_id=recipient_id,
            sender_id=sender_id,
            type=NotificationType.ANSWER_UPVOTED,
            title="Answer Upvoted! 👍",
            message="Someone found your answer helpful!",
            data=NotificationData(
                question_id=question_id, answer_id=answer_id, points=points
            ),
            priority=Priority.LOW,
        )


class Notification(DomainModel):
    """Stored notification in a user's inbox."""

    id: NotificationId
    recipient_id: UserId
    sender_id: Optional[UserId] = None
    type: NotificationType
    title: str = Field(max_length=100)
    message: str = Field(max_length=500)
    data: NotificationData = Field(default_factory=NotificationData)
    priority: Priority = Priority.MEDIUM
    is_read: bool = False
    read_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def from_event(
        cls, notification_id: NotificationId, event: NotificationEvent
    ) -> "Notification":
        """Create an unread notification from a dispatched event."""
        return cls(
            id=notification_id,
            recipient_id=event.recipient_id,
            sender_id=event.sender_id,
            type=event.type,
            title=event.title,
            message=event.message,
            data=event.data,
            priority=event.priority,
        )
