"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from stackit.domain.model import (
    Answer,
    Comment,
    EarnedAchievement,
    Notification,
    NotificationData,
    Question,
    User,
    UserStats,
)
from stackit.domain.value import (
    AchievementName,
    AnswerId,
    CommentId,
    Handle,
    NotificationId,
    NotificationType,
    Priority,
    QuestionCategory,
    QuestionId,
    QuestionStatus,
    UserId,
    UserRole,
    VotableType,
)

_STAT_COLUMNS = (
    "questions_asked",
    "answers_given",
    "accepted_answers",
    "answer_streak",
    "last_answer_date",
    "total_upvotes",
    "total_downvotes",
    "total_views",
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return None if value is None else _uuid(value)


def _voters(ids: Iterable[Any]) -> frozenset[UserId]:
    return frozenset(UserId(_uuid(voter_id)) for voter_id in ids)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        email=row.get("email"),
        role=UserRole(row["role"]),
        allow_anonymous=row["allow_anonymous"],
        points=row["points"],
        achievements=[
            EarnedAchievement(
                name=AchievementName(item["name"]), earned_at=item["earned_at"]
            )
            for item in row.get("achievements") or []
        ],
        stats=UserStats(**{name: row[name] for name in _STAT_COLUMNS}),
        confidence_booster_badge_count=row["confidence_booster_badge_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Stats are flattened into columns and the derived level is stored
    alongside points so leaderboards can read it without recomputing.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump(exclude={"stats", "achievements", "level"})
    data["handle"] = user.handle.root
    data["role"] = user.role.value
    data["level"] = user.level.value
    data["achievements"] = [
        achievement.model_dump(mode="json") for achievement in user.achievements
    ]
    data.update(user.stats.model_dump())
    return data


def row_to_question(
    row: Dict[str, Any],
    upvoters: Iterable[Any] = (),
    downvoters: Iterable[Any] = (),
) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict
        upvoters: User IDs with an up vote on the question
        downvoters: User IDs with a down vote on the question

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        content=row["content"],
        category=QuestionCategory(row["category"]),
        tags=list(row.get("tags") or []),
        is_anonymous=row["is_anonymous"],
        status=QuestionStatus(row["status"]),
        priority=Priority(row["priority"]),
        accepted_answer_id=_optional_uuid(row.get("accepted_answer_id")),
        upvoters=_voters(upvoters),
        downvoters=_voters(downvoters),
        created_at=row["created_at"],
        last_activity_at=row["last_activity_at"],
        edited_at=row.get("edited_at"),
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Vote sets and the derived vote count live in the votes table.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = question.model_dump(exclude={"upvoters", "downvoters", "vote_count"})
    data["category"] = question.category.value
    data["status"] = question.status.value
    data["priority"] = question.priority.value
    return data


def row_to_answer(
    row: Dict[str, Any],
    upvoters: Iterable[Any] = (),
    downvoters: Iterable[Any] = (),
) -> Answer:
    """Convert database row to Answer domain model.

    Args:
        row: Database row as dict
        upvoters: User IDs with an up vote on the answer
        downvoters: User IDs with a down vote on the answer

    Returns:
        Answer domain model
    """
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        is_anonymous=row["is_anonymous"],
        is_accepted=row["is_accepted"],
        accepted_at=row.get("accepted_at"),
        accepted_by=_optional_uuid(row.get("accepted_by")),
        acceptance_rewarded=row["acceptance_rewarded"],
        confidence_booster_awarded=row["confidence_booster_awarded"],
        upvoters=_voters(upvoters),
        downvoters=_voters(downvoters),
        created_at=row["created_at"],
        edited_at=row.get("edited_at"),
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict.

    Args:
        answer: Answer domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return answer.model_dump(exclude={"upvoters", "downvoters", "vote_count"})


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        sender_id=_optional_uuid(row.get("sender_id")),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        data=NotificationData.model_validate(row.get("data") or {}),
        priority=Priority(row["priority"]),
        is_read=row["is_read"],
        read_at=row.get("read_at"),
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict.

    Args:
        notification: Notification domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = notification.model_dump(exclude={"data"})
    data["type"] = notification.type.value
    data["priority"] = notification.priority.value
    data["data"] = notification.data.model_dump(mode="json", exclude_none=True)
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        target_type=VotableType(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump()
    data["target_type"] = comment.target_type.value
    return data
