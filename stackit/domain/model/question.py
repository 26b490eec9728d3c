"""Question aggregate root."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field, field_validator

from stackit.domain.model.common import utc_now
from stackit.domain.model.content import VotableContent
from stackit.domain.value import (
    AnswerId,
    Priority,
    QuestionCategory,
    QuestionId,
    QuestionStatus,
    VotableType,
)

MAX_TAGS = 10


class Question(VotableContent):
    """Question aggregate root.

    ``accepted_answer_id`` mirrors the single accepted answer's flag. The
    scoring coordinator keeps both sides in sync.
    """

    votable_type: ClassVar[VotableType] = VotableType.QUESTION

    id: QuestionId
    title: str = Field(min_length=10, max_length=200)
    content: str = Field(min_length=20, max_length=10000)
    category: QuestionCategory = QuestionCategory.GENERAL
    tags: list[str] = Field(default_factory=list)
    is_anonymous: bool = False
    status: QuestionStatus = QuestionStatus.OPEN
    priority: Priority = Priority.MEDIUM
    accepted_answer_id: Optional[AnswerId] = None
    created_at: datetime = Field(default_factory=utc_now)
    last_activity_at: datetime = Field(default_factory=utc_now)
    edited_at: Optional[datetime] = None

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        """Normalize tags to lowercase and enforce count and length limits."""
        tags = [tag.strip().lower() for tag in v]
        if len(tags) > MAX_TAGS:
            raise ValueError(f"A question can have at most {MAX_TAGS} tags")
        for tag in tags:
            if not 2 <= len(tag) <= 20:
                raise ValueError("Tags must be 2-20 characters")
        return list(dict.fromkeys(tags))
