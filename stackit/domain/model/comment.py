"""Comment entity."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from stackit.domain.model.common import DomainModel, utc_now
from stackit.domain.value import CommentId, UserId, UserRole, VotableType


class Comment(DomainModel):
    """Short remark attached to a question or an answer.

    Comments are flat: no replies, no votes and no points.
    """

    id: CommentId
    target_type: VotableType
    target_id: UUID
    author_id: UserId
    content: str = Field(min_length=1, max_length=1000)
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("content")
    @classmethod
    def validate_content_not_blank(cls, v: str) -> str:
        """Reject whitespace-only comments."""
        if not v.strip():
            raise ValueError("Comment cannot be blank")
        return v.strip()

    def can_be_deleted_by(self, user_id: UserId, role: UserRole) -> bool:
        """Comment authors and moderators may remove a comment."""
        return user_id == self.author_id or role.can_moderate
