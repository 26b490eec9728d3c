"""Votable content shared by questions and answers."""

from typing import Any, ClassVar, Optional, Self
from uuid import UUID

from pydantic import computed_field, model_validator

from stackit.domain.model.common import DomainModel, utc_now
from stackit.domain.value import UserId, UserRole, VotableType, VoteKind


class VotableContent(DomainModel):
    """Content that users can vote up or down.

    Business rules:
    - A user is in at most one of ``upvoters`` and ``downvoters``
    - ``vote_count`` is derived from the two sets and never stored
    - Authors cannot vote on their own content
    """

    votable_type: ClassVar[VotableType]

    id: UUID
    author_id: UserId
    upvoters: frozenset[UserId] = frozenset()
    downvoters: frozenset[UserId] = frozenset()

    @computed_field
    @property
    def vote_count(self) -> int:
        """Net score: upvotes minus downvotes."""
        return len(self.upvoters) - len(self.downvoters)

    @model_validator(mode="after")
    def validate_vote_sets_disjoint(self) -> "VotableContent":
        """Validate that no user is both an upvoter and a downvoter."""
        overlap = self.upvoters & self.downvoters
        if overlap:
            raise ValueError(
                f"Users cannot both upvote and downvote: {sorted(map(str, overlap))}"
            )
        return self

    def vote_of(self, user_id: UserId) -> Optional[VoteKind]:
        """Return the user's current vote on this content, if any."""
        if user_id in self.upvoters:
            return VoteKind.UP
        if user_id in self.downvoters:
            return VoteKind.DOWN
        return None

    def can_be_deleted_by(self, user_id: UserId, role: UserRole) -> bool:
        """Authors and moderators may delete content."""
        return user_id == self.author_id or role.can_moderate

    def can_be_edited_by(self, user_id: UserId, role: UserRole) -> bool:
        """Authors and moderators may edit content."""
        return self.can_be_deleted_by(user_id, role)

    def edited(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied and stamped as edited.

        Unlike ``model_copy`` the result is validated, so edits obey the same
        limits as new content.

        Raises:
            pydantic.ValidationError: If a changed field is invalid
        """
        data = self.model_dump(exclude={"vote_count"})
        data.update(changes, edited_at=utc_now())
        return self.model_validate(data)
