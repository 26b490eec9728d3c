"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from stackit.domain.model.comment import Comment
from stackit.domain.value import CommentId, VotableType


class CommentRepository(ABC):
    """Repository for comments on questions and answers."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def find_by_targets(
        self, target_type: VotableType, target_ids: list[UUID]
    ) -> list[Comment]:
        """Find the comments on several questions or answers.

        Args:
            target_type: Whether the targets are questions or answers
            target_ids: IDs of the commented items

        Returns:
            Comments on any of the targets, oldest first
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            True if a comment was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_targets(
        self, target_type: VotableType, target_ids: list[UUID]
    ) -> int:
        """Delete every comment on the given questions or answers.

        Returns:
            Number of comments deleted
        """
        pass
