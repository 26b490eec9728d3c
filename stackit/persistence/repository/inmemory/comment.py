"""In-memory comment repository for testing."""

from typing import Optional
from uuid import UUID

from stackit.domain.model.comment import Comment
from stackit.domain.repository.comment import CommentRepository
from stackit.domain.value import CommentId, VotableType


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_targets(
        self, target_type: VotableType, target_ids: list[UUID]
    ) -> list[Comment]:
        """Find the comments on several items, oldest first."""
        wanted = set(target_ids)
        comments = [
            c
            for c in self._comments.values()
            if c.target_type == target_type and c.target_id in wanted
        ]
        return sorted(comments, key=lambda c: c.created_at)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_by_targets(
        self, target_type: VotableType, target_ids: list[UUID]
    ) -> int:
        """Delete every comment on the given items."""
        doomed = [c.id for c in await self.find_by_targets(target_type, target_ids)]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
