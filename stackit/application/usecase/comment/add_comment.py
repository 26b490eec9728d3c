"""Add comment use case."""

from datetime import datetime
from typing import Self
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from stackit.domain.error import ValidationError
from stackit.domain.model import Comment
from stackit.domain.service import CommentService
from stackit.domain.value import CommentId, UserId, VotableType


class CommentView(BaseModel):
    """Comment as shown under a question or answer."""

    comment_id: str
    author_id: str
    content: str
    created_at: datetime

    @classmethod
    def of(cls, comment: Comment) -> Self:
        """Build the view of a comment."""
        return cls(
            comment_id=str(comment.id),
            author_id=str(comment.author_id),
            content=comment.content,
            created_at=comment.created_at,
        )


class AddCommentRequest(BaseModel):
    """Add comment request."""

    target_type: VotableType
    target_id: str  # Question or answer UUID string
    author_id: str  # User ID from authenticated user
    content: str


class AddCommentResponse(CommentView):
    """Add comment response."""

    target_type: VotableType
    target_id: str


class AddCommentUseCase:
    """Use case for commenting on a question or an answer."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Raises:
            NotFoundError: If the question or answer does not exist
            ValidationError: If the comment is empty or too long
        """
        with logfire.span(
            "add_comment.execute",
            target_type=request.target_type.value,
            target_id=request.target_id,
        ):
            try:
                comment = Comment(
                    id=CommentId(uuid4()),
                    target_type=request.target_type,
                    target_id=UUID(request.target_id),
                    author_id=UserId(UUID(request.author_id)),
                    content=request.content,
                )
            except PydanticValidationError as e:
                raise ValidationError(str(e)) from e

            saved = await self.comment_service.add_comment(comment)
            view = CommentView.of(saved)
            return AddCommentResponse(
                **view.model_dump(),
                target_type=saved.target_type,
                target_id=str(saved.target_id),
            )
