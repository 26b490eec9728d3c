"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import CommentService
from stackit.domain.value import Actor, CommentId, UserId, UserRole, VotableType


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    target_type: VotableType
    target_id: str  # Question or answer UUID string
    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    role: UserRole = UserRole.USER


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool


class DeleteCommentUseCase:
    """Use case for removing a comment. Authors and moderators only."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment is not on the given item
            NotAuthorizedError: If the user is neither author nor moderator
        """
        actor = Actor(user_id=UserId(UUID(request.user_id)), role=request.role)
        await self.comment_service.remove_comment(
            request.target_type,
            UUID(request.target_id),
            CommentId(UUID(request.comment_id)),
            actor,
        )
        return DeleteCommentResponse(success=True)
