"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import QuestionService
from stackit.domain.value import Actor, QuestionId, UserId, UserRole


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    role: UserRole = UserRole.USER


class DeleteQuestionResponse(BaseModel):
    """Delete question response."""

    success: bool
    removed_answers: int


class DeleteQuestionUseCase:
    """Use case for deleting a question with its answers and votes.

    Points already credited for the question, its answers and their votes
    are kept.
    """

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize delete question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        """Execute delete question flow.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the user is neither author nor moderator
        """
        actor = Actor(user_id=UserId(UUID(request.user_id)), role=request.role)
        removed = await self.question_service.delete_question(
            QuestionId(UUID(request.question_id)), actor
        )
        return DeleteQuestionResponse(success=True, removed_answers=removed)
