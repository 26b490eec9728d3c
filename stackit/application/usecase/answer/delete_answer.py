"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import AnswerService
from stackit.domain.value import Actor, AnswerId, UserId, UserRole


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    role: UserRole = UserRole.USER


class DeleteAnswerResponse(BaseModel):
    """Delete answer response."""

    success: bool
    question_id: str
    was_accepted: bool


class DeleteAnswerUseCase:
    """Use case for deleting an answer and its votes."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize delete answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: DeleteAnswerRequest) -> DeleteAnswerResponse:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the user is neither author nor moderator
        """
        actor = Actor(user_id=UserId(UUID(request.user_id)), role=request.role)
        deleted = await self.answer_service.delete_answer(
            AnswerId(UUID(request.answer_id)), actor
        )
        return DeleteAnswerResponse(
            success=True,
            question_id=str(deleted.question_id),
            was_accepted=deleted.is_accepted,
        )
