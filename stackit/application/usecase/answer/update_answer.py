"""Update answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from stackit.domain.error import ValidationError
from stackit.domain.service import AnswerService
from stackit.domain.value import Actor, AnswerId, UserId, UserRole


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    answer_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    role: UserRole = UserRole.USER
    content: str


class UpdateAnswerResponse(BaseModel):
    """Update answer response."""

    answer_id: str
    question_id: str
    content: str
    edited_at: datetime | None


class UpdateAnswerUseCase:
    """Use case for editing an answer's text."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize update answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: UpdateAnswerRequest) -> UpdateAnswerResponse:
        """Execute update answer flow.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the user is neither author nor moderator
            ValidationError: If the new content is invalid
        """
        actor = Actor(user_id=UserId(UUID(request.user_id)), role=request.role)
        try:
            answer = await self.answer_service.update_answer(
                AnswerId(UUID(request.answer_id)), actor, request.content
            )
        except PydanticValidationError as e:
            raise ValidationError(str(e)) from e

        return UpdateAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            content=answer.content,
            edited_at=answer.edited_at,
        )
