"""Get user answers use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from stackit.application.usecase.user.get_user_questions import load_profile_owner
from stackit.domain.service import AnswerService, UserService


class GetUserAnswersRequest(BaseModel):
    """Get user answers request."""

    handle: str
    viewer_id: str | None = None  # Current user ID (if authenticated)
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class UserAnswerView(BaseModel):
    """Answer as shown on its author's profile."""

    answer_id: str
    question_id: str
    content: str
    is_anonymous: bool
    is_accepted: bool
    vote_count: int
    created_at: datetime


class GetUserAnswersResponse(BaseModel):
    """Get user answers response."""

    answers: list[UserAnswerView]
    total: int
    limit: int
    offset: int


class GetUserAnswersUseCase:
    """Use case for listing the answers a user wrote, newest first.

    Anonymous answers are listed only to their author.
    """

    def __init__(self, user_service: UserService, answer_service: AnswerService) -> None:
        """Initialize get user answers use case.

        Args:
            user_service: User domain service
            answer_service: Answer domain service
        """
        self.user_service = user_service
        self.answer_service = answer_service

    async def execute(self, request: GetUserAnswersRequest) -> GetUserAnswersResponse:
        """Execute get user answers flow.

        Raises:
            NotFoundError: If no user has the handle
        """
        user = await load_profile_owner(self.user_service, request.handle)
        is_owner = request.viewer_id is not None and UUID(request.viewer_id) == user.id

        answers, total = await self.answer_service.list_by_author(
            user.id,
            include_anonymous=is_owner,
            limit=request.limit,
            offset=request.offset,
        )
        return GetUserAnswersResponse(
            answers=[
                UserAnswerView(
                    answer_id=str(answer.id),
                    question_id=str(answer.question_id),
                    content=answer.content,
                    is_anonymous=answer.is_anonymous,
                    is_accepted=answer.is_accepted,
                    vote_count=answer.vote_count,
                    created_at=answer.created_at,
                )
                for answer in answers
            ],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
