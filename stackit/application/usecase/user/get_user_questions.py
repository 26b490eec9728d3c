"""Get user questions use case."""

from uuid import UUID

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from stackit.application.usecase.question.list_questions import QuestionSummary
from stackit.domain.error import NotFoundError
from stackit.domain.model import User
from stackit.domain.service import AnswerService, QuestionService, UserService
from stackit.domain.value import Handle


class GetUserQuestionsRequest(BaseModel):
    """Get user questions request."""

    handle: str
    viewer_id: str | None = None  # Current user ID (if authenticated)
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class GetUserQuestionsResponse(BaseModel):
    """Get user questions response."""

    questions: list[QuestionSummary]
    total: int
    limit: int
    offset: int


async def load_profile_owner(user_service: UserService, handle: str) -> User:
    """Look up the user whose profile lists are requested.

    Raises:
        NotFoundError: If no user has the handle
    """
    try:
        parsed = Handle(handle)
    except PydanticValidationError as e:
        raise NotFoundError("User", handle) from e

    user = await user_service.get_user_by_handle(parsed)
    if not user:
        raise NotFoundError("User", handle)
    return user


class GetUserQuestionsUseCase:
    """Use case for listing the questions a user asked, newest first.

    Anonymous questions are listed only to their author.
    """

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize get user questions use case.

        Args:
            user_service: User domain service
            question_service: Question domain service
            answer_service: Answer domain service (answer counts)
        """
        self.user_service = user_service
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(
        self, request: GetUserQuestionsRequest
    ) -> GetUserQuestionsResponse:
        """Execute get user questions flow.

        Raises:
            NotFoundError: If no user has the handle
        """
        user = await load_profile_owner(self.user_service, request.handle)
        is_owner = request.viewer_id is not None and UUID(request.viewer_id) == user.id

        questions, total = await self.question_service.list_by_author(
            user.id,
            include_anonymous=is_owner,
            limit=request.limit,
            offset=request.offset,
        )
        counts = await self.answer_service.count_for_questions(
            [question.id for question in questions]
        )
        return GetUserQuestionsResponse(
            questions=[
                QuestionSummary.of(question, counts.get(question.id, 0))
                for question in questions
            ],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
