"""Create answer use case."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from stackit.domain.error import ValidationError
from stackit.domain.model import Answer
from stackit.domain.service import (
    AnswerService,
    QuestionService,
    ScoringService,
    UserService,
)
from stackit.domain.value import AnswerId, Level, QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    content: str
    is_anonymous: bool = False


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    answer_id: str
    question_id: str
    content: str
    is_anonymous: bool
    vote_count: int
    created_at: datetime
    author_points: int
    author_level: Level
    answer_streak: int


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
        scoring_service: ScoringService,
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            user_service: User domain service
            scoring_service: Scoring coordinator
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.user_service = user_service
        self.scoring_service = scoring_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Steps:
        1. Load the author and the question
        2. Check the question still takes answers
        3. Create and save the Answer
        4. Bump the question's last activity
        5. Credit the author and update their streak (via ScoringService)

        Args:
            request: Create answer request

        Returns:
            Create answer response with the author's new totals

        Raises:
            NotFoundError: If author or question not found
            ValidationError: If the answer is invalid, anonymity is not
                allowed or the question is closed
        """
        author_id = UserId(UUID(request.author_id))
        question_id = QuestionId(UUID(request.question_id))

        with logfire.span(
            "create_answer.execute",
            question_id=request.question_id,
            author_id=request.author_id,
        ):
            user = await self.user_service.get_by_id(author_id)
            question = await self.question_service.get_question(question_id)

            if request.is_anonymous and not user.allow_anonymous:
                raise ValidationError("Anonymous posting is disabled for this user")
            if not question.status.accepts_answers:
                raise ValidationError(
                    f"Question is {question.status.value} and no longer takes answers"
                )

            try:
                answer = Answer(
                    id=AnswerId(uuid4()),
                    question_id=question_id,
                    author_id=author_id,
                    content=request.content,
                    is_anonymous=request.is_anonymous,
                )
            except PydanticValidationError as e:
                raise ValidationError(str(e)) from e

            saved = await self.answer_service.save_answer(answer)
            question = await self.question_service.save_question(
                question.model_copy(update={"last_activity_at": saved.created_at})
            )
            receipt = await self.scoring_service.submit_answer(saved, question)

            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )

            return CreateAnswerResponse(
                answer_id=str(saved.id),
                question_id=str(saved.question_id),
                content=saved.content,
                is_anonymous=saved.is_anonymous,
                vote_count=saved.vote_count,
                created_at=saved.created_at,
                author_points=receipt.user.points,
                author_level=receipt.user.level,
                answer_streak=receipt.user.stats.answer_streak,
            )
