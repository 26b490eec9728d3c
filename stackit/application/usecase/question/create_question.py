"""Create question use case."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from stackit.domain.error import ValidationError
from stackit.domain.model import Question
from stackit.domain.service import QuestionService, ScoringService, UserService
from stackit.domain.value import (
    Level,
    Priority,
    QuestionCategory,
    QuestionId,
    QuestionStatus,
    UserId,
)


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    author_id: str  # User ID from authenticated user
    title: str
    content: str
    category: QuestionCategory = QuestionCategory.GENERAL
    tags: list[str] = []
    is_anonymous: bool = False
    priority: Priority = Priority.MEDIUM


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question_id: str
    title: str
    category: QuestionCategory
    tags: list[str]
    is_anonymous: bool
    status: QuestionStatus
    priority: Priority
    vote_count: int
    created_at: datetime
    author_points: int
    author_level: Level


class CreateQuestionUseCase:
    """Use case for posting a new question."""

    def __init__(
        self,
        question_service: QuestionService,
        user_service: UserService,
        scoring_service: ScoringService,
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
            scoring_service: Scoring coordinator
        """
        self.question_service = question_service
        self.user_service = user_service
        self.scoring_service = scoring_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Steps:
        1. Load the author (via UserService)
        2. Check the author allows anonymous posting if requested
        3. Create Question entity (validation happens in domain model)
        4. Save question (via QuestionService)
        5. Credit the author (via ScoringService)

        Args:
            request: Create question request

        Returns:
            Create question response with the author's new point total

        Raises:
            NotFoundError: If author not found
            ValidationError: If the question is invalid or anonymity is not allowed
        """
        author_id = UserId(UUID(request.author_id))
        user = await self.user_service.get_by_id(author_id)

        with logfire.span(
            "create_question.execute",
            author=user.handle.root,
            category=request.category.value,
        ):
            if request.is_anonymous and not user.allow_anonymous:
                raise ValidationError("Anonymous posting is disabled for this user")

            try:
                question = Question(
                    id=QuestionId(uuid4()),
                    author_id=author_id,
                    title=request.title,
                    content=request.content,
                    category=request.category,
                    tags=request.tags,
                    is_anonymous=request.is_anonymous,
                    priority=request.priority,
                )
            except PydanticValidationError as e:
                raise ValidationError(str(e)) from e

            saved = await self.question_service.save_question(question)
            receipt = await self.scoring_service.submit_question(saved)

            logfire.info("Question created", question_id=str(saved.id))

            return CreateQuestionResponse(
                question_id=str(saved.id),
                title=saved.title,
                category=saved.category,
                tags=saved.tags,
                is_anonymous=saved.is_anonymous,
                status=saved.status,
                priority=saved.priority,
                vote_count=saved.vote_count,
                created_at=saved.created_at,
                author_points=receipt.user.points,
                author_level=receipt.user.level,
            )
