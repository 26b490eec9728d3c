"""List questions use case."""

from datetime import datetime
from typing import Optional, Self

import logfire
from pydantic import BaseModel, Field

from stackit.domain.model import Question
from stackit.domain.repository import QuestionSortOrder
from stackit.domain.service import AnswerService, QuestionService
from stackit.domain.value import (
    Priority,
    QuestionCategory,
    QuestionStatus,
)


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    category: Optional[QuestionCategory] = None
    status: Optional[QuestionStatus] = None
    tag: Optional[str] = None
    search: Optional[str] = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class QuestionSummary(BaseModel):
    """Question as shown in a listing, without its body."""

    question_id: str
    author_id: str | None  # None when posted anonymously
    title: str
    category: QuestionCategory
    tags: list[str]
    is_anonymous: bool
    status: QuestionStatus
    priority: Priority
    vote_count: int
    answer_count: int
    has_accepted_answer: bool
    created_at: datetime
    last_activity_at: datetime

    @classmethod
    def of(cls, question: Question, answer_count: int) -> Self:
        """Build the listing view of a question."""
        return cls(
            question_id=str(question.id),
            author_id=None if question.is_anonymous else str(question.author_id),
            title=question.title,
            category=question.category,
            tags=question.tags,
            is_anonymous=question.is_anonymous,
            status=question.status,
            priority=question.priority,
            vote_count=question.vote_count,
            answer_count=answer_count,
            has_accepted_answer=question.accepted_answer_id is not None,
            created_at=question.created_at,
            last_activity_at=question.last_activity_at,
        )


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionSummary]
    total: int
    limit: int
    offset: int


class ListQuestionsUseCase:
    """Use case for browsing questions with filters, sorting and pagination."""

    def __init__(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service (answer counts)
        """
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Filters, sort order and page window

        Returns:
            One page of question summaries and the total number matching
        """
        with logfire.span(
            "list_questions.execute",
            sort=request.sort.value,
            limit=request.limit,
            offset=request.offset,
        ):
            questions, total = await self.question_service.list_questions(
                sort=request.sort,
                category=request.category,
                status=request.status,
                tag=request.tag,
                search=request.search,
                limit=request.limit,
                offset=request.offset,
            )
            counts = await self.answer_service.count_for_questions(
                [question.id for question in questions]
            )

            return ListQuestionsResponse(
                questions=[
                    QuestionSummary.of(question, counts.get(question.id, 0))
                    for question in questions
                ],
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
