"""Get question use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.comment.add_comment import CommentView
from stackit.domain.model import Answer, VotableContent
from stackit.domain.service import AnswerService, CommentService, QuestionService
from stackit.domain.value import (
    Priority,
    QuestionCategory,
    QuestionId,
    QuestionStatus,
    UserId,
    VotableType,
    VoteKind,
)


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class AnswerView(BaseModel):
    """Answer as shown under a question."""

    answer_id: str
    author_id: str | None  # None when posted anonymously
    content: str
    is_anonymous: bool
    is_accepted: bool
    accepted_at: datetime | None
    vote_count: int
    user_vote: VoteKind | None
    created_at: datetime
    edited_at: datetime | None
    comments: list[CommentView]

class GetQuestionResponse(BaseModel):
    """Get question response."""

    question_id: str
    author_id: str | None  # None when posted anonymously
    title: str
    content: str
    category: QuestionCategory
    tags: list[str]
    is_anonymous: bool
    status: QuestionStatus
    priority: Priority
    accepted_answer_id: str | None
    vote_count: int
    user_vote: VoteKind | None
    created_at: datetime
    last_activity_at: datetime
    edited_at: datetime | None
    comments: list[CommentView]
    answers: list[AnswerView]


def _public_author(content: VotableContent, is_anonymous: bool) -> str | None:
    return None if is_anonymous else str(content.author_id)


class GetQuestionUseCase:
    """Use case for reading a question with its answers and comments."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            comment_service: Comment domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.comment_service = comment_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Args:
            request: Question ID and optional viewer

        Returns:
            The question, vote counts, the viewer's own votes, answers and
            comments

        Raises:
            NotFoundError: If question not found
        """
        question_id = QuestionId(UUID(request.question_id))
        viewer: Optional[UserId] = (
            UserId(UUID(request.user_id)) if request.user_id else None
        )

        question = await self.question_service.get_question(question_id)
        answers = await self.answer_service.get_answers_for_question(question_id)
        question_comments = await self.comment_service.comments_for(
            VotableType.QUESTION, [question_id]
        )
        answer_comments = await self.comment_service.comments_for(
            VotableType.ANSWER, [answer.id for answer in answers]
        )

        def view(answer: Answer) -> AnswerView:
            return AnswerView(
                answer_id=str(answer.id),
                author_id=_public_author(answer, answer.is_anonymous),
                content=answer.content,
                is_anonymous=answer.is_anonymous,
                is_accepted=answer.is_accepted,
                accepted_at=answer.accepted_at,
                vote_count=answer.vote_count,
                user_vote=answer.vote_of(viewer) if viewer else None,
                created_at=answer.created_at,
                edited_at=answer.edited_at,
                comments=[
                    CommentView.of(comment)
                    for comment in answer_comments.get(answer.id, [])
                ],
            )

        return GetQuestionResponse(
            question_id=str(question.id),
            author_id=_public_author(question, question.is_anonymous),
            title=question.title,
            content=question.content,
            category=question.category,
            tags=question.tags,
            is_anonymous=question.is_anonymous,
            status=question.status,
            priority=question.priority,
            accepted_answer_id=str(question.accepted_answer_id)
            if question.accepted_answer_id
            else None,
            vote_count=question.vote_count,
            user_vote=question.vote_of(viewer) if viewer else None,
            created_at=question.created_at,
            last_activity_at=question.last_activity_at,
            edited_at=question.edited_at,
            comments=[
                CommentView.of(comment)
                for comment in question_comments.get(question.id, [])
            ],
            answers=[view(answer) for answer in answers],
        )
