"""Question domain service."""

from typing import Any, Optional

import logfire

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import Question, VoteOutcome
from stackit.domain.model.common import utc_now
from stackit.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    QuestionSortOrder,
)
from stackit.domain.value import (
    Actor,
    QuestionCategory,
    QuestionId,
    QuestionStatus,
    UserId,
    VotableType,
    VoteKind,
)

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository (for cascading deletes)
            comment_repository: Comment repository (for cascading deletes)
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.comment_repository = comment_repository

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span("question_service.get_question", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def list_questions(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        category: Optional[QuestionCategory] = None,
        status: Optional[QuestionStatus] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Question], int]:
        """List one page of questions and the total matching the filters."""
        questions = await self.question_repository.find_all(
            sort=sort,
            category=category,
            status=status,
            tag=tag,
            search=search,
            limit=limit,
            offset=offset,
        )
        total = await self.question_repository.count(
            category=category, status=status, tag=tag, search=search
        )
        return questions, total

    async def list_by_author(
        self,
        author_id: UserId,
        include_anonymous: bool,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Question], int]:
        """List one page of a user's questions and their total."""
        questions = await self.question_repository.find_by_author(
            author_id, include_anonymous=include_anonymous, limit=limit, offset=offset
        )
        total = await self.question_repository.count_by_author(
            author_id, include_anonymous=include_anonymous
        )
        return questions, total

    async def save_question(self, question: Question) -> Question:
        """Save a question."""
        with logfire.span("question_service.save_question", question_id=str(question.id)):
            return await self.question_repository.save(question)

    async def update_question(
        self, question_id: QuestionId, actor: Actor, changes: dict[str, Any]
    ) -> Question:
        """Edit a question's text, category, tags or priority.

        Args:
            question_id: Question to edit
            actor: User requesting the edit
            changes: Field values to replace; absent fields are kept

        Returns:
            The edited question

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the actor is neither author nor moderator
            pydantic.ValidationError: If an edited field is invalid
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            user_id=str(actor.user_id),
        ):
            question = await self.get_question(question_id)
            if not question.can_be_edited_by(actor.user_id, actor.role):
                logfire.warn(
                    "Unauthorized question edit",
                    question_id=str(question_id),
                    user_id=str(actor.user_id),
                )
                raise NotAuthorizedError("question", str(question_id), str(actor.user_id))

            edited = question.edited(**changes, last_activity_at=utc_now())
            saved = await self.question_repository.save(edited)
            logfire.info(
                "Question edited", question_id=str(question_id), fields=sorted(changes)
            )
            return saved

    async def toggle_vote(
        self, question_id: QuestionId, voter_id: UserId, kind: VoteKind
    ) -> VoteOutcome:
        """Toggle a vote on a question.

        Raises:
            NotFoundError: If the question disappeared
            SelfVoteError: If the voter authored the question
        """
        outcome = await self.question_repository.toggle_vote(question_id, voter_id, kind)
        if outcome is None:
            raise NotFoundError("Question", str(question_id))
        return outcome

    async def delete_question(self, question_id: QuestionId, actor: Actor) -> int:
        """Delete a question together with its answers, comments and votes.

        Args:
            question_id: Question to delete
            actor: User requesting the deletion

        Returns:
            Number of answers removed with the question

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the actor is neither author nor moderator
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            user_id=str(actor.user_id),
        ):
            question = await self.get_question(question_id)
            if not question.can_be_deleted_by(actor.user_id, actor.role):
                logfire.warn(
                    "Unauthorized question delete",
                    question_id=str(question_id),
                    user_id=str(actor.user_id),
                )
                raise NotAuthorizedError("question", str(question_id), str(actor.user_id))

            answers = await self.answer_repository.find_by_question(question_id)
            await self.comment_repository.delete_by_targets(
                VotableType.ANSWER, [answer.id for answer in answers]
            )
            await self.comment_repository.delete_by_targets(
                VotableType.QUESTION, [question_id]
            )
            removed_answers = await self.answer_repository.delete_by_question(question_id)
            await self.question_repository.delete(question_id)

            logfire.info(
                "Question deleted",
                question_id=str(question_id),
                removed_answers=removed_answers,
            )
            return removed_answers
