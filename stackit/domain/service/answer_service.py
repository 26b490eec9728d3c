"""Answer domain service."""

import logfire

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import Answer, VoteOutcome
from stackit.domain.model.common import utc_now
from stackit.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
)
from stackit.domain.value import (
    Actor,
    AnswerId,
    QuestionId,
    QuestionStatus,
    UserId,
    VotableType,
    VoteKind,
)

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository (to keep acceptance in sync)
            comment_repository: Comment repository (for cascading deletes)
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.comment_repository = comment_repository

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If answer not found
        """
        with logfire.span("answer_service.get_answer", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))
            return answer

    async def get_answers_for_question(self, question_id: QuestionId) -> list[Answer]:
        """Get all answers to a question, accepted answer first."""
        return await self.answer_repository.find_by_question(question_id)

    async def list_by_author(
        self,
        author_id: UserId,
        include_anonymous: bool,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Answer], int]:
        """List one page of a user's answers and their total."""
        answers = await self.answer_repository.find_by_author(
            author_id, include_anonymous=include_anonymous, limit=limit, offset=offset
        )
        total = await self.answer_repository.count_by_author(
            author_id, include_anonymous=include_anonymous
        )
        return answers, total

    async def count_for_questions(
        self, question_ids: list[QuestionId]
    ) -> dict[QuestionId, int]:
        """Answer count per question."""
        return await self.answer_repository.count_by_questions(question_ids)

    async def save_answer(self, answer: Answer) -> Answer:
        """Save an answer."""
        with logfire.span("answer_service.save_answer", answer_id=str(answer.id)):
            return await self.answer_repository.save(answer)

    async def update_answer(
        self, answer_id: AnswerId, actor: Actor, content: str
    ) -> Answer:
        """Edit an answer's text.

        Editing does not touch votes or acceptance.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the actor is neither author nor moderator
            pydantic.ValidationError: If the new content is invalid
        """
        with logfire.span(
            "answer_service.update_answer",
            answer_id=str(answer_id),
            user_id=str(actor.user_id),
        ):
            answer = await self.get_answer(answer_id)
            if not answer.can_be_edited_by(actor.user_id, actor.role):
                logfire.warn(
                    "Unauthorized answer edit",
                    answer_id=str(answer_id),
                    user_id=str(actor.user_id),
                )
                raise NotAuthorizedError("answer", str(answer_id), str(actor.user_id))

            saved = await self.answer_repository.save(answer.edited(content=content))
            logfire.info("Answer edited", answer_id=str(answer_id))
            return saved

    async def toggle_vote(
        self, answer_id: AnswerId, voter_id: UserId, kind: VoteKind
    ) -> VoteOutcome:
        """Toggle a vote on an answer.

        Raises:
            NotFoundError: If the answer disappeared
            SelfVoteError: If the voter authored the answer
        """
        outcome = await self.answer_repository.toggle_vote(answer_id, voter_id, kind)
        if outcome is None:
            raise NotFoundError("Answer", str(answer_id))
        return outcome

    async def delete_answer(self, answer_id: AnswerId, actor: Actor) -> Answer:
        """Delete an answer with its comments and votes.

        Deleting the accepted answer clears the question's accepted answer
        and reopens it.

        Args:
            answer_id: Answer to delete
            actor: User requesting the deletion

        Returns:
            The deleted answer

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the actor is neither author nor moderator
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer_id),
            user_id=str(actor.user_id),
        ):
            answer = await self.get_answer(answer_id)
            if not answer.can_be_deleted_by(actor.user_id, actor.role):
                logfire.warn(
                    "Unauthorized answer delete",
                    answer_id=str(answer_id),
                    user_id=str(actor.user_id),
                )
                raise NotAuthorizedError("answer", str(answer_id), str(actor.user_id))

            question = await self.question_repository.find_by_id(answer.question_id)
            if question and question.accepted_answer_id == answer.id:
                status = (
                    QuestionStatus.OPEN
                    if question.status == QuestionStatus.ANSWERED
                    else question.status
                )
                await self.question_repository.save(
                    question.model_copy(
                        update={
                            "accepted_answer_id": None,
                            "status": status,
                            "last_activity_at": utc_now(),
                        }
                    )
                )
                logfire.info(
                    "Accepted answer deleted, question reopened",
                    question_id=str(question.id),
                )

            await self.comment_repository.delete_by_targets(
                VotableType.ANSWER, [answer_id]
            )
            await self.answer_repository.delete(answer_id)
            logfire.info("Answer deleted", answer_id=str(answer_id))
            return answer
