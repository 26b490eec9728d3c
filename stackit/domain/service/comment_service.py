"""Comment domain service."""

from collections import defaultdict
from uuid import UUID

import logfire

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import Comment, Question
from stackit.domain.model.common import utc_now
from stackit.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
)
from stackit.domain.value import (
    Actor,
    AnswerId,
    CommentId,
    QuestionId,
    VotableType,
)

from .base import Service


class CommentService(Service):
    """Domain service for comments on questions and answers.

    Comments carry no points. Adding one counts as activity on the
    question it belongs to.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            question_repository: Question repository (target lookup, activity)
            answer_repository: Answer repository (target lookup)
        """
        self.comment_repository = comment_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def _question_of(self, target_type: VotableType, target_id: UUID) -> Question:
        """Load the question a comment target belongs to.

        Raises:
            NotFoundError: If the target or its question does not exist
        """
        if target_type == VotableType.ANSWER:
            answer = await self.answer_repository.find_by_id(AnswerId(target_id))
            if answer is None:
                raise NotFoundError("Answer", str(target_id))
            question_id = answer.question_id
        else:
            question_id = QuestionId(target_id)

        question = await self.question_repository.find_by_id(question_id)
        if question is None:
            raise NotFoundError("Question", str(question_id))
        return question

    async def add_comment(self, comment: Comment) -> Comment:
        """Attach a comment to an existing question or answer.

        Raises:
            NotFoundError: If the commented item does not exist
        """
        with logfire.span(
            "comment_service.add_comment",
            target_type=comment.target_type.value,
            target_id=str(comment.target_id),
        ):
            question = await self._question_of(comment.target_type, comment.target_id)
            saved = await self.comment_repository.save(comment)
            await self.question_repository.save(
                question.model_copy(update={"last_activity_at": utc_now()})
            )
            logfire.info("Comment added", comment_id=str(saved.id))
            return saved

    async def remove_comment(
        self,
        target_type: VotableType,
        target_id: UUID,
        comment_id: CommentId,
        actor: Actor,
    ) -> Comment:
        """Delete a comment from a question or answer.

        Args:
            target_type: Kind of item the comment is on
            target_id: Item the comment is expected on
            comment_id: Comment to delete
            actor: User requesting the deletion

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment does not exist on that item
            NotAuthorizedError: If the actor is neither its author nor a moderator
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if (
            comment is None
            or comment.target_type != target_type
            or comment.target_id != target_id
        ):
            raise NotFoundError("Comment", str(comment_id))

        if not comment.can_be_deleted_by(actor.user_id, actor.role):
            logfire.warn(
                "Unauthorized comment delete",
                comment_id=str(comment_id),
                user_id=str(actor.user_id),
            )
            raise NotAuthorizedError("comment", str(comment_id), str(actor.user_id))

        await self.comment_repository.delete(comment_id)
        logfire.info("Comment deleted", comment_id=str(comment_id))
        return comment

    async def comments_for(
        self, target_type: VotableType, target_ids: list[UUID]
    ) -> dict[UUID, list[Comment]]:
        """Group the comments on several items by item, oldest first."""
        grouped: dict[UUID, list[Comment]] = defaultdict(list)
        for comment in await self.comment_repository.find_by_targets(
            target_type, target_ids
        ):
            grouped[comment.target_id].append(comment)
        return grouped
