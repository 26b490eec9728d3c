"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stackit.domain.model.answer import Answer
from stackit.domain.model.vote import VoteOutcome
from stackit.domain.value import AnswerId, QuestionId, UserId, VoteKind


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Vote membership is owned by ``toggle_vote``: ``save`` never rewrites the
    upvoter and downvoter sets of an existing answer.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer with its vote sets if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question.

        Args:
            question_id: The question's unique identifier

        Returns:
            Answers ordered with the accepted one first, then by creation time
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        include_anonymous: bool = True,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Answer]:
        """Find answers written by a user, newest first.

        Args:
            author_id: The author's user ID
            include_anonymous: Whether to include answers posted anonymously
            limit: Maximum number of answers to return
            offset: Number of answers to skip

        Returns:
            The author's answers
        """
        pass

    @abstractmethod
    async def count_by_author(
        self, author_id: UserId, include_anonymous: bool = True
    ) -> int:
        """Count answers written by a user."""
        pass

    @abstractmethod
    async def count_by_questions(
        self, question_ids: list[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers per question.

        Args:
            question_ids: Questions to count answers for

        Returns:
            Answer count for every requested question, zero included
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer and the votes on it.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            True if an answer was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question, with their votes.

        Args:
            question_id: The question's unique identifier

        Returns:
            Number of answers deleted
        """
        pass

    @abstractmethod
    async def toggle_vote(
        self, answer_id: AnswerId, voter_id: UserId, kind: VoteKind
    ) -> Optional[VoteOutcome]:
        """Atomically toggle one voter's vote on an answer.

        Args:
            answer_id: The answer being voted on
            voter_id: The voter
            kind: Requested vote kind

        Returns:
            The outcome, or None if the answer does not exist

        Raises:
            SelfVoteError: If the voter authored the answer
        """
        pass
