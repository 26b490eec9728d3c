"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from stackit.domain.model.question import Question
from stackit.domain.model.vote import VoteOutcome
from stackit.domain.value import (
    QuestionCategory,
    QuestionId,
    QuestionStatus,
    UserId,
    VoteKind,
)


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    MOST_VOTED = "most_voted"  # net votes DESC
    MOST_ANSWERED = "most_answered"  # answer count DESC
    ACTIVE = "active"  # last_activity_at DESC


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Vote membership is owned by ``toggle_vote``: ``save`` never rewrites the
    upvoter and downvoter sets of an existing question.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question with its vote sets if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        category: Optional[QuestionCategory] = None,
        status: Optional[QuestionStatus] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination.

        Args:
            sort: Sort order
            category: Only questions in this category
            status: Only questions with this status
            tag: Only questions carrying this tag
            search: Case-insensitive substring of the title or content
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            Questions matching the criteria, with their vote sets
        """
        pass

    @abstractmethod
    async def count(
        self,
        category: Optional[QuestionCategory] = None,
        status: Optional[QuestionStatus] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count questions matching the given filters."""
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        include_anonymous: bool = True,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions asked by a user, newest first.

        Args:
            author_id: The author's user ID
            include_anonymous: Whether to include questions posted anonymously
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            The author's questions
        """
        pass

    @abstractmethod
    async def count_by_author(
        self, author_id: UserId, include_anonymous: bool = True
    ) -> int:
        """Count questions asked by a user."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question and the votes on it.

        Args:
            question_id: The question's unique identifier

        Returns:
            True if a question was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def toggle_vote(
        self, question_id: QuestionId, voter_id: UserId, kind: VoteKind
    ) -> Optional[VoteOutcome]:
        """Atomically toggle one voter's vote on a question.

        Only the voter's own membership is read and written, so concurrent
        voters on the same question never overwrite each other.

        Args:
            question_id: The question being voted on
            voter_id: The voter
            kind: Requested vote kind

        Returns:
            The outcome, or None if the question does not exist

        Raises:
            SelfVoteError: If the voter authored the question
        """
        pass
