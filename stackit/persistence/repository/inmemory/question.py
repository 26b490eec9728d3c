"""In-memory question repository for testing."""

from typing import Optional

from stackit.domain.model.question import Question
from stackit.domain.model.vote import VoteOutcome
from stackit.domain.repository.answer import AnswerRepository
from stackit.domain.repository.question import QuestionRepository, QuestionSortOrder
from stackit.domain.scoring import toggle_vote
from stackit.domain.value import (
    QuestionCategory,
    QuestionId,
    QuestionStatus,
    UserId,
    VoteKind,
)


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing.

    Args:
        answer_repository: Source of answer counts for the most-answered sort
    """

    def __init__(self, answer_repository: Optional[AnswerRepository] = None) -> None:
        self._questions: dict[QuestionId, Question] = {}
        self._answers = answer_repository

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    def _matching(
        self,
        category: Optional[QuestionCategory],
        status: Optional[QuestionStatus],
        tag: Optional[str],
        search: Optional[str],
    ) -> list[Question]:
        questions = list(self._questions.values())
        if category is not None:
            questions = [q for q in questions if q.category == category]
        if status is not None:
            questions = [q for q in questions if q.status == status]
        if tag:
            questions = [q for q in questions if tag.lower() in q.tags]
        if search:
            needle = search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.content.lower()
            ]
        return questions

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
        """Find questions with filtering and pagination."""
        questions = self._matching(category, status, tag, search)

        # Newest first breaks ties for the count-based orders
        questions.sort(key=lambda q: q.created_at, reverse=True)
        if sort == QuestionSortOrder.OLDEST:
            questions.reverse()
        elif sort == QuestionSortOrder.ACTIVE:
            questions.sort(key=lambda q: q.last_activity_at, reverse=True)
        elif sort == QuestionSortOrder.MOST_VOTED:
            questions.sort(key=lambda q: q.vote_count, reverse=True)
        elif sort == QuestionSortOrder.MOST_ANSWERED:
            counts: dict[QuestionId, int] = {}
            if self._answers is not None:
                counts = await self._answers.count_by_questions(
                    [q.id for q in questions]
                )
            questions.sort(key=lambda q: counts.get(q.id, 0), reverse=True)

        # Paginate
        return questions[offset : offset + limit]

    async def count(
        self,
        category: Optional[QuestionCategory] = None,
        status: Optional[QuestionStatus] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count questions matching the given filters."""
        return len(self._matching(category, status, tag, search))

    def _by_author(self, author_id: UserId, include_anonymous: bool) -> list[Question]:
        return [
            q
            for q in self._questions.values()
            if q.author_id == author_id and (include_anonymous or not q.is_anonymous)
        ]

    async def find_by_author(
        self,
        author_id: UserId,
        include_anonymous: bool = True,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions asked by a user, newest first."""
        questions = self._by_author(author_id, include_anonymous)
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[offset : offset + limit]

    async def count_by_author(
        self, author_id: UserId, include_anonymous: bool = True
    ) -> int:
        """Count questions asked by a user."""
        return len(self._by_author(author_id, include_anonymous))

    async def save(self, question: Question) -> Question:
        """Save or update a question.

        Existing vote sets are kept; only ``toggle_vote`` changes them.
        """
        existing = self._questions.get(question.id)
        if existing is not None:
            question = question.model_copy(
                update={
                    "upvoters": existing.upvoters,
                    "downvoters": existing.downvoters,
                }
            )
        self._questions[question.id] = question
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question."""
        return self._questions.pop(question_id, None) is not None

    async def toggle_vote(
        self, question_id: QuestionId, voter_id: UserId, kind: VoteKind
    ) -> Optional[VoteOutcome]:
        """Toggle one voter's vote on a question."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        updated, outcome = toggle_vote(question, voter_id, kind)
        self._questions[question_id] = updated
        return outcome
