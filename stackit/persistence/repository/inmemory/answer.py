"""In-memory answer repository for testing."""

from typing import Optional

from stackit.domain.model.answer import Answer
from stackit.domain.model.vote import VoteOutcome
from stackit.domain.repository.answer import AnswerRepository
from stackit.domain.scoring import toggle_vote
from stackit.domain.value import AnswerId, QuestionId, UserId, VoteKind


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question, accepted first then oldest first."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        return sorted(answers, key=lambda a: (not a.is_accepted, a.created_at))

    def _by_author(self, author_id: UserId, include_anonymous: bool) -> list[Answer]:
        return [
            a
            for a in self._answers.values()
            if a.author_id == author_id and (include_anonymous or not a.is_anonymous)
        ]

    async def find_by_author(
        self,
        author_id: UserId,
        include_anonymous: bool = True,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Answer]:
        """Find answers written by a user, newest first."""
        answers = self._by_author(author_id, include_anonymous)
        answers.sort(key=lambda a: a.created_at, reverse=True)
        return answers[offset : offset + limit]

    async def count_by_author(
        self, author_id: UserId, include_anonymous: bool = True
    ) -> int:
        """Count answers written by a user."""
        return len(self._by_author(author_id, include_anonymous))

    async def count_by_questions(
        self, question_ids: list[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers per question."""
        counts = {question_id: 0 for question_id in question_ids}
        for answer in self._answers.values():
            if answer.question_id in counts:
                counts[answer.question_id] += 1
        return counts

    async def save(self, answer: Answer) -> Answer:
        """Save or update an answer, keeping existing vote sets."""
        existing = self._answers.get(answer.id)
        if existing is not None:
            answer = answer.model_copy(
                update={
                    "upvoters": existing.upvoters,
                    "downvoters": existing.downvoters,
                }
            )
        self._answers[answer.id] = answer
        return answer

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        return self._answers.pop(answer_id, None) is not None

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question."""
        doomed = [a.id for a in self._answers.values() if a.question_id == question_id]
        for answer_id in doomed:
            del self._answers[answer_id]
        return len(doomed)

    async def toggle_vote(
        self, answer_id: AnswerId, voter_id: UserId, kind: VoteKind
    ) -> Optional[VoteOutcome]:
        """Toggle one voter's vote on an answer."""
        answer = self._answers.get(answer_id)
        if answer is None:
            return None
        updated, outcome = toggle_vote(answer, voter_id, kind)
        self._answers[answer_id] = updated
        return outcome
