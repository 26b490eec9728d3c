"""PostgreSQL implementation of Answer repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Answer, VoteOutcome
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId, VotableType, VoteKind
from stackit.persistence.mappers import answer_to_dict, row_to_answer
from stackit.persistence.repository.vote import PostgresVoteStore
from stackit.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session
        self.votes = PostgresVoteStore(session, VotableType.ANSWER)

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID, with its voters."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        up, down = (await self.votes.load([answer_id]))[answer_id]
        return row_to_answer(dict(row), up, down)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question, accepted first then oldest first."""
        with logfire.span(
            "answer_repository.find_by_question", question_id=str(question_id)
        ):
            stmt = (
                select(answers_table)
                .where(answers_table.c.question_id == question_id)
                .order_by(
                    answers_table.c.is_accepted.desc(),
                    answers_table.c.created_at.asc(),
                )
            )
            result = await self.session.execute(stmt)
            rows = [dict(row) for row in result.mappings().all()]

            # Batch load voters for all answers
            voters = await self.votes.load([row["id"] for row in rows])
            return [row_to_answer(row, *voters[row["id"]]) for row in rows]

    async def find_by_author(
        self,
        author_id: UserId,
        include_anonymous: bool = True,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Answer]:
        """Find answers written by a user, newest first."""
        stmt = select(answers_table).where(answers_table.c.author_id == author_id)
        if not include_anonymous:
            stmt = stmt.where(answers_table.c.is_anonymous.is_(False))
        stmt = stmt.order_by(desc(answers_table.c.created_at)).limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        rows = [dict(row) for row in result.mappings().all()]
        voters = await self.votes.load([row["id"] for row in rows])
        return [row_to_answer(row, *voters[row["id"]]) for row in rows]

    async def count_by_author(
        self, author_id: UserId, include_anonymous: bool = True
    ) -> int:
        """Count answers written by a user."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.author_id == author_id)
        )
        if not include_anonymous:
            stmt = stmt.where(answers_table.c.is_anonymous.is_(False))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_questions(
        self, question_ids: list[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers per question in one query."""
        counts = {question_id: 0 for question_id in question_ids}
        if not question_ids:
            return counts

        stmt = (
            select(answers_table.c.question_id, func.count().label("answers"))
            .where(answers_table.c.question_id.in_(question_ids))
            .group_by(answers_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            counts[QuestionId(row.question_id)] = row.answers
        return counts

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update), leaving its votes untouched."""
        answer_dict = answer_to_dict(answer)

        stmt = select(answers_table.c.id).where(answers_table.c.id == answer.id)
        result = await self.session.execute(stmt)

        if result.first():
            stmt = (
                answers_table.update()
                .where(answers_table.c.id == answer.id)
                .values(**answer_dict)
            )
        else:
            stmt = answers_table.insert().values(**answer_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer and the votes on it."""
        await self.votes.delete_for([answer_id])
        stmt = delete(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question, with their votes."""
        stmt = select(answers_table.c.id).where(
            answers_table.c.question_id == question_id
        )
        result = await self.session.execute(stmt)
        answer_ids = list(result.scalars().all())
        if not answer_ids:
            return 0

        await self.votes.delete_for(answer_ids)
        await self.session.execute(
            delete(answers_table).where(answers_table.c.id.in_(answer_ids))
        )
        await self.session.flush()
        return len(answer_ids)

    async def toggle_vote(
        self, answer_id: AnswerId, voter_id: UserId, kind: VoteKind
    ) -> Optional[VoteOutcome]:
        """Toggle one voter's vote on an answer."""
        answer = await self.find_by_id(answer_id)
        if answer is None:
            return None
        return await self.votes.toggle(answer, voter_id, kind)
