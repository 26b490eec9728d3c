"""PostgreSQL implementation of Question repository."""

from typing import Any, Optional

import logfire
from sqlalchemy import Select, case, delete, desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Question, VoteOutcome
from stackit.domain.repository import QuestionRepository, QuestionSortOrder
from stackit.domain.value import (
    QuestionCategory,
    QuestionId,
    QuestionStatus,
    UserId,
    VotableType,
    VoteKind,
)
from stackit.persistence.mappers import question_to_dict, row_to_question
from stackit.persistence.repository.vote import PostgresVoteStore
from stackit.persistence.tables import answers_table, questions_table, votes_table


def _filtered(
    stmt: Select[Any],
    category: Optional[QuestionCategory],
    status: Optional[QuestionStatus],
    tag: Optional[str],
    search: Optional[str],
) -> Select[Any]:
    if category is not None:
        stmt = stmt.where(questions_table.c.category == category.value)
    if status is not None:
        stmt = stmt.where(questions_table.c.status == status.value)
    if tag:
        stmt = stmt.where(questions_table.c.tags.any(tag.lower()))
    if search:
        pattern = f"%{search}%"
        stmt = stmt.where(
            or_(
                questions_table.c.title.ilike(pattern),
                questions_table.c.content.ilike(pattern),
            )
        )
    return stmt


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository.

    Vote sets are read from the votes table and only ever written through
    ``toggle_vote``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session
        self.votes = PostgresVoteStore(session, VotableType.QUESTION)

    async def _with_voters(self, rows: list[dict[str, Any]]) -> list[Question]:
        voters = await self.votes.load([row["id"] for row in rows])
        return [row_to_question(row, *voters[row["id"]]) for row in rows]

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID, with its voters."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                logfire.warn("Question not found", question_id=str(question_id))
                return None

            up, down = (await self.votes.load([question_id]))[question_id]
            return row_to_question(dict(row), up, down)

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
        with logfire.span(
            "question_repository.find_all",
            sort=sort.value,
            category=category.value if category else None,
            status=status.value if status else None,
            tag=tag,
            limit=limit,
            offset=offset,
        ):
            stmt = _filtered(select(questions_table), category, status, tag, search)

            # Sort order
            if sort == QuestionSortOrder.NEWEST:
                stmt = stmt.order_by(desc(questions_table.c.created_at))
            elif sort == QuestionSortOrder.OLDEST:
                stmt = stmt.order_by(questions_table.c.created_at.asc())
            elif sort == QuestionSortOrder.ACTIVE:
                stmt = stmt.order_by(desc(questions_table.c.last_activity_at))
            elif sort == QuestionSortOrder.MOST_VOTED:
                net_votes = (
                    select(
                        votes_table.c.votable_id,
                        func.sum(
                            case(
                                (votes_table.c.vote_type == VoteKind.UP.value, 1),
                                else_=-1,
                            )
                        ).label("score"),
                    )
                    .where(votes_table.c.votable_type == VotableType.QUESTION.value)
                    .group_by(votes_table.c.votable_id)
                    .subquery()
                )
                stmt = stmt.outerjoin(
                    net_votes, net_votes.c.votable_id == questions_table.c.id
                ).order_by(
                    desc(func.coalesce(net_votes.c.score, 0)),
                    desc(questions_table.c.created_at),
                )
            elif sort == QuestionSortOrder.MOST_ANSWERED:
                answer_counts = (
                    select(
                        answers_table.c.question_id,
                        func.count().label("answers"),
                    )
                    .group_by(answers_table.c.question_id)
                    .subquery()
                )
                stmt = stmt.outerjoin(
                    answer_counts, answer_counts.c.question_id == questions_table.c.id
                ).order_by(
                    desc(func.coalesce(answer_counts.c.answers, 0)),
                    desc(questions_table.c.created_at),
                )

            # Pagination
            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            rows = [dict(row) for row in result.mappings().all()]
            if not rows:
                logfire.info("No questions found")
                return []

            questions = await self._with_voters(rows)
            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(
        self,
        category: Optional[QuestionCategory] = None,
        status: Optional[QuestionStatus] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count questions matching the given filters."""
        stmt = _filtered(
            select(func.count()).select_from(questions_table),
            category,
            status,
            tag,
            search,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self,
        author_id: UserId,
        include_anonymous: bool = True,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions asked by a user, newest first."""
        stmt = select(questions_table).where(questions_table.c.author_id == author_id)
        if not include_anonymous:
            stmt = stmt.where(questions_table.c.is_anonymous.is_(False))
        stmt = (
            stmt.order_by(desc(questions_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(stmt)
        rows = [dict(row) for row in result.mappings().all()]
        return await self._with_voters(rows)

    async def count_by_author(
        self, author_id: UserId, include_anonymous: bool = True
    ) -> int:
        """Count questions asked by a user."""
        stmt = (
            select(func.count())
            .select_from(questions_table)
            .where(questions_table.c.author_id == author_id)
        )
        if not include_anonymous:
            stmt = stmt.where(questions_table.c.is_anonymous.is_(False))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Save a question (create or update), leaving its votes untouched."""
        question_dict = question_to_dict(question)

        stmt = select(questions_table.c.id).where(questions_table.c.id == question.id)
        result = await self.session.execute(stmt)

        if result.first():
            stmt = (
                questions_table.update()
                .where(questions_table.c.id == question.id)
                .values(**question_dict)
            )
        else:
            stmt = questions_table.insert().values(**question_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question and the votes on it."""
        await self.votes.delete_for([question_id])
        stmt = delete(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def toggle_vote(
        self, question_id: QuestionId, voter_id: UserId, kind: VoteKind
    ) -> Optional[VoteOutcome]:
        """Toggle one voter's vote on a question."""
        question = await self.find_by_id(question_id)
        if question is None:
            return None
        return await self.votes.toggle(question, voter_id, kind)
