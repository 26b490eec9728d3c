"""Vote membership storage shared by the question and answer repositories.

A voter's membership in an item's upvoter or downvoter set is one row in
the votes table. Toggles lock only that row, so concurrent voters on the
same item never overwrite each other.
"""

from collections import defaultdict
from typing import Sequence, TypeVar
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.error import SelfVoteError
from stackit.domain.model import VotableContent, VoteOutcome
from stackit.domain.model.common import utc_now
from stackit.domain.scoring import VoteTransition, build_vote_outcome, vote_transition
from stackit.domain.value import UserId, VotableType, VoteKind
from stackit.persistence.tables import votes_table

VotableT = TypeVar("VotableT", bound=VotableContent)

VoterSets = tuple[list[UUID], list[UUID]]


class PostgresVoteStore:
    """Reads and toggles vote rows for one votable type."""

    def __init__(self, session: AsyncSession, votable_type: VotableType) -> None:
        """Initialize store with database session.

        Args:
            session: SQLAlchemy async session
            votable_type: Which kind of content this store votes on
        """
        self.session = session
        self.votable_type = votable_type

    async def load(self, content_ids: Sequence[UUID]) -> dict[UUID, VoterSets]:
        """Fetch upvoter and downvoter IDs for several items in one query.

        Args:
            content_ids: Item IDs

        Returns:
            Dict mapping item ID -> (upvoter IDs, downvoter IDs)
        """
        voters: dict[UUID, VoterSets] = defaultdict(lambda: ([], []))
        if not content_ids:
            return voters

        stmt = select(
            votes_table.c.votable_id, votes_table.c.user_id, votes_table.c.vote_type
        ).where(
            and_(
                votes_table.c.votable_type == self.votable_type.value,
                votes_table.c.votable_id.in_(content_ids),
            )
        )
        result = await self.session.execute(stmt)
        for row in result.fetchall():
            up, down = voters[row.votable_id]
            (up if row.vote_type == VoteKind.UP.value else down).append(row.user_id)
        return voters

    async def _locked_vote(self, voter_row) -> VoteKind | None:
        stmt = select(votes_table.c.vote_type).where(voter_row).with_for_update()
        current = (await self.session.execute(stmt)).scalar_one_or_none()
        return VoteKind(current) if current is not None else None

    async def toggle(
        self, content: VotableT, voter_id: UserId, kind: VoteKind
    ) -> VoteOutcome:
        """Toggle one voter's vote on an item.

        A first vote has no row to lock, so two concurrent first votes by
        the same voter both start from "no vote". The insert skips on
        conflict; the loser then locks the winner's committed row and
        toggles from there, exactly as if the requests had run in order.

        Args:
            content: Current snapshot of the item
            voter_id: The voter
            kind: Requested vote kind

        Returns:
            What changed, with the item's vote count after the toggle

        Raises:
            SelfVoteError: If the voter authored the item
        """
        if voter_id == content.author_id:
            raise SelfVoteError(self.votable_type.value, str(content.id))

        voter_row = and_(
            votes_table.c.votable_type == self.votable_type.value,
            votes_table.c.votable_id == content.id,
            votes_table.c.user_id == voter_id,
        )
        transition = vote_transition(await self._locked_vote(voter_row), kind)

        if transition.previous is None:
            result = await self.session.execute(
                insert(votes_table)
                .values(
                    votable_type=self.votable_type.value,
                    votable_id=content.id,
                    user_id=voter_id,
                    vote_type=kind.value,
                )
                .on_conflict_do_nothing(constraint="uq_votes_voter")
                .returning(votes_table.c.id)
            )
            if result.scalar_one_or_none() is None:
                logfire.info(
                    "Concurrent first vote, toggling from stored row",
                    votable_id=str(content.id),
                    voter_id=str(voter_id),
                )
                transition = vote_transition(await self._locked_vote(voter_row), kind)
                await self._write(voter_row, transition)
        else:
            await self._write(voter_row, transition)
        await self.session.flush()

        up, down = (await self.load([content.id]))[content.id]
        updated = content.model_copy(
            update={
                "upvoters": frozenset(UserId(v) for v in up),
                "downvoters": frozenset(UserId(v) for v in down),
            }
        )
        return build_vote_outcome(updated, voter_id, transition)

    async def _write(self, voter_row, transition: VoteTransition) -> None:
        """Apply a retract or flip to an existing vote row."""
        if transition.current is None:
            await self.session.execute(delete(votes_table).where(voter_row))
        else:
            await self.session.execute(
                update(votes_table)
                .where(voter_row)
                .values(vote_type=transition.current.value, updated_at=utc_now())
            )

    async def delete_for(self, content_ids: Sequence[UUID]) -> int:
        """Remove every vote on the given items.

        Args:
            content_ids: Item IDs

        Returns:
            Number of vote rows removed
        """
        if not content_ids:
            return 0

        stmt = delete(votes_table).where(
            and_(
                votes_table.c.votable_type == self.votable_type.value,
                votes_table.c.votable_id.in_(content_ids),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
