"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.scoring import LedgerEvent, LedgerReceipt, apply_ledger_event
from stackit.domain.value import Handle, LeaderboardMetric, UserId
from stackit.persistence.mappers import row_to_user, user_to_dict
from stackit.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle.

        Args:
            handle: Handle to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.handle == handle.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        # Check if user exists
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            # Update
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
            await self.session.execute(stmt)
        else:
            # Insert
            stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return user

    async def apply_ledger_event(
        self, user_id: UserId, event: LedgerEvent, now: datetime
    ) -> Optional[LedgerReceipt]:
        """Apply a ledger event under a row lock.

        The user row stays locked until the request transaction ends, so two
        events for the same user are applied one after the other.

        Args:
            user_id: User to update
            event: Point and counter changes
            now: Timestamp for the update

        Returns:
            The receipt, or None if the user does not exist
        """
        stmt = select(users_table).where(users_table.c.id == user_id).with_for_update()
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        receipt = apply_ledger_event(row_to_user(dict(row)), event, now)

        values = user_to_dict(receipt.user)
        del values["id"], values["created_at"]
        await self.session.execute(
            users_table.update().where(users_table.c.id == user_id).values(**values)
        )
        await self.session.flush()

        logfire.info(
            "Ledger event applied",
            user_id=str(user_id),
            reason=event.reason,
            points=event.points,
            total=receipt.user.points,
        )
        return receipt

    async def find_leaders(self, metric: LeaderboardMetric, limit: int) -> list[User]:
        """Find the top users for a leaderboard metric.

        Args:
            metric: Column to rank by, highest first
            limit: Maximum number of users

        Returns:
            Users ordered by the metric, ties broken by earliest signup
        """
        column = users_table.c[metric.value]
        stmt = (
            select(users_table)
            .order_by(column.desc(), users_table.c.created_at.asc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]
