"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from stackit.domain.model.user import User
from stackit.domain.repository.user import UserRepository
from stackit.domain.scoring import LedgerEvent, LedgerReceipt, apply_ledger_event
from stackit.domain.value import Handle, LeaderboardMetric, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle."""
        for user in self._users.values():
            if user.handle == handle:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def apply_ledger_event(
        self, user_id: UserId, event: LedgerEvent, now: datetime
    ) -> Optional[LedgerReceipt]:
        """Apply a ledger event.

        Read and write happen without an await in between, so concurrent
        tasks cannot interleave.
        """
        user = self._users.get(user_id)
        if user is None:
            return None
        receipt = apply_ledger_event(user, event, now)
        self._users[user_id] = receipt.user
        return receipt

    async def find_leaders(self, metric: LeaderboardMetric, limit: int) -> list[User]:
        """Find the top users for a leaderboard metric."""

        def value(user: User) -> int:
            if metric is LeaderboardMetric.POINTS:
                return user.points
            return getattr(user.stats, metric.value)

        ranked = sorted(
            self._users.values(), key=lambda user: (-value(user), user.created_at)
        )
        return ranked[:limit]
