"""User repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from stackit.domain.model.user import User
from stackit.domain.scoring import LedgerEvent, LedgerReceipt
from stackit.domain.value import Handle, LeaderboardMetric, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle.

        Args:
            handle: The user's handle

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def apply_ledger_event(
        self, user_id: UserId, event: LedgerEvent, now: datetime
    ) -> Optional[LedgerReceipt]:
        """Atomically apply a ledger event to a user.

        The only write path for points, counters and achievements. The
        read, the pure ledger update and the write happen without any other
        writer to the same user in between.

        Args:
            user_id: The user's unique identifier
            event: Point and counter changes
            now: Timestamp for the update

        Returns:
            The receipt, or None if the user does not exist
        """
        pass

    @abstractmethod
    async def find_leaders(self, metric: LeaderboardMetric, limit: int) -> list[User]:
        """Find the top users for a leaderboard metric.

        Args:
            metric: Column to rank by, highest first
            limit: Maximum number of users

        Returns:
            Users ordered by the metric, ties broken by earliest signup
        """
        pass
