"""User domain service."""

import logfire

from stackit.domain.error import NotFoundError
from stackit.domain.model import User
from stackit.domain.model.common import utc_now
from stackit.domain.repository import UserRepository
from stackit.domain.scoring import LedgerEvent, LedgerReceipt
from stackit.domain.value import Handle, LeaderboardMetric, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_handle(self, handle: Handle) -> User | None:
        """Get user by handle.

        Args:
            handle: User handle

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_handle", handle=handle.root):
            user = await self.user_repository.find_by_handle(handle)
            if user:
                logfire.info("User found", handle=handle.root, user_id=str(user.id))
            else:
                logfire.warn("User not found", handle=handle.root)
            return user

    async def save_user(self, user: User) -> User:
        """Create or update a user's profile record."""
        return await self.user_repository.save(user)

    async def apply_ledger_event(
        self, user_id: UserId, event: LedgerEvent
    ) -> LedgerReceipt:
        """Apply a ledger event to a user.

        Args:
            user_id: User to credit
            event: Point and counter changes

        Returns:
            Receipt with the updated user and newly earned achievements

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "user_service.apply_ledger_event",
            user_id=str(user_id),
            reason=event.reason,
            points=event.points,
        ):
            receipt = await self.user_repository.apply_ledger_event(
                user_id, event, utc_now()
            )
            if receipt is None:
                logfire.warn("Ledger event for missing user", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            logfire.info(
                "Ledger event applied",
                user_id=str(user_id),
                reason=event.reason,
                points=receipt.user.points,
                level=receipt.user.level.value,
                earned=[name.value for name in receipt.earned],
            )
            return receipt

    async def get_leaderboard(
        self, metric: LeaderboardMetric, limit: int
    ) -> list[User]:
        """Get the top users for a metric.

        Args:
            metric: Ranking metric
            limit: Maximum number of users

        Returns:
            Users, best first
        """
        with logfire.span(
            "user_service.get_leaderboard", metric=metric.value, limit=limit
        ):
            return await self.user_repository.find_leaders(metric, limit)
