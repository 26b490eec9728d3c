"""Notification repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from stackit.domain.model.notification import Notification
from stackit.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for a user's notification inbox."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification.

        A failed insert must leave the surrounding transaction usable.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_for_recipient(
        self,
        recipient_id: UserId,
        limit: int,
        offset: int = 0,
        unread_only: bool = False,
    ) -> list[Notification]:
        """List a user's notifications, newest first.

        Args:
            recipient_id: Inbox owner
            limit: Page size
            offset: Number of notifications to skip
            unread_only: Only return unread notifications

        Returns:
            Page of notifications
        """
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        pass

    @abstractmethod
    async def mark_read(
        self, notification_id: NotificationId, now: datetime
    ) -> Optional[Notification]:
        """Mark one notification as read.

        Already-read notifications keep their original ``read_at``.

        Returns:
            The updated notification, or None if it does not exist
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId, now: datetime) -> int:
        """Mark every unread notification of a user as read.

        Returns:
            Number of notifications that changed
        """
        pass
