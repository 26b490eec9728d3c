"""In-memory notification repository for testing."""

from datetime import datetime
from typing import Optional

from stackit.domain.model.notification import Notification
from stackit.domain.repository.notification import NotificationRepository
from stackit.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def find_for_recipient(
        self,
        recipient_id: UserId,
        limit: int,
        offset: int = 0,
        unread_only: bool = False,
    ) -> list[Notification]:
        """List a user's notifications, newest first."""
        inbox = [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not (unread_only and n.is_read)
        ]
        inbox.sort(key=lambda n: n.created_at, reverse=True)
        return inbox[offset : offset + limit]

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        return sum(
            1
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not n.is_read
        )

    async def mark_read(
        self, notification_id: NotificationId, now: datetime
    ) -> Optional[Notification]:
        """Mark one notification as read."""
        notification = self._notifications.get(notification_id)
        if notification is None or notification.is_read:
            return notification
        updated = notification.model_copy(update={"is_read": True, "read_at": now})
        self._notifications[notification_id] = updated
        return updated

    async def mark_all_read(self, recipient_id: UserId, now: datetime) -> int:
        """Mark every unread notification of a user as read."""
        changed = 0
        for notification in list(self._notifications.values()):
            if notification.recipient_id == recipient_id and not notification.is_read:
                self._notifications[notification.id] = notification.model_copy(
                    update={"is_read": True, "read_at": now}
                )
                changed += 1
        return changed
