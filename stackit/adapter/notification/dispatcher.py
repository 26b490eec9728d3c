"""Notification dispatchers."""

import logfire
from sqlalchemy.exc import SQLAlchemyError

from stackit.adapter.error import NotificationDispatchError
from stackit.domain.model import NotificationEvent
from stackit.domain.repository import NotificationRepository
from stackit.domain.service.notification_service import (
    NotificationDispatcher,
    notification_from_event,
)


class StoredNotificationDispatcher(NotificationDispatcher):
    """Dispatcher that writes events to the recipient's inbox.

    Uses the request's notification repository, so stored notifications
    commit together with the scoring change that produced them.
    """

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize dispatcher.

        Args:
            notification_repository: Inbox storage
        """
        self.notification_repository = notification_repository

    async def dispatch(self, event: NotificationEvent) -> None:
        """Store the event as an unread notification.

        Raises:
            NotificationDispatchError: If the inbox write fails
        """
        notification = notification_from_event(event)
        try:
            await self.notification_repository.save(notification)
        except SQLAlchemyError as e:
            raise NotificationDispatchError(
                f"Failed to store {event.type.value} notification: {e}"
            ) from e

        logfire.info(
            "Notification stored",
            notification_id=str(notification.id),
            recipient_id=str(event.recipient_id),
            type=event.type.value,
        )


class RecordingNotificationDispatcher(NotificationDispatcher):
    """Dispatcher that keeps events in memory.

    Used by tests and local runs without an inbox. Set ``fail_with`` to make
    every dispatch raise.
    """

    def __init__(self) -> None:
        self.events: list[NotificationEvent] = []
        self.fail_with: Exception | None = None

    async def dispatch(self, event: NotificationEvent) -> None:
        """Record the event, or raise ``fail_with`` if set."""
        if self.fail_with is not None:
            raise self.fail_with
        self.events.append(event)
