"""Notification domain service and dispatch contract."""

from abc import ABC, abstractmethod
from uuid import uuid4

import logfire

from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import Notification, NotificationEvent
from stackit.domain.model.common import utc_now
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, UserId

from .base import Service


class NotificationDispatcher(ABC):
    """Sink for user-visible notification events.

    Implementations live in the adapter layer. Callers treat dispatch as
    fire-and-forget; an implementation may raise and the caller decides
    whether that matters.
    """

    @abstractmethod
    async def dispatch(self, event: NotificationEvent) -> None:
        """Deliver a notification event.

        Args:
            event: Notification descriptor
        """
        pass


def notification_from_event(event: NotificationEvent) -> Notification:
    """Create a new unread inbox entry for an event."""
    return Notification.from_event(NotificationId(uuid4()), event)


class NotificationService(Service):
    """Domain service for dispatching and reading notifications."""

    def __init__(
        self,
        dispatcher: NotificationDispatcher,
        notification_repository: NotificationRepository,
    ) -> None:
        """Initialize notification service.

        Args:
            dispatcher: Notification dispatcher
            notification_repository: Notification repository (inbox reads)
        """
        self.dispatcher = dispatcher
        self.notification_repository = notification_repository

    async def dispatch(self, event: NotificationEvent) -> None:
        """Hand an event to the dispatcher.

        Raises:
            Whatever the dispatcher raises
        """
        with logfire.span(
            "notification_service.dispatch",
            recipient_id=str(event.recipient_id),
            type=event.type.value,
        ):
            await self.dispatcher.dispatch(event)

    async def list_for_user(
        self,
        user_id: UserId,
        limit: int,
        offset: int = 0,
        unread_only: bool = False,
    ) -> list[Notification]:
        """List a user's notifications, newest first."""
        with logfire.span(
            "notification_service.list_for_user", user_id=str(user_id), limit=limit
        ):
            return await self.notification_repository.find_for_recipient(
                user_id, limit=limit, offset=offset, unread_only=unread_only
            )

    async def count_unread(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        return await self.notification_repository.count_unread(user_id)

    async def mark_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification:
        """Mark one of the user's notifications as read.

        Raises:
            NotFoundError: If the notification does not exist
            NotAuthorizedError: If it belongs to another user
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            user_id=str(user_id),
        ):
            notification = await self.notification_repository.find_by_id(
                notification_id
            )
            if not notification:
                raise NotFoundError("Notification", str(notification_id))
            if notification.recipient_id != user_id:
                logfire.warn(
                    "Attempt to read another user's notification",
                    notification_id=str(notification_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "notification", str(notification_id), str(user_id)
                )

            updated = await self.notification_repository.mark_read(
                notification_id, utc_now()
            )
            if updated is None:
                raise NotFoundError("Notification", str(notification_id))
            return updated

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark all of a user's notifications as read.

        Returns:
            Number of notifications that changed
        """
        with logfire.span("notification_service.mark_all_read", user_id=str(user_id)):
            count = await self.notification_repository.mark_all_read(user_id, utc_now())
            logfire.info("Notifications marked read", user_id=str(user_id), count=count)
            return count
