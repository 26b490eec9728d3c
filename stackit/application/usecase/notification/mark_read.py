"""Mark notifications read use cases."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, UserId

from .list_notifications import NotificationView


class MarkNotificationReadRequest(BaseModel):
    """Mark one notification read request."""

    notification_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class MarkNotificationReadUseCase:
    """Use case for marking one notification as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark notification read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: MarkNotificationReadRequest) -> NotificationView:
        """Execute mark read flow.

        Raises:
            NotFoundError: If the notification does not exist
            NotAuthorizedError: If it belongs to another user
        """
        notification = await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return NotificationView.from_notification(notification)


class MarkAllNotificationsReadRequest(BaseModel):
    """Mark all notifications read request."""

    user_id: str  # User ID from authenticated user


class MarkAllNotificationsReadResponse(BaseModel):
    """Mark all notifications read response."""

    updated: int


class MarkAllNotificationsReadUseCase:
    """Use case for clearing a user's unread notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark all read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: MarkAllNotificationsReadRequest
    ) -> MarkAllNotificationsReadResponse:
        """Execute mark all read flow."""
        updated = await self.notification_service.mark_all_read(
            UserId(UUID(request.user_id))
        )
        return MarkAllNotificationsReadResponse(updated=updated)
