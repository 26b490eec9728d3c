"""List notifications use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from stackit.domain.model import Notification, NotificationData
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationType, Priority, UserId


class NotificationView(BaseModel):
    """Notification as returned to its recipient."""

    notification_id: str
    sender_id: str | None
    type: NotificationType
    title: str
    message: str
    data: NotificationData
    priority: Priority
    is_read: bool
    read_at: datetime | None
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationView":
        """Build the view from a stored notification."""
        return cls(
            notification_id=str(notification.id),
            sender_id=str(notification.sender_id) if notification.sender_id else None,
            type=notification.type,
            title=notification.title,
            message=notification.message,
            data=notification.data,
            priority=notification.priority,
            is_read=notification.is_read,
            read_at=notification.read_at,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # User ID from authenticated user
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    unread_only: bool = False


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationView]
    unread_count: int


class ListNotificationsUseCase:
    """Use case for reading a user's notification inbox."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow."""
        user_id = UserId(UUID(request.user_id))
        notifications = await self.notification_service.list_for_user(
            user_id,
            limit=request.limit,
            offset=request.offset,
            unread_only=request.unread_only,
        )
        unread = await self.notification_service.count_unread(user_id)
        return ListNotificationsResponse(
            notifications=[NotificationView.from_notification(n) for n in notifications],
            unread_count=unread,
        )


class GetUnreadCountRequest(BaseModel):
    """Unread count request."""

    user_id: str


class GetUnreadCountResponse(BaseModel):
    """Unread count response."""

    unread_count: int


class GetUnreadCountUseCase:
    """Use case for the unread notification badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetUnreadCountRequest) -> GetUnreadCountResponse:
        """Execute unread count flow."""
        count = await self.notification_service.count_unread(
            UserId(UUID(request.user_id))
        )
        return GetUnreadCountResponse(unread_count=count)
