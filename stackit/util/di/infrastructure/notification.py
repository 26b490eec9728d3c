"""Notification infrastructure providers."""

from dishka import Scope, provide

from stackit.adapter.notification import StoredNotificationDispatcher
from stackit.domain.repository import NotificationRepository
from stackit.domain.service import NotificationDispatcher
from stackit.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification dispatch component base."""

    __mock_component__ = "notifications"


class ProdNotificationProvider(NotificationProvider):
    """Production provider that delivers notifications to the stored inbox."""

    __is_mock__ = False

    @provide(scope=Scope.REQUEST)
    def get_dispatcher(
        self, notification_repository: NotificationRepository
    ) -> NotificationDispatcher:
        """Provide inbox dispatcher bound to the request's repository."""
        return StoredNotificationDispatcher(notification_repository)
