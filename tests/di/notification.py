"""Mock notification providers for testing."""

from dishka import Scope, provide

from stackit.adapter.notification import RecordingNotificationDispatcher
from stackit.domain.service import NotificationDispatcher
from stackit.util.di.infrastructure.notification import NotificationProvider


class MockNotificationProvider(NotificationProvider):
    """Mock notification provider that records events in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_recording_dispatcher(self) -> RecordingNotificationDispatcher:
        """Provide the recording dispatcher, so tests can inspect it."""
        return RecordingNotificationDispatcher()

    @provide(scope=Scope.APP)
    def get_dispatcher(
        self, recorder: RecordingNotificationDispatcher
    ) -> NotificationDispatcher:
        """Provide the recording dispatcher behind the domain contract."""
        return recorder
