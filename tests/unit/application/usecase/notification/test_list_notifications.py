"""Unit tests for the notification inbox use cases."""

from uuid import uuid4

import pytest

from stackit.application.usecase.notification.list_notifications import (
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsUseCase,
)
from stackit.application.usecase.notification.mark_read import (
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)
from stackit.domain.model import Notification, NotificationEvent
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import (
    AchievementName,
    Level,
    NotificationId,
    NotificationType,
    UserId,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed_inbox(unit_env, recipient: UserId) -> list[Notification]:
    repo = await unit_env.get(NotificationRepository)
    events = [
        NotificationEvent.achievement_earned(recipient, AchievementName.FIRST_QUESTION),
        NotificationEvent.level_up(recipient, Level.INTERMEDIATE, 500),
        NotificationEvent.achievement_earned(recipient, AchievementName.HELPER),
    ]
    return [
        await repo.save(Notification.from_event(NotificationId(uuid4()), event))
        for event in events
    ]


class TestNotificationInboxUseCases:
    """Tests for listing and marking notifications."""

    @pytest.mark.asyncio
    async def test_list_newest_first_with_unread_count(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListNotificationsUseCase)
        recipient = UserId(uuid4())
        seeded = await _seed_inbox(unit_env, recipient)

        # Act
        response = await use_case.execute(
            ListNotificationsRequest(user_id=str(recipient), limit=2)
        )

        # Assert
        assert response.unread_count == 3
        assert len(response.notifications) == 2
        created = [n.created_at for n in response.notifications]
        assert created == sorted(created, reverse=True)
        assert {n.notification_id for n in response.notifications} <= {
            str(n.id) for n in seeded
        }

    @pytest.mark.asyncio
    async def test_mark_one_then_all(self, unit_env):
        # Arrange
        mark_one = await unit_env.get(MarkNotificationReadUseCase)
        mark_all = await unit_env.get(MarkAllNotificationsReadUseCase)
        unread = await unit_env.get(GetUnreadCountUseCase)
        recipient = UserId(uuid4())
        seeded = await _seed_inbox(unit_env, recipient)

        # Act
        view = await mark_one.execute(
            MarkNotificationReadRequest(
                notification_id=str(seeded[0].id), user_id=str(recipient)
            )
        )
        after_one = await unread.execute(GetUnreadCountRequest(user_id=str(recipient)))
        result = await mark_all.execute(
            MarkAllNotificationsReadRequest(user_id=str(recipient))
        )
        after_all = await unread.execute(GetUnreadCountRequest(user_id=str(recipient)))

        # Assert
        assert view.is_read is True
        assert view.type == NotificationType.ACHIEVEMENT_EARNED
        assert after_one.unread_count == 2
        assert result.updated == 2
        assert after_all.unread_count == 0

    @pytest.mark.asyncio
    async def test_unread_only_filter(self, unit_env):
        use_case = await unit_env.get(ListNotificationsUseCase)
        repo = await unit_env.get(NotificationRepository)
        recipient = UserId(uuid4())
        seeded = await _seed_inbox(unit_env, recipient)
        await repo.mark_read(seeded[1].id, seeded[1].created_at)

        response = await use_case.execute(
            ListNotificationsRequest(user_id=str(recipient), unread_only=True)
        )

        assert len(response.notifications) == 2
        assert all(not n.is_read for n in response.notifications)
