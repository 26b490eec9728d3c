"""End-to-end tests for the notification inbox."""

import pytest
from fastapi.testclient import TestClient

from stackit.config import Settings
from stackit.domain.repository import UserRepository
from stackit.domain.service import JWTService
from stackit.interface.api.app import create_app
from stackit.util.di.container import setup_di
from tests.conftest import make_user
from tests.di import build_test_container


@pytest.fixture
def container():
    # Stored inbox on top of in-memory repositories
    return build_test_container(unmock={"notifications"})


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, container)
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def tokens(client, container):
    jwt_service = JWTService(Settings().auth)
    seeded = [make_user(handle="asker"), make_user(handle="voter")]

    async def _seed():
        user_repo = await container.get(UserRepository)
        for user in seeded:
            await user_repo.save(user)

    client.portal.call(_seed)
    return {
        user.handle.root: jwt_service.create_token(str(user.id), user.handle.root)
        for user in seeded
    }


class TestNotificationInbox:
    """End-to-end tests for notification endpoints."""

    def test_inbox_requires_auth(self, client):
        response = client.get("/notifications")

        assert response.status_code == 401

    def test_upvote_lands_in_inbox(self, client, tokens):
        """Scoring events show up as unread notifications."""
        # Arrange
        asked = client.post(
            "/questions",
            json={
                "title": "Why is my asyncio task never awaited?",
                "content": "The task is created but its result never arrives.",
            },
            cookies={"auth_token": tokens["asker"]},
        )
        question_id = asked.json()["question_id"]
        client.post(
            f"/questions/{question_id}/vote",
            json={"vote_type": "up"},
            cookies={"auth_token": tokens["voter"]},
        )

        # Act
        inbox = client.get("/notifications", cookies={"auth_token": tokens["asker"]})

        # Assert
        assert inbox.status_code == 200
        body = inbox.json()
        types = [n["type"] for n in body["notifications"]]
        assert "question_upvoted" in types
        assert "achievement_earned" in types
        assert body["unread_count"] == len(types)

    def test_mark_read_flow(self, client, tokens):
        # Arrange
        client.post(
            "/questions",
            json={
                "title": "What does functools.wraps do?",
                "content": "My decorated functions lose their names and docs.",
            },
            cookies={"auth_token": tokens["asker"]},
        )
        inbox = client.get(
            "/notifications", cookies={"auth_token": tokens["asker"]}
        ).json()
        notification_id = inbox["notifications"][0]["notification_id"]

        # Act
        foreign = client.post(
            f"/notifications/{notification_id}/read",
            cookies={"auth_token": tokens["voter"]},
        )
        own = client.post(
            f"/notifications/{notification_id}/read",
            cookies={"auth_token": tokens["asker"]},
        )
        read_all = client.post(
            "/notifications/read-all", cookies={"auth_token": tokens["asker"]}
        )
        unread = client.get(
            "/notifications/unread-count", cookies={"auth_token": tokens["asker"]}
        )

        # Assert
        assert foreign.status_code == 403
        assert own.status_code == 200
        assert own.json()["is_read"] is True
        assert read_all.json()["updated"] == inbox["unread_count"] - 1
        assert unread.json()["unread_count"] == 0
