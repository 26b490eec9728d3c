"""End-to-end tests for user profile and leaderboard endpoints."""

import pytest
from fastapi.testclient import TestClient

from stackit.domain.repository import UserRepository
from stackit.interface.api.app import create_app
from stackit.util.di.container import setup_di
from tests.conftest import make_user
from tests.di import build_test_container


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, container)
    with TestClient(app_instance) as test_client:
        yield test_client


class TestUserProfileEndpoints:
    """End-to-end tests for public user endpoints."""

    def test_get_nonexistent_user_profile(self, client):
        """Should return 404 for nonexistent user."""
        # Act
        response = client.get("/users/nobody")

        # Assert
        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    def test_leaderboard_is_not_a_handle(self, client, container):
        """The leaderboard route wins over the profile route."""
        # Arrange
        async def _seed():
            user_repo = await container.get(UserRepository)
            await user_repo.save(make_user(handle="top", points=900))
            await user_repo.save(make_user(handle="second", points=40))

        client.portal.call(_seed)

        # Act
        response = client.get("/users/leaderboard", params={"limit": 1})

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert [e["handle"] for e in body["points"]] == ["top"]
        assert body["points"][0]["level"] == "Intermediate"
        assert body["points"][0]["rank"] == 1

    def test_leaderboard_rejects_zero_limit(self, client):
        response = client.get("/users/leaderboard", params={"limit": 0})

        assert response.status_code == 422

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
