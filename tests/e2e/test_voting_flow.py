"""End-to-end tests for asking, answering, voting and accepting."""

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
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, container)
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def users(client, container):
    """Seed two users and return ``{handle: auth_token}``."""
    jwt_service = JWTService(Settings().auth)
    seeded = [make_user(handle="asker"), make_user(handle="helper")]

    async def _seed():
        user_repo = await container.get(UserRepository)
        for user in seeded:
            await user_repo.save(user)

    client.portal.call(_seed)
    return {
        user.handle.root: jwt_service.create_token(str(user.id), user.handle.root)
        for user in seeded
    }


def _ask(client, token) -> str:
    response = client.post(
        "/questions",
        json={
            "title": "How do I merge two dicts?",
            "content": "I want one dict with the keys of both inputs.",
            "tags": ["python"],
        },
        cookies={"auth_token": token},
    )
    assert response.status_code == 201
    return response.json()["question_id"]


def _answer(client, token, question_id) -> str:
    response = client.post(
        f"/questions/{question_id}/answers",
        json={"content": "Use the | operator: merged = a | b"},
        cookies={"auth_token": token},
    )
    assert response.status_code == 201
    return response.json()["answer_id"]


class TestVotingFlow:
    """End-to-end tests for the scoring API.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_ask_without_auth_fails(self, client):
        """Should return 401 when not authenticated."""
        # Act
        response = client.post(
            "/questions",
            json={
                "title": "Can I ask without logging in?",
                "content": "This request carries no auth cookie at all.",
            },
        )

        # Assert
        assert response.status_code == 401
        assert "Authentication required" in response.json()["detail"]

    def test_ask_credits_author(self, client, users):
        # Act
        question_id = _ask(client, users["asker"])
        profile = client.get("/users/asker")

        # Assert
        assert profile.status_code == 200
        body = profile.json()
        assert body["points"] == 5
        assert body["stats"]["questions_asked"] == 1
        assert [a["name"] for a in body["achievements"]] == ["First Question"]
        assert client.get(f"/questions/{question_id}").status_code == 200

    def test_upvote_then_retract_answer(self, client, users):
        """Upvote credits the answer author and retracting takes it back."""
        # Arrange
        question_id = _ask(client, users["asker"])
        answer_id = _answer(client, users["helper"], question_id)
        before = client.get("/users/helper").json()["points"]

        # Act
        upvote = client.post(
            f"/answers/{answer_id}/vote",
            json={"vote_type": "up"},
            cookies={"auth_token": users["asker"]},
        )
        after_upvote = client.get("/users/helper").json()["points"]
        retract = client.post(
            f"/answers/{answer_id}/vote",
            json={"vote_type": "up"},
            cookies={"auth_token": users["asker"]},
        )
        after_retract = client.get("/users/helper").json()["points"]

        # Assert
        assert upvote.status_code == 200
        assert upvote.json()["vote_count"] == 1
        assert upvote.json()["direction"] == "added"
        assert after_upvote == before + 5
        assert retract.json()["direction"] == "retracted"
        assert retract.json()["user_vote"] is None
        assert after_retract == before

    def test_self_vote_rejected(self, client, users):
        question_id = _ask(client, users["asker"])

        response = client.post(
            f"/questions/{question_id}/vote",
            json={"vote_type": "up"},
            cookies={"auth_token": users["asker"]},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "self_vote"

    def test_only_author_accepts(self, client, users):
        # Arrange
        question_id = _ask(client, users["asker"])
        answer_id = _answer(client, users["helper"], question_id)
        path = f"/questions/{question_id}/accept-answer/{answer_id}"

        # Act
        forbidden = client.post(path, cookies={"auth_token": users["helper"]})
        accepted = client.post(path, cookies={"auth_token": users["asker"]})

        # Assert
        assert forbidden.status_code == 403
        assert forbidden.json()["code"] == "not_author"
        assert accepted.status_code == 200
        assert accepted.json()["question_status"] == "answered"
        assert accepted.json()["accepted_answer_id"] == answer_id

        question = client.get(f"/questions/{question_id}").json()
        assert question["answers"][0]["is_accepted"] is True

    def test_vote_on_missing_question(self, client, users):
        response = client.post(
            "/questions/00000000-0000-0000-0000-000000000000/vote",
            json={"vote_type": "down"},
            cookies={"auth_token": users["asker"]},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    def test_malformed_id_is_unprocessable(self, client, users):
        response = client.post(
            "/questions/not-a-uuid/vote",
            json={"vote_type": "up"},
            cookies={"auth_token": users["asker"]},
        )

        assert response.status_code == 422
