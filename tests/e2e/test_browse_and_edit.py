"""End-to-end tests for browsing, editing and commenting."""

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


def _ask(client, token, title="How do I merge two dicts?", **extra) -> str:
    response = client.post(
        "/questions",
        json={
            "title": title,
            "content": "I want one dict with the keys of both inputs.",
            "tags": ["python"],
            **extra,
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


class TestBrowseQuestions:
    """Question listing and per-user lists."""

    def test_list_with_filters_and_pages(self, client, users):
        # Arrange
        first = _ask(client, users["asker"])
        second = _ask(
            client,
            users["asker"],
            title="Which font pairs well with Inter?",
            category="design",
        )
        _answer(client, users["helper"], first)

        # Act
        newest = client.get("/questions")
        page = client.get("/questions", params={"sort": "oldest", "limit": 1})
        design = client.get("/questions", params={"category": "design"})
        answered = client.get("/questions", params={"sort": "most_answered"})
        closed = client.get("/questions", params={"status": "closed"})

        # Assert
        assert newest.status_code == 200
        assert [q["question_id"] for q in newest.json()["questions"]] == [
            second,
            first,
        ]
        assert page.json()["total"] == 2
        assert [q["question_id"] for q in page.json()["questions"]] == [first]
        assert [q["question_id"] for q in design.json()["questions"]] == [second]
        assert answered.json()["questions"][0]["answer_count"] == 1
        assert closed.json() == {"questions": [], "total": 0, "limit": 20, "offset": 0}

    def test_limit_out_of_range_rejected(self, client):
        response = client.get("/questions", params={"limit": 101})

        assert response.status_code == 422

    def test_user_lists(self, client, users):
        question_id = _ask(client, users["asker"])
        _ask(client, users["asker"], is_anonymous=True)
        _answer(client, users["helper"], question_id)

        public = client.get("/users/asker/questions")
        own = client.get(
            "/users/asker/questions", cookies={"auth_token": users["asker"]}
        )
        answers = client.get("/users/helper/answers")
        missing = client.get("/users/nobody_here/answers")

        assert public.json()["total"] == 1
        assert own.json()["total"] == 2
        assert answers.json()["answers"][0]["question_id"] == question_id
        assert missing.status_code == 404


class TestEditContent:
    """Editing questions and answers."""

    def test_author_edits_question(self, client, users):
        question_id = _ask(client, users["asker"])

        response = client.put(
            f"/questions/{question_id}",
            json={"title": "How do I merge two dicts in Python 3?", "tags": ["dict"]},
            cookies={"auth_token": users["asker"]},
        )
        shown = client.get(f"/questions/{question_id}").json()

        assert response.status_code == 200
        assert shown["title"] == "How do I merge two dicts in Python 3?"
        assert shown["tags"] == ["dict"]
        assert shown["edited_at"] is not None

    def test_edit_rules(self, client, users):
        question_id = _ask(client, users["asker"])
        answer_id = _answer(client, users["helper"], question_id)

        anonymous = client.put(f"/questions/{question_id}", json={"priority": "high"})
        stranger = client.put(
            f"/questions/{question_id}",
            json={"priority": "high"},
            cookies={"auth_token": users["helper"]},
        )
        too_short = client.put(
            f"/answers/{answer_id}",
            json={"content": "short"},
            cookies={"auth_token": users["helper"]},
        )
        edited = client.put(
            f"/answers/{answer_id}",
            json={"content": "Use {**a, **b} on older Python versions."},
            cookies={"auth_token": users["helper"]},
        )

        assert anonymous.status_code == 401
        assert stranger.status_code == 403
        assert stranger.json()["code"] == "not_authorized"
        assert too_short.status_code == 400
        assert too_short.json()["code"] == "validation_error"
        assert edited.status_code == 200
        assert edited.json()["content"] == "Use {**a, **b} on older Python versions."


class TestComments:
    """Commenting on questions and answers."""

    def test_comment_lifecycle(self, client, users):
        # Arrange
        question_id = _ask(client, users["asker"])
        answer_id = _answer(client, users["helper"], question_id)

        # Act
        created = client.post(
            f"/questions/{question_id}/comments",
            json={"content": "Which Python version?"},
            cookies={"auth_token": users["helper"]},
        )
        on_answer = client.post(
            f"/answers/{answer_id}/comments",
            json={"content": "Works, thanks!"},
            cookies={"auth_token": users["asker"]},
        )
        comment_id = created.json()["comment_id"]
        shown = client.get(f"/questions/{question_id}").json()
        forbidden = client.delete(
            f"/questions/{question_id}/comments/{comment_id}",
            cookies={"auth_token": users["asker"]},
        )
        deleted = client.delete(
            f"/questions/{question_id}/comments/{comment_id}",
            cookies={"auth_token": users["helper"]},
        )
        again = client.delete(
            f"/questions/{question_id}/comments/{comment_id}",
            cookies={"auth_token": users["helper"]},
        )

        # Assert
        assert created.status_code == 201
        assert on_answer.status_code == 201
        assert [c["content"] for c in shown["comments"]] == ["Which Python version?"]
        assert shown["answers"][0]["comments"][0]["content"] == "Works, thanks!"
        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        assert again.status_code == 404

    def test_comment_requires_auth(self, client, users):
        question_id = _ask(client, users["asker"])

        response = client.post(
            f"/questions/{question_id}/comments", json={"content": "Hi"}
        )

        assert response.status_code == 401
