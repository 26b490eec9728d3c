"""Unit tests for JWTService."""

from uuid import uuid4

import pytest

from stackit.config import AuthSettings
from stackit.domain.service import JWTService
from stackit.domain.value import UserRole
from stackit.util.jwt import JWTError


@pytest.fixture
def jwt_service():
    return JWTService(AuthSettings(jwt_secret="test-secret"))


class TestJWTService:
    """Tests for token round trips and actor resolution."""

    def test_actor_from_valid_token(self, jwt_service):
        user_id = str(uuid4())
        token = jwt_service.create_token(user_id, "ada.l", UserRole.MODERATOR)

        actor = jwt_service.get_actor_from_token(token)

        assert str(actor.user_id) == user_id
        assert actor.role == UserRole.MODERATOR

    def test_missing_or_garbage_token_is_anonymous(self, jwt_service):
        assert jwt_service.get_actor_from_token(None) is None
        assert jwt_service.get_actor_from_token("not-a-token") is None

    def test_token_signed_with_other_secret(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret="another-secret"))
        token = other.create_token(str(uuid4()), "ada.l")

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)

    def test_expired_token(self):
        service = JWTService(AuthSettings(jwt_secret="test-secret", jwt_expiry_days=-1))
        token = service.create_token(str(uuid4()), "ada.l")

        with pytest.raises(JWTError):
            service.verify_token(token)
