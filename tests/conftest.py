"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from stackit.domain.model import Answer, Question, User
from stackit.domain.model.common import utc_now
from stackit.domain.value import (
    AnswerId,
    Handle,
    QuestionId,
    UserId,
    UserRole,
)

# Keep spans local; the app instruments FastAPI and SQLAlchemy on import
logfire.configure(send_to_logfire=False, console=False)


def make_user(
    handle: str | None = None,
    points: int = 0,
    role: UserRole = UserRole.USER,
    allow_anonymous: bool = True,
    created_at: datetime | None = None,
) -> User:
    """Build a user with a unique handle."""
    return User(
        id=UserId(uuid4()),
        handle=Handle(handle or f"user_{uuid4().hex[:8]}"),
        role=role,
        allow_anonymous=allow_anonymous,
        points=points,
        created_at=created_at or utc_now(),
    )


def make_question(author_id: UserId, **overrides) -> Question:
    """Build a valid question by ``author_id``."""
    fields = {
        "id": QuestionId(uuid4()),
        "author_id": author_id,
        "title": "How do I reverse a list in Python?",
        "content": "I have a list of integers and need it in reverse order.",
    }
    fields.update(overrides)
    return Question(**fields)


def make_answer(question: Question, author_id: UserId, **overrides) -> Answer:
    """Build a valid answer to ``question`` by ``author_id``."""
    fields = {
        "id": AnswerId(uuid4()),
        "question_id": question.id,
        "author_id": author_id,
        "content": "Use reversed() or slice it with [::-1].",
    }
    fields.update(overrides)
    return Answer(**fields)
