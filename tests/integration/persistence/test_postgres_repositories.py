"""Integration tests for the PostgreSQL repositories.

Assumes postgres is running with migrations applied (DATABASE__URL).
Enable with RUN_INTEGRATION_TESTS=1.
"""

import asyncio
import os
from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from stackit.adapter.notification import RecordingNotificationDispatcher
from stackit.config import ScoringSettings
from stackit.domain.model import Comment, Notification, NotificationEvent
from stackit.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    QuestionSortOrder,
    UserRepository,
)
from stackit.domain.scoring import LedgerEvent
from stackit.domain.service import (
    AnswerService,
    NotificationService,
    QuestionService,
    ScoringService,
    UserService,
)
from stackit.domain.value import (
    AchievementName,
    CommentId,
    Level,
    LeaderboardMetric,
    NotificationId,
    QuestionCategory,
    VotableType,
    VoteDirection,
    VoteKind,
)
from stackit.persistence.database import transactional_session
from stackit.persistence.repository import (
    PostgresAnswerRepository,
    PostgresCommentRepository,
    PostgresNotificationRepository,
    PostgresQuestionRepository,
    PostgresUserRepository,
)
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.getenv("RUN_INTEGRATION_TESTS"),
        reason="needs a migrated postgres (set RUN_INTEGRATION_TESTS=1)",
    ),
]

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence", "notifications"})

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestPostgresUserRepository:
    """Ledger writes and leaderboard reads against postgres."""

    @pytest.mark.asyncio
    async def test_apply_ledger_event_persists_stats(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        assert isinstance(user_repo, PostgresUserRepository)
        user = await user_repo.save(make_user(points=495))

        # Act
        receipt = await user_repo.apply_ledger_event(
            user.id,
            LedgerEvent(reason="question_asked", points=5, questions_asked=1),
            NOW,
        )
        stored = await user_repo.find_by_id(user.id)

        # Assert
        assert receipt.leveled_up is True
        assert stored.points == 500
        assert stored.level == Level.INTERMEDIATE
        assert stored.stats.questions_asked == 1
        assert stored.has_achievement(AchievementName.FIRST_QUESTION)

    @pytest.mark.asyncio
    async def test_find_by_handle_and_leaders(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.save(make_user(points=10**6))

        found = await user_repo.find_by_handle(user.handle)
        leaders = await user_repo.find_leaders(LeaderboardMetric.POINTS, 1)

        assert found.id == user.id
        assert leaders[0].id == user.id


class TestPostgresVotes:
    """Vote rows behind the question and answer repositories."""

    @pytest.mark.asyncio
    async def test_toggle_round_trip(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        question_repo = await integration_env.get(QuestionRepository)
        assert isinstance(question_repo, PostgresQuestionRepository)
        author = await user_repo.save(make_user())
        voter = await user_repo.save(make_user())
        question = await question_repo.save(make_question(author.id))

        # Act
        added = await question_repo.toggle_vote(question.id, voter.id, VoteKind.UP)
        flipped = await question_repo.toggle_vote(question.id, voter.id, VoteKind.DOWN)
        stored = await question_repo.find_by_id(question.id)
        retracted = await question_repo.toggle_vote(
            question.id, voter.id, VoteKind.DOWN
        )

        # Assert
        assert added.direction == VoteDirection.ADDED
        assert flipped.direction == VoteDirection.FLIPPED
        assert stored.downvoters == frozenset({voter.id})
        assert stored.upvoters == frozenset()
        assert retracted.vote_count == 0

    @pytest.mark.asyncio
    async def test_concurrent_first_votes_by_one_voter_serialise(self, integration_env):
        # Arrange: committed rows, visible to the two racing sessions
        factory = await integration_env.get(async_sessionmaker[AsyncSession])
        async with transactional_session(factory) as session:
            author = await PostgresUserRepository(session).save(make_user())
            voter = await PostgresUserRepository(session).save(make_user())
            question = await PostgresQuestionRepository(session).save(
                make_question(author.id)
            )

        async def upvote():
            async with transactional_session(factory) as session:
                return await PostgresQuestionRepository(session).toggle_vote(
                    question.id, voter.id, VoteKind.UP
                )

        # Act
        outcomes = await asyncio.gather(upvote(), upvote())
        async with transactional_session(factory) as session:
            stored = await PostgresQuestionRepository(session).find_by_id(question.id)

        # Assert: the second request retracts what the first added
        assert sorted(o.direction.value for o in outcomes) == ["added", "retracted"]
        assert sum(o.credit_delta for o in outcomes) == 0
        assert stored.upvoters == frozenset()

    @pytest.mark.asyncio
    async def test_delete_question_removes_answers(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        question_repo = await integration_env.get(QuestionRepository)
        answer_repo = await integration_env.get(AnswerRepository)
        author = await user_repo.save(make_user())
        question = await question_repo.save(make_question(author.id))
        answer = await answer_repo.save(make_answer(question, author.id))

        removed = await answer_repo.delete_by_question(question.id)
        deleted = await question_repo.delete(question.id)

        assert removed == 1
        assert deleted is True
        assert await answer_repo.find_by_id(answer.id) is None


class TestPostgresQuestionListing:
    """Question listing filters, sort orders and per-author pages."""

    @pytest.mark.asyncio
    async def test_filters_and_sort_orders(self, integration_env):
        # Arrange: a tag unique to this test keeps other rows out
        user_repo = await integration_env.get(UserRepository)
        question_repo = await integration_env.get(QuestionRepository)
        answer_repo = await integration_env.get(AnswerRepository)
        author = await user_repo.save(make_user())
        voter = await user_repo.save(make_user())
        tag = f"t{uuid4().hex[:12]}"
        plain = await question_repo.save(make_question(author.id, tags=[tag]))
        voted = await question_repo.save(
            make_question(
                author.id,
                tags=[tag],
                category=QuestionCategory.DESIGN,
                title="Which palette reads best in dark mode?",
            )
        )
        answered = await question_repo.save(make_question(author.id, tags=[tag]))
        await question_repo.toggle_vote(voted.id, voter.id, VoteKind.UP)
        await answer_repo.save(make_answer(answered, voter.id))
        await answer_repo.save(make_answer(answered, voter.id))

        # Act
        most_voted = await question_repo.find_all(
            sort=QuestionSortOrder.MOST_VOTED, tag=tag
        )
        most_answered = await question_repo.find_all(
            sort=QuestionSortOrder.MOST_ANSWERED, tag=tag
        )
        design = await question_repo.find_all(
            category=QuestionCategory.DESIGN, tag=tag
        )
        searched = await question_repo.find_all(tag=tag, search="PALETTE")
        page = await question_repo.find_all(
            sort=QuestionSortOrder.OLDEST, tag=tag, limit=2, offset=1
        )
        counts = await answer_repo.count_by_questions([plain.id, answered.id])

        # Assert
        assert most_voted[0].id == voted.id
        assert most_voted[0].vote_count == 1
        assert most_answered[0].id == answered.id
        assert [q.id for q in design] == [voted.id]
        assert [q.id for q in searched] == [voted.id]
        assert [q.id for q in page] == [voted.id, answered.id]
        assert await question_repo.count(tag=tag) == 3
        assert counts == {plain.id: 0, answered.id: 2}

    @pytest.mark.asyncio
    async def test_author_pages_hide_anonymous_on_request(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        question_repo = await integration_env.get(QuestionRepository)
        author = await user_repo.save(make_user())
        await question_repo.save(make_question(author.id))
        await question_repo.save(make_question(author.id, is_anonymous=True))

        public = await question_repo.find_by_author(author.id, include_anonymous=False)
        everything = await question_repo.find_by_author(author.id)

        assert len(public) == 1
        assert len(everything) == 2
        assert await question_repo.count_by_author(author.id, False) == 1


class TestPostgresComments:
    """Comment storage on questions and answers."""

    @pytest.mark.asyncio
    async def test_comment_round_trip_and_cascade(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        question_repo = await integration_env.get(QuestionRepository)
        comment_repo = await integration_env.get(CommentRepository)
        author = await user_repo.save(make_user())
        question = await question_repo.save(make_question(author.id))
        first = await comment_repo.save(
            Comment(
                id=CommentId(uuid4()),
                target_type=VotableType.QUESTION,
                target_id=question.id,
                author_id=author.id,
                content="Which Python version?",
            )
        )
        await comment_repo.save(
            Comment(
                id=CommentId(uuid4()),
                target_type=VotableType.QUESTION,
                target_id=question.id,
                author_id=author.id,
                content="Never mind, found it.",
            )
        )

        # Act
        stored = await comment_repo.find_by_id(first.id)
        listed = await comment_repo.find_by_targets(VotableType.QUESTION, [question.id])
        on_answers = await comment_repo.find_by_targets(
            VotableType.ANSWER, [question.id]
        )
        removed = await comment_repo.delete_by_targets(
            VotableType.QUESTION, [question.id]
        )

        # Assert
        assert stored.content == "Which Python version?"
        assert stored.target_id == question.id
        assert len(listed) == 2
        assert on_answers == []
        assert removed == 2
        assert await comment_repo.find_by_id(first.id) is None


class TestPostgresNotifications:
    """Inbox storage."""

    @pytest.mark.asyncio
    async def test_inbox_round_trip(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        repo = await integration_env.get(NotificationRepository)
        user = await user_repo.save(make_user())
        notification = await repo.save(
            Notification.from_event(
                NotificationId(uuid4()),
                NotificationEvent.level_up(user.id, Level.EXPERT, 5000),
            )
        )

        unread = await repo.count_unread(user.id)
        marked = await repo.mark_read(notification.id, NOW)

        assert unread == 1
        assert marked.is_read is True
        assert marked.data.level == Level.EXPERT
        assert await repo.count_unread(user.id) == 0


def _scoring_service(session) -> ScoringService:
    """Scoring coordinator wired to postgres repositories on one session."""
    questions = PostgresQuestionRepository(session)
    answers = PostgresAnswerRepository(session)
    comments = PostgresCommentRepository(session)
    return ScoringService(
        question_service=QuestionService(
            question_repository=questions,
            answer_repository=answers,
            comment_repository=comments,
        ),
        answer_service=AnswerService(
            answer_repository=answers,
            question_repository=questions,
            comment_repository=comments,
        ),
        user_service=UserService(user_repository=PostgresUserRepository(session)),
        notification_service=NotificationService(
            dispatcher=RecordingNotificationDispatcher(),
            notification_repository=PostgresNotificationRepository(session),
        ),
        scoring_settings=ScoringSettings(),
    )


class TestScoringTransaction:
    """A scoring event commits all of its writes or none."""

    @pytest.mark.asyncio
    async def test_ledger_failure_rolls_back_vote_row(
        self, integration_env, monkeypatch
    ):
        # Arrange
        factory = await integration_env.get(async_sessionmaker[AsyncSession])
        async with transactional_session(factory) as session:
            author = await PostgresUserRepository(session).save(make_user())
            voter = await PostgresUserRepository(session).save(make_user())
            question = await PostgresQuestionRepository(session).save(
                make_question(author.id)
            )

        async def crash(self, user_id, event, now):
            raise RuntimeError("connection lost after vote write")

        monkeypatch.setattr(PostgresUserRepository, "apply_ledger_event", crash)

        # Act
        with pytest.raises(RuntimeError, match="connection lost"):
            async with transactional_session(factory) as session:
                await _scoring_service(session).cast_vote(
                    VotableType.QUESTION, question.id, voter.id, VoteKind.UP
                )
        monkeypatch.undo()

        # Assert
        async with transactional_session(factory) as session:
            stored = await PostgresQuestionRepository(session).find_by_id(question.id)
            stored_author = await PostgresUserRepository(session).find_by_id(author.id)
        assert stored.upvoters == frozenset()
        assert stored_author.points == 0
        assert stored_author.stats.total_upvotes == 0
