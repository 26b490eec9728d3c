"""Unit tests for ledger primitives."""

from datetime import date, datetime, timezone
from uuid import uuid4

import pytest

from stackit.domain.error import SelfVoteError
from stackit.domain.model import UserStats
from stackit.domain.scoring import (
    LedgerEvent,
    advance_streak,
    apply_ledger_event,
    credit_points,
    toggle_vote,
    vote_transition,
)
from stackit.domain.value import (
    AchievementName,
    Level,
    UserId,
    VoteDirection,
    VoteKind,
    level_for_points,
)
from tests.conftest import make_answer, make_question, make_user

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestVoteTransition:
    """Tests for vote_transition."""

    def test_no_vote_adds(self):
        transition = vote_transition(None, VoteKind.UP)

        assert transition.direction == VoteDirection.ADDED
        assert transition.current is VoteKind.UP
        assert transition.vote_delta == 1
        assert transition.credit_delta == 1

    def test_same_kind_retracts(self):
        transition = vote_transition(VoteKind.DOWN, VoteKind.DOWN)

        assert transition.direction == VoteDirection.RETRACTED
        assert transition.current is None
        assert transition.vote_delta == 1
        assert transition.credit_delta == 0

    def test_opposite_kind_flips(self):
        transition = vote_transition(VoteKind.UP, VoteKind.DOWN)

        assert transition.direction == VoteDirection.FLIPPED
        assert transition.current is VoteKind.DOWN
        assert transition.vote_delta == -2
        assert transition.credit_delta == -1


class TestToggleVote:
    """Tests for toggle_vote on votable content."""

    def test_upvote_adds_voter(self):
        """First upvote should put the voter in upvoters only."""
        # Arrange
        author = make_user()
        question = make_question(author.id)
        voter_id = UserId(uuid4())

        # Act
        updated, outcome = toggle_vote(question, voter_id, VoteKind.UP)

        # Assert
        assert updated.upvoters == frozenset({voter_id})
        assert updated.downvoters == frozenset()
        assert outcome.vote_count == 1
        assert outcome.upvote_landed is True
        # Input record is untouched
        assert question.vote_count == 0

    def test_repeat_upvote_retracts(self):
        """Same vote twice should leave no vote behind."""
        # Arrange
        author = make_user()
        answer = make_answer(make_question(author.id), UserId(uuid4()))
        voter_id = UserId(uuid4())
        voted, _ = toggle_vote(answer, voter_id, VoteKind.UP)

        # Act
        updated, outcome = toggle_vote(voted, voter_id, VoteKind.UP)

        # Assert
        assert voter_id not in updated.upvoters
        assert voter_id not in updated.downvoters
        assert outcome.direction == VoteDirection.RETRACTED
        assert outcome.credit_delta == -1
        assert outcome.vote_count == 0

    def test_flip_moves_voter_between_sets(self):
        """Downvoting after an upvote should move the voter, never duplicate."""
        # Arrange
        author = make_user()
        question = make_question(author.id)
        voter_id = UserId(uuid4())
        voted, _ = toggle_vote(question, voter_id, VoteKind.UP)

        # Act
        updated, outcome = toggle_vote(voted, voter_id, VoteKind.DOWN)

        # Assert
        assert updated.upvoters == frozenset()
        assert updated.downvoters == frozenset({voter_id})
        assert outcome.direction == VoteDirection.FLIPPED
        assert outcome.vote_delta == -2
        assert outcome.vote_count == -1

    def test_vote_count_tracks_many_voters(self):
        """Vote count should be upvoters minus downvoters."""
        # Arrange
        author = make_user()
        question = make_question(author.id)

        # Act
        for _ in range(3):
            question, _ = toggle_vote(question, UserId(uuid4()), VoteKind.UP)
        question, outcome = toggle_vote(question, UserId(uuid4()), VoteKind.DOWN)

        # Assert
        assert outcome.vote_count == 2
        assert question.vote_count == len(question.upvoters) - len(question.downvoters)

    def test_self_vote_rejected(self):
        """Authors cannot vote on their own content."""
        # Arrange
        author = make_user()
        question = make_question(author.id)

        # Act & Assert
        with pytest.raises(SelfVoteError):
            toggle_vote(question, author.id, VoteKind.UP)


class TestCreditPoints:
    """Tests for credit_points and level derivation."""

    def test_credit_updates_level_in_same_step(self):
        """Crossing a threshold should change the level immediately."""
        # Arrange
        user = make_user(points=4995)
        assert user.level == Level.ADVANCED

        # Act
        updated = credit_points(user, 5, "answer_upvote")

        # Assert
        assert updated.points == 5000
        assert updated.level == Level.EXPERT

    def test_points_never_go_negative(self):
        """A debit larger than the balance should clamp at zero."""
        user = make_user(points=3)

        updated = credit_points(user, -10, "question_vote_retracted")

        assert updated.points == 0
        assert updated.level == Level.BEGINNER

    def test_credit_requires_reason(self):
        with pytest.raises(ValueError):
            credit_points(make_user(), 5, "")

    @pytest.mark.parametrize(
        ("points", "level"),
        [
            (0, Level.BEGINNER),
            (499, Level.BEGINNER),
            (500, Level.INTERMEDIATE),
            (1999, Level.INTERMEDIATE),
            (2000, Level.ADVANCED),
            (4999, Level.ADVANCED),
            (5000, Level.EXPERT),
            (9999, Level.EXPERT),
            (10000, Level.MASTER),
            (-5, Level.BEGINNER),
        ],
    )
    def test_level_boundaries(self, points, level):
        assert level_for_points(points) == level


class TestAdvanceStreak:
    """Tests for the calendar-day answer streak."""

    def test_first_answer_starts_streak(self):
        stats = advance_streak(UserStats(), date(2025, 3, 1))

        assert stats.answer_streak == 1
        assert stats.last_answer_date == date(2025, 3, 1)

    def test_next_day_extends_streak(self):
        stats = UserStats(answer_streak=3, last_answer_date=date(2025, 3, 1))

        updated = advance_streak(stats, date(2025, 3, 2))

        assert updated.answer_streak == 4

    def test_same_day_keeps_streak(self):
        stats = UserStats(answer_streak=3, last_answer_date=date(2025, 3, 1))

        updated = advance_streak(stats, date(2025, 3, 1))

        assert updated == stats

    def test_gap_restarts_streak(self):
        stats = UserStats(answer_streak=6, last_answer_date=date(2025, 3, 1))

        updated = advance_streak(stats, date(2025, 3, 3))

        assert updated.answer_streak == 1
        assert updated.last_answer_date == date(2025, 3, 3)

    def test_earlier_date_changes_nothing(self):
        stats = UserStats(answer_streak=2, last_answer_date=date(2025, 3, 5))

        updated = advance_streak(stats, date(2025, 3, 4))

        assert updated == stats


class TestApplyLedgerEvent:
    """Tests for apply_ledger_event."""

    def test_first_question_scenario(self):
        """Fresh user asking a question gets points, a counter and a badge."""
        # Arrange
        user = make_user()

        # Act
        receipt = apply_ledger_event(
            user,
            LedgerEvent(reason="question_asked", points=5, questions_asked=1),
            NOW,
        )

        # Assert
        assert receipt.user.points == 5
        assert receipt.user.stats.questions_asked == 1
        assert receipt.user.has_achievement(AchievementName.FIRST_QUESTION)
        assert receipt.earned == [AchievementName.FIRST_QUESTION]
        assert receipt.user.updated_at == NOW

    def test_reports_level_up(self):
        """Receipt should report the level before the event."""
        user = make_user(points=4995)

        receipt = apply_ledger_event(
            user, LedgerEvent(reason="answer_vote_added", points=5), NOW
        )

        assert receipt.previous_level == Level.ADVANCED
        assert receipt.user.level == Level.EXPERT
        assert receipt.leveled_up is True

    def test_counters_clamp_at_zero(self):
        """Reversals past zero should stop at zero."""
        user = make_user()

        receipt = apply_ledger_event(
            user,
            LedgerEvent(reason="answer_vote_retracted", points=-5, total_upvotes=-1),
            NOW,
        )

        assert receipt.user.points == 0
        assert receipt.user.stats.total_upvotes == 0
        assert receipt.leveled_up is False

    def test_answer_event_advances_streak(self):
        user = make_user()

        receipt = apply_ledger_event(
            user,
            LedgerEvent(
                reason="answer_given",
                points=10,
                answers_given=1,
                answered_on=date(2025, 3, 1),
            ),
            NOW,
        )

        assert receipt.user.stats.answers_given == 1
        assert receipt.user.stats.answer_streak == 1

    def test_empty_event(self):
        assert LedgerEvent(reason="noop").is_empty
        assert not LedgerEvent(reason="streak", answered_on=date(2025, 3, 1)).is_empty
