"""Ledger primitives: vote toggling, point credits and streaks.

Everything here is a pure function over immutable domain records. Loading
and saving is the repositories' job; deciding which event happened is the
scoring coordinator's.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, TypeVar

from pydantic import Field

from stackit.domain.error import SelfVoteError
from stackit.domain.model.content import VotableContent
from stackit.domain.model.user import User, UserStats
from stackit.domain.model.vote import VoteOutcome
from stackit.domain.scoring.achievements import award_achievements
from stackit.domain.value import (
    AchievementName,
    Level,
    UserId,
    VoteDirection,
    VoteKind,
    level_for_points,
)
from stackit.domain.value.common import ValueObject

VotableT = TypeVar("VotableT", bound=VotableContent)

_VOTE_WEIGHT: dict[Optional[VoteKind], int] = {
    VoteKind.UP: 1,
    VoteKind.DOWN: -1,
    None: 0,
}

__all__ = [
    "LedgerEvent",
    "LedgerReceipt",
    "VoteTransition",
    "advance_streak",
    "apply_ledger_event",
    "build_vote_outcome",
    "credit_points",
    "level_for_points",
    "toggle_vote",
    "vote_transition",
]


@dataclass(frozen=True)
class VoteTransition:
    """One voter's membership change on one item."""

    requested: VoteKind
    previous: Optional[VoteKind]
    current: Optional[VoteKind]
    direction: VoteDirection

    @property
    def vote_delta(self) -> int:
        """Change in the item's vote count."""
        return _VOTE_WEIGHT[self.current] - _VOTE_WEIGHT[self.previous]

    @property
    def credit_delta(self) -> int:
        """+1 when the voter's upvote lands, -1 when it leaves, else 0."""
        return int(self.current is VoteKind.UP) - int(self.previous is VoteKind.UP)


def vote_transition(current: Optional[VoteKind], requested: VoteKind) -> VoteTransition:
    """Decide what a toggle does given the voter's current vote.

    Same kind again retracts, the opposite kind flips, no vote adds.
    """
    if current is requested:
        return VoteTransition(requested, current, None, VoteDirection.RETRACTED)
    if current is None:
        return VoteTransition(requested, None, requested, VoteDirection.ADDED)
    return VoteTransition(requested, current, requested, VoteDirection.FLIPPED)


def build_vote_outcome(
    content: VotableContent, voter_id: UserId, transition: VoteTransition
) -> VoteOutcome:
    """Describe a transition already applied to ``content``."""
    return VoteOutcome(
        votable_type=content.votable_type,
        content_id=content.id,
        voter_id=voter_id,
        kind=transition.requested,
        direction=transition.direction,
        previous=transition.previous,
        current=transition.current,
        vote_delta=transition.vote_delta,
        credit_delta=transition.credit_delta,
        vote_count=content.vote_count,
    )


def toggle_vote(
    content: VotableT, voter_id: UserId, kind: VoteKind
) -> tuple[VotableT, VoteOutcome]:
    """Toggle a voter's vote on a question or answer.

    Args:
        content: Question or answer being voted on
        voter_id: User casting the vote
        kind: Requested vote kind

    Returns:
        The content with updated vote sets, and what changed

    Raises:
        SelfVoteError: If the voter authored the content. Nothing changes.
    """
    if voter_id == content.author_id:
        raise SelfVoteError(content.votable_type.value, str(content.id))

    transition = vote_transition(content.vote_of(voter_id), kind)

    upvoters = set(content.upvoters) - {voter_id}
    downvoters = set(content.downvoters) - {voter_id}
    if transition.current is VoteKind.UP:
        upvoters.add(voter_id)
    elif transition.current is VoteKind.DOWN:
        downvoters.add(voter_id)

    updated = content.model_copy(
        update={"upvoters": frozenset(upvoters), "downvoters": frozenset(downvoters)}
    )
    return updated, build_vote_outcome(updated, voter_id, transition)


def credit_points(user: User, amount: int, reason: str) -> User:
    """Add points to a user, never going below zero.

    The level is derived from points, so it changes in the same step.

    Args:
        user: User to credit
        amount: Points to add, negative for a reversal
        reason: Short machine-readable reason, e.g. "answer_upvote"

    Returns:
        The updated user
    """
    if not reason:
        raise ValueError("A point credit needs a reason")
    return user.model_copy(update={"points": max(0, user.points + amount)})


def advance_streak(stats: UserStats, answered_on: date) -> UserStats:
    """Update the answer streak for an answer posted on ``answered_on``.

    Compares calendar days: the next day extends the streak, the same day
    leaves it alone, a longer gap restarts it at 1. A date before the last
    answer (clock skew) changes nothing.
    """
    last = stats.last_answer_date
    if last is None:
        streak = 1
    else:
        gap = (answered_on - last).days
        if gap <= 0:
            return stats
        streak = stats.answer_streak + 1 if gap == 1 else 1

    return stats.model_copy(
        update={"answer_streak": streak, "last_answer_date": answered_on}
    )


class LedgerEvent(ValueObject):
    """Point and counter changes applied to one user as a unit."""

    reason: str
    points: int = 0
    questions_asked: int = 0
    answers_given: int = 0
    accepted_answers: int = 0
    total_upvotes: int = 0
    total_downvotes: int = 0
    total_views: int = 0
    confidence_boosters: int = Field(default=0, ge=0)
    answered_on: Optional[date] = None

    @property
    def is_empty(self) -> bool:
        """Whether applying the event would change nothing."""
        return self.answered_on is None and not any(
            (
                self.points,
                self.questions_asked,
                self.answers_given,
                self.accepted_answers,
                self.total_upvotes,
                self.total_downvotes,
                self.total_views,
                self.confidence_boosters,
            )
        )


@dataclass(frozen=True)
class LedgerReceipt:
    """Result of applying a ledger event."""

    user: User
    previous_level: Level
    earned: list[AchievementName]

    @property
    def leveled_up(self) -> bool:
        """Whether the event moved the user to a higher level."""
        return self.user.level.rank > self.previous_level.rank


_COUNTERS = (
    "questions_asked",
    "answers_given",
    "accepted_answers",
    "total_upvotes",
    "total_downvotes",
    "total_views",
)


def apply_ledger_event(user: User, event: LedgerEvent, now: datetime) -> LedgerReceipt:
    """Apply a ledger event and re-evaluate achievements.

    This is the single place where a user's points, level, counters and
    achievements change. Points and counters are clamped at zero.

    Args:
        user: Current user snapshot
        event: Changes to apply
        now: Timestamp for ``updated_at`` and newly earned achievements

    Returns:
        Receipt with the updated user, the level before the event and any
        newly earned achievements
    """
    previous_level = user.level
    updated = credit_points(user, event.points, event.reason)

    stats = updated.stats.model_copy(
        update={
            name: max(0, getattr(updated.stats, name) + getattr(event, name))
            for name in _COUNTERS
        }
    )
    if event.answered_on is not None:
        stats = advance_streak(stats, event.answered_on)

    updated = updated.model_copy(
        update={
            "stats": stats,
            "confidence_booster_badge_count": updated.confidence_booster_badge_count
            + event.confidence_boosters,
            "updated_at": now,
        }
    )
    updated, earned = award_achievements(updated, now)
    return LedgerReceipt(user=updated, previous_level=previous_level, earned=earned)
