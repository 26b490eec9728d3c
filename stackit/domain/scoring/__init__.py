"""Scoring: ledger primitives and achievement evaluation."""

from stackit.domain.scoring.achievements import (
    ACHIEVEMENT_RULES,
    RULES_BY_NAME,
    AchievementRule,
    award_achievements,
    evaluate_achievements,
)
from stackit.domain.scoring.ledger import (
    LedgerEvent,
    LedgerReceipt,
    VoteTransition,
    advance_streak,
    apply_ledger_event,
    build_vote_outcome,
    credit_points,
    level_for_points,
    toggle_vote,
    vote_transition,
)

__all__ = [
    "ACHIEVEMENT_RULES",
    "RULES_BY_NAME",
    "AchievementRule",
    "LedgerEvent",
    "LedgerReceipt",
    "VoteTransition",
    "advance_streak",
    "apply_ledger_event",
    "award_achievements",
    "build_vote_outcome",
    "credit_points",
    "evaluate_achievements",
    "level_for_points",
    "toggle_vote",
    "vote_transition",
]
