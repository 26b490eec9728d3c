"""Achievement evaluation.

A fixed table of rules, each a pure predicate over a user's stats. Rules are
independent of each other and every rule fires at most once per user, ever.
This module does no I/O and emits no notifications.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from stackit.domain.model.user import EarnedAchievement, User
from stackit.domain.value import AchievementName


@dataclass(frozen=True)
class AchievementRule:
    """Catalog entry for one achievement."""

    name: AchievementName
    description: str
    icon: str
    qualifies: Callable[[User], bool]


ACHIEVEMENT_RULES: tuple[AchievementRule, ...] = (
    AchievementRule(
        name=AchievementName.ANSWER_STREAK,
        description="Answered questions for 7 consecutive days",
        icon="🔥",
        qualifies=lambda user: user.stats.answer_streak >= 7,
    ),
    AchievementRule(
        name=AchievementName.PROBLEM_SOLVER,
        description="Had 10 answers accepted",
        icon="🧠",
        qualifies=lambda user: user.stats.accepted_answers >= 10,
    ),
    AchievementRule(
        name=AchievementName.FIRST_QUESTION,
        description="Asked your first question",
        icon="📝",
        qualifies=lambda user: user.stats.questions_asked >= 1,
    ),
    AchievementRule(
        name=AchievementName.HELPER,
        description="Helped 5 people with answers",
        icon="🆘",
        qualifies=lambda user: user.stats.answers_given >= 5,
    ),
    AchievementRule(
        name=AchievementName.CONFIDENCE_BOOSTER,
        description="Had an anonymous answer accepted",
        icon="🌟",
        qualifies=lambda user: user.confidence_booster_badge_count >= 1,
    ),
)

RULES_BY_NAME: dict[AchievementName, AchievementRule] = {
    rule.name: rule for rule in ACHIEVEMENT_RULES
}


def evaluate_achievements(user: User) -> list[AchievementName]:
    """Find achievements the user now qualifies for but does not hold.

    Args:
        user: User snapshot after the latest stat change

    Returns:
        Newly qualified achievement names, in catalog order. Empty when
        nothing changed since the last evaluation.
    """
    return [
        rule.name
        for rule in ACHIEVEMENT_RULES
        if not user.has_achievement(rule.name) and rule.qualifies(user)
    ]


def award_achievements(
    user: User, now: datetime
) -> tuple[User, list[AchievementName]]:
    """Append newly qualified achievements to the user.

    Args:
        user: User snapshot after the latest stat change
        now: Timestamp recorded as ``earned_at``

    Returns:
        The updated user and the names that were just earned
    """
    earned = evaluate_achievements(user)
    if not earned:
        return user, []

    achievements = [
        *user.achievements,
        *(EarnedAchievement(name=name, earned_at=now) for name in earned),
    ]
    return user.model_copy(update={"achievements": achievements}), earned
