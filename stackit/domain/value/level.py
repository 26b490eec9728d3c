"""User levels derived from StackPoints."""

from enum import Enum


class Level(str, Enum):
    """Five-tier rank derived purely from accumulated points."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"
    MASTER = "Master"

    @property
    def rank(self) -> int:
        """Position of the level in ascending order (Beginner is 0)."""
        return list(Level).index(self)


# Minimum points per level, highest first
LEVEL_THRESHOLDS: tuple[tuple[int, Level], ...] = (
    (10000, Level.MASTER),
    (5000, Level.EXPERT),
    (2000, Level.ADVANCED),
    (500, Level.INTERMEDIATE),
)


def level_for_points(points: int) -> Level:
    """Look up the level for a point total.

    Thresholds are checked high to low and the first one reached wins.
    Anything below the lowest threshold, including negative input, is
    Beginner.

    Args:
        points: Accumulated StackPoints

    Returns:
        The level for that total
    """
    for threshold, level in LEVEL_THRESHOLDS:
        if points >= threshold:
            return level
    return Level.BEGINNER
