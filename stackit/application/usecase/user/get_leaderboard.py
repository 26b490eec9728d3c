"""Get leaderboard use case."""

from pydantic import BaseModel

from stackit.config import LeaderboardSettings
from stackit.domain.model import User
from stackit.domain.service import UserService
from stackit.domain.value import LeaderboardMetric, Level


class GetLeaderboardRequest(BaseModel):
    """Get leaderboard request."""

    limit: int | None = None  # Defaults to the configured page size


class LeaderboardEntry(BaseModel):
    """One ranked user."""

    rank: int
    user_id: str
    handle: str
    points: int
    level: Level
    value: int  # The metric this board is ranked by


class GetLeaderboardResponse(BaseModel):
    """Top users by points, questions asked and answers given."""

    points: list[LeaderboardEntry]
    questions_asked: list[LeaderboardEntry]
    answers_given: list[LeaderboardEntry]


def _metric_value(user: User, metric: LeaderboardMetric) -> int:
    if metric is LeaderboardMetric.POINTS:
        return user.points
    return getattr(user.stats, metric.value)


class GetLeaderboardUseCase:
    """Use case for the three leaderboards."""

    def __init__(
        self, user_service: UserService, leaderboard_settings: LeaderboardSettings
    ) -> None:
        """Initialize get leaderboard use case.

        Args:
            user_service: User domain service
            leaderboard_settings: Page size limits
        """
        self.user_service = user_service
        self.settings = leaderboard_settings

    async def execute(self, request: GetLeaderboardRequest) -> GetLeaderboardResponse:
        """Execute get leaderboard flow.

        The limit is clamped to ``1..max_limit``.
        """
        limit = request.limit or self.settings.default_limit
        limit = max(1, min(limit, self.settings.max_limit))

        boards: dict[LeaderboardMetric, list[LeaderboardEntry]] = {}
        for metric in LeaderboardMetric:
            users = await self.user_service.get_leaderboard(metric, limit)
            boards[metric] = [
                LeaderboardEntry(
                    rank=rank,
                    user_id=str(user.id),
                    handle=user.handle.root,
                    points=user.points,
                    level=user.level,
                    value=_metric_value(user, metric),
                )
                for rank, user in enumerate(users, start=1)
            ]

        return GetLeaderboardResponse(
            points=boards[LeaderboardMetric.POINTS],
            questions_asked=boards[LeaderboardMetric.QUESTIONS_ASKED],
            answers_given=boards[LeaderboardMetric.ANSWERS_GIVEN],
        )
