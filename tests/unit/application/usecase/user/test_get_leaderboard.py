"""Unit tests for GetLeaderboardUseCase."""

from datetime import datetime, timezone

import pytest

from stackit.application.usecase.user.get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardUseCase,
)
from stackit.config import LeaderboardSettings
from stackit.domain.model import UserStats
from stackit.domain.repository import UserRepository
from stackit.domain.service import UserService
from stackit.domain.value import Level
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetLeaderboardUseCase:
    """Tests for GetLeaderboardUseCase."""

    @pytest.mark.asyncio
    async def test_boards_ranked_by_metric(self, unit_env):
        """Each board is ordered by its own metric."""
        # Arrange
        use_case = await unit_env.get(GetLeaderboardUseCase)
        user_repo = await unit_env.get(UserRepository)

        asker = await user_repo.save(
            make_user(handle="asker", points=600).model_copy(
                update={"stats": UserStats(questions_asked=9, answers_given=1)}
            )
        )
        helper = await user_repo.save(
            make_user(handle="helper", points=2500).model_copy(
                update={"stats": UserStats(questions_asked=1, answers_given=20)}
            )
        )

        # Act
        response = await use_case.execute(GetLeaderboardRequest())

        # Assert
        assert [e.handle for e in response.points] == ["helper", "asker"]
        assert [e.rank for e in response.points] == [1, 2]
        assert response.points[0].level == Level.ADVANCED
        assert response.points[0].value == 2500
        assert [e.user_id for e in response.questions_asked] == [
            str(asker.id),
            str(helper.id),
        ]
        assert response.answers_given[0].value == 20

    @pytest.mark.asyncio
    async def test_ties_go_to_earlier_user(self, unit_env):
        use_case = await unit_env.get(GetLeaderboardUseCase)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(
            make_user(
                handle="newer",
                points=50,
                created_at=datetime(2025, 2, 1, tzinfo=timezone.utc),
            )
        )
        await user_repo.save(
            make_user(
                handle="older",
                points=50,
                created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
            )
        )

        response = await use_case.execute(GetLeaderboardRequest())

        assert [e.handle for e in response.points] == ["older", "newer"]

    @pytest.mark.asyncio
    async def test_limit_is_clamped(self, unit_env):
        """Limits outside 1..max_limit are pulled back into range."""
        # Arrange
        use_case = GetLeaderboardUseCase(
            user_service=await unit_env.get(UserService),
            leaderboard_settings=LeaderboardSettings(default_limit=2, max_limit=3),
        )
        user_repo = await unit_env.get(UserRepository)
        for points in range(5):
            await user_repo.save(make_user(points=points))

        # Act
        default = await use_case.execute(GetLeaderboardRequest())
        too_many = await use_case.execute(GetLeaderboardRequest(limit=50))
        too_few = await use_case.execute(GetLeaderboardRequest(limit=-4))

        # Assert
        assert len(default.points) == 2
        assert len(too_many.points) == 3
        assert len(too_few.points) == 1
        assert too_few.points[0].points == 4
