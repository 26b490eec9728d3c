"""Get user profile use case."""

from datetime import date, datetime

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from stackit.domain.error import NotFoundError
from stackit.domain.scoring import RULES_BY_NAME
from stackit.domain.service import UserService
from stackit.domain.value import AchievementName, Handle, Level


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    handle: str


class AchievementView(BaseModel):
    """Earned achievement with its catalog entry."""

    name: AchievementName
    description: str
    icon: str
    earned_at: datetime


class UserStatsView(BaseModel):
    """Public activity counters."""

    questions_asked: int
    answers_given: int
    accepted_answers: int
    answer_streak: int
    last_answer_date: date | None
    total_upvotes: int
    total_downvotes: int


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user_id: str
    handle: str
    points: int
    level: Level
    achievements: list[AchievementView]
    stats: UserStatsView
    confidence_booster_badge_count: int
    created_at: datetime


class GetUserProfileUseCase:
    """Use case for reading a user's public scoring profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If no user has the handle
        """
        try:
            handle = Handle(request.handle)
        except PydanticValidationError as e:
            raise NotFoundError("User", request.handle) from e

        user = await self.user_service.get_user_by_handle(handle)
        if not user:
            raise NotFoundError("User", request.handle)

        return GetUserProfileResponse(
            user_id=str(user.id),
            handle=user.handle.root,
            points=user.points,
            level=user.level,
            achievements=[
                AchievementView(
                    name=earned.name,
                    description=RULES_BY_NAME[earned.name].description,
                    icon=RULES_BY_NAME[earned.name].icon,
                    earned_at=earned.earned_at,
                )
                for earned in user.achievements
            ],
            stats=UserStatsView(**user.stats.model_dump(exclude={"total_views"})),
            confidence_booster_badge_count=user.confidence_booster_badge_count,
            created_at=user.created_at,
        )
