"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from stackit.application.usecase.user import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    GetUserAnswersRequest,
    GetUserAnswersResponse,
    GetUserAnswersUseCase,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    GetUserQuestionsRequest,
    GetUserQuestionsResponse,
    GetUserQuestionsUseCase,
)
from stackit.domain.service import JWTService

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


# Registered before /{handle} so "leaderboard" is never read as a handle
@router.get("/leaderboard", response_model=GetLeaderboardResponse)
async def get_leaderboard(
    get_leaderboard_use_case: FromDishka[GetLeaderboardUseCase],
    limit: int | None = Query(default=None, ge=1),
) -> GetLeaderboardResponse:
    """Top users by points, questions asked and answers given.

    Public endpoint. ``limit`` is capped by configuration.
    """
    return await get_leaderboard_use_case.execute(GetLeaderboardRequest(limit=limit))


@router.get("/{handle}", response_model=GetUserProfileResponse)
async def get_user_profile(
    handle: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Public scoring profile: points, level, achievements and stats.

    Args:
        handle: User handle
        get_user_profile_use_case: Get user profile use case from DI

    Returns:
        User profile
    """
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(handle=handle)
    )


@router.get("/{handle}/questions", response_model=GetUserQuestionsResponse)
async def get_user_questions(
    handle: str,
    get_user_questions_use_case: FromDishka[GetUserQuestionsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> GetUserQuestionsResponse:
    """Questions a user asked, newest first.

    Anonymous questions only appear when the user views their own list.
    """
    viewer = jwt_service.get_actor_from_token(auth_token)
    return await get_user_questions_use_case.execute(
        GetUserQuestionsRequest(
            handle=handle,
            viewer_id=str(viewer.user_id) if viewer else None,
            limit=limit,
            offset=offset,
        )
    )


@router.get("/{handle}/answers", response_model=GetUserAnswersResponse)
async def get_user_answers(
    handle: str,
    get_user_answers_use_case: FromDishka[GetUserAnswersUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> GetUserAnswersResponse:
    """Answers a user wrote, newest first.

    Anonymous answers only appear when the user views their own list.
    """
    viewer = jwt_service.get_actor_from_token(auth_token)
    return await get_user_answers_use_case.execute(
        GetUserAnswersRequest(
            handle=handle,
            viewer_id=str(viewer.user_id) if viewer else None,
            limit=limit,
            offset=offset,
        )
    )
