"""User use cases."""

from .get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    LeaderboardEntry,
)
from .get_user_answers import (
    GetUserAnswersRequest,
    GetUserAnswersResponse,
    GetUserAnswersUseCase,
    UserAnswerView,
)
from .get_user_profile import (
    AchievementView,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from .get_user_questions import (
    GetUserQuestionsRequest,
    GetUserQuestionsResponse,
    GetUserQuestionsUseCase,
)

__all__ = [
    "AchievementView",
    "GetLeaderboardRequest",
    "GetLeaderboardResponse",
    "GetLeaderboardUseCase",
    "GetUserAnswersRequest",
    "GetUserAnswersResponse",
    "GetUserAnswersUseCase",
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "GetUserQuestionsRequest",
    "GetUserQuestionsResponse",
    "GetUserQuestionsUseCase",
    "LeaderboardEntry",
    "UserAnswerView",
]
