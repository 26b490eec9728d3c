"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .notification_service import NotificationDispatcher, NotificationService
from .question_service import QuestionService
from .scoring_service import AcceptanceResult, ScoringService
from .user_service import UserService

__all__ = [
    "AcceptanceResult",
    "AnswerService",
    "CommentService",
    "JWTService",
    "NotificationDispatcher",
    "NotificationService",
    "QuestionService",
    "ScoringService",
    "Service",
    "UserService",
]
