"""Domain layer DI providers."""

from dishka import Scope, provide

from stackit.config import AuthSettings, ScoringSettings
from stackit.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.service import (
    AnswerService,
    CommentService,
    JWTService,
    NotificationDispatcher,
    NotificationService,
    QuestionService,
    ScoringService,
    UserService,
)
from stackit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        comment_repository: CommentRepository,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_notification_service(
        self,
        dispatcher: NotificationDispatcher,
        notification_repository: NotificationRepository,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            dispatcher=dispatcher, notification_repository=notification_repository
        )

    @provide
    def get_scoring_service(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
        notification_service: NotificationService,
        scoring_settings: ScoringSettings,
    ) -> ScoringService:
        """Provide the scoring coordinator."""
        return ScoringService(
            question_service=question_service,
            answer_service=answer_service,
            user_service=user_service,
            notification_service=notification_service,
            scoring_settings=scoring_settings,
        )
