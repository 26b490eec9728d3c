"""Application layer DI providers."""

from dishka import Scope, provide

from stackit.application.usecase.answer import (
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    UpdateAnswerUseCase,
)
from stackit.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
)
from stackit.application.usecase.notification import (
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from stackit.application.usecase.question import (
    AcceptAnswerUseCase,
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UnacceptAnswerUseCase,
    UpdateQuestionUseCase,
)
from stackit.application.usecase.user import (
    GetLeaderboardUseCase,
    GetUserAnswersUseCase,
    GetUserProfileUseCase,
    GetUserQuestionsUseCase,
)
from stackit.application.usecase.vote import CastVoteUseCase
from stackit.config import LeaderboardSettings
from stackit.domain.service import (
    AnswerService,
    CommentService,
    NotificationService,
    QuestionService,
    ScoringService,
    UserService,
)
from stackit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self,
        question_service: QuestionService,
        user_service: UserService,
        scoring_service: ScoringService,
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service,
            user_service=user_service,
            scoring_service=scoring_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            comment_service=comment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service, answer_service=answer_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self, question_service: QuestionService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self, question_service: QuestionService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self, scoring_service: ScoringService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(scoring_service=scoring_service)

    @provide(scope=Scope.REQUEST)
    def get_unaccept_answer_use_case(
        self, scoring_service: ScoringService
    ) -> UnacceptAnswerUseCase:
        """Provide unaccept answer use case."""
        return UnacceptAnswerUseCase(scoring_service=scoring_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
        scoring_service: ScoringService,
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service,
            question_service=question_service,
            user_service=user_service,
            scoring_service=scoring_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_answer_use_case(
        self, answer_service: AnswerService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(answer_service=answer_service)

    @provide(scope=Scope.REQUEST)
    def get_update_answer_use_case(
        self, answer_service: AnswerService
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(answer_service=answer_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, scoring_service: ScoringService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(scoring_service=scoring_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_questions_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> GetUserQuestionsUseCase:
        """Provide get user questions use case."""
        return GetUserQuestionsUseCase(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_user_answers_use_case(
        self, user_service: UserService, answer_service: AnswerService
    ) -> GetUserAnswersUseCase:
        """Provide get user answers use case."""
        return GetUserAnswersUseCase(
            user_service=user_service, answer_service=answer_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_leaderboard_use_case(
        self, user_service: UserService, leaderboard_settings: LeaderboardSettings
    ) -> GetLeaderboardUseCase:
        """Provide get leaderboard use case."""
        return GetLeaderboardUseCase(
            user_service=user_service, leaderboard_settings=leaderboard_settings
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        """Provide unread count use case."""
        return GetUnreadCountUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_all_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllNotificationsReadUseCase(
            notification_service=notification_service
        )
