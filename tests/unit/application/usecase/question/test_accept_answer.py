"""Unit tests for AcceptAnswerUseCase and UnacceptAnswerUseCase."""

import pytest

from stackit.application.usecase.question.accept_answer import (
    AcceptanceRequest,
    AcceptAnswerUseCase,
    UnacceptAnswerUseCase,
)
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.value import QuestionStatus
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAcceptAnswerUseCase:
    """Tests for the acceptance use cases."""

    @pytest.mark.asyncio
    async def test_accept_then_unaccept(self, unit_env):
        # Arrange
        accept = await unit_env.get(AcceptAnswerUseCase)
        unaccept = await unit_env.get(UnacceptAnswerUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        asker = await user_repo.save(make_user())
        answerer = await user_repo.save(make_user())
        question = await question_repo.save(make_question(asker.id))
        answer = await answer_repo.save(make_answer(question, answerer.id))
        request = AcceptanceRequest(
            question_id=str(question.id),
            answer_id=str(answer.id),
            user_id=str(asker.id),
        )

        # Act
        accepted = await accept.execute(request)
        repeated = await accept.execute(request)
        withdrawn = await unaccept.execute(request)

        # Assert
        assert accepted.is_accepted is True
        assert accepted.changed is True
        assert accepted.accepted_answer_id == str(answer.id)
        assert accepted.question_status == QuestionStatus.ANSWERED

        assert repeated.changed is False

        assert withdrawn.is_accepted is False
        assert withdrawn.accepted_answer_id is None
        assert withdrawn.question_status == QuestionStatus.OPEN
