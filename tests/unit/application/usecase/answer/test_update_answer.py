"""Unit tests for UpdateAnswerUseCase."""

import pytest

from stackit.application.usecase.answer.update_answer import (
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from stackit.domain.error import NotAuthorizedError, ValidationError
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.value import UserRole
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateAnswerUseCase:
    """Tests for UpdateAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_author_edits_accepted_answer(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateAnswerUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = await user_repo.save(make_user())
        helper = await user_repo.save(make_user())
        question = await question_repo.save(make_question(asker.id))
        answer = await answer_repo.save(
            make_answer(question, helper.id, is_accepted=True, acceptance_rewarded=True)
        )

        # Act
        response = await use_case.execute(
            UpdateAnswerRequest(
                answer_id=str(answer.id),
                user_id=str(helper.id),
                content="Use reversed(), or list.reverse() to do it in place.",
            )
        )

        # Assert
        stored = await answer_repo.find_by_id(answer.id)
        assert response.question_id == str(question.id)
        assert response.edited_at is not None
        assert stored.content.startswith("Use reversed(), or list.reverse()")
        assert stored.is_accepted is True
        assert stored.acceptance_rewarded is True

    @pytest.mark.asyncio
    async def test_only_author_or_moderator_edits(self, unit_env):
        use_case = await unit_env.get(UpdateAnswerUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        asker = await user_repo.save(make_user())
        helper = await user_repo.save(make_user())
        question = await question_repo.save(make_question(asker.id))
        answer = await answer_repo.save(make_answer(question, helper.id))

        # The question author does not own the answer
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateAnswerRequest(
                    answer_id=str(answer.id),
                    user_id=str(asker.id),
                    content="Rewritten by the asker, which is not allowed.",
                )
            )
        response = await use_case.execute(
            UpdateAnswerRequest(
                answer_id=str(answer.id),
                user_id=str(make_user().id),
                role=UserRole.ADMIN,
                content="Tidied up by an admin for formatting.",
            )
        )

        assert response.content == "Tidied up by an admin for formatting."

    @pytest.mark.asyncio
    async def test_too_short_content_rejected(self, unit_env):
        use_case = await unit_env.get(UpdateAnswerUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        helper = await user_repo.save(make_user())
        question = await question_repo.save(make_question(helper.id))
        answer = await answer_repo.save(make_answer(question, helper.id))

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateAnswerRequest(
                    answer_id=str(answer.id), user_id=str(helper.id), content="nope"
                )
            )

        assert (await answer_repo.find_by_id(answer.id)).content == answer.content
