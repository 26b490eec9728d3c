"""Unit tests for UpdateQuestionUseCase."""

import pytest

from stackit.application.usecase.question.update_question import (
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from stackit.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from stackit.domain.repository import QuestionRepository, UserRepository
from stackit.domain.value import Priority, QuestionCategory, UserRole, VoteKind
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateQuestionUseCase:
    """Tests for UpdateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_author_edits_only_given_fields(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user(points=5))
        voter = await user_repo.save(make_user())
        question = await question_repo.save(make_question(asker.id, tags=["python"]))
        await question_repo.toggle_vote(question.id, voter.id, VoteKind.UP)

        # Act
        response = await use_case.execute(
            UpdateQuestionRequest(
                question_id=str(question.id),
                user_id=str(asker.id),
                title="How do I reverse a list in place?",
                tags=["Python", "Lists"],
                priority=Priority.HIGH,
            )
        )

        # Assert
        stored = await question_repo.find_by_id(question.id)
        assert response.title == "How do I reverse a list in place?"
        assert response.tags == ["python", "lists"]
        assert response.content == question.content
        assert response.category == QuestionCategory.GENERAL
        assert response.edited_at is not None
        assert stored.priority == Priority.HIGH
        assert stored.last_activity_at >= question.last_activity_at
        # Votes and points are untouched by edits
        assert stored.upvoters == frozenset({voter.id})
        assert (await user_repo.find_by_id(asker.id)).points == 5

    @pytest.mark.asyncio
    async def test_moderator_can_edit(self, unit_env):
        use_case = await unit_env.get(UpdateQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user())
        moderator = await user_repo.save(make_user(role=UserRole.MODERATOR))
        question = await question_repo.save(make_question(asker.id))

        response = await use_case.execute(
            UpdateQuestionRequest(
                question_id=str(question.id),
                user_id=str(moderator.id),
                role=UserRole.MODERATOR,
                category=QuestionCategory.PROGRAMMING,
            )
        )

        assert response.category == QuestionCategory.PROGRAMMING

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        use_case = await unit_env.get(UpdateQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user())
        question = await question_repo.save(make_question(asker.id))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateQuestionRequest(
                    question_id=str(question.id),
                    user_id=str(make_user().id),
                    title="A title somebody else wrote",
                )
            )

        assert (await question_repo.find_by_id(question.id)).title == question.title

    @pytest.mark.asyncio
    async def test_invalid_edit_is_rejected(self, unit_env):
        use_case = await unit_env.get(UpdateQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user())
        question = await question_repo.save(make_question(asker.id))

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateQuestionRequest(
                    question_id=str(question.id), user_id=str(asker.id), title="Short"
                )
            )
        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateQuestionRequest(question_id=str(question.id), user_id=str(asker.id))
            )

        stored = await question_repo.find_by_id(question.id)
        assert stored.title == question.title
        assert stored.edited_at is None

    @pytest.mark.asyncio
    async def test_missing_question(self, unit_env):
        use_case = await unit_env.get(UpdateQuestionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateQuestionRequest(
                    question_id=str(make_question(make_user().id).id),
                    user_id=str(make_user().id),
                    title="Does this question exist at all?",
                )
            )
