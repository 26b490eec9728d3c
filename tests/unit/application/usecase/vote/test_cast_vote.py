"""Unit tests for CastVoteUseCase."""

import pytest

from stackit.application.usecase.vote.cast_vote import (
    CastVoteRequest,
    CastVoteUseCase,
)
from stackit.domain.error import SelfVoteError
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from stackit.domain.value import VotableType, VoteDirection, VoteKind
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_on_answer_routes_to_answer(self, unit_env):
        """Voting on an answer should change that answer's vote sets."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        asker = await user_repo.save(make_user())
        answerer = await user_repo.save(make_user())
        question = await question_repo.save(make_question(asker.id))
        answer = await answer_repo.save(make_answer(question, answerer.id))

        request = CastVoteRequest(
            votable_type=VotableType.ANSWER,
            votable_id=str(answer.id),
            user_id=str(asker.id),
            vote_type=VoteKind.UP,
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.direction == VoteDirection.ADDED
        assert response.user_vote == VoteKind.UP
        assert response.vote_count == 1
        assert asker.id in (await answer_repo.find_by_id(answer.id)).upvoters
        assert (await question_repo.find_by_id(question.id)).vote_count == 0

    @pytest.mark.asyncio
    async def test_second_identical_vote_retracts(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user())
        voter = await user_repo.save(make_user())
        question = await question_repo.save(make_question(asker.id))
        request = CastVoteRequest(
            votable_type=VotableType.QUESTION,
            votable_id=str(question.id),
            user_id=str(voter.id),
            vote_type=VoteKind.DOWN,
        )

        # Act
        await use_case.execute(request)
        response = await use_case.execute(request)

        # Assert
        assert response.direction == VoteDirection.RETRACTED
        assert response.user_vote is None
        assert response.vote_count == 0

    @pytest.mark.asyncio
    async def test_self_vote(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        asker = await user_repo.save(make_user())
        question = await question_repo.save(make_question(asker.id))

        with pytest.raises(SelfVoteError):
            await use_case.execute(
                CastVoteRequest(
                    votable_type=VotableType.QUESTION,
                    votable_id=str(question.id),
                    user_id=str(asker.id),
                    vote_type=VoteKind.UP,
                )
            )
