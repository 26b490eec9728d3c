"""Unit tests for ListQuestionsUseCase."""

from datetime import timedelta

import pytest

from stackit.application.usecase.question.list_questions import (
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from stackit.domain.model.common import utc_now
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    QuestionSortOrder,
    UserRepository,
)
from stackit.domain.value import QuestionCategory, QuestionStatus, VoteKind
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(unit_env):
    """Three questions an hour apart: oldest has answers, middle has votes."""
    user_repo = await unit_env.get(UserRepository)
    question_repo = await unit_env.get(QuestionRepository)
    answer_repo = await unit_env.get(AnswerRepository)
    asker = await user_repo.save(make_user())
    helper = await user_repo.save(make_user())
    start = utc_now() - timedelta(hours=3)

    answered = await question_repo.save(
        make_question(
            asker.id,
            created_at=start,
            tags=["python"],
            status=QuestionStatus.ANSWERED,
        )
    )
    voted = await question_repo.save(
        make_question(
            asker.id,
            created_at=start + timedelta(hours=1),
            title="Choosing colours for a dashboard",
            category=QuestionCategory.DESIGN,
        )
    )
    newest = await question_repo.save(
        make_question(asker.id, created_at=start + timedelta(hours=2), is_anonymous=True)
    )
    for _ in range(2):
        await answer_repo.save(make_answer(answered, helper.id))
    await question_repo.toggle_vote(voted.id, helper.id, VoteKind.UP)
    return answered, voted, newest


class TestListQuestionsUseCase:
    """Tests for ListQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_newest_first_by_default(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListQuestionsUseCase)
        answered, voted, newest = await _seed(unit_env)

        # Act
        response = await use_case.execute(ListQuestionsRequest())

        # Assert
        assert [q.question_id for q in response.questions] == [
            str(newest.id),
            str(voted.id),
            str(answered.id),
        ]
        assert response.total == 3
        assert response.limit == 20
        # Anonymous authors stay hidden in listings
        assert response.questions[0].author_id is None
        assert response.questions[2].answer_count == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "sort, first",
        [
            (QuestionSortOrder.OLDEST, 0),
            (QuestionSortOrder.MOST_VOTED, 1),
            (QuestionSortOrder.MOST_ANSWERED, 0),
        ],
    )
    async def test_sort_orders(self, unit_env, sort, first):
        use_case = await unit_env.get(ListQuestionsUseCase)
        seeded = await _seed(unit_env)

        response = await use_case.execute(ListQuestionsRequest(sort=sort))

        assert response.questions[0].question_id == str(seeded[first].id)

    @pytest.mark.asyncio
    async def test_filters_narrow_results_and_total(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        answered, voted, _ = await _seed(unit_env)

        by_category = await use_case.execute(
            ListQuestionsRequest(category=QuestionCategory.DESIGN)
        )
        by_status = await use_case.execute(
            ListQuestionsRequest(status=QuestionStatus.ANSWERED)
        )
        by_tag = await use_case.execute(ListQuestionsRequest(tag="Python"))
        by_search = await use_case.execute(ListQuestionsRequest(search="COLOURS"))

        assert [q.question_id for q in by_category.questions] == [str(voted.id)]
        assert by_category.total == 1
        assert [q.question_id for q in by_status.questions] == [str(answered.id)]
        assert [q.question_id for q in by_tag.questions] == [str(answered.id)]
        assert [q.question_id for q in by_search.questions] == [str(voted.id)]

    @pytest.mark.asyncio
    async def test_pagination_keeps_full_total(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)
        _, voted, _ = await _seed(unit_env)

        response = await use_case.execute(ListQuestionsRequest(limit=1, offset=1))

        assert [q.question_id for q in response.questions] == [str(voted.id)]
        assert response.questions[0].vote_count == 1
        assert response.total == 3
        assert response.offset == 1

    def test_limit_is_bounded(self):
        with pytest.raises(ValueError):
            ListQuestionsRequest(limit=0)
        with pytest.raises(ValueError):
            ListQuestionsRequest(limit=101)
