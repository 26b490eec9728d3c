"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from stackit.application.usecase.question import (
    AcceptanceRequest,
    AcceptanceResponse,
    AcceptAnswerUseCase,
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    UnacceptAnswerUseCase,
    UpdateQuestionRequest,
    UpdateQuestionResponse,
    UpdateQuestionUseCase,
)
from stackit.domain.repository import QuestionSortOrder
from stackit.domain.service import JWTService
from stackit.domain.value import Priority, QuestionCategory, QuestionStatus
from stackit.interface.api.auth import require_actor

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question.

    Lengths are checked again by the domain model.
    """

    title: str = Field(max_length=200)
    content: str = Field(max_length=10000)
    category: QuestionCategory = QuestionCategory.GENERAL
    tags: list[str] = Field(default_factory=list)
    is_anonymous: bool = False
    priority: Priority = Priority.MEDIUM


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question. Omitted fields are kept."""

    title: str | None = Field(default=None, max_length=200)
    content: str | None = Field(default=None, max_length=10000)
    category: QuestionCategory | None = None
    tags: list[str] | None = None
    priority: Priority | None = None


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
    category: QuestionCategory | None = None,
    question_status: QuestionStatus | None = Query(default=None, alias="status"),
    tag: str | None = None,
    search: str | None = Query(default=None, max_length=200),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListQuestionsResponse:
    """Browse questions with filtering, sorting and pagination.

    Public endpoint.

    Args:
        list_questions_use_case: List questions use case from DI
        sort: newest, oldest, most_voted, most_answered or active
        category: Filter by category (optional)
        question_status: Filter by status, sent as ``status`` (optional)
        tag: Filter by tag (optional)
        search: Text to look for in titles and bodies (optional)
        limit: Maximum number of questions to return (1-100)
        offset: Number of questions to skip

    Returns:
        One page of question summaries with the total count
    """
    return await list_questions_use_case.execute(
        ListQuestionsRequest(
            sort=sort,
            category=category,
            status=question_status,
            tag=tag,
            search=search,
            limit=limit,
            offset=offset,
        )
    )


    priority: Priority = Priority.MEDIUM


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateQuestionResponse:
    """Ask a new question.

    Requires authentication. Credits the author for asking.

    Args:
        request: Question data
        create_question_use_case: Create question use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created question with the author's new point total
    """
    actor = require_actor(jwt_service, auth_token, "ask questions")
    return await create_question_use_case.execute(
        CreateQuestionRequest(
            author_id=str(actor.user_id),
            title=request.title,
            content=request.content,
            category=request.category,
            tags=request.tags,
            is_anonymous=request.is_anonymous,
            priority=request.priority,
        )
    )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetQuestionResponse:
    """Get a question with its answers.

    Authentication is optional; signed-in users also see their own votes.
    """
    actor = jwt_service.get_actor_from_token(auth_token)
    return await get_question_use_case.execute(
        GetQuestionRequest(
            question_id=str(question_id),
            user_id=str(actor.user_id) if actor else None,
        )
    )


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteQuestionResponse:
    """Delete a question with its answers.

    Only the author or a moderator may delete.
    """
    actor = require_actor(jwt_service, auth_token, "delete questions")
    return await delete_question_use_case.execute(
        DeleteQuestionRequest(
            question_id=str(question_id),
            user_id=str(actor.user_id),
            role=actor.role,
        )
    )


@router.post(
    "/{question_id}/accept-answer/{answer_id}", response_model=AcceptanceResponse
)
async def accept_answer(
    question_id: UUID,
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AcceptanceResponse:
    """Accept an answer as the solution.

    Only the question author may accept. Accepting another answer replaces
    the current one.
    """
    actor = require_actor(jwt_service, auth_token, "accept answers")
    return await accept_answer_use_case.execute(
        AcceptanceRequest(
            question_id=str(question_id),
            answer_id=str(answer_id),
            user_id=str(actor.user_id),
        )
    )


@router.delete(
    "/{question_id}/accept-answer/{answer_id}", response_model=AcceptanceResponse
)
async def unaccept_answer(
    question_id: UUID,
    answer_id: UUID,
    unaccept_answer_use_case: FromDishka[UnacceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AcceptanceResponse:
    """Withdraw acceptance of an answer."""
    actor = require_actor(jwt_service, auth_token, "unaccept answers")
    return await unaccept_answer_use_case.execute(
        AcceptanceRequest(
            question_id=str(question_id),
            answer_id=str(answer_id),
            user_id=str(actor.user_id),
        )
    )


@router.put("/{question_id}", response_model=UpdateQuestionResponse)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateQuestionResponse:
    """Edit a question's title, body, category, tags or priority.

    Only the author or a moderator may edit. Votes and points are unchanged.
    """
    actor = require_actor(jwt_service, auth_token, "edit questions")
    return await update_question_use_case.execute(
        UpdateQuestionRequest(
            question_id=str(question_id),
            user_id=str(actor.user_id),
            role=actor.role,
            title=request.title,
            content=request.content,
            category=request.category,
            tags=request.tags,
            priority=request.priority,
        )
    )
