"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from stackit.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerResponse,
    UpdateAnswerUseCase,
)
from stackit.domain.service import JWTService
from stackit.interface.api.auth import require_actor

router = APIRouter(tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str = Field(max_length=10000)
    is_anonymous: bool = False


class UpdateAnswerAPIRequest(BaseModel):
    """API request for editing an answer."""

    content: str = Field(max_length=10000)


@router.post(
    "/questions/{question_id}/answers",
    response_model=CreateAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateAnswerResponse:
    """Answer a question.

    Requires authentication. Credits the author and advances their streak.

    Args:
        question_id: Question UUID
        request: Answer data
        create_answer_use_case: Create answer use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created answer with the author's new totals
    """
    actor = require_actor(jwt_service, auth_token, "answer questions")
    return await create_answer_use_case.execute(
        CreateAnswerRequest(
            question_id=str(question_id),
            author_id=str(actor.user_id),
            content=request.content,
            is_anonymous=request.is_anonymous,
        )
    )


@router.delete("/answers/{answer_id}", response_model=DeleteAnswerResponse)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteAnswerResponse:
    """Delete an answer.

    Only the author or a moderator may delete.
    """
    actor = require_actor(jwt_service, auth_token, "delete answers")
    return await delete_answer_use_case.execute(
        DeleteAnswerRequest(
            answer_id=str(answer_id), user_id=str(actor.user_id), role=actor.role
        )
    )


@router.put("/answers/{answer_id}", response_model=UpdateAnswerResponse)
async def update_answer(
    answer_id: UUID,
    request: UpdateAnswerAPIRequest,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateAnswerResponse:
    """Edit an answer's text.

    Only the author or a moderator may edit.
    """
    actor = require_actor(jwt_service, auth_token, "edit answers")
    return await update_answer_use_case.execute(
        UpdateAnswerRequest(
            answer_id=str(answer_id),
            user_id=str(actor.user_id),
            role=actor.role,
            content=request.content,
        )
    )
