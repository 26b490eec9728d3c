"""Comment routes for questions and answers."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from stackit.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from stackit.domain.service import JWTService
from stackit.domain.value import VotableType
from stackit.interface.api.auth import require_actor

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for commenting."""

    content: str = Field(max_length=1000)


async def _add(
    target_type: VotableType,
    target_id: UUID,
    request: AddCommentAPIRequest,
    use_case: AddCommentUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> AddCommentResponse:
    actor = require_actor(jwt_service, auth_token, "comment")
    return await use_case.execute(
        AddCommentRequest(
            target_type=target_type,
            target_id=str(target_id),
            author_id=str(actor.user_id),
            content=request.content,
        )
    )


async def _delete(
    target_type: VotableType,
    target_id: UUID,
    comment_id: UUID,
    use_case: DeleteCommentUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> DeleteCommentResponse:
    actor = require_actor(jwt_service, auth_token, "delete comments")
    return await use_case.execute(
        DeleteCommentRequest(
            target_type=target_type,
            target_id=str(target_id),
            comment_id=str(comment_id),
            user_id=str(actor.user_id),
            role=actor.role,
        )
    )


@router.post(
    "/questions/{question_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def comment_on_question(
    question_id: UUID,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AddCommentResponse:
    """Comment on a question. Requires authentication."""
    return await _add(
        VotableType.QUESTION,
        question_id,
        request,
        add_comment_use_case,
        jwt_service,
        auth_token,
    )


@router.delete(
    "/questions/{question_id}/comments/{comment_id}",
    response_model=DeleteCommentResponse,
)
async def delete_question_comment(
    question_id: UUID,
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment on a question. Author or moderator only."""
    return await _delete(
        VotableType.QUESTION,
        question_id,
        comment_id,
        delete_comment_use_case,
        jwt_service,
        auth_token,
    )


@router.post(
    "/answers/{answer_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def comment_on_answer(
    answer_id: UUID,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AddCommentResponse:
    """Comment on an answer. Requires authentication."""
    return await _add(
        VotableType.ANSWER,
        answer_id,
        request,
        add_comment_use_case,
        jwt_service,
        auth_token,
    )


@router.delete(
    "/answers/{answer_id}/comments/{comment_id}",
    response_model=DeleteCommentResponse,
)
async def delete_answer_comment(
    answer_id: UUID,
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment on an answer. Author or moderator only."""
    return await _delete(
        VotableType.ANSWER,
        answer_id,
        comment_id,
        delete_comment_use_case,
        jwt_service,
        auth_token,
    )
