"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from stackit.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from stackit.domain.service import JWTService
from stackit.domain.value import VotableType, VoteKind
from stackit.interface.api.auth import require_actor

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting."""

    vote_type: VoteKind


@router.post("/questions/{question_id}/vote", response_model=CastVoteResponse)
async def vote_question(
    question_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a question.

    Requires authentication. Repeating a vote retracts it, the other kind
    flips it.

    Args:
        question_id: Question UUID
        request: Vote kind
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Vote outcome with the new vote count
    """
    actor = require_actor(jwt_service, auth_token, "vote")
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_type=VotableType.QUESTION,
            votable_id=str(question_id),
            user_id=str(actor.user_id),
            vote_type=request.vote_type,
        )
    )


@router.post("/answers/{answer_id}/vote", response_model=CastVoteResponse)
async def vote_answer(
    answer_id: UUID,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on an answer.

    Requires authentication.
    """
    actor = require_actor(jwt_service, auth_token, "vote")
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_type=VotableType.ANSWER,
            votable_id=str(answer_id),
            user_id=str(actor.user_id),
            vote_type=request.vote_type,
        )
    )
