"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import ScoringService
from stackit.domain.value import UserId, VotableType, VoteDirection, VoteKind


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    vote_type: VoteKind


class CastVoteResponse(BaseModel):
    """Cast vote response.

    ``user_vote`` is the caller's vote after the toggle, None when it was
    retracted.
    """

    votable_type: VotableType
    votable_id: str
    vote_type: VoteKind
    direction: VoteDirection
    user_vote: VoteKind | None
    vote_count: int


class CastVoteUseCase:
    """Use case for toggling a vote on a question or answer.

    Voting the same way twice retracts the vote, voting the other way flips it.
    """

    def __init__(self, scoring_service: ScoringService) -> None:
        """Initialize cast vote use case.

        Args:
            scoring_service: Scoring coordinator
        """
        self.scoring_service = scoring_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Cast vote response with the new vote count

        Raises:
            NotFoundError: If the item or its author not found
            SelfVoteError: If the user authored the item
        """
        outcome = await self.scoring_service.cast_vote(
            request.votable_type,
            UUID(request.votable_id),
            UserId(UUID(request.user_id)),
            request.vote_type,
        )
        return CastVoteResponse(
            votable_type=outcome.votable_type,
            votable_id=str(outcome.content_id),
            vote_type=outcome.kind,
            direction=outcome.direction,
            user_vote=outcome.current,
            vote_count=outcome.vote_count,
        )
