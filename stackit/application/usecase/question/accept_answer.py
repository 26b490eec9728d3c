"""Accept and unaccept answer use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import AcceptanceResult, ScoringService
from stackit.domain.value import AnswerId, QuestionId, QuestionStatus, UserId


class AcceptanceRequest(BaseModel):
    """Accept or unaccept answer request."""

    question_id: str  # UUID string
    answer_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class AcceptanceResponse(BaseModel):
    """State of the question and answer after the change."""

    question_id: str
    answer_id: str
    is_accepted: bool
    accepted_at: datetime | None
    accepted_answer_id: str | None
    question_status: QuestionStatus
    changed: bool


def _to_response(result: AcceptanceResult) -> AcceptanceResponse:
    question = result.question
    return AcceptanceResponse(
        question_id=str(question.id),
        answer_id=str(result.answer.id),
        is_accepted=result.answer.is_accepted,
        accepted_at=result.answer.accepted_at,
        accepted_answer_id=str(question.accepted_answer_id)
        if question.accepted_answer_id
        else None,
        question_status=question.status,
        changed=result.changed,
    )


class AcceptAnswerUseCase:
    """Use case for the question author accepting an answer."""

    def __init__(self, scoring_service: ScoringService) -> None:
        """Initialize accept answer use case.

        Args:
            scoring_service: Scoring coordinator
        """
        self.scoring_service = scoring_service

    async def execute(self, request: AcceptanceRequest) -> AcceptanceResponse:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If question or answer not found
            NotAuthorError: If the user did not ask the question
            MismatchError: If the answer belongs to another question
        """
        result = await self.scoring_service.accept_answer(
            QuestionId(UUID(request.question_id)),
            AnswerId(UUID(request.answer_id)),
            UserId(UUID(request.user_id)),
        )
        return _to_response(result)


class UnacceptAnswerUseCase:
    """Use case for the question author withdrawing an acceptance."""

    def __init__(self, scoring_service: ScoringService) -> None:
        """Initialize unaccept answer use case.

        Args:
            scoring_service: Scoring coordinator
        """
        self.scoring_service = scoring_service

    async def execute(self, request: AcceptanceRequest) -> AcceptanceResponse:
        """Execute unaccept answer flow."""
        result = await self.scoring_service.unaccept_answer(
            QuestionId(UUID(request.question_id)),
            AnswerId(UUID(request.answer_id)),
            UserId(UUID(request.user_id)),
        )
        return _to_response(result)
