"""Scoring coordinator.

Turns content events (votes, acceptances, new questions and answers) into
vote-set changes, ledger events and notifications. Every precondition is
checked before the first write; notifications are best-effort and never
undo or block the scoring change that produced them.
"""

from dataclasses import dataclass
from datetime import timezone, tzinfo
from uuid import UUID
from zoneinfo import ZoneInfo

import logfire

from stackit.config import ScoringSettings
from stackit.domain.error import MismatchError, NotAuthorError, SelfVoteError
from stackit.domain.model import (
    Answer,
    NotificationEvent,
    Question,
    VotableContent,
    VoteOutcome,
)
from stackit.domain.model.common import utc_now
from stackit.domain.scoring import LedgerEvent, LedgerReceipt
from stackit.domain.value import (
    AnswerId,
    QuestionId,
    QuestionStatus,
    UserId,
    VotableType,
    VoteDirection,
    VoteKind,
)

from .answer_service import AnswerService
from .base import Service
from .notification_service import NotificationService
from .question_service import QuestionService
from .user_service import UserService


@dataclass(frozen=True)
class AcceptanceResult:
    """State of a question and answer after an accept or unaccept."""

    question: Question
    answer: Answer
    changed: bool
    receipt: LedgerReceipt | None = None


def _zone(name: str) -> tzinfo:
    return timezone.utc if name.upper() == "UTC" else ZoneInfo(name)


class ScoringService(Service):
    """Coordinates scoring events across content and user ledgers."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_service: UserService,
        notification_service: NotificationService,
        scoring_settings: ScoringSettings,
    ) -> None:
        """Initialize scoring service.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            user_service: User domain service (ledger writes)
            notification_service: Notification domain service
            scoring_settings: Point rewards and reversal policy
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.user_service = user_service
        self.notification_service = notification_service
        self.settings = scoring_settings
        self.streak_zone = _zone(scoring_settings.streak_timezone)

    # ------------------------------------------------------------------
    # Votes
    # ------------------------------------------------------------------

    async def cast_vote(
        self,
        votable_type: VotableType,
        content_id: UUID,
        voter_id: UserId,
        kind: VoteKind,
    ) -> VoteOutcome:
        """Toggle a vote and credit the content author.

        Args:
            votable_type: Question or answer
            content_id: ID of the content
            voter_id: User casting the vote
            kind: Up or down

        Returns:
            What the toggle changed

        Raises:
            NotFoundError: If the content or its author does not exist
            SelfVoteError: If the voter authored the content
        """
        with logfire.span(
            "scoring_service.cast_vote",
            votable_type=votable_type.value,
            content_id=str(content_id),
            voter_id=str(voter_id),
            kind=kind.value,
        ):
            content: VotableContent
            if votable_type == VotableType.QUESTION:
                content = await self.question_service.get_question(QuestionId(content_id))
            else:
                content = await self.answer_service.get_answer(AnswerId(content_id))

            if content.author_id == voter_id:
                logfire.warn(
                    "Self-vote rejected",
                    content_id=str(content_id),
                    voter_id=str(voter_id),
                )
                raise SelfVoteError(content.votable_type.value, str(content_id))

            # Author must exist before anything is written
            await self.user_service.get_by_id(content.author_id)

            if votable_type == VotableType.QUESTION:
                outcome = await self.question_service.toggle_vote(
                    QuestionId(content_id), voter_id, kind
                )
            else:
                outcome = await self.answer_service.toggle_vote(
                    AnswerId(content_id), voter_id, kind
                )

            event = self._vote_ledger_event(outcome)
            receipt = None
            if not event.is_empty:
                receipt = await self.user_service.apply_ledger_event(
                    content.author_id, event
                )

            logfire.info(
                "Vote toggled",
                content_id=str(content_id),
                direction=outcome.direction.value,
                vote_count=outcome.vote_count,
                points=event.points,
            )

            notifications = []
            if outcome.upvote_landed:
                notifications.append(self._upvote_notification(content, voter_id))
            notifications.extend(self._ledger_notifications(receipt))
            await self._notify(notifications)

            return outcome

    def _upvote_reward(self, votable_type: VotableType) -> int:
        if votable_type == VotableType.QUESTION:
            return self.settings.question_upvote_points
        return self.settings.answer_upvote_points

    def _vote_ledger_event(self, outcome: VoteOutcome) -> LedgerEvent:
        """Ledger change for the content author after a toggle."""
        reward = self._upvote_reward(outcome.votable_type)
        if self.settings.vote_reversal == "symmetric":
            points = outcome.credit_delta * reward
        elif (
            outcome.direction == VoteDirection.ADDED
            and outcome.current is VoteKind.UP
        ):
            points = reward
        else:
            points = 0

        return LedgerEvent(
            reason=f"{outcome.votable_type.value}_vote_{outcome.direction.value}",
            points=points,
            total_upvotes=int(outcome.current is VoteKind.UP)
            - int(outcome.previous is VoteKind.UP),
            total_downvotes=int(outcome.current is VoteKind.DOWN)
            - int(outcome.previous is VoteKind.DOWN),
        )

    def _upvote_notification(
        self, content: VotableContent, voter_id: UserId
    ) -> NotificationEvent:
        reward = self._upvote_reward(content.votable_type)
        if isinstance(content, Answer):
            return NotificationEvent.answer_upvoted(
                content.author_id, voter_id, content.question_id, content.id, reward
            )
        return NotificationEvent.question_upvoted(
            content.author_id, voter_id, QuestionId(content.id), reward
        )

    # ------------------------------------------------------------------
    # Acceptance
    # ------------------------------------------------------------------

    async def _load_pair(
        self, question_id: QuestionId, answer_id: AnswerId, actor_id: UserId
    ) -> tuple[Question, Answer]:
        question = await self.question_service.get_question(question_id)
        answer = await self.answer_service.get_answer(answer_id)

        if actor_id != question.author_id:
            logfire.warn(
                "Non-author tried to change acceptance",
                question_id=str(question_id),
                user_id=str(actor_id),
            )
            raise NotAuthorError(str(question_id), str(actor_id))
        if answer.question_id != question.id:
            logfire.warn(
                "Answer does not belong to question",
                question_id=str(question_id),
                answer_id=str(answer_id),
            )
            raise MismatchError(str(question_id), str(answer_id))
        return question, answer

    async def accept_answer(
        self, question_id: QuestionId, answer_id: AnswerId, actor_id: UserId
    ) -> AcceptanceResult:
        """Accept an answer, replacing any previously accepted one.

        Accepting the answer that is already accepted changes nothing. The
        Confidence Booster is paid at most once per answer. The acceptance
        reward follows ``acceptance_reward``: every acceptance by default,
        or only the first one for an answer.

        Args:
            question_id: Question the answer belongs to
            answer_id: Answer to accept
            actor_id: User accepting; must be the question author

        Returns:
            Updated question and answer

        Raises:
            NotFoundError: If question, answer or answer author not found
            NotAuthorError: If the actor did not ask the question
            MismatchError: If the answer belongs to another question
        """
        with logfire.span(
            "scoring_service.accept_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            user_id=str(actor_id),
        ):
            question, answer = await self._load_pair(question_id, answer_id, actor_id)

            if answer.is_accepted and question.accepted_answer_id == answer.id:
                logfire.info("Answer already accepted", answer_id=str(answer_id))
                return AcceptanceResult(question=question, answer=answer, changed=False)

            await self.user_service.get_by_id(answer.author_id)

            now = utc_now()

            # Exclusive acceptance: clear every other accepted answer first
            for other in await self.answer_service.get_answers_for_question(question.id):
                if other.id != answer.id and other.is_accepted:
                    await self.answer_service.save_answer(
                        other.model_copy(
                            update={
                                "is_accepted": False,
                                "accepted_at": None,
                                "accepted_by": None,
                            }
                        )
                    )
                    logfire.info(
                        "Previously accepted answer cleared", answer_id=str(other.id)
                    )

            pays_reward = (
                self.settings.acceptance_reward == "every_acceptance"
                or not answer.acceptance_rewarded
            )
            boosts = answer.is_anonymous and not answer.confidence_booster_awarded

            accepted = await self.answer_service.save_answer(
                answer.model_copy(
                    update={
                        "is_accepted": True,
                        "accepted_at": now,
                        "accepted_by": actor_id,
                        "acceptance_rewarded": True,
                        "confidence_booster_awarded": answer.confidence_booster_awarded
                        or boosts,
                    }
                )
            )
            question = await self.question_service.save_question(
                question.model_copy(
                    update={
                        "accepted_answer_id": answer.id,
                        "status": QuestionStatus.ANSWERED
                        if question.status == QuestionStatus.OPEN
                        else question.status,
                        "last_activity_at": now,
                    }
                )
            )

            points = self.settings.answer_accepted_points if pays_reward else 0
            event = LedgerEvent(
                reason="answer_accepted",
                points=points,
                accepted_answers=int(pays_reward),
                confidence_boosters=int(boosts),
            )
            receipt = None
            if not event.is_empty:
                receipt = await self.user_service.apply_ledger_event(
                    answer.author_id, event
                )

            logfire.info(
                "Answer accepted",
                question_id=str(question_id),
                answer_id=str(answer_id),
                points=points,
                confidence_booster=boosts,
            )

            notifications = []
            if answer.author_id != actor_id:
                notifications.append(
                    NotificationEvent.answer_accepted(
                        answer.author_id, actor_id, question.id, answer.id, points
                    )
                )
            notifications.extend(self._ledger_notifications(receipt))
            await self._notify(notifications)

            return AcceptanceResult(
                question=question, answer=accepted, changed=True, receipt=receipt
            )

    async def unaccept_answer(
        self, question_id: QuestionId, answer_id: AnswerId, actor_id: UserId
    ) -> AcceptanceResult:
        """Withdraw acceptance of an answer.

        Points and achievements earned by the acceptance are kept.

        Raises:
            NotFoundError: If question or answer not found
            NotAuthorError: If the actor did not ask the question
            MismatchError: If the answer belongs to another question
        """
        with logfire.span(
            "scoring_service.unaccept_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            user_id=str(actor_id),
        ):
            question, answer = await self._load_pair(question_id, answer_id, actor_id)

            if not answer.is_accepted and question.accepted_answer_id != answer.id:
                logfire.info("Answer not accepted", answer_id=str(answer_id))
                return AcceptanceResult(question=question, answer=answer, changed=False)

            now = utc_now()
            answer = await self.answer_service.save_answer(
                answer.model_copy(
                    update={"is_accepted": False, "accepted_at": None, "accepted_by": None}
                )
            )
            question = await self.question_service.save_question(
                question.model_copy(
                    update={
                        "accepted_answer_id": None,
                        "status": QuestionStatus.OPEN
                        if question.status == QuestionStatus.ANSWERED
                        else question.status,
                        "last_activity_at": now,
                    }
                )
            )
            logfire.info(
                "Answer unaccepted", question_id=str(question_id), answer_id=str(answer_id)
            )
            return AcceptanceResult(question=question, answer=answer, changed=True)

    # ------------------------------------------------------------------
    # Submissions
    # ------------------------------------------------------------------

    async def submit_question(self, question: Question) -> LedgerReceipt:
        """Credit the author of a newly posted question.

        Args:
            question: The saved question

        Returns:
            Ledger receipt for the author
        """
        with logfire.span(
            "scoring_service.submit_question",
            question_id=str(question.id),
            author_id=str(question.author_id),
        ):
            receipt = await self.user_service.apply_ledger_event(
                question.author_id,
                LedgerEvent(
                    reason="question_asked",
                    points=self.settings.question_asked_points,
                    questions_asked=1,
                ),
            )
            await self._notify(self._ledger_notifications(receipt))
            return receipt

    async def submit_answer(self, answer: Answer, question: Question) -> LedgerReceipt:
        """Credit the author of a newly posted answer and update their streak.

        The streak counts calendar days in the configured timezone.

        Args:
            answer: The saved answer
            question: The question it answers

        Returns:
            Ledger receipt for the answer author
        """
        with logfire.span(
            "scoring_service.submit_answer",
            answer_id=str(answer.id),
            author_id=str(answer.author_id),
        ):
            answered_on = answer.created_at.astimezone(self.streak_zone).date()
            receipt = await self.user_service.apply_ledger_event(
                answer.author_id,
                LedgerEvent(
                    reason="answer_given",
                    points=self.settings.answer_given_points,
                    answers_given=1,
                    answered_on=answered_on,
                ),
            )

            notifications = []
            if question.author_id != answer.author_id and not question.is_anonymous:
                notifications.append(
                    NotificationEvent.question_answered(
                        question.author_id,
                        None if answer.is_anonymous else answer.author_id,
                        question.id,
                        answer.id,
                    )
                )
            notifications.extend(self._ledger_notifications(receipt))
            await self._notify(notifications)
            return receipt

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def _ledger_notifications(
        self, receipt: LedgerReceipt | None
    ) -> list[NotificationEvent]:
        if receipt is None:
            return []
        user = receipt.user
        events = [
            NotificationEvent.achievement_earned(user.id, name)
            for name in receipt.earned
        ]
        if receipt.leveled_up:
            events.append(NotificationEvent.level_up(user.id, user.level, user.points))
        return events

    async def _notify(self, events: list[NotificationEvent]) -> None:
        """Dispatch notifications, logging and dropping any failure."""
        for event in events:
            try:
                await self.notification_service.dispatch(event)
            except Exception as e:
                logfire.warn(
                    "Notification dispatch failed",
                    recipient_id=str(event.recipient_id),
                    type=event.type.value,
                    error=str(e),
                    error_type=type(e).__name__,
                )
