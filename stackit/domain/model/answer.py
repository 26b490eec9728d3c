"""Answer entity."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from stackit.domain.model.common import utc_now
from stackit.domain.model.content import VotableContent
from stackit.domain.value import AnswerId, QuestionId, UserId, VotableType


class Answer(VotableContent):
    """Answer to a question.

    At most one answer per question is accepted at a time. The two reward
    flags remember what an acceptance already paid out, so accepting the
    same answer again never credits twice.
    """

    votable_type: ClassVar[VotableType] = VotableType.ANSWER

    id: AnswerId
    question_id: QuestionId
    content: str = Field(min_length=10, max_length=10000)
    is_anonymous: bool = False
    is_accepted: bool = False
    accepted_at: Optional[datetime] = None
    accepted_by: Optional[UserId] = None
    acceptance_rewarded: bool = False
    confidence_booster_awarded: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    edited_at: Optional[datetime] = None
