"""Vote outcome returned by a toggle.

Votes are not entities of their own: membership lives in the content's
upvoter and downvoter sets. A toggle reports what it changed.
"""

from typing import Optional
from uuid import UUID

from stackit.domain.value import UserId, VotableType, VoteDirection, VoteKind
from stackit.domain.value.common import ValueObject


class VoteOutcome(ValueObject):
    """Result of toggling one voter's vote on one item.

    ``vote_delta`` is the change in the item's vote count. ``credit_delta``
    is +1 when the voter's upvote landed, -1 when it was taken back and 0
    otherwise.
    """

    changed: bool = True
    votable_type: VotableType
    content_id: UUID
    voter_id: UserId
    kind: VoteKind
    direction: VoteDirection
    previous: Optional[VoteKind] = None
    current: Optional[VoteKind] = None
    vote_delta: int
    credit_delta: int
    vote_count: int

    @property
    def upvote_landed(self) -> bool:
        """Whether this toggle left the voter upvoting when they were not before."""
        return self.current is VoteKind.UP and self.previous is not VoteKind.UP
