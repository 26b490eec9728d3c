"""Domain layer errors.

Every domain error carries a stable ``code`` so callers can tell rejections
apart without parsing messages. None of them is transient: the event that
raised it is abandoned before anything was written.
"""


class DomainError(Exception):
    """Base domain error."""

    code: str = "domain_error"


class ValidationError(DomainError):
    """Domain validation error."""

    code = "validation_error"


class SelfVoteError(DomainError):
    """Raised when a user votes on their own question or answer."""

    code = "self_vote"

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"You cannot vote on your own {resource}: {resource_id}")


class NotAuthorError(DomainError):
    """Raised when someone other than the question author accepts an answer."""

    code = "not_author"

    def __init__(self, question_id: str, user_id: str):
        self.question_id = question_id
        self.user_id = user_id
        super().__init__(
            f"Only the question author can accept answers on question {question_id}"
        )


class MismatchError(DomainError):
    """Raised when an answer does not belong to the given question."""

    code = "mismatch"

    def __init__(self, question_id: str, answer_id: str):
        self.question_id = question_id
        self.answer_id = answer_id
        super().__init__(
            f"Answer {answer_id} does not belong to question {question_id}"
        )


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    code = "not_authorized"

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
