"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class NotificationDispatchError(AdapterError):
    """A notification could not be delivered."""

    pass
