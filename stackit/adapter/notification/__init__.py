"""Notification dispatch adapters."""

from .dispatcher import RecordingNotificationDispatcher, StoredNotificationDispatcher

__all__ = [
    "RecordingNotificationDispatcher",
    "StoredNotificationDispatcher",
]
