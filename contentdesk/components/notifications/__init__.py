"""
Notification component - single in-flight user notifications.
"""

from .component import (
    NotificationEmitter,
    bulk_schedule_message,
    identity,
    transition_message,
)

__all__ = [
    "NotificationEmitter",
    "bulk_schedule_message",
    "identity",
    "transition_message",
]
