"""
Notification component - user-facing feedback for workflow events.

Single in-flight model: emitting replaces whatever is currently shown.
Auto-dismiss timing belongs to the UI; this component only holds state.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from datetime import datetime

from contentdesk.domain.entities import ContentItem, Notification, NotificationSeverity, User
from contentdesk.domain.state import TransitionKind

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    NotificationSeverity.SUCCESS: logging.INFO,
    NotificationSeverity.INFO: logging.INFO,
    NotificationSeverity.ERROR: logging.WARNING,
}


class NotificationEmitter:
    """Holds the current notification and a bounded history of past ones."""

    def __init__(
        self,
        history_limit: int = 50,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._current: Notification | None = None
        self._history: deque[Notification] = deque(maxlen=history_limit)
        self._now = now

    @property
    def current(self) -> Notification | None:
        return self._current

    @property
    def history(self) -> list[Notification]:
        return list(self._history)

    def emit(self, message: str, severity: NotificationSeverity) -> Notification:
        if self._now is not None:
            notification = Notification(message=message, severity=severity, created_at=self._now())
        else:
            notification = Notification(message=message, severity=severity)

        self._current = notification
        self._history.append(notification)
        logger.log(_LOG_LEVELS[severity], "notify[%s] %s", severity.value, message)
        return notification

    def success(self, message: str) -> Notification:
        return self.emit(message, NotificationSeverity.SUCCESS)

    def info(self, message: str) -> Notification:
        return self.emit(message, NotificationSeverity.INFO)

    def error(self, message: str) -> Notification:
        return self.emit(message, NotificationSeverity.ERROR)

    def dismiss(self) -> None:
        self._current = None

    def clear(self) -> None:
        self._current = None
        self._history.clear()


# --- Message builders ---


def identity(user: User | None, fallback: str) -> str:
    if user is None:
        return fallback
    return user.email or user.display_name or fallback


def transition_message(
    kind: TransitionKind,
    item: ContentItem,
    actor: User | None,
    unknown_label: str = "unknown author",
) -> tuple[str, NotificationSeverity]:
    """Message and severity for a reviewed transition."""
    who = identity(actor, unknown_label)

    if kind is TransitionKind.SUBMITTED:
        return f"'{item.title}' submitted for review by {who}", NotificationSeverity.INFO
    if kind is TransitionKind.APPROVED:
        return f"'{item.title}' approved by {who}", NotificationSeverity.SUCCESS
    if kind is TransitionKind.REJECTED:
        return f"'{item.title}' rejected by {who}", NotificationSeverity.ERROR
    if kind is TransitionKind.PUBLISHED:
        return "Content published successfully.", NotificationSeverity.SUCCESS
    if kind is TransitionKind.SCHEDULED:
        return f"'{item.title}' scheduled", NotificationSeverity.SUCCESS

    raise ValueError(f"Unhandled transition kind: {kind!r}")


def bulk_schedule_message(count: int) -> tuple[str, NotificationSeverity]:
    if count == 0:
        return "0 items scheduled.", NotificationSeverity.INFO
    noun = "item" if count == 1 else "items"
    return f"{count} {noun} scheduled successfully.", NotificationSeverity.SUCCESS
