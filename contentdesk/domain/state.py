from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from contentdesk.domain.entities import ContentItem, ContentStatus
from contentdesk.domain.errors import InvalidTransitionError


class TransitionKind(str, Enum):
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"
    PUBLISHED = "published"
    SCHEDULED = "scheduled"


@dataclass(frozen=True)
class TransitionRule:
    """One row of the workflow transition table."""

    from_status: ContentStatus
    to_status: ContentStatus
    kind: TransitionKind
    action: str  # Policy action checked against rules.yaml
    direct: bool = True  # False: only reachable via the publish action or the bulk scheduler


def outgoing(status: ContentStatus) -> list[TransitionRule]:
    """
    Return the transitions leaving a status.
    Every status is listed so that a new one fails loudly here.
    """
    if status is ContentStatus.DRAFT:
        return [
            TransitionRule(status, ContentStatus.NEEDS_REVIEW, TransitionKind.SUBMITTED, "content:submit"),
        ]

    if status is ContentStatus.NEEDS_REVIEW:
        return [
            TransitionRule(status, ContentStatus.APPROVED, TransitionKind.APPROVED, "content:approve"),
            TransitionRule(status, ContentStatus.DRAFT, TransitionKind.REJECTED, "content:reject"),
        ]

    if status is ContentStatus.APPROVED:
        return [
            TransitionRule(
                status, ContentStatus.PUBLISHED, TransitionKind.PUBLISHED, "content:publish", direct=False
            ),
            TransitionRule(
                status, ContentStatus.SCHEDULED, TransitionKind.SCHEDULED, "content:schedule", direct=False
            ),
        ]

    if status is ContentStatus.SCHEDULED:
        return []

    if status is ContentStatus.PUBLISHED:
        return []  # Terminal; republishing is an update and keeps the status

    raise ValueError(f"Unhandled content status: {status!r}")


def find_rule(current: ContentStatus, new: ContentStatus) -> TransitionRule | None:
    for rule in outgoing(current):
        if rule.to_status is new:
            return rule
    return None


def can_transition(current: ContentStatus, new: ContentStatus) -> bool:
    return find_rule(current, new) is not None


def allowed_targets(current: ContentStatus) -> list[ContentStatus]:
    return [rule.to_status for rule in outgoing(current)]


def coerce_status(value: ContentStatus | str, current: ContentStatus) -> ContentStatus:
    """Parse a requested target status; unknown values are invalid transitions."""
    if isinstance(value, ContentStatus):
        return value
    try:
        return ContentStatus(value)
    except ValueError:
        raise InvalidTransitionError(current, value, "unknown status") from None


def transition(
    item: ContentItem,
    new_status: ContentStatus,
    now: datetime,
    scheduled_for: datetime | None = None,
) -> ContentItem:
    """
    Return a NEW ContentItem with the updated status and timestamps.
    Raises InvalidTransitionError if the pair is not in the table.

    scheduled_for is set iff the new status is scheduled.
    """
    if not can_transition(item.status, new_status):
        raise InvalidTransitionError(
            item.status,
            new_status,
            f"allowed: {[s.value for s in allowed_targets(item.status)]}",
        )

    updates: dict[str, Any] = {
        "status": new_status,
        "updated_at": now,
        "scheduled_for": None,
    }

    if new_status is ContentStatus.SCHEDULED:
        if scheduled_for is None:
            raise InvalidTransitionError(item.status, new_status, "scheduled_for is required")
        updates["scheduled_for"] = scheduled_for

    return item.model_copy(update=updates)
