"""
Scheduler component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from contentdesk.domain.entities import ContentItem, User

# --- Configuration ---


@dataclass(frozen=True)
class SchedulerConfig:
    """Bulk scheduling configuration from rules."""

    # Skipped items keep the cursor in place unless this is set
    advance_cursor_on_skip: bool = False
    default_interval_days: int = 1
    default_start_hour: int = 9  # UTC hour for date-only starts


DEFAULT_CONFIG = SchedulerConfig()


# --- Input Models ---


@dataclass(frozen=True)
class BulkScheduleInput:
    """Input for staggering a batch of approved items."""

    item_ids: list[str]
    actor: User
    start: datetime | date | str | None = None  # None: tomorrow at the default hour
    interval_days: int | None = None  # None: config default


# --- Output Models ---


@dataclass(frozen=True)
class ScheduledSlot:
    item_id: str
    scheduled_for: datetime


@dataclass(frozen=True)
class BulkScheduleOutput:
    """Output for a bulk schedule run."""

    count: int
    slots: list[ScheduledSlot] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CalendarDay:
    day: date
    in_month: bool
    items: list[ContentItem] = field(default_factory=list)
