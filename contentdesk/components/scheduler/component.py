"""
Scheduler component - bulk scheduling of approved content.

Assigns staggered future publish timestamps to a batch of approved items.

Invariants:
- I1: only editors schedule; validation finishes before any item changes
- I2: items are processed in the order given
- I3: only items that are exactly "approved" are scheduled
- I4: assigned timestamps are strictly increasing, spaced by interval_days
- I5: skipped items do not advance the cursor (configurable)
- I6: every slot is computed before the first write, so a batch that cannot
  be placed on the calendar changes nothing
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime, time, timedelta

from contentdesk.components.notifications import NotificationEmitter, bulk_schedule_message
from contentdesk.components.workflow import ClockPort, ItemStorePort, PolicyPort, authorize
from contentdesk.domain.entities import ContentItem, ContentStatus
from contentdesk.domain.errors import InvalidIntervalError, InvalidStartDateError
from contentdesk.domain.state import transition
from contentdesk.rules.models import Rules

from .models import (
    DEFAULT_CONFIG,
    BulkScheduleInput,
    BulkScheduleOutput,
    ScheduledSlot,
    SchedulerConfig,
)

logger = logging.getLogger(__name__)


def build_config(rules: Rules | None) -> SchedulerConfig:
    """Build scheduler config from rules."""
    if rules is None:
        return DEFAULT_CONFIG
    return SchedulerConfig(
        advance_cursor_on_skip=rules.scheduling.advance_cursor_on_skip,
        default_interval_days=rules.scheduling.default_interval_days,
        default_start_hour=rules.scheduling.default_start_hour,
    )


# --- Validation ---


def validate_interval(interval_days: object) -> int:
    # bool is an int subclass; True is not "one day"
    if isinstance(interval_days, bool) or not isinstance(interval_days, int):
        raise InvalidIntervalError(interval_days)
    if interval_days <= 0:
        raise InvalidIntervalError(interval_days)
    try:
        timedelta(days=interval_days)
    except OverflowError:
        raise InvalidIntervalError(interval_days) from None
    return interval_days


def parse_start(
    value: object,
    default_hour: int = 0,
    today: date | None = None,
) -> datetime:
    """
    Parse the batch start instant.

    Accepts a datetime, a date or an ISO-8601 string. Dates without a time
    start at default_hour. None means tomorrow at default_hour (needs today).
    Naive values are taken as UTC.
    """
    if value is None:
        if today is None:
            raise InvalidStartDateError(value)
        return _at_hour(today + timedelta(days=1), default_hour)

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return _at_hour(value, default_hour)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidStartDateError(value)
        try:
            return _at_hour(date.fromisoformat(text), default_hour)
        except ValueError:
            pass
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidStartDateError(value) from None
    else:
        raise InvalidStartDateError(value)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def _at_hour(day: date, hour: int) -> datetime:
    return datetime.combine(day, time(hour), tzinfo=UTC)


# --- Planning ---


def plan_slots(
    item_ids: list[str],
    store: ItemStorePort,
    start: datetime,
    interval_days: int,
    config: SchedulerConfig = DEFAULT_CONFIG,
) -> tuple[list[tuple[ContentItem, datetime]], list[str]]:
    """
    Decide which items get which timestamp, without writing anything.

    Returns (item, scheduled_for) pairs in input order and the skipped ids.

    Raises:
        InvalidStartDateError: a slot falls past the last representable date
    """
    step = timedelta(days=interval_days)
    planned: list[tuple[ContentItem, datetime]] = []
    planned_ids: set[str] = set()
    skipped: list[str] = []
    offset = 0

    for item_id in item_ids:
        item = store.get_by_id(item_id)
        if item is None or item.status is not ContentStatus.APPROVED or item.id in planned_ids:
            skipped.append(item_id)
            if config.advance_cursor_on_skip:
                offset += 1
            continue

        try:
            when = start + step * offset
        except OverflowError:
            raise InvalidStartDateError(start, "schedule runs past the calendar") from None

        planned.append((item, when))
        planned_ids.add(item.id)
        offset += 1

    return planned, skipped


# --- Component Entry Points ---


def run_schedule_batch(
    inp: BulkScheduleInput,
    *,
    store: ItemStorePort,
    policy: PolicyPort,
    clock: ClockPort,
    emitter: NotificationEmitter,
    config: SchedulerConfig = DEFAULT_CONFIG,
) -> BulkScheduleOutput:
    """
    Schedule every approved item in item_ids, one interval apart.

    Args:
        inp: Item ids, start instant, interval in days, acting user.
            A missing interval or start falls back to the config defaults.
        store: Content item store.
        policy: Permission checks ("content:schedule").
        clock: Timestamp source for updated_at and the default start day.
        emitter: Receives one aggregate notification.
        config: Scheduler configuration.

    Returns:
        BulkScheduleOutput with the count actually scheduled.

    Raises:
        UnauthorizedError, InvalidIntervalError, InvalidStartDateError
    """
    authorize(policy, inp.actor, "content:schedule")
    now = clock.now_utc()

    interval_days = inp.interval_days if inp.interval_days is not None else config.default_interval_days
    interval = validate_interval(interval_days)
    start = parse_start(inp.start, config.default_start_hour, today=now.date())

    planned, skipped = plan_slots(inp.item_ids, store, start, interval, config)

    slots: list[ScheduledSlot] = []
    for item, when in planned:
        store.save(transition(item, ContentStatus.SCHEDULED, now, scheduled_for=when))
        slots.append(ScheduledSlot(item_id=item.id, scheduled_for=when))

    logger.info(
        "Bulk schedule by %s: %d scheduled, %d skipped (interval %d day(s))",
        inp.actor.id,
        len(slots),
        len(skipped),
        interval,
    )

    message, severity = bulk_schedule_message(len(slots))
    emitter.emit(message, severity)

    return BulkScheduleOutput(count=len(slots), slots=slots, skipped=skipped)
