"""
Calendar queries over scheduled content.

Days are calendar days in UTC. A month view always spans whole weeks,
Sunday through Saturday.
"""

from __future__ import annotations

import calendar
from datetime import UTC, date, timedelta

from contentdesk.domain.entities import ContentItem, ContentStatus
from contentdesk.domain.errors import InvalidCalendarMonthError

from .models import CalendarDay


def scheduled_items(items: list[ContentItem]) -> list[ContentItem]:
    return [i for i in items if i.status is ContentStatus.SCHEDULED and i.scheduled_for]


def items_for_day(items: list[ContentItem], day: date) -> list[ContentItem]:
    """Scheduled items falling on the given UTC day, in store order."""
    result = []
    for item in scheduled_items(items):
        assert item.scheduled_for is not None
        when = item.scheduled_for
        if when.tzinfo is not None:
            when = when.astimezone(UTC)
        if when.date() == day:
            result.append(item)
    return result


def month_grid(year: int, month: int) -> list[date]:
    """
    Days shown for a month: Sunday on/before the 1st to Saturday on/after the last.

    Raises InvalidCalendarMonthError for a month outside 1..12 or a grid
    that would leave the supported date range.
    """
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidCalendarMonthError(year, month)
    try:
        first = date(year, month, 1)
        last = date(year, month, calendar.monthrange(year, month)[1])

        # date.weekday(): Monday=0 ... Sunday=6
        start = first - timedelta(days=(first.weekday() + 1) % 7)
        end = last + timedelta(days=(5 - last.weekday()) % 7)
    except (TypeError, ValueError, OverflowError):
        raise InvalidCalendarMonthError(year, month) from None

    return [start + timedelta(days=n) for n in range((end - start).days + 1)]


def calendar_month(items: list[ContentItem], year: int, month: int) -> list[CalendarDay]:
    return [
        CalendarDay(day=d, in_month=d.month == month, items=items_for_day(items, d))
        for d in month_grid(year, month)
    ]
