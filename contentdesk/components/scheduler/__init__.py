"""
Scheduler component - Bulk scheduling and the scheduling calendar.
"""

from .calendar import calendar_month, items_for_day, month_grid, scheduled_items
from .component import build_config, parse_start, plan_slots, run_schedule_batch, validate_interval
from .models import (
    DEFAULT_CONFIG,
    BulkScheduleInput,
    BulkScheduleOutput,
    CalendarDay,
    ScheduledSlot,
    SchedulerConfig,
)

__all__ = [
    # Entry points
    "run_schedule_batch",
    # Calendar
    "calendar_month",
    "items_for_day",
    "month_grid",
    "scheduled_items",
    # Helpers
    "build_config",
    "parse_start",
    "plan_slots",
    "validate_interval",
    # Models
    "DEFAULT_CONFIG",
    "BulkScheduleInput",
    "BulkScheduleOutput",
    "CalendarDay",
    "ScheduledSlot",
    "SchedulerConfig",
]
