"""
Error taxonomy for the content workflow.

Local validation errors abort the requested operation with zero mutation.
External errors (generation, publish) are passed through verbatim.
None of them is fatal; the controller reports each one as a notification.
"""

from __future__ import annotations

from contentdesk.domain.entities import ContentStatus


class ContentDeskError(Exception):
    """Base class for every recoverable workflow failure."""

    code = "error"


# --- Workflow ---


class ItemNotFoundError(ContentDeskError):
    code = "item_not_found"

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Item {item_id} not found")


class InvalidTransitionError(ContentDeskError):
    code = "invalid_transition"

    def __init__(
        self,
        from_status: ContentStatus | str,
        to_status: ContentStatus | str,
        reason: str = "",
    ) -> None:
        self.from_status = from_status
        self.to_status = to_status
        self.reason = reason
        msg = f"Cannot transition from '{_label(from_status)}' to '{_label(to_status)}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class UnauthorizedError(ContentDeskError):
    code = "unauthorized"


# --- Scheduler ---


class InvalidIntervalError(ContentDeskError):
    code = "invalid_interval"

    def __init__(self, interval_days: object) -> None:
        self.interval_days = interval_days
        super().__init__(f"Interval must be a positive number of days, got {interval_days!r}")


class InvalidStartDateError(ContentDeskError):
    code = "invalid_start_date"

    def __init__(self, value: object, reason: str = "") -> None:
        self.value = value
        self.reason = reason
        msg = f"Invalid start date: {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class InvalidCalendarMonthError(ContentDeskError):
    code = "invalid_month"

    def __init__(self, year: object, month: object) -> None:
        self.year = year
        self.month = month
        super().__init__(f"No calendar for {year}/{month}")


# --- Sites ---


class SiteNotFoundError(ContentDeskError):
    code = "site_not_found"

    def __init__(self, site_id: str) -> None:
        self.site_id = site_id
        super().__init__(f"Site {site_id} not found")


class SiteExistsError(ContentDeskError):
    code = "site_exists"

    def __init__(self, site_id: str) -> None:
        self.site_id = site_id
        super().__init__("A site with this URL already exists.")


class InvalidSiteError(ContentDeskError):
    code = "invalid_site"


# --- External collaborators ---


class GenerationError(ContentDeskError):
    code = "generation_failed"


class PublishError(ContentDeskError):
    code = "publish_failed"


def _label(status: ContentStatus | str) -> str:
    return status.value if isinstance(status, ContentStatus) else str(status)
