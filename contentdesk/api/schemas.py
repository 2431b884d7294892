from datetime import date, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from contentdesk.domain.entities import (
    ContentItem,
    PublishAction,
    RemotePostStatus,
    SiteStats,
)

# --- Session ---


class LoginRequest(BaseModel):
    email: str


# --- Content ---


class AddItemsRequest(BaseModel):
    items: list[ContentItem]


class GenerateRequest(BaseModel):
    kind: Literal["article", "product"]
    params: dict[str, Any] = Field(default_factory=dict)


class TransitionRequest(BaseModel):
    to_status: str


class BulkScheduleRequest(BaseModel):
    item_ids: list[str]
    # Omitted values fall back to the scheduling rules
    start: datetime | str | None = None
    interval_days: int | None = None


class BulkScheduleResponse(BaseModel):
    count: int


class PublishRequest(BaseModel):
    site_id: str
    categories: list[int] = []
    remote_status: RemotePostStatus = "publish"
    action: PublishAction = "create"
    post_id: int | None = None


class PublishResponse(BaseModel):
    external_post_id: int
    external_url: str
    item: ContentItem | None = None  # None when the item was deleted mid-publish


class CalendarDayResponse(BaseModel):
    day: date
    in_month: bool
    items: list[ContentItem] = []


# --- Sites ---


class SiteCreateRequest(BaseModel):
    url: str
    username: str = ""
    app_password: str = ""
    name: str | None = None
    is_virtual: bool = False


class SiteUpdateRequest(BaseModel):
    name: str | None = None
    username: str | None = None
    app_password: str | None = None
    stats: SiteStats | None = None


class SiteResponse(BaseModel):
    """Site without its application password."""

    id: str
    url: str
    name: str
    username: str
    stats: SiteStats
    is_virtual: bool
