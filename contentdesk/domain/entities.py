from datetime import UTC, datetime
from enum import Enum
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return str(uuid4())


# --- Enums ---

class ContentType(str, Enum):
    ARTICLE = "article"
    PRODUCT = "product"


class ContentStatus(str, Enum):
    DRAFT = "draft"
    NEEDS_REVIEW = "needs-review"
    APPROVED = "approved"
    SCHEDULED = "scheduled"
    PUBLISHED = "published"


class Role(str, Enum):
    WRITER = "writer"
    EDITOR = "editor"


class NotificationSeverity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


RemotePostStatus = Literal["publish", "draft", "pending"]
PublishAction = Literal["create", "update"]

# --- Users ---

class User(BaseModel):
    id: str = Field(default_factory=_new_id)
    email: str
    display_name: str = ""
    role: Role

    @property
    def is_editor(self) -> bool:
        return self.role is Role.EDITOR

# --- Sites ---

class SiteStats(BaseModel):
    posts: int = 0
    pages: int = 0
    products: int = 0


class Site(BaseModel):
    id: str  # Normalized URL origin
    url: str
    name: str
    username: str = ""
    app_password: str = ""
    stats: SiteStats = Field(default_factory=SiteStats)
    is_virtual: bool = False

# --- Content ---

class ContentItem(BaseModel):
    id: str = Field(default_factory=_new_id)
    type: ContentType
    title: str
    meta_description: str = ""

    # Article fields
    body: str = ""
    featured_image_url: str | None = None
    featured_image_prompt: str | None = None

    # Product fields
    long_description: str = ""
    short_description: str = ""
    gallery_image_urls: list[str] = Field(default_factory=list)

    status: ContentStatus = ContentStatus.DRAFT
    author_id: str | None = None

    site_id: str | None = None
    external_post_id: int | None = None
    external_url: str | None = None

    scheduled_for: datetime | None = None

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @property
    def was_published(self) -> bool:
        return self.external_post_id is not None

# --- Notifications ---

class Notification(BaseModel):
    message: str
    severity: NotificationSeverity
    created_at: datetime = Field(default_factory=_utcnow)

# --- Persistence ---

class WorkspaceSnapshot(BaseModel):
    current_user: User | None = None
    items: list[ContentItem] = Field(default_factory=list)
    sites: list[Site] = Field(default_factory=list)
