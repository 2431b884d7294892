"""Publish component models - frozen dataclass inputs and outputs."""

from dataclasses import dataclass, field

from contentdesk.domain.entities import ContentItem, PublishAction, RemotePostStatus, User


@dataclass(frozen=True)
class PublishOptions:
    """How the item is sent to the target site."""

    categories: list[int] = field(default_factory=list)
    remote_status: RemotePostStatus = "publish"
    action: PublishAction = "create"
    post_id: int | None = None  # Required for action="update"


@dataclass(frozen=True)
class PublishResult:
    """What the target site reports back."""

    external_post_id: int
    external_url: str


@dataclass(frozen=True)
class PublishInput:
    """Input for publishing an item to a site."""

    item_id: str
    site_id: str
    actor: User
    options: PublishOptions = field(default_factory=PublishOptions)


@dataclass(frozen=True)
class PublishOutput:
    """Output for a publish call. item is None when the write-back was dropped."""

    result: PublishResult
    item: ContentItem | None
