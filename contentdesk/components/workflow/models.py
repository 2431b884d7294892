"""
Workflow component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from contentdesk.domain.entities import ContentItem, ContentStatus, User
from contentdesk.domain.state import TransitionKind

# --- Input Models ---


@dataclass(frozen=True)
class TransitionInput:
    """Input for a reviewed status change."""

    item_id: str
    to_status: ContentStatus | str
    actor: User


@dataclass(frozen=True)
class AddToLibraryInput:
    """Input for adding freshly generated drafts to the library."""

    items: list[ContentItem]
    actor: User


@dataclass(frozen=True)
class DeleteItemInput:
    """Input for deleting an item."""

    item_id: str
    actor: User


# --- Output Models ---


@dataclass(frozen=True)
class TransitionOutput:
    """Result of a successful transition."""

    item: ContentItem
    previous_status: ContentStatus
    kind: TransitionKind


@dataclass(frozen=True)
class AddToLibraryOutput:
    items: list[ContentItem] = field(default_factory=list)


@dataclass(frozen=True)
class DeleteItemOutput:
    item_id: str
