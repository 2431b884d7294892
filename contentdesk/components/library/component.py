"""
Library component - filtered views of the content library.

The query is pure: it never mutates and preserves input order, so the
same arguments on an unchanged library always give the same result.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Literal

from contentdesk.domain.entities import ContentItem, ContentStatus, ContentType, User

TypeFilter = ContentType | Literal["all"]
StatusFilter = ContentStatus | Literal["all"]

UNKNOWN_AUTHOR = "unknown author"


def author_labels(user: User | None, unknown_label: str = UNKNOWN_AUTHOR) -> list[str]:
    """Strings an author can be searched by."""
    if user is None:
        return [unknown_label]
    return [label for label in (user.email, user.display_name) if label]


def _matches_filter(value: str, wanted: str) -> bool:
    return wanted == "all" or value == wanted


def query(
    items: Sequence[ContentItem],
    type_filter: TypeFilter | str = "all",
    status_filter: StatusFilter | str = "all",
    search_text: str = "",
    resolve_user: Callable[[str], User | None] | None = None,
    unknown_label: str = UNKNOWN_AUTHOR,
) -> list[ContentItem]:
    """
    Return the items matching type, status and free-text search.

    Args:
        items: Library items, in display order.
        type_filter: "all" or a ContentType.
        status_filter: "all" or a ContentStatus.
        search_text: Case-insensitive substring of title or author email/name.
        resolve_user: Author lookup; unknown ids use unknown_label.
        unknown_label: Placeholder author string.
    """
    type_value = type_filter.value if isinstance(type_filter, ContentType) else type_filter
    status_value = status_filter.value if isinstance(status_filter, ContentStatus) else status_filter
    needle = search_text.lower()

    result: list[ContentItem] = []
    for item in items:
        if not _matches_filter(item.type.value, type_value):
            continue
        if not _matches_filter(item.status.value, status_value):
            continue
        if needle and not _matches_search(item, needle, resolve_user, unknown_label):
            continue
        result.append(item)
    return result


def _matches_search(
    item: ContentItem,
    needle: str,
    resolve_user: Callable[[str], User | None] | None,
    unknown_label: str,
) -> bool:
    if needle in item.title.lower():
        return True

    author = None
    if item.author_id and resolve_user is not None:
        author = resolve_user(item.author_id)

    return any(needle in label.lower() for label in author_labels(author, unknown_label))
