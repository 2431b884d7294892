"""
In-memory Content Item Store and snapshot store.

The item store keeps library order (newest additions first) and is the
single collection every workflow operation reads and writes. Durability
comes from saving a WorkspaceSnapshot through a SnapshotStorePort.
"""

from __future__ import annotations

from contentdesk.domain.entities import ContentItem


class InMemoryItemStore:
    """Ordered, id-indexed collection of content items."""

    def __init__(self, items: list[ContentItem] | None = None) -> None:
        self._items: list[ContentItem] = list(items or [])

    def get_by_id(self, item_id: str) -> ContentItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def save(self, item: ContentItem) -> ContentItem:
        """Replace the item in place, keeping its position; append if new."""
        for i, existing in enumerate(self._items):
            if existing.id == item.id:
                self._items[i] = item
                return item
        self._items.append(item)
        return item

    def prepend(self, items: list[ContentItem]) -> None:
        self._items[:0] = items

    def delete(self, item_id: str) -> None:
        """Remove the item get_by_id would return; nothing else."""
        for i, existing in enumerate(self._items):
            if existing.id == item_id:
                del self._items[i]
                return

    def list_items(self) -> list[ContentItem]:
        return list(self._items)

    def replace_all(self, items: list[ContentItem]) -> None:
        self._items = list(items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class InMemorySnapshotStore:
    """Dict-backed SnapshotStorePort, for tests and throwaway sessions."""

    def __init__(self) -> None:
        self.blobs: dict[str, bytes] = {}

    def load(self, key: str) -> bytes | None:
        return self.blobs.get(key)

    def save(self, key: str, blob: bytes) -> None:
        self.blobs[key] = blob

    def delete(self, key: str) -> None:
        self.blobs.pop(key, None)
