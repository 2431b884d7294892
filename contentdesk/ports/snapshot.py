"""
Workspace persistence port.

The workspace (current user, item collection, sites) is stored as an
opaque keyed blob. Implementations must write a blob atomically: a reader
sees either the previous snapshot or the new one, never a mix.
"""

from __future__ import annotations

from typing import Protocol


class SnapshotStorePort(Protocol):
    """Keyed blob store for workspace snapshots."""

    def load(self, key: str) -> bytes | None:
        """Return the blob stored under key, or None."""
        ...

    def save(self, key: str, blob: bytes) -> None:
        """Replace the blob stored under key atomically."""
        ...

    def delete(self, key: str) -> None:
        """Remove the blob if present."""
        ...
