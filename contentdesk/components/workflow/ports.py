"""
Workflow component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from contentdesk.domain.entities import ContentItem, User
from contentdesk.ports.clock import ClockPort
from contentdesk.ports.repo import ItemStorePort, UserDirectoryPort


class PolicyPort(Protocol):
    """Port for permission checks."""

    def check_permission(
        self,
        user: User | None,
        action: str,
        resource: ContentItem | None = None,
    ) -> bool:
        """Check if user may perform action on resource."""
        ...


__all__ = [
    "ClockPort",
    "ItemStorePort",
    "PolicyPort",
    "UserDirectoryPort",
]
