"""Publish component port definitions - protocols for dependencies."""

from typing import Protocol

from contentdesk.domain.entities import ContentItem, Site

from .models import PublishOptions, PublishResult


class PublisherPort(Protocol):
    """Content-management site client (external collaborator)."""

    async def publish(
        self,
        site: Site,
        item: ContentItem,
        options: PublishOptions,
    ) -> PublishResult:
        """
        Create or update the remote post.

        Raises:
            PublishError: remote failure; message is shown verbatim
        """
        ...
