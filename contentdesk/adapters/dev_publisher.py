"""
Dev Publisher Adapter.

Logs publish calls instead of talking to a real content-management site.
Used for local development and testing.

Key behaviors:
- Derives the post URL from the site URL, post type and a title slug
- "update" keeps the given post id; "create" allocates a new one
- Sites whose URL contains "publish-fail" reject with PublishError
- Records every call in memory for test assertions
"""

from __future__ import annotations

import asyncio
import itertools
import logging
import re
from dataclasses import dataclass, field

from contentdesk.components.publish import PublishOptions, PublishResult
from contentdesk.domain.entities import ContentItem, ContentType, Site
from contentdesk.domain.errors import PublishError

logger = logging.getLogger(__name__)


def slugify(title: str) -> str:
    slug = re.sub(r"\s+", "-", title.lower())
    return re.sub(r"[^a-z0-9-]", "", slug)


@dataclass
class PublishCall:
    """Record of a logged publish for test assertions."""

    site_id: str
    item_id: str
    options: PublishOptions
    result: PublishResult | None


@dataclass
class DevPublisher:
    """Dev publisher that logs instead of publishing. Implements PublisherPort."""

    calls: list[PublishCall] = field(default_factory=list)
    delay_seconds: float = 0.0
    fail_marker: str = "publish-fail"
    _ids: itertools.count = field(default_factory=lambda: itertools.count(1001))

    async def publish(
        self,
        site: Site,
        item: ContentItem,
        options: PublishOptions,
    ) -> PublishResult:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)

        if self.fail_marker in site.url:
            self.calls.append(PublishCall(site.id, item.id, options, None))
            raise PublishError("The server returned an error (500).")

        post_type = "product" if item.type is ContentType.PRODUCT else "post"
        url = f"{site.url}/{post_type}/{slugify(item.title)}"

        if options.action == "update" and options.post_id is not None:
            logger.info("Dev publisher: UPDATING post %s on %s", options.post_id, site.url)
            result = PublishResult(external_post_id=options.post_id, external_url=url)
        else:
            post_id = next(self._ids)
            logger.info("Dev publisher: CREATING post %s on %s", post_id, site.url)
            result = PublishResult(external_post_id=post_id, external_url=url)

        self.calls.append(PublishCall(site.id, item.id, options, result))
        return result
