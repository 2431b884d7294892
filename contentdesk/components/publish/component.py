"""Publish component - sends approved content to an external site."""

from __future__ import annotations

import logging

from contentdesk.components.notifications import NotificationEmitter
from contentdesk.components.sites import find_site
from contentdesk.components.workflow import (
    ClockPort,
    ItemStorePort,
    PolicyPort,
    authorize,
    get_item_or_raise,
    resolve_rule,
)
from contentdesk.domain.entities import ContentItem, ContentStatus, Site
from contentdesk.domain.errors import InvalidSiteError, InvalidTransitionError
from contentdesk.domain.state import transition

from .models import PublishInput, PublishOptions, PublishOutput, PublishResult
from .ports import PublisherPort

logger = logging.getLogger(__name__)


class PublishComponent:
    """
    Publishes items through the PublisherPort.

    The publisher call is the only await in the workflow. The item is read
    again after it resolves: a publish that outlives its item (deleted while
    the call was in flight) is dropped instead of resurrecting it, and so is
    one whose item changed status meanwhile.
    """

    def __init__(
        self,
        store: ItemStorePort,
        policy: PolicyPort,
        clock: ClockPort,
        emitter: NotificationEmitter,
        publisher: PublisherPort,
    ) -> None:
        self._store = store
        self._policy = policy
        self._clock = clock
        self._emitter = emitter
        self._publisher = publisher

    async def run_publish(self, inp: PublishInput, sites: list[Site]) -> PublishOutput:
        """
        Publish (create) an approved item, or update an already published one.

        Raises:
            ItemNotFoundError, UnauthorizedError, InvalidTransitionError,
            SiteNotFoundError, InvalidSiteError, PublishError
        """
        item = get_item_or_raise(self._store, inp.item_id)
        authorize(self._policy, inp.actor, "content:publish", item)

        site = find_site(sites, inp.site_id)
        if site.is_virtual:
            raise InvalidSiteError(f"Site {site.id} is virtual and cannot be published to")

        options = self._check_action(item, inp.options)

        # Item stays in its pre-call status until the publisher resolves
        result = await self._publisher.publish(site, item, options)

        current = self._store.get_by_id(item.id)
        if current is None:
            logger.warning(
                "Item %s was deleted while publishing to %s; dropping result (post %s)",
                item.id,
                site.id,
                result.external_post_id,
            )
            return PublishOutput(result=result, item=None)
        if current.status is not item.status:
            logger.warning(
                "Item %s moved from %s to %s while publishing to %s; dropping result (post %s)",
                item.id,
                item.status.value,
                current.status.value,
                site.id,
                result.external_post_id,
            )
            return PublishOutput(result=result, item=None)

        updated = self._apply_result(current, site, result)
        self._store.save(updated)
        logger.info(
            "Published %s to %s as post %s (%s)",
            item.id,
            site.id,
            result.external_post_id,
            options.action,
        )

        if options.action == "update":
            self._emitter.success("Content updated successfully.")
        else:
            self._emitter.success("Content published successfully.")

        return PublishOutput(result=result, item=updated)

    def _check_action(self, item: ContentItem, options: PublishOptions) -> PublishOptions:
        if options.action == "create":
            resolve_rule(item, ContentStatus.PUBLISHED)
            return options

        if item.status is not ContentStatus.PUBLISHED:
            raise InvalidTransitionError(
                item.status, ContentStatus.PUBLISHED, "only published items can be updated"
            )
        post_id = options.post_id if options.post_id is not None else item.external_post_id
        if post_id is None:
            raise InvalidTransitionError(
                item.status, ContentStatus.PUBLISHED, "update requires a post id"
            )
        return PublishOptions(
            categories=list(options.categories),
            remote_status=options.remote_status,
            action="update",
            post_id=post_id,
        )

    def _apply_result(self, item: ContentItem, site: Site, result: PublishResult) -> ContentItem:
        now = self._clock.now_utc()
        if item.status is not ContentStatus.PUBLISHED:
            item = transition(item, ContentStatus.PUBLISHED, now)
        return item.model_copy(
            update={
                "site_id": site.id,
                "external_post_id": result.external_post_id,
                "external_url": result.external_url,
                "updated_at": now,
            }
        )
