"""
Workflow component - reviewed status transitions and library membership.

State Machine:
- draft -> needs-review (submitted; writer, author only)
- needs-review -> approved (editor)
- needs-review -> draft (rejected; editor)
- approved -> published (publish action only)
- approved -> scheduled (bulk scheduler only)

Guards:
- G1: unknown item fails before anything else
- G2: pair must be in the transition table
- G3: actor must hold the transition's permission (role + ownership)
A failed call never mutates the store and emits no workflow notification.
"""

from __future__ import annotations

import logging
from datetime import datetime
from uuid import uuid4

from contentdesk.components.notifications import NotificationEmitter, transition_message
from contentdesk.domain.entities import ContentItem, ContentStatus, User
from contentdesk.domain.errors import (
    InvalidTransitionError,
    ItemNotFoundError,
    UnauthorizedError,
)
from contentdesk.domain.state import (
    TransitionKind,
    TransitionRule,
    coerce_status,
    find_rule,
    transition,
)

from .models import (
    AddToLibraryInput,
    AddToLibraryOutput,
    DeleteItemInput,
    DeleteItemOutput,
    TransitionInput,
    TransitionOutput,
)
from .ports import ClockPort, ItemStorePort, PolicyPort, UserDirectoryPort

logger = logging.getLogger(__name__)

_INDIRECT_HINTS = {
    ContentStatus.PUBLISHED: "use the publish action",
    ContentStatus.SCHEDULED: "use the bulk scheduler",
}


# --- Guards ---


def get_item_or_raise(store: ItemStorePort, item_id: str) -> ContentItem:
    item = store.get_by_id(item_id)
    if item is None:
        raise ItemNotFoundError(item_id)
    return item


def authorize(
    policy: PolicyPort,
    actor: User,
    action: str,
    item: ContentItem | None = None,
) -> None:
    """Raise UnauthorizedError unless actor may perform action."""
    if not policy.check_permission(actor, action, resource=item):
        raise UnauthorizedError(f"{actor.email} ({actor.role.value}) is not allowed to {action}")


def resolve_rule(item: ContentItem, to_status: ContentStatus | str) -> TransitionRule:
    """Look up the table row for item.status -> to_status or raise."""
    target = coerce_status(to_status, item.status)
    rule = find_rule(item.status, target)
    if rule is None:
        raise InvalidTransitionError(item.status, target)
    return rule


# --- Component Entry Points ---


def run_transition(
    inp: TransitionInput,
    *,
    store: ItemStorePort,
    policy: PolicyPort,
    clock: ClockPort,
    emitter: NotificationEmitter,
    directory: UserDirectoryPort | None = None,
    unknown_label: str = "unknown author",
) -> TransitionOutput:
    """
    Apply a reviewed transition (submit, approve, reject).

    Args:
        inp: Item id, target status and acting user.
        store: Content item store.
        policy: Permission checks.
        clock: Timestamp source for updated_at.
        emitter: Receives exactly one notification on success.
        directory: Resolves the author named in "submitted" messages.
        unknown_label: Placeholder for unresolvable identities.

    Raises:
        ItemNotFoundError, InvalidTransitionError, UnauthorizedError
    """
    item = get_item_or_raise(store, inp.item_id)
    rule = resolve_rule(item, inp.to_status)

    if not rule.direct:
        raise InvalidTransitionError(item.status, rule.to_status, _INDIRECT_HINTS[rule.to_status])

    authorize(policy, inp.actor, rule.action, item)

    updated = transition(item, rule.to_status, clock.now_utc())
    store.save(updated)
    logger.info(
        "Transition %s: %s -> %s by %s",
        item.id,
        rule.from_status.value,
        rule.to_status.value,
        inp.actor.id,
    )

    named = inp.actor
    if rule.kind is TransitionKind.SUBMITTED and directory is not None and item.author_id:
        named = directory.resolve_user(item.author_id) or inp.actor
    message, severity = transition_message(rule.kind, updated, named, unknown_label)
    emitter.emit(message, severity)

    return TransitionOutput(item=updated, previous_status=item.status, kind=rule.kind)


def run_add_to_library(
    inp: AddToLibraryInput,
    *,
    store: ItemStorePort,
    policy: PolicyPort,
    clock: ClockPort,
    emitter: NotificationEmitter,
) -> AddToLibraryOutput:
    """
    Add generated drafts to the front of the library, owned by the actor.
    Every added item gets a fresh id, so it can never shadow a stored one.
    """
    authorize(policy, inp.actor, "content:create")

    now = clock.now_utc()
    added = [_as_new_draft(item, inp.actor, now) for item in inp.items]
    store.prepend(added)
    logger.info("Added %d item(s) to library for %s", len(added), inp.actor.id)

    emitter.success("Content added to library.")
    return AddToLibraryOutput(items=added)


def run_delete(
    inp: DeleteItemInput,
    *,
    store: ItemStorePort,
    policy: PolicyPort,
    emitter: NotificationEmitter,
) -> DeleteItemOutput:
    """
    Delete an item. Editors may delete anything; writers only their own drafts.
    """
    item = get_item_or_raise(store, inp.item_id)
    authorize(policy, inp.actor, "content:delete", item)

    store.delete(item.id)
    logger.info("Deleted item %s (%s) by %s", item.id, item.status.value, inp.actor.id)

    emitter.success("Content deleted.")
    return DeleteItemOutput(item_id=item.id)


def _as_new_draft(item: ContentItem, actor: User, now: datetime) -> ContentItem:
    # Ids and creation times are assigned on entry to the library
    return item.model_copy(
        update={
            "id": str(uuid4()),
            "created_at": now,
            "author_id": actor.id,
            "status": ContentStatus.DRAFT,
            "scheduled_for": None,
            "site_id": None,
            "external_post_id": None,
            "external_url": None,
            "updated_at": now,
        }
    )
