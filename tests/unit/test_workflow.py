"""
Tests for the workflow component.

- reviewed transitions (submit, approve, reject)
- guard order: existence, then table, then permission
- failed calls leave the store and notifications untouched
"""

import pytest

from contentdesk.components.workflow import (
    AddToLibraryInput,
    DeleteItemInput,
    TransitionInput,
    run_add_to_library,
    run_delete,
    run_transition,
)
from contentdesk.domain.entities import (
    ContentItem,
    ContentStatus,
    ContentType,
    NotificationSeverity,
)
from contentdesk.domain.errors import (
    InvalidTransitionError,
    ItemNotFoundError,
    UnauthorizedError,
)
from contentdesk.domain.state import TransitionKind


@pytest.fixture
def deps(store, policy, clock, emitter, directory):
    return {
        "store": store,
        "policy": policy,
        "clock": clock,
        "emitter": emitter,
        "directory": directory,
    }


def _transition(deps, item_id, to_status, actor):
    return run_transition(TransitionInput(item_id=item_id, to_status=to_status, actor=actor), **deps)


# --- Submit ---


def test_writer_submits_own_draft(deps, make_item, writer, clock):
    item = make_item()
    clock.advance(minutes=5)

    out = _transition(deps, item.id, ContentStatus.NEEDS_REVIEW, writer)

    assert out.kind is TransitionKind.SUBMITTED
    assert out.previous_status is ContentStatus.DRAFT
    saved = deps["store"].get_by_id(item.id)
    assert saved.status is ContentStatus.NEEDS_REVIEW
    assert saved.updated_at == clock.current

    note = deps["emitter"].current
    assert note.severity is NotificationSeverity.INFO
    assert note.message == "'Spring Launch' submitted for review by writer@example.com"


def test_writer_cannot_submit_someone_elses_draft(deps, make_item, other_writer):
    item = make_item(author_id="user-1")

    with pytest.raises(UnauthorizedError):
        _transition(deps, item.id, ContentStatus.NEEDS_REVIEW, other_writer)

    assert deps["store"].get_by_id(item.id) == item
    assert deps["emitter"].current is None


def test_accepts_status_as_string(deps, make_item, writer):
    item = make_item()
    out = _transition(deps, item.id, "needs-review", writer)
    assert out.item.status is ContentStatus.NEEDS_REVIEW


# --- Review ---


def test_editor_approves(deps, make_item, editor):
    item = make_item(status=ContentStatus.NEEDS_REVIEW)

    out = _transition(deps, item.id, ContentStatus.APPROVED, editor)

    assert out.item.status is ContentStatus.APPROVED
    note = deps["emitter"].current
    assert note.severity is NotificationSeverity.SUCCESS
    assert note.message == "'Spring Launch' approved by editor@example.com"


def test_editor_rejects_back_to_draft(deps, make_item, editor):
    item = make_item(status=ContentStatus.NEEDS_REVIEW)

    out = _transition(deps, item.id, ContentStatus.DRAFT, editor)

    assert out.kind is TransitionKind.REJECTED
    assert deps["store"].get_by_id(item.id).status is ContentStatus.DRAFT
    note = deps["emitter"].current
    assert note.severity is NotificationSeverity.ERROR
    assert "editor@example.com" in note.message


def test_writer_cannot_approve_own_item(deps, make_item, writer):
    item = make_item(status=ContentStatus.NEEDS_REVIEW)

    with pytest.raises(UnauthorizedError):
        _transition(deps, item.id, ContentStatus.APPROVED, writer)

    assert deps["store"].get_by_id(item.id).status is ContentStatus.NEEDS_REVIEW


# --- Guards ---


def test_missing_item(deps, editor):
    with pytest.raises(ItemNotFoundError):
        _transition(deps, "nope", ContentStatus.APPROVED, editor)


def test_invalid_pair_checked_before_permission(deps, make_item, other_writer):
    # Not the author, but the pair itself is invalid
    item = make_item()
    with pytest.raises(InvalidTransitionError):
        _transition(deps, item.id, ContentStatus.APPROVED, other_writer)


@pytest.mark.parametrize(
    "target, hint",
    [
        (ContentStatus.PUBLISHED, "publish action"),
        (ContentStatus.SCHEDULED, "bulk scheduler"),
    ],
)
def test_indirect_targets_rejected(deps, make_item, editor, target, hint):
    item = make_item(status=ContentStatus.APPROVED)

    with pytest.raises(InvalidTransitionError, match=hint):
        _transition(deps, item.id, target, editor)

    assert deps["store"].get_by_id(item.id).status is ContentStatus.APPROVED


def test_unknown_status_string(deps, make_item, writer):
    item = make_item()
    with pytest.raises(InvalidTransitionError):
        _transition(deps, item.id, "archived", writer)


def test_failed_transition_never_mutates(deps, make_item, writer, editor):
    items = [
        make_item(title="a"),
        make_item(title="b", status=ContentStatus.NEEDS_REVIEW),
        make_item(title="c", status=ContentStatus.PUBLISHED),
    ]
    before = deps["store"].list_items()

    attempts = [
        (items[0].id, ContentStatus.PUBLISHED, writer),
        (items[1].id, ContentStatus.APPROVED, writer),
        (items[2].id, ContentStatus.DRAFT, editor),
        ("missing", ContentStatus.APPROVED, editor),
    ]
    for item_id, target, actor in attempts:
        with pytest.raises((InvalidTransitionError, UnauthorizedError, ItemNotFoundError)):
            _transition(deps, item_id, target, actor)

    assert deps["store"].list_items() == before
    assert deps["emitter"].history == []


# --- Library membership ---


def test_add_to_library_prepends_owned_drafts(deps, make_item, writer, clock):
    existing = make_item(title="old")
    generated = ContentItem(
        type=ContentType.PRODUCT,
        title="Kettle",
        status=ContentStatus.PUBLISHED,
        external_post_id=7,
    )

    out = run_add_to_library(
        AddToLibraryInput(items=[generated], actor=writer),
        store=deps["store"],
        policy=deps["policy"],
        clock=clock,
        emitter=deps["emitter"],
    )

    added = out.items[0]
    assert added.author_id == writer.id
    assert added.status is ContentStatus.DRAFT
    assert added.external_post_id is None
    assert [i.id for i in deps["store"].list_items()] == [added.id, existing.id]
    assert deps["emitter"].current.message == "Content added to library."


def test_writer_deletes_own_draft(deps, make_item, writer):
    item = make_item()
    run_delete(
        DeleteItemInput(item_id=item.id, actor=writer),
        store=deps["store"],
        policy=deps["policy"],
        emitter=deps["emitter"],
    )
    assert deps["store"].get_by_id(item.id) is None
    assert deps["emitter"].current.message == "Content deleted."


def test_writer_cannot_delete_reviewed_item(deps, make_item, writer):
    item = make_item(status=ContentStatus.NEEDS_REVIEW)
    with pytest.raises(UnauthorizedError):
        run_delete(
            DeleteItemInput(item_id=item.id, actor=writer),
            store=deps["store"],
            policy=deps["policy"],
            emitter=deps["emitter"],
        )
    assert deps["store"].get_by_id(item.id) is not None


def test_editor_deletes_anything(deps, make_item, editor):
    item = make_item(status=ContentStatus.PUBLISHED)
    run_delete(
        DeleteItemInput(item_id=item.id, actor=editor),
        store=deps["store"],
        policy=deps["policy"],
        emitter=deps["emitter"],
    )
    assert len(deps["store"]) == 0


def test_added_items_get_fresh_ids(deps, make_item, writer, clock):
    existing = make_item(title="old", status=ContentStatus.PUBLISHED, author_id="user-2")
    clock.advance(hours=1)

    out = run_add_to_library(
        AddToLibraryInput(items=[ContentItem(id=existing.id, type=ContentType.ARTICLE, title="Mine")], actor=writer),
        store=deps["store"],
        policy=deps["policy"],
        clock=clock,
        emitter=deps["emitter"],
    )

    added = out.items[0]
    assert added.id != existing.id
    assert added.created_at == clock.current
    assert deps["store"].get_by_id(existing.id) == existing


def test_reused_id_cannot_reach_someone_elses_item(deps, make_item, writer):
    published = make_item(title="Live", status=ContentStatus.PUBLISHED, author_id="user-2")
    run_add_to_library(
        AddToLibraryInput(items=[ContentItem(id=published.id, type=ContentType.ARTICLE, title="Mine")], actor=writer),
        store=deps["store"],
        policy=deps["policy"],
        clock=deps["clock"],
        emitter=deps["emitter"],
    )

    with pytest.raises(UnauthorizedError):
        run_delete(
            DeleteItemInput(item_id=published.id, actor=writer),
            store=deps["store"],
            policy=deps["policy"],
            emitter=deps["emitter"],
        )

    assert deps["store"].get_by_id(published.id) == published
    assert len(deps["store"]) == 2
