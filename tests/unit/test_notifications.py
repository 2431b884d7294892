import pytest

from contentdesk.components.notifications import (
    NotificationEmitter,
    bulk_schedule_message,
    identity,
    transition_message,
)
from contentdesk.domain.entities import ContentItem, ContentType, NotificationSeverity, Role, User
from contentdesk.domain.state import TransitionKind


@pytest.fixture
def item():
    return ContentItem(type=ContentType.ARTICLE, title="Hello")


def test_emit_replaces_current(emitter, clock):
    emitter.success("first")
    note = emitter.info("second")

    assert emitter.current is note
    assert note.created_at == clock.current
    assert [n.message for n in emitter.history] == ["first", "second"]


def test_dismiss_keeps_history(emitter):
    emitter.error("boom")
    emitter.dismiss()

    assert emitter.current is None
    assert len(emitter.history) == 1


def test_history_is_bounded():
    emitter = NotificationEmitter(history_limit=2)
    for n in range(5):
        emitter.info(str(n))
    assert [n.message for n in emitter.history] == ["3", "4"]


def test_clear(emitter):
    emitter.info("x")
    emitter.clear()
    assert emitter.current is None
    assert emitter.history == []


def test_identity_prefers_email():
    assert identity(User(email="a@b.c", display_name="A", role=Role.WRITER), "?") == "a@b.c"
    assert identity(User(email="", display_name="A", role=Role.WRITER), "?") == "A"
    assert identity(None, "?") == "?"


@pytest.mark.parametrize(
    "kind, message, severity",
    [
        (TransitionKind.SUBMITTED, "'Hello' submitted for review by e@x.io", NotificationSeverity.INFO),
        (TransitionKind.APPROVED, "'Hello' approved by e@x.io", NotificationSeverity.SUCCESS),
        (TransitionKind.REJECTED, "'Hello' rejected by e@x.io", NotificationSeverity.ERROR),
        (TransitionKind.PUBLISHED, "Content published successfully.", NotificationSeverity.SUCCESS),
        (TransitionKind.SCHEDULED, "'Hello' scheduled", NotificationSeverity.SUCCESS),
    ],
)
def test_transition_messages(item, kind, message, severity):
    actor = User(email="e@x.io", role=Role.EDITOR)
    assert transition_message(kind, item, actor) == (message, severity)


def test_transition_message_unknown_actor(item):
    message, _ = transition_message(TransitionKind.APPROVED, item, None, "someone")
    assert message == "'Hello' approved by someone"


def test_bulk_schedule_message():
    assert bulk_schedule_message(0) == ("0 items scheduled.", NotificationSeverity.INFO)
    assert bulk_schedule_message(1)[0] == "1 item scheduled successfully."
    assert bulk_schedule_message(4) == ("4 items scheduled successfully.", NotificationSeverity.SUCCESS)
