from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from contentdesk.adapters.dev_generator import DevGenerator
from contentdesk.adapters.dev_publisher import DevPublisher
from contentdesk.adapters.memory import InMemoryItemStore, InMemorySnapshotStore
from contentdesk.adapters.user_directory import StaticUserDirectory
from contentdesk.app_shell.controller import DashboardController
from contentdesk.components.notifications import NotificationEmitter
from contentdesk.domain.entities import ContentItem, ContentStatus, ContentType, Role, User
from contentdesk.domain.policy import PolicyEngine
from contentdesk.rules.loader import load_rules

RULES_PATH = Path(__file__).parent.parent / "rules.yaml"

NOW = datetime(2025, 3, 10, 12, 0, tzinfo=UTC)


@dataclass
class FixedClock:
    """ClockPort that only moves when told to."""

    current: datetime = NOW

    def now_utc(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current += timedelta(**kwargs)


@dataclass
class ItemFactory:
    store: InMemoryItemStore
    created: list[ContentItem] = field(default_factory=list)

    def __call__(
        self,
        title: str = "Spring Launch",
        status: ContentStatus = ContentStatus.DRAFT,
        type: ContentType = ContentType.ARTICLE,
        author_id: str | None = "user-1",
        **kwargs,
    ) -> ContentItem:
        item = ContentItem(type=type, title=title, status=status, author_id=author_id, **kwargs)
        self.store.save(item)
        self.created.append(item)
        return item


@pytest.fixture
def rules():
    return load_rules(RULES_PATH)


@pytest.fixture
def policy(rules):
    return PolicyEngine(rules)


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def store():
    return InMemoryItemStore()


@pytest.fixture
def emitter(clock):
    return NotificationEmitter(history_limit=10, now=clock.now_utc)


@pytest.fixture
def writer():
    return User(id="user-1", email="writer@example.com", display_name="Wren Writer", role=Role.WRITER)


@pytest.fixture
def other_writer():
    return User(id="user-3", email="other@example.com", display_name="Olive Other", role=Role.WRITER)


@pytest.fixture
def editor():
    return User(id="user-2", email="editor@example.com", display_name="Eddie Editor", role=Role.EDITOR)


@pytest.fixture
def directory(writer, other_writer, editor):
    return StaticUserDirectory([writer, other_writer, editor])


@pytest.fixture
def make_item(store):
    return ItemFactory(store)


@pytest.fixture
def snapshots():
    return InMemorySnapshotStore()


@pytest.fixture
def publisher():
    return DevPublisher()


@pytest.fixture
def generator():
    return DevGenerator()


@pytest.fixture
def controller(rules, snapshots, publisher, generator, directory, clock):
    return DashboardController.create(
        rules=rules,
        snapshots=snapshots,
        publisher=publisher,
        generator=generator,
        directory=directory,
        clock=clock,
    )
