"""
Dashboard controller - the single owner of session and library state.

Every UI/API action goes through here:
- the acting user is always the logged-in session user
- workflow errors become an error notification, then propagate
- every successful mutation saves the full workspace snapshot
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from contentdesk.adapters.clock import SystemClock
from contentdesk.adapters.user_directory import StaticUserDirectory
from contentdesk.app_shell.state import AppState
from contentdesk.components import library, scheduler, sites, workflow
from contentdesk.components.library import GenerationKind, GeneratorPort
from contentdesk.components.notifications import NotificationEmitter
from contentdesk.components.publish import (
    PublishComponent,
    PublishInput,
    PublishOptions,
    PublishOutput,
    PublisherPort,
)
from contentdesk.domain.entities import (
    ContentItem,
    ContentStatus,
    Notification,
    Site,
    User,
    WorkspaceSnapshot,
)
from contentdesk.domain.errors import ContentDeskError, UnauthorizedError
from contentdesk.domain.policy import PolicyEngine
from contentdesk.ports.clock import ClockPort
from contentdesk.ports.repo import UserDirectoryPort
from contentdesk.ports.snapshot import SnapshotStorePort
from contentdesk.rules.models import Rules

logger = logging.getLogger(__name__)

SNAPSHOT_KEY = "workspace"


@dataclass
class DashboardController:
    rules: Rules
    policy: PolicyEngine
    directory: UserDirectoryPort
    snapshots: SnapshotStorePort
    publisher: PublisherPort
    generator: GeneratorPort
    emitter: NotificationEmitter
    clock: ClockPort
    state: AppState

    @classmethod
    def create(
        cls,
        rules: Rules,
        snapshots: SnapshotStorePort,
        publisher: PublisherPort,
        generator: GeneratorPort,
        directory: UserDirectoryPort | None = None,
        clock: ClockPort | None = None,
    ) -> DashboardController:
        clock = clock or SystemClock()
        controller = cls(
            rules=rules,
            policy=PolicyEngine(rules),
            directory=directory or StaticUserDirectory.from_rules(rules),
            snapshots=snapshots,
            publisher=publisher,
            generator=generator,
            emitter=NotificationEmitter(rules.notifications.history_limit, now=clock.now_utc),
            clock=clock,
            state=AppState(),
        )
        controller.load()
        return controller

    # --- Lifecycle ---

    def load(self) -> None:
        """Restore the persisted workspace, if any."""
        blob = self.snapshots.load(SNAPSHOT_KEY)
        if blob is None:
            return
        snapshot = WorkspaceSnapshot.model_validate_json(blob)
        self.state.restore(snapshot)
        logger.info(
            "Workspace restored: %d item(s), %d site(s)", len(snapshot.items), len(snapshot.sites)
        )

    def save(self) -> None:
        self.snapshots.save(SNAPSHOT_KEY, self.state.snapshot().model_dump_json().encode("utf-8"))

    def login(self, email: str) -> User:
        with self._reported():
            user = self.directory.find_by_email(email)
            if user is None:
                raise UnauthorizedError("Invalid credentials")
        self.state.login(user)
        self.save()
        logger.info("Login: %s (%s)", user.id, user.role.value)
        return user

    def logout(self) -> None:
        user = self.state.current_user
        self.state.logout()
        self.emitter.clear()
        self.snapshots.delete(SNAPSHOT_KEY)
        logger.info("Logout: %s", user.id if user else "-")

    @property
    def current_user(self) -> User | None:
        return self.state.current_user

    @property
    def notification(self) -> Notification | None:
        return self.emitter.current

    def require_user(self) -> User:
        user = self.state.current_user
        if user is None:
            raise UnauthorizedError("Not logged in")
        return user

    # --- Library ---

    def items(self) -> list[ContentItem]:
        return self.state.items.list_items()

    def get_item(self, item_id: str) -> ContentItem:
        return workflow.get_item_or_raise(self.state.items, item_id)

    def query(
        self,
        type_filter: str = "all",
        status_filter: str = "all",
        search_text: str = "",
    ) -> list[ContentItem]:
        return library.query(
            self.state.items.list_items(),
            type_filter,
            status_filter,
            search_text,
            resolve_user=self.directory.resolve_user,
            unknown_label=self.rules.library.unknown_author_label,
        )

    def add_to_library(self, items: list[ContentItem]) -> list[ContentItem]:
        with self._reported():
            out = workflow.run_add_to_library(
                workflow.AddToLibraryInput(items=items, actor=self.require_user()),
                store=self.state.items,
                policy=self.policy,
                clock=self.clock,
                emitter=self.emitter,
            )
        self.save()
        return out.items

    async def generate(self, kind: GenerationKind, params: dict[str, Any]) -> ContentItem:
        with self._reported("Generation failed: "):
            self.require_user()
            item = await self.generator.generate(kind, params)
        return self.add_to_library([item])[0]

    def request_transition(self, item_id: str, to_status: ContentStatus | str) -> ContentItem:
        with self._reported():
            out = workflow.run_transition(
                workflow.TransitionInput(item_id=item_id, to_status=to_status, actor=self.require_user()),
                store=self.state.items,
                policy=self.policy,
                clock=self.clock,
                emitter=self.emitter,
                directory=self.directory,
                unknown_label=self.rules.library.unknown_author_label,
            )
        self.save()
        return out.item

    def delete_item(self, item_id: str) -> None:
        with self._reported():
            workflow.run_delete(
                workflow.DeleteItemInput(item_id=item_id, actor=self.require_user()),
                store=self.state.items,
                policy=self.policy,
                emitter=self.emitter,
            )
        self.save()

    # --- Scheduling ---

    def schedule_batch(
        self,
        item_ids: list[str],
        start: datetime | date | str | None = None,
        interval_days: int | None = None,
    ) -> int:
        with self._reported():
            out = scheduler.run_schedule_batch(
                scheduler.BulkScheduleInput(
                    item_ids=list(item_ids),
                    start=start,
                    interval_days=interval_days,
                    actor=self.require_user(),
                ),
                store=self.state.items,
                policy=self.policy,
                clock=self.clock,
                emitter=self.emitter,
                config=scheduler.build_config(self.rules),
            )
        self.save()
        return out.count

    def calendar_month(self, year: int, month: int) -> list[scheduler.CalendarDay]:
        return scheduler.calendar_month(self.state.items.list_items(), year, month)

    def items_for_day(self, day: date) -> list[ContentItem]:
        return scheduler.items_for_day(self.state.items.list_items(), day)

    # --- Publishing ---

    async def publish(
        self,
        item_id: str,
        site_id: str,
        options: PublishOptions | None = None,
    ) -> PublishOutput:
        component = PublishComponent(
            store=self.state.items,
            policy=self.policy,
            clock=self.clock,
            emitter=self.emitter,
            publisher=self.publisher,
        )
        with self._reported():
            out = await component.run_publish(
                PublishInput(
                    item_id=item_id,
                    site_id=site_id,
                    actor=self.require_user(),
                    options=options or PublishOptions(),
                ),
                self.state.sites,
            )
        if out.item is not None:
            self.save()
        return out

    # --- Sites ---

    def add_site(
        self,
        url: str,
        username: str = "",
        app_password: str = "",
        name: str | None = None,
        is_virtual: bool = False,
    ) -> Site:
        with self._reported():
            workflow.authorize(self.policy, self.require_user(), "sites:manage")
            site = sites.build_site(url, username, app_password, name, is_virtual)
            self.state.sites = sites.add_site(self.state.sites, site)
        self.emitter.success("Site added successfully.")
        self.save()
        return site

    def remove_site(self, site_id: str) -> None:
        with self._reported():
            workflow.authorize(self.policy, self.require_user(), "sites:manage")
            self.state.sites = sites.remove_site(self.state.sites, site_id)
        self.emitter.success("Site removed successfully.")
        self.save()

    def update_site(self, site_id: str, updates: dict[str, Any]) -> Site:
        with self._reported():
            workflow.authorize(self.policy, self.require_user(), "sites:manage")
            self.state.sites = sites.update_site(self.state.sites, site_id, updates)
        self.save()
        return sites.find_site(self.state.sites, site_id)

    # --- Internals ---

    @contextmanager
    def _reported(self, prefix: str = "") -> Iterator[None]:
        """Surface a workflow error to the user, then let it propagate."""
        try:
            yield
        except ContentDeskError as e:
            self.emitter.error(f"{prefix}{e}")
            raise
        except Exception:
            logger.exception("Unexpected error in dashboard action")
            self.emitter.error(f"{prefix}An unexpected error occurred.")
            raise
