from dataclasses import dataclass, field

from contentdesk.adapters.memory import InMemoryItemStore
from contentdesk.domain.entities import Site, User, WorkspaceSnapshot


@dataclass
class AppState:
    current_user: User | None = None
    items: InMemoryItemStore = field(default_factory=InMemoryItemStore)
    sites: list[Site] = field(default_factory=list)

    def login(self, user: User) -> None:
        self.current_user = user

    def logout(self) -> None:
        self.current_user = None
        self.items.clear()
        self.sites = []

    def snapshot(self) -> WorkspaceSnapshot:
        return WorkspaceSnapshot(
            current_user=self.current_user,
            items=self.items.list_items(),
            sites=list(self.sites),
        )

    def restore(self, snapshot: WorkspaceSnapshot) -> None:
        self.current_user = snapshot.current_user
        self.items.replace_all(snapshot.items)
        self.sites = list(snapshot.sites)
