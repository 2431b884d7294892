from typing import Protocol

from contentdesk.domain.entities import ContentItem, User


class ItemStorePort(Protocol):
    def get_by_id(self, item_id: str) -> ContentItem | None:
        ...

    def save(self, item: ContentItem) -> ContentItem:
        ...

    def prepend(self, items: list[ContentItem]) -> None:
        ...

    def delete(self, item_id: str) -> None:
        ...

    def list_items(self) -> list[ContentItem]:
        ...


class UserDirectoryPort(Protocol):
    def resolve_user(self, user_id: str) -> User | None:
        ...

    def find_by_email(self, email: str) -> User | None:
        ...

    def list_all(self) -> list[User]:
        ...
