from contentdesk.domain.entities import User
from contentdesk.rules.models import Rules


class StaticUserDirectory:
    """UserDirectoryPort over a fixed team roster."""

    def __init__(self, users: list[User] | None = None):
        self._users: dict[str, User] = {u.id: u for u in users or []}

    @classmethod
    def from_rules(cls, rules: Rules) -> "StaticUserDirectory":
        return cls(
            [
                User(id=u.id, email=u.email, display_name=u.display_name, role=u.role)
                for u in rules.directory.users
            ]
        )

    def resolve_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def find_by_email(self, email: str) -> User | None:
        wanted = email.strip().lower()
        for user in self._users.values():
            if user.email.lower() == wanted:
                return user
        return None

    def list_all(self) -> list[User]:
        return list(self._users.values())

    def add(self, user: User) -> None:
        self._users[user.id] = user
