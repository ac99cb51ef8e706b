"""Thread-safe in-memory store of users."""

import threading
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str


class UserNotFoundError(LookupError):
    """Raised when no user has the requested id."""

    def __init__(self, user_id: str) -> None:
        super().__init__("user not found")
        self.user_id = user_id


class UserStore:
    """In-memory user store seeded with two users."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, User] = {
            "1": User(id="1", name="John Doe", email="john@example.com"),
            "2": User(id="2", name="Jane Smith", email="jane@example.com"),
        }
        self._next_id = 3

    def get_all(self) -> list[User]:
        """Return every stored user."""
        with self._lock:
            return list(self._users.values())

    def get_by_id(self, user_id: str) -> User:
        """Return the user with ``user_id`` or raise UserNotFoundError."""
        with self._lock:
            try:
                return self._users[user_id]
            except KeyError:
                raise UserNotFoundError(user_id) from None

    def create(self, name: str, email: str) -> User:
        """Store a new user under the next free id and return it."""
        with self._lock:
            user = User(id=self._take_next_id(), name=name, email=email)
            self._users[user.id] = user
            return user

    def update(self, user_id: str, name: str, email: str) -> User:
        """Change the non-empty fields of an existing user and return it."""
        with self._lock:
            try:
                user = self._users[user_id]
            except KeyError:
                raise UserNotFoundError(user_id) from None
            changes = {}
            if name:
                changes["name"] = name
            if email:
                changes["email"] = email
            user = replace(user, **changes)
            self._users[user_id] = user
            return user

    def delete(self, user_id: str) -> None:
        """Remove a user or raise UserNotFoundError."""
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise UserNotFoundError(user_id)

    def _take_next_id(self) -> str:
        # Ids are single characters counted up from "0"; past "9" they run on
        # through the following code points.
        user_id = chr(ord("0") + self._next_id)
        self._next_id += 1
        return user_id