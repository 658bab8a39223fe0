"""In-memory user registry."""

from __future__ import annotations

from typing import Optional

from ...logging_config import get_logger
from ...models.user import User
from ..ids import IdGenerator

logger = get_logger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


class InMemoryUserRepository:
    """Registered users keyed by id, with a unique email per user."""

    def __init__(self, id_generator: Optional[IdGenerator] = None):
        self._ids = id_generator or IdGenerator()
        self._users: dict[int, User] = {}

    def register(self, name: str, email: str) -> User:
        """Create a new user.

        Raises ValueError when the email is taken, and pydantic's
        ValidationError for a malformed name or email.
        """

        email = _normalize_email(email)
        if self.get_by_email(email) is not None:
            raise ValueError("Email already registered")
        # validate before consuming an id
        user = User(name=name.strip(), email=email)
        user.id = self._ids.next_id()
        self._users[user.id] = user
        logger.info("User registered", extra={"user_id": user.id})
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        email = _normalize_email(email)
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def list_all(self) -> list[User]:
        """Return all users ordered by id."""
        return [self._users[key] for key in sorted(self._users)]

    def delete(self, user_id: int) -> None:
        if self._users.pop(user_id, None) is not None:
            logger.info("User deleted", extra={"user_id": user_id})
