"""User repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.user import User


class UserRepository(Protocol):
    """Repository for registering and looking up users."""

    def register(self, name: str, email: str) -> User:
        """Create a user with the next free id."""
        ...

    def get_by_id(self, user_id: int) -> Optional[User]:
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        ...

    def list_all(self) -> list[User]:
        ...

    def delete(self, user_id: int) -> None:
        ...
