"""User model used to partition habits."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import EmailStr
from sqlmodel import Field, SQLModel

_IDENTITY_FIELDS = frozenset({"id", "email"})


class User(SQLModel):
    """Application user; habits are stored per user.

    Equality and hashing use ``(id, email)``. Once an id is issued both
    fields are fixed, because the habit store keys its partitions on them.
    """

    id: Optional[int] = Field(default=None)
    name: str = Field(min_length=1, max_length=64)
    email: EmailStr

    def __setattr__(self, name: str, value: Any) -> None:
        current = self.__dict__
        if name in _IDENTITY_FIELDS and current.get("id") is not None and current.get(name) != value:
            raise AttributeError(f"User.{name} cannot change once the user has an id")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return (self.id, self.email) == (other.id, other.email)

    def __hash__(self) -> int:
        return hash((self.id, self.email))
