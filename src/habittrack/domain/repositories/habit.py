"""Habit repository protocol."""

from __future__ import annotations

from typing import Mapping, Optional, Protocol

from ...models.habit import Habit, HabitStatus
from ...models.user import User


class HabitRepository(Protocol):
    """Per-user habit storage.

    Lookups for an unknown user return ``None``; mutations for an unknown
    user or habit are silent no-ops.
    """

    def add(self, user: User, habit: Habit) -> Habit:
        """Assign the next id to ``habit`` and store it for ``user``."""
        ...

    def delete(self, user: User, habit_id: int) -> None:
        """Remove a habit by ID."""
        ...

    def update_name(self, user: User, habit: Habit, new_name: str) -> None:
        ...

    def update_description(self, user: User, habit: Habit, new_description: str) -> None:
        ...

    def update_status(self, user: User, habit: Habit, new_status: HabitStatus) -> None:
        ...

    def set_all_finished(self, user: User) -> None:
        """Mark every habit of ``user`` as finished."""
        ...

    def get_by_id(self, user: User, habit_id: int) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        ...

    def get_all(self, user: User) -> Optional[list[Habit]]:
        """List all habits of ``user`` in insertion order."""
        ...

    def get_by_status(self, user: User, status: HabitStatus) -> Optional[list[Habit]]:
        """List the habits of ``user`` that have ``status``."""
        ...

    def get_sorted_by_status(self, user: User) -> Optional[list[Habit]]:
        """List habits ordered NEW, IN_PROGRESS, FINISHED."""
        ...

    def get_sorted_by_creation_date(self, user: User) -> Optional[list[Habit]]:
        """List habits oldest first."""
        ...

    def users(self) -> list[User]:
        ...

    def habits_by_user(self) -> Mapping[User, Mapping[int, Habit]]:
        ...
