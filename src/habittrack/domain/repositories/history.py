"""Habit history protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.habit import Habit


class HabitHistoryRecorder(Protocol):
    """Receives lifecycle and completion events from the habit store."""

    def create_habit_history(self, habit: Habit) -> None:
        """Open an empty history for a newly added habit."""
        ...

    def delete_habit_from_history(self, habit: Optional[Habit]) -> None:
        """Drop the history of a removed habit; ``None`` is ignored."""
        ...

    def record_completion(self, habit: Habit, on: Optional[date] = None) -> None:
        """Record that ``habit`` was completed on ``on`` (today by default)."""
        ...
