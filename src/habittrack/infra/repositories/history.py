"""In-memory habit history with streak tracking."""

from __future__ import annotations

from datetime import date
from typing import Optional

from ...logging_config import get_logger
from ...models.habit import Habit
from ...models.history import HabitHistory
from ...services.habits import compute_streaks

logger = get_logger(__name__)


class InMemoryHabitHistory:
    """Completion history for every habit known to the habit store."""

    def __init__(self) -> None:
        self._histories: dict[int, HabitHistory] = {}

    def create_habit_history(self, habit: Habit) -> None:
        """Open an empty history; an existing history is left untouched."""
        if habit.id is None:
            raise ValueError("habit must have an id before its history is created")
        self._histories.setdefault(habit.id, HabitHistory(habit_id=habit.id))

    def delete_habit_from_history(self, habit: Optional[Habit]) -> None:
        if habit is None or habit.id is None:
            return
        self._histories.pop(habit.id, None)

    def record_completion(self, habit: Habit, on: Optional[date] = None) -> None:
        """Record a completion day; recording the same day twice is a no-op."""
        history = self._histories.get(habit.id) if habit.id is not None else None
        if history is None:
            logger.warning("Completion for habit without history", extra={"habit_id": habit.id})
            return
        history.completions.add(on or date.today())

    def get_history(self, habit_id: int) -> Optional[HabitHistory]:
        return self._histories.get(habit_id)

    def completion_days(self, habit_id: int) -> list[date]:
        """Completion days of a habit in ascending order."""
        history = self._histories.get(habit_id)
        if history is None:
            return []
        return sorted(history.completions)

    def current_streak(self, habit_id: int, today: Optional[date] = None) -> int:
        current, _ = compute_streaks(self.completion_days(habit_id), today=today)
        return current

    def longest_streak(self, habit_id: int) -> int:
        _, longest = compute_streaks(self.completion_days(habit_id))
        return longest

    def __contains__(self, habit_id: object) -> bool:
        return habit_id in self._histories

    def __len__(self) -> int:
        return len(self._histories)
