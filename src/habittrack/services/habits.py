"""Habit service helpers for streaks, completions and summaries."""

from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from typing import Iterable, Optional

from ..domain.repositories.habit import HabitRepository
from ..domain.repositories.history import HabitHistoryRecorder
from ..logging_config import get_logger
from ..models.habit import Habit, HabitStatus
from ..models.user import User

logger = get_logger(__name__)


def compute_streaks(days: Iterable[date], *, today: date | None = None) -> tuple[int, int]:
    """Return (current_streak, longest_streak) from a collection of completion days."""

    today = today or date.today()
    done = set(days)

    # Current streak: walk backwards from today until a gap.
    current = 0
    cursor = today
    while cursor in done:
        current += 1
        cursor -= timedelta(days=1)

    # Longest streak: sweep through sorted days, counting consecutive runs.
    longest = 0
    run = 0
    last_day: date | None = None
    for d in sorted(done):
        if last_day is None or d == last_day + timedelta(days=1):
            run += 1
        else:
            longest = max(longest, run)
            run = 1
        last_day = d
    longest = max(longest, run)

    return current, longest


def complete_habit(
    repo: HabitRepository,
    history: HabitHistoryRecorder,
    user: User,
    habit_id: int,
    *,
    on: Optional[date] = None,
) -> Optional[Habit]:
    """Record a completion for a habit and move it out of NEW.

    Returns None when the user or habit is unknown.
    """

    habit = repo.get_by_id(user, habit_id)
    if habit is None:
        return None
    history.record_completion(habit, on)
    if habit.status == HabitStatus.NEW:
        repo.update_status(user, habit, HabitStatus.IN_PROGRESS)
    logger.info("Habit completed", extra={"habit_id": habit_id, "on": on or date.today()})
    return habit


def status_summary(habits: Iterable[Habit]) -> dict[HabitStatus, int]:
    """Count habits per status; every status is present in the result."""

    counts = Counter(h.status for h in habits)
    return {status: counts.get(status, 0) for status in HabitStatus}


__all__ = ["complete_habit", "compute_streaks", "status_summary"]
