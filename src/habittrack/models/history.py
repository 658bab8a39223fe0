"""Per-habit completion history."""

from __future__ import annotations

from datetime import date

from sqlmodel import Field, SQLModel


class HabitHistory(SQLModel):
    """Completion days recorded for a single habit."""

    habit_id: int
    opened_on: date = Field(default_factory=date.today)
    completions: set[date] = Field(default_factory=set)
