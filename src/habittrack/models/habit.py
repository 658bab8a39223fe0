"""Habit tracking data structures."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import ConfigDict
from sqlmodel import Field, SQLModel


class HabitStatus(str, Enum):
    """Lifecycle of a habit, ordered NEW < IN_PROGRESS < FINISHED."""

    NEW = "new"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"

    @property
    def rank(self) -> int:
        return _STATUS_ORDER.index(self)


_STATUS_ORDER = [HabitStatus.NEW, HabitStatus.IN_PROGRESS, HabitStatus.FINISHED]


class Habit(SQLModel):
    """A user-defined habit the app tracks.

    Field limits are enforced on construction and on every assignment.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = Field(default=None)
    name: str = Field(min_length=1, max_length=80)
    description: str = Field(default="", max_length=255)
    status: HabitStatus = Field(default=HabitStatus.NEW)
    created_on: date = Field(default_factory=date.today)
