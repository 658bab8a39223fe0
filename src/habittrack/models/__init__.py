"""Domain model exports."""

from .habit import Habit, HabitStatus
from .history import HabitHistory
from .user import User

__all__ = [
    "Habit",
    "HabitHistory",
    "HabitStatus",
    "User",
]
