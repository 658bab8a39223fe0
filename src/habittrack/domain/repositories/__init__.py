"""Repository protocol definitions for domain layer."""

from .habit import HabitRepository
from .history import HabitHistoryRecorder
from .user import UserRepository

__all__ = [
    "HabitHistoryRecorder",
    "HabitRepository",
    "UserRepository",
]
