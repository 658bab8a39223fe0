"""Concrete in-memory repository implementations."""

from .habit import InMemoryHabitRepository
from .history import InMemoryHabitHistory
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryHabitHistory",
    "InMemoryHabitRepository",
    "InMemoryUserRepository",
]
