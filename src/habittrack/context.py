"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import BaseConfig
from .domain.repositories import UserRepository
from .infra.repositories import (
    InMemoryHabitHistory,
    InMemoryHabitRepository,
    InMemoryUserRepository,
)
from .logging_config import setup_logging


@dataclass
class AppContext:
    """Centralized application context with configuration and repositories."""

    config: BaseConfig
    user_repo: UserRepository
    habit_history: InMemoryHabitHistory
    habit_repo: InMemoryHabitRepository


def create_app_context(
    config: Optional[BaseConfig] = None, *, configure_logging: bool = True
) -> AppContext:
    """Create and wire the application context."""

    if config is None:
        config = BaseConfig()
    if configure_logging:
        setup_logging(config)

    habit_history = InMemoryHabitHistory()
    return AppContext(
        config=config,
        user_repo=InMemoryUserRepository(),
        habit_history=habit_history,
        habit_repo=InMemoryHabitRepository(habit_history),
    )
