"""Pytest configuration and shared fixtures for HabitTrack tests.

Fixtures build fresh in-memory repositories for every test, plus small
factories for users and habits so tests only spell out the fields they care
about.
"""

from __future__ import annotations

import logging
from datetime import date

import pytest

from habittrack.config import TestConfig
from habittrack.infra.repositories import (
    InMemoryHabitHistory,
    InMemoryHabitRepository,
    InMemoryUserRepository,
)
from habittrack.models import Habit, HabitStatus, User


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep tests away from a developer's .env and data directory."""
    monkeypatch.setenv("HABITTRACK_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.delenv("HABITTRACK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("HABITTRACK_DEV_MODE", raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Detach handlers installed by setup_logging so they don't leak between tests."""
    yield
    package_logger = logging.getLogger("habittrack")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def config(tmp_path) -> TestConfig:
    return TestConfig(data_dir=tmp_path)


# =============================================================================
# Repository Fixtures
# =============================================================================


@pytest.fixture
def history() -> InMemoryHabitHistory:
    return InMemoryHabitHistory()


@pytest.fixture
def habit_repo(history) -> InMemoryHabitRepository:
    """Habit store wired to the ``history`` fixture."""
    return InMemoryHabitRepository(history)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def user(user_repo) -> User:
    """A registered default user."""
    return user_repo.register("Tester", "tester@example.com")


@pytest.fixture
def other_user(user_repo) -> User:
    return user_repo.register("Other", "other@example.com")


@pytest.fixture
def habit_factory(habit_repo, user):
    """Factory for creating habits and adding them to the store.

    Returns:
        Callable: Function that builds a Habit and adds it for a user
    """

    def _create_habit(
        name: str = "Test Habit",
        description: str = "Test habit description",
        status: HabitStatus = HabitStatus.NEW,
        created_on: date | None = None,
        owner: User | None = None,
    ) -> Habit:
        habit = Habit(
            name=name,
            description=description,
            status=status,
            created_on=created_on or date.today(),
        )
        return habit_repo.add(owner or user, habit)

    return _create_habit
