"""In-memory implementation of the habit repository."""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType
from typing import Mapping, Optional

from ...domain.repositories.history import HabitHistoryRecorder
from ...logging_config import get_logger
from ...models.habit import Habit, HabitStatus
from ...models.user import User
from ..ids import IdGenerator
from .history import InMemoryHabitHistory

logger = get_logger(__name__)


class InMemoryHabitRepository:
    """Habits of every user, kept as ``user -> habit id -> habit``.

    Habit ids come from a single generator, so they are unique across users.
    Every added habit gets a history opened in ``history``; deleting a habit
    closes it again.
    """

    def __init__(
        self,
        history: Optional[HabitHistoryRecorder] = None,
        id_generator: Optional[IdGenerator] = None,
    ):
        """Initialize with an optional history recorder and id generator."""
        self.history: HabitHistoryRecorder = history if history is not None else InMemoryHabitHistory()
        self._ids = id_generator or IdGenerator()
        self._habits_by_user: dict[User, dict[int, Habit]] = {}

    def add(self, user: User, habit: Habit) -> Habit:
        """Assign the next id to ``habit`` and store it for ``user``."""
        habit.id = self._ids.next_id()
        self._habits_by_user.setdefault(user, {})[habit.id] = habit
        self.history.create_habit_history(habit)
        logger.info("Habit added", extra={"user_id": user.id, "habit_id": habit.id})
        return habit

    def delete(self, user: User, habit_id: int) -> None:
        """Delete a habit by ID."""
        habits = self._habits_by_user.get(user)
        if habits is None:
            return
        # history is told even when the id is unknown; it ignores None
        self.history.delete_habit_from_history(habits.get(habit_id))
        if habits.pop(habit_id, None) is not None:
            logger.info("Habit deleted", extra={"user_id": user.id, "habit_id": habit_id})

    def _stored(self, user: User, habit: Habit) -> Optional[Habit]:
        habits = self._habits_by_user.get(user)
        if habits is None or habit.id is None:
            return None
        return habits.get(habit.id)

    def update_name(self, user: User, habit: Habit, new_name: str) -> None:
        stored = self._stored(user, habit)
        if stored is None:
            return
        stored.name = new_name

    def update_description(self, user: User, habit: Habit, new_description: str) -> None:
        stored = self._stored(user, habit)
        if stored is None:
            return
        stored.description = new_description

    def update_status(self, user: User, habit: Habit, new_status: HabitStatus) -> None:
        stored = self._stored(user, habit)
        if stored is None:
            return
        stored.status = HabitStatus(new_status)
        logger.debug(
            "Habit status changed",
            extra={"habit_id": stored.id, "status": stored.status.value},
        )

    def set_all_finished(self, user: User) -> None:
        """Mark every habit of ``user`` as finished."""
        habits = self.get_all(user)
        if habits is None:
            return
        for habit in habits:
            habit.status = HabitStatus.FINISHED

    def get_by_id(self, user: User, habit_id: int) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        habits = self._habits_by_user.get(user)
        if habits is None:
            return None
        return habits.get(habit_id)

    def get_all(self, user: User) -> Optional[list[Habit]]:
        """Return a new list of the user's habits, or None for an unknown user."""
        habits = self._habits_by_user.get(user)
        if habits is None:
            return None
        return list(habits.values())

    def get_by_status(self, user: User, status: HabitStatus) -> Optional[list[Habit]]:
        """Return habits with ``status``, or None for an unknown user."""
        return self._select(user, lambda habits: [h for h in habits if h.status == status])

    def get_sorted_by_status(self, user: User) -> Optional[list[Habit]]:
        """Sort all habits of the user in natural status order (NEW, IN_PROGRESS, FINISHED)."""
        return self._select(user, lambda habits: sorted(habits, key=lambda h: h.status.rank))

    def get_sorted_by_creation_date(self, user: User) -> Optional[list[Habit]]:
        """Sort all habits of the user by creation date, oldest first."""
        return self._select(user, lambda habits: sorted(habits, key=lambda h: h.created_on))

    def _select(
        self, user: User, view: Callable[[list[Habit]], list[Habit]]
    ) -> Optional[list[Habit]]:
        habits = self.get_all(user)
        if habits is None:
            return None
        return view(habits)

    def users(self) -> list[User]:
        return list(self._habits_by_user)

    def habits_by_user(self) -> Mapping[User, Mapping[int, Habit]]:
        """Read-only snapshot of the nested user -> id -> habit mapping."""
        return MappingProxyType(
            {user: MappingProxyType(dict(habits)) for user, habits in self._habits_by_user.items()}
        )
