"""Sequential id generation."""

from __future__ import annotations

import itertools


class IdGenerator:
    """Issue 1, 2, 3, ... for the lifetime of the generator.

    Ids are never reused, even after the owning entity is deleted.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)
