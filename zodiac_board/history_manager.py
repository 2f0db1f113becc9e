"""
Undo and redo management for the cipher board.
Keeps a bounded list of immutable snapshots and a cursor into it.
"""

import logging
from typing import Callable, Generic, List, TypeVar, Union

T = TypeVar("T")

logger = logging.getLogger(__name__)


class HistoryManager(Generic[T]):
    def __init__(self, initial_state: T, limit: int = 15):
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        self.limit = limit
        self._snapshots: List[T] = [initial_state]
        self._cursor = 0
        self._listeners: List[Callable[[T], None]] = []

    @property
    def state(self) -> T:
        return self._snapshots[self._cursor]

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def __len__(self) -> int:
        return len(self._snapshots)

    def subscribe(self, listener: Callable[[T], None]):
        self._listeners.append(listener)

    def _notify(self):
        for listener in self._listeners:
            listener(self.state)

    def push(self, action: Union[T, Callable[[T], T]]) -> bool:
        """
        Record a new state, either given directly or computed from the current one.
        Returns False when the new state is the current object itself.
        """
        current = self.state
        next_state = action(current) if callable(action) else action
        if next_state is current:
            return False

        del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(next_state)
        if len(self._snapshots) > self.limit:
            self._snapshots.pop(0)
            logger.debug("History full (%d), dropped oldest snapshot", self.limit)
        self._cursor = len(self._snapshots) - 1
        self._notify()
        return True

    def undo(self) -> bool:
        if not self.can_undo:
            return False
        self._cursor -= 1
        self._notify()
        return True

    def redo(self) -> bool:
        if not self.can_redo:
            return False
        self._cursor += 1
        self._notify()
        return True

    def reset(self, new_state: T):
        self._snapshots = [new_state]
        self._cursor = 0
        self._notify()
