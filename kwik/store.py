"""
KWIK - Task Store
=================
In-memory ordered list of tasks. Positions are the only task identity;
validation of user input happens in the command interpreter.
"""

from typing import Iterable, Iterator, List, Optional

from .errors import IndexOutOfBounds
from .schema import Task


class TaskStore:
    """Ordered collection of tasks, re-sorted by deadline before each render"""

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks or [])

    # ========================================
    # MUTATIONS
    # ========================================

    def add(self, task: Task) -> None:
        """Append a task; order is fixed up by the next sort"""
        self._tasks.append(task)

    def remove(self, index: int) -> Task:
        """Remove and return the task at `index`"""
        self._check_index(index)
        return self._tasks.pop(index)

    def get(self, index: int) -> Task:
        """Return the live task at `index`; edits to it change the store."""
        self._check_index(index)
        return self._tasks[index]

    def sort_by_deadline(self) -> None:
        """Sort ascending by deadline"""
        # list.sort is stable: equal deadlines keep their relative order
        self._tasks.sort(key=lambda t: t.deadline)

    # ========================================
    # QUERIES
    # ========================================

    def all(self) -> List[Task]:
        """Snapshot of the tasks in current order"""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise IndexOutOfBounds()

    def __repr__(self) -> str:
        return f"TaskStore({len(self._tasks)} tasks)"
