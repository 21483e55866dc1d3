# src/dude/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..core.errors import EmptyListError, OutOfRangeError
from .task_models import MarkDoneResult, Task

logger = logging.getLogger(__name__)


class TaskList:
    """
    Ordered, mutable collection of tasks.

    Positions are 1-based and derived from the current index, never stored:
    removing a task implicitly renumbers everything after it.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"TaskList(count={len(self._tasks)})"

    def count(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def _index_of(self, position: int) -> int:
        if not self._tasks:
            raise EmptyListError()
        if position < 1 or position > len(self._tasks):
            raise OutOfRangeError(position, len(self._tasks))
        return position - 1

    def get(self, position: int) -> Task:
        return self._tasks[self._index_of(position)]

    def add(self, task: Task) -> int:
        """Append a task (duplicates allowed). Returns the new count."""
        self._tasks.append(task)
        logger.debug("Task added kind=%s count=%s", task.kind.value, len(self._tasks))
        return len(self._tasks)

    def delete(self, position: int) -> Task:
        removed = self._tasks.pop(self._index_of(position))
        logger.debug("Task deleted position=%s count=%s", position, len(self._tasks))
        return removed

    def mark_done(self, position: int) -> tuple[Task, MarkDoneResult]:
        task = self._tasks[self._index_of(position)]
        result = task.mark_done()
        logger.debug("Task mark_done position=%s result=%s", position, result.value)
        return task, result

    def search(self, term: str) -> Iterator[Task]:
        """Tasks whose description contains `term` literally (case-sensitive), in list order."""
        return (task for task in self._tasks if term in task.description)
