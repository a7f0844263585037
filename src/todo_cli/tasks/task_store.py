# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from .errors import ParseError, TaskNotFound
from .task_models import Task, parse_due_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TaskListItem:
    id: int
    done: bool
    text: str
    due_date: date | None


@dataclass(frozen=True, slots=True)
class TaskListing:
    """Read-only snapshot returned by TaskStore.list()."""

    items: tuple[TaskListItem, ...]
    done_count: int

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def progress(self) -> float:
        """Percentage of done tasks; 0.0 for an empty store (check is_empty first)."""
        if not self.items:
            return 0.0
        return self.done_count / len(self.items) * 100


class TaskStore:
    """
    In-memory ordered task list with a monotonic id counter.

    - insertion order is display order
    - ids are never reused: next_id only grows, even after remove()
    - lookups are linear scans by id

    Persisting is the caller's job (see TaskFile); the store never touches disk.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> TaskStore:
        """Rebuild a store from loaded tasks; next_id = max(id) + 1, or 1 if empty."""
        store = cls()
        seen: set[int] = set()
        for task in tasks:
            if task.id in seen:
                raise ParseError(f"duplicate task id {task.id}")
            seen.add(task.id)
            store._tasks.append(task)
        store._next_id = max(seen, default=0) + 1
        logger.debug("TaskStore restored total=%s next_id=%s", len(store._tasks), store._next_id)
        return store

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        raise TaskNotFound(task_id)

    def _append(self, text: str, due_date: date | None) -> int:
        task = Task.create(self._next_id, text, due_date)
        self._tasks.append(task)
        self._next_id += 1
        logger.debug("Task added id=%s due_date=%s", task.id, task.due_date)
        return task.id

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add(self, text: str) -> int:
        return self._append(text, None)

    def add_with_due_date(self, text: str, date_string: str) -> int:
        """Add a dated task. Raises InvalidDateFormat before anything is changed."""
        due = parse_due_date(date_string)
        return self._append(text, due)

    def complete(self, task_id: int) -> bool:
        """
        Mark a task done.

        Returns False when the task was already done (its completion time is
        kept). Raises TaskNotFound for an unknown id.
        """
        task = self._tasks[self._index_of(task_id)]
        if task.done:
            logger.debug("Task already done id=%s", task_id)
            return False
        task.complete()
        logger.debug("Task completed id=%s at=%s", task_id, task.completed_at)
        return True

    def remove(self, task_id: int) -> Task:
        """Delete a task and return it. Raises TaskNotFound for an unknown id."""
        task = self._tasks.pop(self._index_of(task_id))
        logger.debug("Task removed id=%s", task_id)
        return task

    def list(self) -> TaskListing:
        items = tuple(
            TaskListItem(id=t.id, done=t.done, text=t.text, due_date=t.due_date)
            for t in self._tasks
        )
        return TaskListing(items=items, done_count=sum(1 for t in self._tasks if t.done))
