# src/todo_cli/tasks/errors.py

"""
Error kinds raised by the task layer.

Every error is recoverable: the command layer turns it into a reply line and
the console loop keeps reading.
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for all task-layer errors."""


class InvalidDateFormat(TodoError, ValueError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid date {raw!r}: expected a real calendar date as YYYY-MM-DD.")
        self.raw = raw


class TaskNotFound(TodoError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found.")
        self.task_id = task_id


class StorageError(TodoError, OSError):
    """The task file could not be read or written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Cannot access task file {path}: {reason}")
        self.path = Path(path)


class ParseError(TodoError, ValueError):
    """The task file exists but does not hold a valid task list."""

    def __init__(self, reason: str, path: str | Path | None = None) -> None:
        where = f" in {path}" if path is not None else ""
        super().__init__(f"Malformed task data{where}: {reason}")
        self.path = Path(path) if path is not None else None
        self.reason = reason
