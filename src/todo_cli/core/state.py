# src/todo_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_file import TaskFile
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same attributes).
    settings: object

    task_store: TaskStore
    task_file: TaskFile

    def save(self) -> None:
        """Persist the whole store. Raises StorageError; in-memory state is kept either way."""
        self.task_file.save(self.task_store.tasks())
