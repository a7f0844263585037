# src/todo_cli/tasks/task_file.py

"""
Whole-file JSON persistence for the task list.

The file holds a single JSON array of task objects. Every save rewrites the
whole file; every load reads the whole file. A missing file is the first-run
state and loads as an empty list.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .errors import ParseError, StorageError
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "tasks.json"


class TaskFile:
    def __init__(self, path: str | Path = DEFAULT_TASKS_FILE) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> list[Task]:
        """
        Read and parse the task file.

        Raises:
        - StorageError if the file exists but cannot be read
        - ParseError if it is not a JSON array of well-formed tasks
        """
        if not self._path.exists():
            logger.info("No task file at %s, starting with an empty list.", self._path)
            return []

        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(self._path, str(e)) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(f"invalid JSON ({e})", self._path) from e

        if not isinstance(data, list):
            raise ParseError(f"expected a JSON array, got {type(data).__name__}", self._path)

        tasks: list[Task] = []
        for entry in data:
            try:
                tasks.append(Task.from_dict(entry))
            except ParseError as e:
                raise ParseError(e.reason, self._path) from e

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Overwrite the task file with the full list. Raises StorageError."""
        payload = [t.to_dict() for t in tasks]
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StorageError(self._path, str(e)) from e
        logger.info("Saved %d tasks to %s", len(payload), self._path)
