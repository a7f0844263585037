# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (injected or loaded once),
- loads the task file into a TaskStore,
- wires both into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.errors import ParseError, StorageError
from ..tasks.task_file import TaskFile
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def load_task_store(task_file: TaskFile) -> TaskStore:
    """
    Load the persisted tasks; never fails.

    A missing file gives an empty store. An unreadable or malformed file is
    logged as a warning and also gives an empty store; the file itself is left
    as is until the next save overwrites it.
    """
    try:
        return TaskStore.from_tasks(task_file.load())
    except (ParseError, StorageError) as e:
        logger.warning("Could not load tasks: %s. Starting with an empty list.", e)
        return TaskStore()


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    task_file = TaskFile(settings.tasks_path)
    return AppState(
        settings=settings,
        task_store=load_task_store(task_file),
        task_file=task_file,
    )
