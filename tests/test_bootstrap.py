# tests/test_bootstrap.py

from __future__ import annotations

import logging

from todo_cli.cli.bootstrap import create_initial_state
from todo_cli.tasks.task_file import TaskFile
from todo_cli.tasks.task_store import TaskStore


def test_first_run_starts_empty(settings) -> None:
    state = create_initial_state(settings=settings)

    assert state.task_store.count_tasks() == 0
    assert state.task_store.next_id == 1
    assert state.task_file.path == settings.tasks_path
    assert not settings.tasks_path.exists()


def test_loads_existing_tasks_and_resumes_ids(settings) -> None:
    store = TaskStore()
    store.add("a")
    store.add("b")
    store.add("c")
    store.remove(3)
    TaskFile(settings.tasks_path).save(store.tasks())

    state = create_initial_state(settings=settings)

    assert [t.text for t in state.task_store.tasks()] == ["a", "b"]
    # only ids present on disk count; 3 was never persisted
    assert state.task_store.add("d") == 3


def test_malformed_file_warns_and_starts_empty(settings, caplog) -> None:
    settings.tasks_path.write_text("{broken", "utf-8")

    with caplog.at_level(logging.WARNING, logger="todo_cli"):
        state = create_initial_state(settings=settings)

    assert state.task_store.count_tasks() == 0
    assert any(
        r.levelno == logging.WARNING and str(settings.tasks_path) in r.getMessage()
        for r in caplog.records
    )
    # untouched until the next save
    assert settings.tasks_path.read_text("utf-8") == "{broken"

    state.task_store.add("fresh")
    state.save()
    assert [t.text for t in TaskFile(settings.tasks_path).load()] == ["fresh"]


def test_duplicate_ids_on_disk_start_empty(settings) -> None:
    settings.tasks_path.write_text(
        '[{"id": 1, "text": "a", "done": false, "created_at": "c"},'
        ' {"id": 1, "text": "b", "done": false, "created_at": "c"}]',
        "utf-8",
    )

    state = create_initial_state(settings=settings)

    assert state.task_store.count_tasks() == 0
