# src/todo_cli/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Any

from .errors import InvalidDateFormat, ParseError

DUE_DATE_FORMAT = "%Y-%m-%d"
_DUE_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _now_local() -> str:
    return datetime.now().astimezone().isoformat()


def parse_due_date(raw: str) -> date:
    """
    Parse a strict YYYY-MM-DD string into a date.

    The shape is checked first (strptime alone accepts "2024-2-5"), then the
    calendar: "2024-02-30" is rejected.
    """
    value = (raw or "").strip()
    if not _DUE_DATE_RE.match(value):
        raise InvalidDateFormat(raw)
    try:
        return datetime.strptime(value, DUE_DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateFormat(raw) from None


class TaskStatus(StrEnum):
    """Task lifecycle: OPEN -> DONE, DONE is terminal."""

    OPEN = "open"
    DONE = "done"


@dataclass(slots=True)
class Task:
    id: int
    text: str
    done: bool
    created_at: str
    completed_at: str | None = None
    due_date: date | None = None

    @classmethod
    def create(cls, task_id: int, text: str, due_date: str | date | None = None) -> Task:
        if not text or not text.strip():
            raise ValueError("text is required")
        if isinstance(due_date, str):
            due_date = parse_due_date(due_date)
        return cls(
            id=task_id,
            text=text.strip(),
            done=False,
            created_at=_now_local(),
            completed_at=None,
            due_date=due_date,
        )

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.DONE if self.done else TaskStatus.OPEN

    def complete(self) -> None:
        self.done = True
        self.completed_at = _now_local()

    # ---- JSON mapping ----

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "done": self.done,
            "created_at": self.created_at,
            "completed_at": self.completed_at,
            "due_date": self.due_date.isoformat() if self.due_date is not None else None,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from one entry of the persisted JSON array.

        Raises ParseError on missing fields, wrong types, or a completion
        timestamp that disagrees with the done flag.
        """
        if not isinstance(raw, dict):
            raise ParseError(f"task entry must be an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        # bool is an int subclass; true/false are not ids.
        if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id < 1:
            raise ParseError(f"invalid id {task_id!r}")

        text = raw.get("text")
        if not isinstance(text, str) or not text.strip():
            raise ParseError(f"task {task_id}: text must be a non-empty string")

        done = raw.get("done")
        if not isinstance(done, bool):
            raise ParseError(f"task {task_id}: done must be a boolean")

        created_at = raw.get("created_at")
        if not isinstance(created_at, str):
            raise ParseError(f"task {task_id}: created_at must be a string")

        completed_at = raw.get("completed_at")
        if completed_at is not None and not isinstance(completed_at, str):
            raise ParseError(f"task {task_id}: completed_at must be a string or null")
        if done != (completed_at is not None):
            raise ParseError(f"task {task_id}: completed_at must be set exactly when done")

        raw_due = raw.get("due_date")
        due: date | None = None
        if raw_due is not None:
            if not isinstance(raw_due, str):
                raise ParseError(f"task {task_id}: due_date must be a string or null")
            try:
                due = parse_due_date(raw_due)
            except InvalidDateFormat as e:
                raise ParseError(f"task {task_id}: {e}") from e

        return cls(
            id=task_id,
            text=text,
            done=done,
            created_at=created_at,
            completed_at=completed_at,
            due_date=due,
        )
