# src/todo_cli/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.errors import InvalidDateFormat, StorageError, TaskNotFound, TodoError
from ..tasks.task_store import TaskListing

CommandHandler = Callable[[AppState, str], str]

QUIT_COMMANDS = ("quit", "exit")
DUE_SEPARATOR = " due "

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Registry of the line commands understood by the console (add, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def command_names(self) -> list[str]:
        return [*self._help, QUIT_COMMANDS[0]]

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "command args".
        Returns a reply string, or None for a blank line.
        """
        line = line.strip()
        if not line:
            return None

        name, _, rest = line.partition(" ")
        name = name.lower()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {name}. Valid commands: {', '.join(self.command_names())}."

        try:
            return handler(state, rest.strip())
        except TodoError as e:
            logger.info("Command %s failed: %s", name, e)
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        lines.append(f"  {QUIT_COMMANDS[0]} - Exit the program.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(raw: str) -> int | None:
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw)


def _save_or_warn(state: AppState, reply: str) -> str:
    """Persist after a successful mutation; a failed save keeps the in-memory change."""
    try:
        state.save()
    except StorageError as e:
        logger.error("Save failed: %s", e)
        return f"{reply}\nWarning: the change is kept for this session but was not saved: {e}"
    return reply


def _split_due(rest: str) -> tuple[str, str | None]:
    """
    Split "text due YYYY-MM-DD" into (text, date_string).

    Only the last " due " counts, and only when a single token follows it, so
    "call mum about due dates" stays plain text.
    """
    text, sep, tail = rest.rpartition(DUE_SEPARATOR)
    tail = tail.strip()
    if not sep or not text.strip() or not tail or " " in tail:
        return rest, None
    return text.strip(), tail


def format_listing(listing: TaskListing) -> str:
    if listing.is_empty:
        return "No tasks yet."
    lines = ["Tasks:"]
    for item in listing.items:
        mark = "x" if item.done else " "
        due = f" (due {item.due_date.isoformat()})" if item.due_date is not None else ""
        lines.append(f"{item.id:3} [{mark}] {item.text}{due}")
    lines.append(f"Progress: {listing.progress:.0f}% ({listing.done_count}/{listing.total} done)")
    return "\n".join(lines)


def cmd_help(state: AppState, rest: str) -> str:
    return registry.build_help()


def cmd_add(state: AppState, rest: str) -> str:
    """
    add <text>                 -> plain task
    add <text> due YYYY-MM-DD  -> dated task
    """
    if not rest:
        return "Usage: add <text> [due YYYY-MM-DD]"

    text, due = _split_due(rest)
    try:
        if due is None:
            task_id = state.task_store.add(text)
        else:
            task_id = state.task_store.add_with_due_date(text, due)
    except InvalidDateFormat as e:
        return str(e)

    return _save_or_warn(state, f"Task added (id {task_id}).")


def cmd_list(state: AppState, rest: str) -> str:
    return format_listing(state.task_store.list())


def cmd_complete(state: AppState, rest: str) -> str:
    task_id = _parse_id(rest)
    if task_id is None:
        return "Invalid task id. Usage: complete <id>"
    try:
        changed = state.task_store.complete(task_id)
    except TaskNotFound as e:
        return str(e)
    if not changed:
        return f"Task {task_id} is already done."
    return _save_or_warn(state, f"Task {task_id} completed.")


def cmd_remove(state: AppState, rest: str) -> str:
    task_id = _parse_id(rest)
    if task_id is None:
        return "Invalid task id. Usage: remove <id>"
    try:
        state.task_store.remove(task_id)
    except TaskNotFound as e:
        return str(e)
    return _save_or_warn(state, f"Task {task_id} removed.")


registry.register("add", cmd_add, help_text="Add a task: add <text> [due YYYY-MM-DD].")
registry.register("list", cmd_list, help_text="List tasks with progress.", aliases=["ls"])
registry.register("complete", cmd_complete, help_text="Mark a task done: complete <id>.", aliases=["done"])
registry.register("remove", cmd_remove, help_text="Delete a task: remove <id>.", aliases=["rm"])
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
