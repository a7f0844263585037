# tests/test_console_connector.py

from __future__ import annotations

import builtins

from todo_cli.connectors import console_connector
from todo_cli.connectors.console_connector import run_console_loop


def _feed(monkeypatch, lines, end=EOFError) -> list[str]:
    """Replace input() with a scripted sequence; raise `end` when it runs out."""
    remaining = list(lines)
    prompts: list[str] = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        if not remaining:
            raise end()
        return remaining.pop(0)

    monkeypatch.setattr(builtins, "input", fake_input)
    return prompts


def test_loop_runs_commands_until_quit(state, monkeypatch, capsys) -> None:
    prompts = _feed(monkeypatch, ["add buy milk", "", "list", "QUIT", "add never"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Task added (id 1)." in out
    assert "  1 [ ] buy milk" in out
    assert state.task_store.count_tasks() == 1
    # the line after quit is never read
    assert len(prompts) == 4


def test_loop_ends_on_eof_and_ctrl_c(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["add a"])
    run_console_loop(state)

    _feed(monkeypatch, ["add b"], end=KeyboardInterrupt)
    run_console_loop(state)

    assert [t.text for t in state.task_store.tasks()] == ["a", "b"]


def test_unknown_command_keeps_looping(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["dance", "add a", "exit"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Unknown command: dance." in out
    assert "Task added (id 1)." in out


def test_handler_crash_is_reported_and_loop_continues(state, monkeypatch, capsys) -> None:
    def crash(state, line):
        raise RuntimeError("boom")

    monkeypatch.setattr(console_connector.command_registry, "handle", crash)
    _feed(monkeypatch, ["list", "list"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert out.count("Internal error while handling a command.") == 2
