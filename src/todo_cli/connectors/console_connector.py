# src/todo_cli/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import QUIT_COMMANDS
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "


def run_console_loop(state: AppState) -> None:
    """
    Read one command per line, dispatch it, print the reply.

    Ends on quit/exit, end of input, or Ctrl+C. Every command is finished
    (including its save) before the next line is read.
    """
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todo"))
    logger.info("Console started (tasks=%d).", state.task_store.count_tasks())
    print(f"{app_name}: type 'help' for commands, 'quit' to exit.")

    while True:
        try:
            user_input = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in QUIT_COMMANDS:
            logger.info("Console quit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            print(reply)

    logger.info("Console finished.")
