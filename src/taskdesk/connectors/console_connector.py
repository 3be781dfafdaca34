# src/taskdesk/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import handle_edit_input
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


class ConsoleNotifier:
    """Notifier that prints a highlighted line (the console's alert box)."""

    def notify(self, message: str) -> None:
        print(f"[{_ts_local()}] [!] {message}", flush=True)


def _prompt(state: AppState) -> str:
    session = state.editor.session
    if session is not None:
        return f"edit #{session.task_id} {session.field}> "
    if state.form.is_open:
        return "new task> "
    return "> "


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (filter=%s).", state.filter_mode)
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskdesk"))
    _print_ts(f"[{app_name}] Use /help for commands, /list to see tasks, /exit to quit.\n")

    while True:
        try:
            raw = input(_prompt(state))
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        user_input = raw.strip()

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input)
            if reply is None:
                # Plain line: the content of the active edit widget (blank included).
                reply = handle_edit_input(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            if user_input:
                _print_ts("Not editing anything. Use /edit <id> <field> or /help.")
            continue

        if reply:
            _print_ts(reply)

    logger.info("Console connector finished.")
