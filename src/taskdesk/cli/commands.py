# src/taskdesk/cli/commands.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from ..core.state import AppState
from ..editing.editors import editor_for
from ..tasks.errors import NotFoundError, ValidationError
from ..tasks.task_models import STATUS, TASK_FIELDS, TaskId
from ..tasks.view_filter import FilterMode
from .render import render_filters, render_form, render_table

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /new, /edit, ...)."""

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

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(raw: str) -> TaskId | None:
    try:
        return int(raw.lstrip("#"))
    except ValueError:
        return None


def _date_format(state: AppState) -> str:
    return str(getattr(state.settings, "date_format", "%d.%m.%Y"))


def _color(state: AppState) -> bool:
    return bool(getattr(state.settings, "color", False)) and sys.stdout.isatty()


def handle_edit_input(state: AppState, text: str) -> str | None:
    """
    Plain (non-command) input while a cell is being edited: the line is the
    widget's content, committed as a blur. Returns None when idle.
    """
    session = state.editor.session
    if session is None:
        return None

    if session.field == STATUS:
        ok = state.editor.select_status(text)
    else:
        ok = state.editor.commit(text)

    if ok:
        return f"Task #{session.task_id}: {session.field} saved."
    return f"Task #{session.task_id}: {session.field} unchanged."


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    table = render_table(
        state.visible_tasks(),
        date_format=_date_format(state),
        editing=state.editor.session,
        color=_color(state),
    )
    return render_filters(state.filter_mode) + "\n" + table


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter               -> show current mode
    /filter active        -> switch mode (all | active | completed)
    """
    if not args:
        return render_filters(state.filter_mode)
    try:
        state.filter_mode = FilterMode(args[0].lower())
    except ValueError:
        return "Usage: /filter all | active | completed."
    logger.debug("Filter mode set to %s", state.filter_mode)
    return cmd_list(state, [])


def cmd_new(state: AppState, args: list[str]) -> str:
    if state.editor.is_editing:
        state.editor.cancel()
    state.form.open()
    return (
        render_form(state.form, date_format=_date_format(state))
        + "\nUse /set <field> <value>, then /create (or /cancel)."
    )


def cmd_set(state: AppState, args: list[str]) -> str:
    if not state.form.is_open:
        return "Creation popup is closed. Use /new first."
    if not args:
        return "Usage: /set <field> <value>. Fields: " + ", ".join(TASK_FIELDS) + "."

    field = args[0].lower()
    if field not in TASK_FIELDS:
        return f"Unknown field: {field}. Fields: " + ", ".join(TASK_FIELDS) + "."
    value = " ".join(args[1:])
    try:
        state.form.set_field(field, value)
    except ValidationError as e:
        return f"{field} not staged: {e.message}"
    return f"{field} = {state.form.draft.value_of(field)}"


def cmd_draft(state: AppState, args: list[str]) -> str:
    if not state.form.is_open:
        return "Creation popup is closed. Use /new first."
    return render_form(state.form, date_format=_date_format(state))


def cmd_create(state: AppState, args: list[str]) -> str:
    if not state.form.is_open:
        return "Creation popup is closed. Use /new first."
    task_id = state.form.commit()
    if task_id is None:
        return "Task not created. Fix the field and /create again."
    return f"Task #{task_id} created."


def cmd_cancel(state: AppState, args: list[str]) -> str:
    if state.form.is_open:
        state.form.cancel()
        return "Creation cancelled."
    if state.editor.is_editing:
        state.editor.cancel()
        return "Edit cancelled."
    return "Nothing to cancel."


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id> <field>  -> activate a cell; the next plain line commits it
    """
    if len(args) < 2:
        return "Usage: /edit <id> <field>. Fields: " + ", ".join(TASK_FIELDS) + "."
    task_id = _parse_id(args[0])
    if task_id is None:
        return f"Invalid task id: {args[0]}"
    field = args[1].lower()
    try:
        state.editor.begin(task_id, field)
    except NotFoundError:
        return f"No task #{task_id}."
    except ValueError:
        return f"Unknown field: {field}. Fields: " + ", ".join(TASK_FIELDS) + "."

    kind = editor_for(field)
    return (
        f"Editing #{task_id} {field} ({kind.editor.hint}):\n"
        f"{state.editor.current_value()}\n"
        "Type the new value, or /cancel."
    )


def cmd_status(state: AppState, args: list[str]) -> str:
    """
    /status <id> <value>  -> status choice, committed immediately
    """
    if len(args) < 2:
        return "Usage: /status <id> <active | completed | cancelled>."
    task_id = _parse_id(args[0])
    if task_id is None:
        return f"Invalid task id: {args[0]}"
    try:
        state.editor.begin(task_id, STATUS)
    except NotFoundError:
        return f"No task #{task_id}."
    return handle_edit_input(state, " ".join(args[1:])) or ""


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <id>."
    task_id = _parse_id(args[0])
    if task_id is None:
        return f"Invalid task id: {args[0]}"

    session = state.editor.session
    if session is not None and session.task_id == task_id:
        state.editor.cancel()

    before = len(state.task_store)
    state.task_store.remove(task_id)
    if len(state.task_store) == before:
        return f"No task #{task_id}."
    return f"Task #{task_id} deleted."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task table.", aliases=["ls"])
registry.register(
    "filter", cmd_filter, help_text="Filter the table: /filter all | active | completed."
)
registry.register("new", cmd_new, help_text="Open the creation popup.")
registry.register("set", cmd_set, help_text="Stage a draft field: /set <field> <value>.")
registry.register("draft", cmd_draft, help_text="Show the task being created.")
registry.register("create", cmd_create, help_text="Create the drafted task.")
registry.register("cancel", cmd_cancel, help_text="Discard the draft or the current edit.")
registry.register("edit", cmd_edit, help_text="Edit a cell: /edit <id> <field>.")
registry.register("status", cmd_status, help_text="Change status: /status <id> <status>.")
registry.register(
    "delete", cmd_delete, help_text="Delete a task (no confirmation).", aliases=["rm"]
)
