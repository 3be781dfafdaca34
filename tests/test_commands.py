# tests/test_commands.py

from __future__ import annotations

from taskdesk.cli.commands import CommandRegistry, handle_edit_input, registry
from taskdesk.core.state import AppState
from taskdesk.tasks.task_models import TaskStatus
from taskdesk.tasks.view_filter import FilterMode

from .fakes import FakeNotifier


def _create(state: AppState, title: str = "A") -> int:
    registry.handle(state, "/new")
    registry.handle(state, f"/set title {title}")
    registry.handle(state, "/set description d")
    registry.handle(state, "/set executor e")
    registry.handle(state, "/set deadline 2024-01-01")
    reply = registry.handle(state, "/create") or ""
    assert reply.startswith("Task #")
    return int(reply.split("#")[1].split()[0])


def test_command_registry_routes_and_aliases(state: AppState) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(state, args):
        called.append(args)
        return "ok"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x y") == "ok"
    assert reg.handle(state, "/ALPHA") == "ok"
    assert called == [["x", "y"], []]
    assert "/a - a" in reg.build_help()


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_create_flow_and_list(state: AppState) -> None:
    task_id = _create(state, "Buy milk")

    out = registry.handle(state, "/list") or ""
    assert f"{task_id}" in out
    assert "Buy milk" in out
    assert "01.01.2024" in out
    assert "[Активная задача]" in out
    assert not state.form.is_open


def test_create_with_missing_field_keeps_popup(state: AppState, notifier: FakeNotifier) -> None:
    registry.handle(state, "/new")
    registry.handle(state, "/set description d")

    reply = registry.handle(state, "/create") or ""

    assert "not created" in reply
    assert state.form.is_open
    assert len(state.task_store) == 0
    assert notifier.messages == ["Введите название задачи"]


def test_set_requires_open_popup(state: AppState) -> None:
    assert "closed" in (registry.handle(state, "/set title A") or "")


def test_set_rejects_invalid_date(state: AppState) -> None:
    registry.handle(state, "/new")
    reply = registry.handle(state, "/set deadline 2024-02-30") or ""
    assert "not staged" in reply
    assert state.form.draft.deadline == ""


def test_cancel_closes_popup(state: AppState) -> None:
    registry.handle(state, "/new")
    registry.handle(state, "/set title A")
    assert registry.handle(state, "/cancel") == "Creation cancelled."
    assert not state.form.is_open
    assert state.form.draft.title == ""


def test_edit_then_plain_line_commits(state: AppState) -> None:
    task_id = _create(state)

    reply = registry.handle(state, f"/edit {task_id} title") or ""
    assert reply.startswith(f"Editing #{task_id} title")

    assert handle_edit_input(state, "Renamed") == f"Task #{task_id}: title saved."
    assert state.task_store.get(task_id).title == "Renamed"
    assert state.editor.session is None


def test_edit_blank_line_keeps_value(state: AppState, notifier: FakeNotifier) -> None:
    task_id = _create(state)
    registry.handle(state, f"/edit {task_id} executor")

    assert handle_edit_input(state, "") == f"Task #{task_id}: executor unchanged."
    assert state.task_store.get(task_id).executor == "e"
    assert state.editor.session is None
    assert notifier.messages == ["Поле не может быть пустым"]


def test_plain_line_when_idle_is_not_handled(state: AppState) -> None:
    assert handle_edit_input(state, "hello") is None


def test_edit_unknown_task_or_field(state: AppState) -> None:
    task_id = _create(state)
    assert registry.handle(state, "/edit 999 title") == "No task #999."
    assert "Unknown field" in (registry.handle(state, f"/edit {task_id} priority") or "")
    assert "Invalid task id" in (registry.handle(state, "/edit x title") or "")


def test_status_command_moves_task_between_filters(state: AppState) -> None:
    task_id = _create(state)

    reply = registry.handle(state, f"/status {task_id} Задача отменена") or ""

    assert "saved" in reply
    assert state.task_store.get(task_id).status is TaskStatus.CANCELLED

    registry.handle(state, "/filter completed")
    assert [t.id for t in state.visible_tasks()] == [task_id]
    registry.handle(state, "/filter active")
    assert state.visible_tasks() == []


def test_filter_command(state: AppState) -> None:
    assert state.filter_mode is FilterMode.ALL
    out = registry.handle(state, "/filter active") or ""
    assert state.filter_mode is FilterMode.ACTIVE
    assert "[Активные]" in out
    assert "Нет задач для отображения" in out

    assert "Usage" in (registry.handle(state, "/filter archived") or "")
    assert state.filter_mode is FilterMode.ACTIVE


def test_delete_command(state: AppState) -> None:
    task_id = _create(state)
    registry.handle(state, f"/edit {task_id} title")

    assert registry.handle(state, f"/delete {task_id}") == f"Task #{task_id} deleted."
    assert len(state.task_store) == 0
    assert state.editor.session is None

    assert registry.handle(state, f"/rm {task_id}") == f"No task #{task_id}."
