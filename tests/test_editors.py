# tests/test_editors.py

from __future__ import annotations

import pytest

from taskdesk.editing.editors import EditorKind, editor_for
from taskdesk.tasks.errors import EMPTY_FIELD_MESSAGE, INVALID_DATE_MESSAGE, ValidationError
from taskdesk.tasks.task_models import TaskStatus, status_slug


@pytest.mark.parametrize(
    ("field", "kind"),
    [
        ("title", EditorKind.TEXT),
        ("executor", EditorKind.TEXT),
        ("description", EditorKind.MULTILINE),
        ("deadline", EditorKind.DATE),
        ("status", EditorKind.CHOICE),
    ],
)
def test_field_to_editor_kind(field: str, kind: EditorKind) -> None:
    assert editor_for(field) is kind


def test_editor_for_unknown_field() -> None:
    with pytest.raises(ValueError):
        editor_for("id")


def test_parse_trims_and_rejects_blank() -> None:
    assert EditorKind.TEXT.parse("title", "  Buy milk ") == "Buy milk"
    with pytest.raises(ValidationError) as exc:
        EditorKind.TEXT.parse("title", "   ")
    assert exc.value.field == "title"
    assert exc.value.message == EMPTY_FIELD_MESSAGE

    with pytest.raises(ValidationError):
        EditorKind.TEXT.parse("title", None)


def test_multiline_expands_escaped_newlines() -> None:
    assert EditorKind.MULTILINE.parse("description", r"line one\nline two") == "line one\nline two"


def test_date_editor_normalizes_and_rejects_invalid_dates() -> None:
    assert EditorKind.DATE.parse("deadline", " 2024-02-29 ") == "2024-02-29"

    with pytest.raises(ValidationError) as exc:
        EditorKind.DATE.parse("deadline", "2023-02-29")
    assert exc.value.message == INVALID_DATE_MESSAGE

    with pytest.raises(ValidationError):
        EditorKind.DATE.parse("deadline", "tomorrow")


@pytest.mark.parametrize(
    "raw", ["Задача выполнена", "completed", "COMPLETED", "задача-выполнена"]
)
def test_choice_editor_accepts_label_name_or_slug(raw: str) -> None:
    assert EditorKind.CHOICE.parse("status", raw) == TaskStatus.COMPLETED.value


def test_choice_editor_rejects_unknown_status() -> None:
    with pytest.raises(ValidationError):
        EditorKind.CHOICE.parse("status", "archived")


def test_choice_render_marks_current_status() -> None:
    out = EditorKind.CHOICE.render(TaskStatus.CANCELLED)
    lines = out.splitlines()
    assert len(lines) == 3
    assert lines[2].startswith("  [*] Задача отменена")
    assert lines[0].startswith("  [ ] Активная задача")


def test_status_slug() -> None:
    assert status_slug("Активная задача") == "активная-задача"
    assert status_slug("Task   Done") == "task-done"
    assert TaskStatus.CANCELLED.slug == "задача-отменена"
