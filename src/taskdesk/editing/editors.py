# src/taskdesk/editing/editors.py

"""
Per-field editor kinds.

Which widget edits a cell is a lookup keyed by field name, not a class
hierarchy: FIELD_EDITORS maps a field to an EditorKind, and each kind owns
its render / parse / validate behavior.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from enum import Enum

from ..tasks.errors import INVALID_DATE_MESSAGE, UNKNOWN_STATUS_MESSAGE, ValidationError
from ..tasks.task_models import DEADLINE, DESCRIPTION, STATUS, TASK_FIELDS, TaskStatus


class EditorKind(Enum):
    TEXT = "text"
    MULTILINE = "multiline"
    DATE = "date"
    CHOICE = "choice"

    @property
    def editor(self) -> Editor:
        return _EDITORS[self]

    def render(self, value: object) -> str:
        return self.editor.render(value)

    def parse(self, field: str, raw: str | None) -> str:
        """Trim, validate and convert widget text into the value stored for `field`."""
        text = (raw or "").strip()
        if not text:
            raise ValidationError(field)
        return self.editor.parse(field, text)


@dataclass(frozen=True, slots=True)
class Editor:
    render: Callable[[object], str]
    parse: Callable[[str, str], str]
    hint: str


def _render_plain(value: object) -> str:
    return "" if value is None else str(value)


def _render_multiline(value: object) -> str:
    text = _render_plain(value)
    return "\n".join(f"  | {line}" for line in text.splitlines()) or "  | "


def _render_choice(value: object) -> str:
    current = TaskStatus.parse(_render_plain(value))
    lines = []
    for st in TaskStatus:
        mark = "*" if st is current else " "
        lines.append(f"  [{mark}] {st.value} ({st.slug})")
    return "\n".join(lines)


def _parse_text(field: str, text: str) -> str:
    return text


def _parse_multiline(field: str, text: str) -> str:
    # Console input is single-line; a literal "\n" stands for a line break.
    return text.replace("\\n", "\n").strip()


def _parse_date(field: str, text: str) -> str:
    try:
        return date.fromisoformat(text).isoformat()
    except ValueError:
        raise ValidationError(field, INVALID_DATE_MESSAGE) from None


def _parse_choice(field: str, text: str) -> str:
    status = TaskStatus.parse(text)
    if status is None:
        raise ValidationError(field, UNKNOWN_STATUS_MESSAGE)
    return status.value


_EDITORS: dict[EditorKind, Editor] = {
    EditorKind.TEXT: Editor(_render_plain, _parse_text, "single line of text"),
    EditorKind.MULTILINE: Editor(
        _render_multiline, _parse_multiline, "text, use \\n for a line break"
    ),
    EditorKind.DATE: Editor(_render_plain, _parse_date, "date as YYYY-MM-DD"),
    EditorKind.CHOICE: Editor(
        _render_choice, _parse_choice, "one of: " + ", ".join(st.slug for st in TaskStatus)
    ),
}

FIELD_EDITORS: dict[str, EditorKind] = {
    DESCRIPTION: EditorKind.MULTILINE,
    STATUS: EditorKind.CHOICE,
    DEADLINE: EditorKind.DATE,
}


def editor_for(field: str) -> EditorKind:
    """Editor kind for a task field. Unknown fields raise ValueError."""
    if field not in TASK_FIELDS:
        raise ValueError(f"Field {field!r} is not editable")
    return FIELD_EDITORS.get(field, EditorKind.TEXT)
