# src/taskdesk/cli/render.py

"""Plain-text rendering of the task table, filter bar and creation popup."""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import date

from ..editing.creation_form import CreationForm
from ..editing.session import EditSession
from ..tasks.task_models import (
    DEADLINE,
    DESCRIPTION,
    EXECUTOR,
    STATUS,
    TASK_FIELDS,
    TITLE,
    Task,
    TaskStatus,
)
from ..tasks.view_filter import FilterMode

EMPTY_MESSAGE = "Нет задач для отображения"

COLUMN_TITLES: dict[str, str] = {
    TITLE: "Название",
    DESCRIPTION: "Описание",
    EXECUTOR: "Исполнитель",
    DEADLINE: "Дедлайн",
    STATUS: "Статус",
}

FORM_LABELS: dict[str, str] = {
    TITLE: "Название задачи *",
    DESCRIPTION: "Описание *",
    EXECUTOR: "Исполнитель *",
    DEADLINE: "Дедлайн *",
    STATUS: "Статус",
}

MAX_CELL_WIDTH = 28
SEP = " | "
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

RESET = "\033[0m"
BADGE_COLORS: dict[TaskStatus, str] = {
    TaskStatus.ACTIVE: "\033[38;5;33m",
    TaskStatus.COMPLETED: "\033[38;5;34m",
    TaskStatus.CANCELLED: "\033[38;5;160m",
}


def format_date(iso: str, fmt: str = "%d.%m.%Y") -> str:
    """Localized display of an ISO date; unparsable input is shown as-is."""
    try:
        return date.fromisoformat(iso).strftime(fmt)
    except (TypeError, ValueError):
        return iso


def badge_class(status: TaskStatus) -> str:
    return f"status-{status.slug}"


def status_badge(status: TaskStatus, *, color: bool = False) -> str:
    text = f"[{status.value}]"
    if not color:
        return text
    return f"{BADGE_COLORS.get(status, '')}{text}{RESET}"


def _visible_len(s: str) -> int:
    return len(ANSI_RE.sub("", s))


def _clip(text: str, width: int = MAX_CELL_WIDTH) -> str:
    lines = text.splitlines() or [""]
    first = lines[0]
    if len(lines) > 1 or len(first) > width:
        first = first[: width - 1].rstrip() + "…"
    return first


def _pad(cell: str, width: int) -> str:
    return cell + " " * max(0, width - _visible_len(cell))


def render_filters(mode: FilterMode) -> str:
    parts = []
    for m in FilterMode:
        parts.append(f"[{m.label}]" if m is mode else f" {m.label} ")
    return "Фильтр: " + " ".join(parts)


def render_table(
    tasks: Sequence[Task],
    *,
    date_format: str = "%d.%m.%Y",
    editing: EditSession = None,
    color: bool = False,
) -> str:
    header = ["#"] + [COLUMN_TITLES[f] for f in TASK_FIELDS]
    if not tasks:
        return SEP.join(header) + "\n" + EMPTY_MESSAGE

    rows: list[list[str]] = []
    for t in tasks:
        cells = [
            str(t.id),
            _clip(t.title),
            _clip(t.description),
            _clip(t.executor),
            format_date(t.deadline, date_format),
            status_badge(t.status, color=color),
        ]
        if editing is not None and editing.task_id == t.id:
            col = TASK_FIELDS.index(editing.field) + 1
            cells[col] = "✎ " + cells[col]
        rows.append(cells)

    widths = [
        max(_visible_len(row[i]) for row in [header, *rows]) for i in range(len(header))
    ]
    lines = [SEP.join(_pad(c, w) for c, w in zip(header, widths))]
    lines.append(SEP.join("-" * w for w in widths))
    for row in rows:
        lines.append(SEP.join(_pad(c, w) for c, w in zip(row, widths)).rstrip())
    return "\n".join(lines)


def render_form(form: CreationForm, *, date_format: str = "%d.%m.%Y") -> str:
    draft = form.draft
    lines = ["Создание задачи"]
    for name in TASK_FIELDS:
        value = draft.value_of(name)
        if name == DEADLINE and value:
            value = f"{value} ({format_date(value, date_format)})"
        lines.append(f"  {FORM_LABELS[name]}: {value}")
    missing = form.missing_fields()
    if missing:
        lines.append("  missing: " + ", ".join(missing))
    return "\n".join(lines)
