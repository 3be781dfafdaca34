# src/taskdesk/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum

TaskId = int

# Editable task fields, in table column order.
TITLE = "title"
DESCRIPTION = "description"
EXECUTOR = "executor"
DEADLINE = "deadline"
STATUS = "status"

TASK_FIELDS: tuple[str, ...] = (TITLE, DESCRIPTION, EXECUTOR, DEADLINE, STATUS)

# Checked in this order on creation; the first blank one is reported.
REQUIRED_FIELDS: tuple[str, ...] = (TITLE, DESCRIPTION, EXECUTOR, DEADLINE)

_WS_RE = re.compile(r"\s+")


class TaskStatus(StrEnum):
    """
    Task status. Values are the user-facing labels.

    Notes:
    - the "completed" filter bucket merges COMPLETED and CANCELLED
      (see view_filter.py); the statuses themselves stay distinct.
    """

    ACTIVE = "Активная задача"
    COMPLETED = "Задача выполнена"
    CANCELLED = "Задача отменена"

    @property
    def slug(self) -> str:
        return status_slug(self.value)

    @classmethod
    def parse(cls, raw: str | None) -> TaskStatus | None:
        """Accept a label, an enum name or a slug (case-insensitive). None if unknown."""
        if not raw:
            return None
        needle = raw.strip().lower()
        if not needle:
            return None
        for st in cls:
            if needle in (st.value.lower(), st.name.lower(), st.slug):
                return st
        return None


def status_slug(label: str) -> str:
    """CSS-class-safe slug: whitespace runs become '-', lower-cased."""
    return _WS_RE.sub("-", label).lower()


@dataclass(frozen=True, slots=True)
class Task:
    id: TaskId
    title: str
    description: str
    executor: str
    deadline: str  # ISO date, YYYY-MM-DD
    status: TaskStatus = TaskStatus.ACTIVE


@dataclass(slots=True)
class DraftTask:
    """Uncommitted task staged by the creation form (no id yet)."""

    title: str = ""
    description: str = ""
    executor: str = ""
    deadline: str = ""
    status: TaskStatus | str | None = field(default=TaskStatus.ACTIVE)

    def value_of(self, name: str) -> str:
        val = getattr(self, name)
        return "" if val is None else str(val)
