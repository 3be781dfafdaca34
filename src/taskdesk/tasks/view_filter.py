# src/taskdesk/tasks/view_filter.py

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from .task_models import Task, TaskStatus


class FilterMode(StrEnum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return FILTER_LABELS[self]


FILTER_LABELS: dict[FilterMode, str] = {
    FilterMode.ALL: "Все задачи",
    FilterMode.ACTIVE: "Активные",
    FilterMode.COMPLETED: "Завершенные",
}

# "completed" deliberately covers both finished and cancelled tasks.
_BUCKETS: dict[FilterMode, frozenset[TaskStatus]] = {
    FilterMode.ACTIVE: frozenset({TaskStatus.ACTIVE}),
    FilterMode.COMPLETED: frozenset({TaskStatus.COMPLETED, TaskStatus.CANCELLED}),
}


def filter_tasks(tasks: Iterable[Task], mode: FilterMode | str) -> list[Task]:
    """
    Visible subset of `tasks` for `mode`, in the same relative order.

    Raises ValueError for an unknown mode.
    """
    mode = FilterMode(mode)
    if mode is FilterMode.ALL:
        return list(tasks)
    bucket = _BUCKETS[mode]
    return [t for t in tasks if t.status in bucket]
