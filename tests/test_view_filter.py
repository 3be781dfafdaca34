# tests/test_view_filter.py

from __future__ import annotations

import pytest

from taskdesk.tasks.task_models import Task, TaskStatus
from taskdesk.tasks.view_filter import FilterMode, filter_tasks


def _tasks() -> list[Task]:
    statuses = [
        TaskStatus.ACTIVE,
        TaskStatus.COMPLETED,
        TaskStatus.CANCELLED,
        TaskStatus.ACTIVE,
        TaskStatus.CANCELLED,
    ]
    return [
        Task(id=i, title=f"t{i}", description="d", executor="e", deadline="2024-01-01", status=s)
        for i, s in enumerate(statuses, start=1)
    ]


def test_all_returns_everything_in_order() -> None:
    tasks = _tasks()
    assert filter_tasks(tasks, "all") == tasks


def test_active_bucket() -> None:
    assert [t.id for t in filter_tasks(_tasks(), FilterMode.ACTIVE)] == [1, 4]


def test_completed_bucket_merges_completed_and_cancelled() -> None:
    assert [t.id for t in filter_tasks(_tasks(), "completed")] == [2, 3, 5]


def test_active_and_completed_partition_all_tasks() -> None:
    tasks = _tasks()
    active = filter_tasks(tasks, "active")
    completed = filter_tasks(tasks, "completed")

    assert not {t.id for t in active} & {t.id for t in completed}
    assert sorted(t.id for t in active + completed) == [t.id for t in tasks]


@pytest.mark.parametrize("mode", list(FilterMode))
def test_filter_is_idempotent(mode: FilterMode) -> None:
    once = filter_tasks(_tasks(), mode)
    assert filter_tasks(once, mode) == once


def test_filter_does_not_mutate_input() -> None:
    tasks = _tasks()
    snapshot = list(tasks)
    filter_tasks(tasks, "active")
    assert tasks == snapshot


def test_unknown_mode_is_rejected() -> None:
    with pytest.raises(ValueError):
        filter_tasks(_tasks(), "archived")


def test_filter_labels() -> None:
    assert FilterMode.ALL.label == "Все задачи"
    assert FilterMode.ACTIVE.label == "Активные"
    assert FilterMode.COMPLETED.label == "Завершенные"
