# src/taskdesk/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from dataclasses import replace

from .errors import UNKNOWN_STATUS_MESSAGE, NotFoundError, ValidationError
from .task_models import (
    REQUIRED_FIELDS,
    STATUS,
    TASK_FIELDS,
    DraftTask,
    Task,
    TaskId,
    TaskStatus,
)

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task store.

    - insertion order is the display order (absent filtering)
    - ids come from a per-store monotonic counter and are never reused
    - tasks are frozen; updates swap in a replaced copy, so callers cannot
      bypass the blank checks by mutating what get() or list() returned
    - the store rejects blank values and unknown statuses; date checks live in the editors
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._ids = itertools.count(1)
        logger.debug("TaskStore ready (in-memory)")

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    # ---- low-level helpers ----

    def _find_index(self, task_id: TaskId) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    @staticmethod
    def _is_blank(value: object) -> bool:
        return value is None or not str(value).strip()

    # ---- public API ----

    def count(self) -> int:
        return len(self._tasks)

    def list(self) -> list[Task]:
        """Full collection in insertion order (a shallow copy of the list)."""
        return list(self._tasks)

    def get(self, task_id: TaskId) -> Task:
        idx = self._find_index(task_id)
        if idx is None:
            raise NotFoundError(task_id)
        return self._tasks[idx]

    def add(self, draft: DraftTask) -> TaskId:
        for name in REQUIRED_FIELDS:
            if self._is_blank(getattr(draft, name)):
                raise ValidationError(name)

        # None (or an empty choice) means the default status.
        status = self._coerce_status(draft.status) if draft.status else TaskStatus.ACTIVE

        task = Task(
            id=next(self._ids),
            title=draft.title.strip(),
            description=draft.description.strip(),
            executor=draft.executor.strip(),
            deadline=draft.deadline.strip(),
            status=status,
        )
        self._tasks.append(task)
        logger.debug(
            "Task added id=%s status=%s deadline=%s", task.id, task.status.slug, task.deadline
        )
        return task.id

    def update(self, task_id: TaskId, field: str, value: str) -> None:
        """Replace a single field. Raises ValidationError / NotFoundError."""
        if field not in TASK_FIELDS:
            raise ValueError(f"Unknown task field: {field!r}")
        if self._is_blank(value):
            raise ValidationError(field)

        idx = self._find_index(task_id)
        if idx is None:
            raise NotFoundError(task_id)

        new_value: object = self._coerce_status(value) if field == STATUS else value.strip()
        self._tasks[idx] = replace(self._tasks[idx], **{field: new_value})
        logger.debug("Task updated id=%s field=%s", task_id, field)

    @staticmethod
    def _coerce_status(value: object) -> TaskStatus:
        if isinstance(value, TaskStatus):
            return value
        status = TaskStatus.parse(str(value))
        if status is None:
            raise ValidationError(STATUS, UNKNOWN_STATUS_MESSAGE)
        return status

    def remove(self, task_id: TaskId) -> None:
        """Remove a task; absent ids are ignored."""
        idx = self._find_index(task_id)
        if idx is None:
            logger.debug("Task remove ignored, id=%s not present", task_id)
            return
        del self._tasks[idx]
        logger.debug("Task removed id=%s", task_id)
