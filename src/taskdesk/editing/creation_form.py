# src/taskdesk/editing/creation_form.py

from __future__ import annotations

import logging

from ..core.ports import Notifier, TaskRepo
from ..tasks.errors import REQUIRED_FIELD_MESSAGES, ValidationError
from ..tasks.task_models import (
    DEADLINE,
    REQUIRED_FIELDS,
    STATUS,
    TASK_FIELDS,
    DraftTask,
    TaskId,
    TaskStatus,
)
from .editors import editor_for

logger = logging.getLogger(__name__)


class CreationForm:
    """
    Creation popup: stages a DraftTask until it is committed or discarded.

    A failed commit keeps the draft and leaves the popup open.
    """

    def __init__(self, store: TaskRepo, notifier: Notifier) -> None:
        self._store = store
        self._notifier = notifier
        self.draft = DraftTask()
        self.is_open = False

    def open(self) -> None:
        self.is_open = True

    def set_field(self, field: str, raw: str) -> None:
        """
        Stage a draft value.

        Status and deadline go through their constrained widgets, so an
        unknown status or an impossible date raises ValidationError here.
        Text fields are staged as typed; blanks are caught on commit.
        """
        if field not in TASK_FIELDS:
            raise ValueError(f"Unknown task field: {field!r}")
        if field == STATUS:
            self.draft.status = TaskStatus(editor_for(field).parse(field, raw))
        elif field == DEADLINE:
            self.draft.deadline = editor_for(field).parse(field, raw)
        else:
            setattr(self.draft, field, raw)

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not self.draft.value_of(name).strip()]

    def commit(self) -> TaskId | None:
        """Create the task. On a blank required field notify and keep the popup open."""
        try:
            task_id = self._store.add(self.draft)
        except ValidationError as e:
            message = REQUIRED_FIELD_MESSAGES.get(e.field, e.message)
            logger.info("Task creation rejected: field=%s", e.field)
            self._notifier.notify(message)
            return None

        logger.info("Task created id=%s", task_id)
        self._reset()
        return task_id

    def cancel(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.draft = DraftTask()
        self.is_open = False
