# src/taskdesk/editing/session.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.ports import Notifier, TaskRepo
from ..tasks.errors import NotFoundError, ValidationError
from ..tasks.task_models import STATUS, TaskId
from .editors import EditorKind, editor_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Editing:
    task_id: TaskId
    field: str


# Idle is represented by None.
EditSession = Editing | None


class EditSessionController:
    """
    Inline-edit state machine: Idle <-> Editing(task_id, field).

    - at most one cell is edited at a time
    - begin() on another cell abandons the current edit without saving
    - commit() (blur) and select_status() always end in Idle, whether or not
      the store accepted the value
    """

    def __init__(self, store: TaskRepo, notifier: Notifier) -> None:
        self._store = store
        self._notifier = notifier
        self._session: EditSession = None

    @property
    def session(self) -> EditSession:
        return self._session

    @property
    def is_editing(self) -> bool:
        return self._session is not None

    def is_editing_cell(self, task_id: TaskId, field: str) -> bool:
        return self._session == Editing(task_id, field)

    @property
    def editor_kind(self) -> EditorKind | None:
        if self._session is None:
            return None
        return editor_for(self._session.field)

    def begin(self, task_id: TaskId, field: str) -> Editing:
        """Activate a cell. Raises ValueError / NotFoundError."""
        editor_for(field)
        self._store.get(task_id)

        if self._session is not None and self._session != Editing(task_id, field):
            logger.debug(
                "Edit abandoned task_id=%s field=%s", self._session.task_id, self._session.field
            )

        self._session = Editing(task_id, field)
        logger.debug("Edit started task_id=%s field=%s", task_id, field)
        return self._session

    def current_value(self) -> str:
        """Widget text for the active cell ('' when idle)."""
        if self._session is None:
            return ""
        task = self._store.get(self._session.task_id)
        return editor_for(self._session.field).render(getattr(task, self._session.field))

    def commit(self, raw: str | None) -> bool:
        """
        Blur: forward the widget's text to the store and return to Idle.

        Returns True if the store was updated.
        """
        session = self._session
        if session is None:
            return False
        try:
            return self._apply(session, raw)
        finally:
            self._session = None

    def select_status(self, raw: str | None) -> bool:
        """Status choice changed: commit at once, no blur needed."""
        session = self._session
        if session is None or session.field != STATUS:
            return False
        return self.commit(raw)

    def cancel(self) -> None:
        if self._session is not None:
            logger.debug(
                "Edit cancelled task_id=%s field=%s", self._session.task_id, self._session.field
            )
        self._session = None

    def _apply(self, session: Editing, raw: str | None) -> bool:
        try:
            value = editor_for(session.field).parse(session.field, raw)
            self._store.update(session.task_id, session.field, value)
        except ValidationError as e:
            logger.info("Edit rejected task_id=%s field=%s: %s", session.task_id, e.field, e.message)
            self._notifier.notify(e.message)
            return False
        except NotFoundError:
            logger.debug("Edit target gone task_id=%s; nothing to update", session.task_id)
            return False

        logger.debug("Edit committed task_id=%s field=%s", session.task_id, session.field)
        return True
