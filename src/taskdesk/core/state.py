# src/taskdesk/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..editing.creation_form import CreationForm
from ..editing.session import EditSessionController
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore
from ..tasks.view_filter import FilterMode, filter_tasks
from .ports import Notifier


@dataclass
class AppState:
    # Settings live on the state so handlers do not read global config.
    settings: object

    task_store: TaskStore
    notifier: Notifier
    editor: EditSessionController
    form: CreationForm

    filter_mode: FilterMode = field(default=FilterMode.ALL)

    def visible_tasks(self) -> list[Task]:
        """Derived view, recomputed on every call."""
        return filter_tasks(self.task_store.list(), self.filter_mode)
