# src/taskdesk/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The editing core depends on Protocols instead of concrete implementations,
so the console can be swapped for another surface and tests stay headless.
"""

from typing import Protocol

from ..tasks.task_models import DraftTask, Task, TaskId


class Notifier(Protocol):
    """Blocking user notification (an alert box in a GUI, a printed line in the console)."""

    def notify(self, message: str) -> None: ...


class TaskRepo(Protocol):
    def add(self, draft: DraftTask) -> TaskId: ...
    def update(self, task_id: TaskId, field: str, value: str) -> None: ...
    def remove(self, task_id: TaskId) -> None: ...
    def get(self, task_id: TaskId) -> Task: ...
    def list(self) -> list[Task]: ...
