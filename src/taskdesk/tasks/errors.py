# src/taskdesk/tasks/errors.py

from __future__ import annotations

from .task_models import TaskId

EMPTY_FIELD_MESSAGE = "Поле не может быть пустым"
INVALID_DATE_MESSAGE = "Некорректная дата"
UNKNOWN_STATUS_MESSAGE = "Неизвестный статус"

# Creation-time messages, one per required field.
REQUIRED_FIELD_MESSAGES: dict[str, str] = {
    "title": "Введите название задачи",
    "description": "Введите описание задачи",
    "executor": "Укажите исполнителя",
    "deadline": "Укажите дедлайн",
}


class ValidationError(ValueError):
    """A required field is blank (or not a value its widget can produce)."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        self.message = message or EMPTY_FIELD_MESSAGE
        super().__init__(f"{field}: {self.message}")


class NotFoundError(LookupError):
    def __init__(self, task_id: TaskId) -> None:
        self.task_id = task_id
        super().__init__(f"Task id {task_id} not found")
