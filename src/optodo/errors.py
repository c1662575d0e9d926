# src/optodo/errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base class for task-list errors."""


class EmptyTitle(TodoError, ValueError):
    """Raised when a task title is empty or whitespace-only."""

    def __init__(self, message: str = "Task title must not be empty.") -> None:
        super().__init__(message)


class TaskNotFound(TodoError, KeyError):
    """Raised by strict stores when an operation references an unknown task id."""

    def __init__(self, task_id: str) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task not found: {self.task_id!r}"
