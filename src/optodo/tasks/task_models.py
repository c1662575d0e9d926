# src/optodo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

TaskId = str


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    `id` is assigned by the store and never changes; only `title` and
    `completed` are mutated in place.
    """

    id: TaskId
    title: str
    completed: bool = False


# Initial display fixture; nothing is persisted between runs.
SEED_TASKS: tuple[tuple[TaskId, str, bool], ...] = (
    ("1", "Review quarterly reports", False),
    ("2", "Schedule team sync meeting", True),
    ("3", "Approve vendor contracts", False),
)


def seed_tasks() -> list[Task]:
    """Fresh copies of the seed fixture (callers may mutate them)."""
    return [Task(id=tid, title=title, completed=done) for tid, title, done in SEED_TASKS]
