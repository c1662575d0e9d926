# src/optodo/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..core.ports import Notifier
from ..errors import EmptyTitle, TaskNotFound
from ..notifications.notice_models import (
    MSG_COMPLETED,
    MSG_CREATED,
    MSG_DELETED,
    MSG_UPDATED,
    NoticeKind,
)
from .task_models import Task, TaskId

logger = logging.getLogger(__name__)

IdFactory = Callable[[], TaskId]

_MAX_ID_ATTEMPTS = 100


class _CounterIds:
    """Default id factory: decimal strings from a monotonic counter."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def __call__(self) -> TaskId:
        nid = self._next
        self._next += 1
        return str(nid)


class TaskStore:
    """
    In-memory, ordered task list.

    Every successful mutation reports exactly one notice to `notifier`.

    Unknown ids:
    - default store: toggle/remove/update on an unknown id is a logged no-op
      (no state change, no notice)
    - strict store: the same calls raise TaskNotFound

    Ids handed out by the store are never reused, even after the task that
    carried them was removed.
    """

    def __init__(
        self,
        notifier: Notifier,
        tasks: Iterable[Task] | None = None,
        *,
        strict: bool = False,
        id_factory: IdFactory | None = None,
    ) -> None:
        self._notifier = notifier
        self._strict = strict
        self._tasks: list[Task] = []
        self._issued: set[TaskId] = set()

        for task in tasks or ():
            if task.id in self._issued:
                raise ValueError(f"Duplicate task id in initial tasks: {task.id!r}")
            self._issued.add(task.id)
            self._tasks.append(task)

        if id_factory is None:
            numeric = [int(tid) for tid in self._issued if tid.isdigit()]
            id_factory = _CounterIds(start=max(numeric, default=0) + 1)
        self._id_factory = id_factory

        logger.debug("TaskStore ready total=%s strict=%s", len(self._tasks), strict)

    @property
    def strict(self) -> bool:
        return self._strict

    # ---- low-level helpers ----

    def _new_id(self) -> TaskId:
        for _ in range(_MAX_ID_ATTEMPTS):
            tid = self._id_factory()
            if tid not in self._issued:
                self._issued.add(tid)
                return tid
            logger.warning("Id factory returned an already issued id=%s; retrying", tid)
        raise RuntimeError("Id factory keeps returning already issued ids.")

    def _find(self, task_id: TaskId) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _missing(self, op: str, task_id: TaskId) -> None:
        if self._strict:
            raise TaskNotFound(task_id)
        logger.warning("%s ignored: unknown task id=%s", op, task_id)

    # ---- queries ----

    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: TaskId) -> Task | None:
        return self._find(task_id)

    def position_of(self, task_id: TaskId) -> int | None:
        """1-based display position, or None."""
        for i, task in enumerate(self._tasks, start=1):
            if task.id == task_id:
                return i
        return None

    def total(self) -> int:
        return len(self._tasks)

    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.completed)

    def __contains__(self, task_id: object) -> bool:
        return any(t.id == task_id for t in self._tasks)

    # ---- mutations ----

    def add(self, title: str) -> TaskId:
        if not title or not title.strip():
            raise EmptyTitle()

        task = Task(id=self._new_id(), title=title)
        self._tasks.append(task)
        logger.info("Task added id=%s", task.id)
        self._notifier.show(MSG_CREATED, NoticeKind.CREATE)
        return task.id

    def toggle(self, task_id: TaskId) -> None:
        task = self._find(task_id)
        if task is None:
            self._missing("toggle", task_id)
            return

        was_completed = task.completed
        task.completed = not was_completed
        logger.info("Task toggled id=%s completed=%s", task_id, task.completed)

        # Wording follows the state the task ends up in.
        if was_completed:
            self._notifier.show(MSG_CREATED, NoticeKind.CREATE)
        else:
            self._notifier.show(MSG_COMPLETED, NoticeKind.COMPLETE)

    def remove(self, task_id: TaskId) -> None:
        task = self._find(task_id)
        if task is None:
            self._missing("remove", task_id)
            return

        self._tasks.remove(task)
        logger.info("Task removed id=%s", task_id)
        self._notifier.show(MSG_DELETED, NoticeKind.DELETE)

    def update(self, task_id: TaskId, title: str) -> None:
        """Overwrite the title. No emptiness check here; see EditSession."""
        task = self._find(task_id)
        if task is None:
            self._missing("update", task_id)
            return

        if not title.strip():
            logger.warning("Task id=%s updated to an empty title", task_id)
        task.title = title
        logger.info("Task updated id=%s", task_id)
        self._notifier.show(MSG_UPDATED, NoticeKind.UPDATE)
