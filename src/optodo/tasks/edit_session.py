# src/optodo/tasks/edit_session.py

from __future__ import annotations

import logging

from ..core.ports import TaskRepo
from ..errors import EmptyTitle, TaskNotFound
from .task_models import TaskId

logger = logging.getLogger(__name__)


class EditSession:
    """
    Tracks the one task being renamed and its draft title.

    Lifecycle:
    - begin(): starts (or retargets) the session; an unsaved draft for another
      task is dropped
    - commit(): writes the draft through the store, then ends the session
    - reseed(): the cancel key; resets the draft to the stored title but keeps
      the session open

    With strict_titles, a blank draft is refused at commit time; otherwise it
    goes through to the store like any other title.
    """

    def __init__(self, store: TaskRepo, *, strict_titles: bool = False) -> None:
        self._store = store
        self._strict_titles = strict_titles
        self._active_task_id: TaskId | None = None
        self._draft_text = ""

    @property
    def active_task_id(self) -> TaskId | None:
        return self._active_task_id

    @property
    def draft_text(self) -> str:
        return self._draft_text

    @property
    def active(self) -> bool:
        return self._active_task_id is not None

    def is_editing(self, task_id: TaskId) -> bool:
        return self._active_task_id is not None and self._active_task_id == task_id

    def begin(self, task_id: TaskId, current_title: str) -> None:
        if self._active_task_id is not None and self._active_task_id != task_id:
            logger.info("Edit of task id=%s abandoned for id=%s", self._active_task_id, task_id)
        self._active_task_id = task_id
        self._draft_text = current_title

    def update_draft(self, text: str) -> None:
        self._draft_text = text

    def commit(self, task_id: TaskId) -> None:
        if self._strict_titles and not self._draft_text.strip():
            raise EmptyTitle()

        self._store.update(task_id, self._draft_text)
        self.clear()

    def reseed(self, task_id: TaskId) -> None:
        task = self._store.get(task_id)
        if task is None:
            raise TaskNotFound(task_id)
        self.begin(task_id, task.title)

    def clear(self) -> None:
        self._active_task_id = None
        self._draft_text = ""
