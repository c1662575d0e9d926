# src/optodo/tasks/task_api.py

from __future__ import annotations

"""
Input-boundary helpers.

The presentation layer talks to the controllers through these functions:
they trim raw input, translate display positions into ids, and decide which
conditions are a silent no-op instead of an error.
"""

import logging

from ..core.state import AppState
from ..errors import TaskNotFound
from .task_models import TaskId

logger = logging.getLogger(__name__)


def submit_new_task(state: AppState, raw_title: str) -> TaskId | None:
    """
    Add a task from raw input-box text.

    Blank input is ignored: no task, no notice. Returns the new id otherwise.
    """
    title = (raw_title or "").strip()
    if not title:
        logger.debug("Blank task title ignored.")
        return None
    return state.store.add(title)


def task_id_at(state: AppState, position: int) -> TaskId | None:
    """Map a 1-based display position to a task id."""
    tasks = state.store.tasks()
    if position < 1 or position > len(tasks):
        return None
    return tasks[position - 1].id


def begin_edit(state: AppState, task_id: TaskId) -> bool:
    """Start editing `task_id`, seeding the draft with its stored title."""
    task = state.store.get(task_id)
    if task is None:
        if state.store.strict:
            raise TaskNotFound(task_id)
        logger.warning("begin_edit ignored: unknown task id=%s", task_id)
        return False
    state.edit.begin(task.id, task.title)
    return True


def commit_edit(state: AppState) -> TaskId | None:
    """Commit the active draft. Returns the committed id, or None if not editing."""
    task_id = state.edit.active_task_id
    if task_id is None:
        return None
    try:
        state.edit.commit(task_id)
    except TaskNotFound:
        state.edit.clear()
        raise
    return task_id


def revert_edit(state: AppState) -> bool:
    """Cancel key: reset the draft to the stored title; the session stays open."""
    task_id = state.edit.active_task_id
    if task_id is None:
        return False
    try:
        state.edit.reseed(task_id)
    except TaskNotFound:
        state.edit.clear()
        if state.store.strict:
            raise
        logger.warning("revert_edit ended: task id=%s no longer exists", task_id)
        return False
    return True


def remove_task(state: AppState, task_id: TaskId) -> None:
    """Delete a task; a rename in progress on it ends with it."""
    state.store.remove(task_id)
    if state.edit.is_editing(task_id):
        logger.info("Edit of removed task id=%s ended", task_id)
        state.edit.clear()
