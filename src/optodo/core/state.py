# src/optodo/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..notifications.notice_center import NoticeCenter
from ..tasks.edit_session import EditSession
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything the presentation layer reads on each render.

    The three controllers own their own slices; AppState only holds the
    references so connectors and commands can reach them.
    """

    # Store Settings on the state for easy access in other modules later.
    settings: object

    store: TaskStore
    notices: NoticeCenter
    edit: EditSession
