# src/optodo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) log directory exists,
- wires the three controllers into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TimerScheduler
from ..core.state import AppState
from ..notifications.notice_center import NoticeCenter
from ..notifications.timers import AsyncioTimerScheduler
from ..tasks.edit_session import EditSession
from ..tasks.task_models import seed_tasks
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, scheduler: TimerScheduler | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the timer source injectable makes the app easy to test.
    If settings is None, falls back to get_settings(); if scheduler is None,
    notices are timed on the running asyncio loop, so calling it outside a
    loop raises RuntimeError before anything is built.
    """
    if scheduler is None:
        scheduler = AsyncioTimerScheduler()

    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    notices = NoticeCenter(
        scheduler,
        ttl_seconds=settings.notice_ttl_seconds,
    )
    store = TaskStore(
        notices,
        seed_tasks() if settings.seed_tasks else None,
        strict=settings.strict_ids,
    )
    edit = EditSession(store, strict_titles=settings.strict_titles)

    logger.info("State ready: %d tasks (%d completed)", store.total(), store.completed_count())
    return AppState(settings=settings, store=store, notices=notices, edit=edit)
