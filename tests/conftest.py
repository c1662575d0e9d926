# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from optodo.cli.bootstrap import create_initial_state
from optodo.core.state import AppState
from optodo.tasks.task_models import seed_tasks
from optodo.tasks.task_store import TaskStore

from .fakes import ManualTimerScheduler, RecordingNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the connectors.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment and .env.
    """
    return SimpleNamespace(
        app_name="Operational To-Dos",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        notice_ttl_seconds=3.0,
        seed_tasks=True,
        strict_ids=False,
        strict_titles=False,
        color="never",
    )


@pytest.fixture()
def scheduler() -> ManualTimerScheduler:
    return ManualTimerScheduler()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def store(notifier: RecordingNotifier) -> TaskStore:
    """Seeded store that records notices instead of timing them."""
    return TaskStore(notifier, seed_tasks())


@pytest.fixture()
def strict_store(notifier: RecordingNotifier) -> TaskStore:
    return TaskStore(notifier, seed_tasks(), strict=True)


@pytest.fixture()
def state(settings: SimpleNamespace, scheduler: ManualTimerScheduler) -> AppState:
    """AppState wired by the real composition root, timed by the manual clock."""
    return create_initial_state(settings=settings, scheduler=scheduler)
