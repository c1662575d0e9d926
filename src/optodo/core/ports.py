# src/optodo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controllers depend on Protocols instead of concrete implementations.
This keeps the timer source swappable (asyncio loop vs. manual test clock)
and lets the task store notify without importing the notice controller.
"""

from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TimerHandle(Protocol):
    """One-shot scheduled callback that can be cancelled before it fires."""

    def cancel(self) -> None: ...


class TimerScheduler(Protocol):
    """Something that can run `callback` once, `delay` seconds from now."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class Notifier(Protocol):
    """
    Store-side port: how the task store reports a finished mutation.

    `kind` is one of create/update/delete/complete; the receiver decides
    how (and for how long) to show it.
    """

    def show(self, text: str, kind: str) -> None: ...


class TaskRepo(Protocol):
    # Used by the edit session; the task store is the only implementation.
    def get(self, task_id: str) -> Task | None: ...
    def update(self, task_id: str, title: str) -> None: ...
