# src/optodo/notifications/notice_center.py

from __future__ import annotations

"""
Single-slot notice controller.

Exactly one notice is visible at a time. Showing a new notice:
- replaces the current one (no queue),
- cancels the pending auto-clear handle of the replaced notice,
- schedules a fresh one-shot clear `ttl_seconds` from now.

The expiry callback is bound to the notice's sequence number, so even a
callback that slipped past cancellation leaves a newer notice alone.
"""

import logging
from collections.abc import Callable

from ..core.ports import TimerHandle, TimerScheduler
from ..config import DEFAULT_NOTICE_TTL_SECONDS
from .notice_models import Notice

logger = logging.getLogger(__name__)

ChangeListener = Callable[[Notice | None], None]


class NoticeCenter:
    def __init__(
        self,
        scheduler: TimerScheduler,
        *,
        ttl_seconds: float = DEFAULT_NOTICE_TTL_SECONDS,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._scheduler = scheduler
        self._ttl = float(ttl_seconds)
        self._current: Notice | None = None
        self._handle: TimerHandle | None = None
        self._seq = 0
        self._listeners: list[ChangeListener] = []

    @property
    def current(self) -> Notice | None:
        return self._current

    def on_change(self, listener: ChangeListener) -> None:
        """Register a callback run after every show/clear (e.g. re-render)."""
        self._listeners.append(listener)

    def show(self, text: str, kind: str) -> None:
        notice = Notice(seq=self._seq + 1, text=text, kind=str(kind))
        # Schedule first: if the timer source fails, the slot is left untouched.
        handle = self._scheduler.call_later(self._ttl, lambda: self._expire(notice.seq))

        self._cancel_pending()
        self._seq = notice.seq
        self._current = notice
        self._handle = handle
        logger.debug("Notice shown seq=%s kind=%s", notice.seq, notice.kind)
        self._emit()

    def clear(self) -> None:
        self._cancel_pending()
        if self._current is None:
            return
        logger.debug("Notice cleared seq=%s", self._current.seq)
        self._current = None
        self._emit()

    # ---- internals ----

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _expire(self, seq: int) -> None:
        if self._current is None or self._current.seq != seq:
            logger.debug("Stale notice timer ignored seq=%s", seq)
            return
        self._handle = None
        self._current = None
        logger.debug("Notice expired seq=%s", seq)
        self._emit()

    def _emit(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._current)
            except Exception:
                logger.exception("Notice listener failed.")
