# src/optodo/notifications/timers.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class AsyncioTimerScheduler:
    """
    TimerScheduler backed by an asyncio event loop.

    Callbacks run on the loop thread, between input events, so they never
    interleave with a store mutation. The loop is bound at construction:
    without a loop there is nothing to expire notices, so that is an error
    at wiring time rather than in the middle of a mutation.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as e:
                raise RuntimeError(
                    "AsyncioTimerScheduler needs an event loop: build it inside a running "
                    "loop or pass loop= explicitly."
                ) from e
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        handle = self._loop.call_later(max(0.0, float(delay)), callback)
        logger.debug("Timer scheduled delay=%.3fs", delay)
        return handle
