# tests/test_notice_center.py

from __future__ import annotations

import asyncio

import pytest

from optodo.notifications.notice_center import NoticeCenter
from optodo.notifications.notice_models import NoticeKind
from optodo.notifications.timers import AsyncioTimerScheduler

from .fakes import ManualTimerScheduler


def test_show_then_auto_clear_after_ttl(scheduler: ManualTimerScheduler) -> None:
    center = NoticeCenter(scheduler, ttl_seconds=3.0)
    center.show("Logged.", "create")

    assert center.current is not None
    assert center.current.text == "Logged."
    assert center.current.kind == "create"

    scheduler.advance(2.5)
    assert center.current is not None

    scheduler.advance(0.5)
    assert center.current is None


def test_new_notice_supersedes_and_cancels_previous_timer(
    scheduler: ManualTimerScheduler,
) -> None:
    center = NoticeCenter(scheduler, ttl_seconds=3.0)
    center.show("A", "create")
    first_handle = scheduler.handles[0]

    scheduler.advance(2.0)
    center.show("B", "delete")

    assert first_handle.cancelled is True
    assert center.current.text == "B"

    # A's deadline passes: B must still be visible.
    scheduler.advance(1.5)
    assert first_handle.fired is False
    assert center.current is not None
    assert center.current.text == "B"

    # B lives a full ttl from its own creation.
    scheduler.advance(1.5)
    assert center.current is None


def test_stale_callback_does_not_clear_newer_notice(scheduler: ManualTimerScheduler) -> None:
    center = NoticeCenter(scheduler, ttl_seconds=3.0)
    center.show("A", "create")
    stale = scheduler.handles[0]
    center.show("B", "update")

    # Simulate a timer that fired despite cancellation.
    stale.callback()

    assert center.current is not None
    assert center.current.text == "B"


def test_rapid_sequence_keeps_only_latest(scheduler: ManualTimerScheduler) -> None:
    center = NoticeCenter(scheduler)
    for i in range(5):
        center.show(f"n{i}", "update")

    assert center.current.text == "n4"
    assert len(scheduler.pending()) == 1


def test_explicit_clear_cancels_pending_timer(scheduler: ManualTimerScheduler) -> None:
    center = NoticeCenter(scheduler)
    center.show("A", "create")
    center.clear()

    assert center.current is None
    assert scheduler.pending() == []
    center.clear()


def test_listeners_see_show_and_expiry(scheduler: ManualTimerScheduler) -> None:
    center = NoticeCenter(scheduler, ttl_seconds=1.0)
    seen = []
    center.on_change(lambda n: seen.append(None if n is None else n.text))

    center.show("A", "create")
    scheduler.advance(1.0)

    assert seen == ["A", None]


def test_failing_listener_does_not_break_show(scheduler: ManualTimerScheduler) -> None:
    center = NoticeCenter(scheduler)

    def boom(_notice) -> None:
        raise RuntimeError("boom")

    center.on_change(boom)
    center.show("A", "create")
    assert center.current.text == "A"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("create", NoticeKind.CREATE),
        ("update", NoticeKind.UPDATE),
        ("delete", NoticeKind.DELETE),
        ("complete", NoticeKind.COMPLETE),
        ("COMPLETE", NoticeKind.COMPLETE),
        ("error", NoticeKind.NEUTRAL),
        ("", NoticeKind.NEUTRAL),
        (None, NoticeKind.NEUTRAL),
    ],
)
def test_unknown_kinds_fall_back_to_neutral(raw, expected) -> None:
    assert NoticeKind.from_raw(raw) is expected


def test_notice_keeps_raw_kind_but_styles_neutral(scheduler: ManualTimerScheduler) -> None:
    center = NoticeCenter(scheduler)
    center.show("hm", "mystery")
    assert center.current.kind == "mystery"
    assert center.current.style is NoticeKind.NEUTRAL


def test_ttl_must_be_positive(scheduler: ManualTimerScheduler) -> None:
    with pytest.raises(ValueError):
        NoticeCenter(scheduler, ttl_seconds=0)


@pytest.mark.asyncio
async def test_asyncio_scheduler_clears_notice_on_the_loop() -> None:
    center = NoticeCenter(AsyncioTimerScheduler(), ttl_seconds=0.05)
    center.show("A", "create")
    assert center.current is not None

    await asyncio.sleep(0.15)
    assert center.current is None


@pytest.mark.asyncio
async def test_asyncio_supersede_is_not_cleared_by_old_timer() -> None:
    center = NoticeCenter(AsyncioTimerScheduler(), ttl_seconds=0.5)
    center.show("A", "create")
    await asyncio.sleep(0.2)
    center.show("B", "update")

    # A's deadline (0.5s) passes, B (due at ~0.7s) is still there.
    await asyncio.sleep(0.4)
    assert center.current is not None
    assert center.current.text == "B"

    await asyncio.sleep(0.4)
    assert center.current is None


class _BrokenScheduler:
    def __init__(self) -> None:
        self.inner = ManualTimerScheduler()
        self.broken = False

    def call_later(self, delay, callback):
        if self.broken:
            raise RuntimeError("no running event loop")
        return self.inner.call_later(delay, callback)


def test_failed_scheduling_leaves_slot_and_timer_untouched() -> None:
    timers = _BrokenScheduler()
    center = NoticeCenter(timers, ttl_seconds=3.0)
    seen = []
    center.on_change(lambda n: seen.append(n))

    center.show("A", "create")
    timers.broken = True
    with pytest.raises(RuntimeError):
        center.show("B", "update")

    assert center.current.text == "A"
    assert timers.inner.handles[0].cancelled is False
    assert len(seen) == 1

    # A still expires on its own timer.
    timers.inner.advance(3.0)
    assert center.current is None


def test_asyncio_scheduler_refuses_to_build_outside_a_loop() -> None:
    with pytest.raises(RuntimeError):
        AsyncioTimerScheduler()


def test_asyncio_scheduler_accepts_an_explicit_loop() -> None:
    loop = asyncio.new_event_loop()
    try:
        center = NoticeCenter(AsyncioTimerScheduler(loop), ttl_seconds=0.01)
        center.show("A", "create")
        loop.run_until_complete(asyncio.sleep(0.05))
        assert center.current is None
    finally:
        loop.close()
