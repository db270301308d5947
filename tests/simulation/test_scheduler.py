"""Tests for exodiscover.simulation.scheduler."""

from __future__ import annotations

import asyncio

import pytest

from exodiscover.simulation.scheduler import (
    AsyncioScheduler,
    CancelHandle,
    ManualScheduler,
    Scheduler,
)


class TestCancelHandle:
    def test_cancel_is_idempotent(self) -> None:
        calls: list[int] = []
        handle = CancelHandle(on_cancel=lambda: calls.append(1))
        handle.cancel()
        handle.cancel()
        assert handle.cancelled
        assert calls == [1]


class TestManualScheduler:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(ManualScheduler(), Scheduler)
        assert isinstance(AsyncioScheduler(), Scheduler)

    def test_advance_runs_ticks(self) -> None:
        sched = ManualScheduler()
        calls: list[int] = []
        sched.schedule(lambda: calls.append(1))
        assert sched.advance(5) == 5
        assert len(calls) == 5

    def test_cancel_stops_ticks(self) -> None:
        sched = ManualScheduler()
        calls: list[int] = []
        handle = sched.schedule(lambda: calls.append(1))
        sched.advance(2)
        handle.cancel()
        assert sched.advance(3) == 0
        assert len(calls) == 2
        assert sched.active == 0

    def test_tick_can_cancel_itself(self) -> None:
        sched = ManualScheduler()
        calls: list[int] = []
        handle: CancelHandle

        def tick() -> None:
            calls.append(1)
            if len(calls) == 3:
                handle.cancel()

        handle = sched.schedule(tick)
        sched.advance(10)
        assert len(calls) == 3

    def test_multiple_callbacks(self) -> None:
        sched = ManualScheduler()
        sched.schedule(lambda: None)
        sched.schedule(lambda: None)
        assert sched.active == 2
        assert sched.advance(2) == 4

    def test_negative_frames(self) -> None:
        with pytest.raises(ValueError):
            ManualScheduler().advance(-1)


class TestAsyncioScheduler:
    def test_rejects_non_positive_interval(self) -> None:
        with pytest.raises(ValueError):
            AsyncioScheduler(interval=0.0)

    def test_ticks_until_cancelled(self) -> None:
        async def run() -> int:
            sched = AsyncioScheduler(interval=0.001)
            calls: list[int] = []
            handle = sched.schedule(lambda: calls.append(1))
            while len(calls) < 3:
                await asyncio.sleep(0.001)
            handle.cancel()
            seen = len(calls)
            await asyncio.sleep(0.02)
            assert len(calls) == seen
            return seen

        assert asyncio.run(run()) >= 3

    def test_failing_tick_cancels(self) -> None:
        async def run() -> CancelHandle:
            loop = asyncio.get_running_loop()
            errors: list[dict[str, object]] = []
            loop.set_exception_handler(lambda _loop, ctx: errors.append(ctx))

            def boom() -> None:
                raise RuntimeError("tick failed")

            handle = AsyncioScheduler(interval=0.001).schedule(boom)
            await asyncio.sleep(0.02)
            assert errors
            return handle

        assert asyncio.run(run()).cancelled
