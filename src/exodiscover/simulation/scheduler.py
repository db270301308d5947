"""Frame schedulers.

A scheduler repeatedly invokes a tick callback until the returned handle is
cancelled. Sessions depend only on the ``Scheduler`` protocol, so the core
runs the same under a test driver, an asyncio loop or a GUI timer.

Implementations:
- ManualScheduler: ticks only when ``advance()`` is called (tests, CLI)
- AsyncioScheduler: cooperative periodic callback on an asyncio event loop
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

TickFn = Callable[[], None]


class CancelHandle:
    """Stops further ticks of one scheduled callback. Cancelling twice is a no-op."""

    def __init__(self, on_cancel: Callable[[], None] | None = None) -> None:
        self._cancelled = False
        self._on_cancel = on_cancel

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()


@runtime_checkable
class Scheduler(Protocol):
    def schedule(self, tick_fn: TickFn) -> CancelHandle:
        """Invoke ``tick_fn`` once per frame until the handle is cancelled."""
        ...


class ManualScheduler:
    """Deterministic scheduler driven by explicit ``advance()`` calls.

    Example:
        >>> sched = ManualScheduler()
        >>> calls = []
        >>> handle = sched.schedule(lambda: calls.append(1))
        >>> sched.advance(3)
        3
        >>> handle.cancel()
        >>> sched.advance()
        0
    """

    def __init__(self) -> None:
        self._callbacks: list[tuple[CancelHandle, TickFn]] = []

    @property
    def active(self) -> int:
        """Number of callbacks still scheduled."""
        return sum(1 for handle, _ in self._callbacks if not handle.cancelled)

    def schedule(self, tick_fn: TickFn) -> CancelHandle:
        handle = CancelHandle()
        self._callbacks.append((handle, tick_fn))
        return handle

    def advance(self, frames: int = 1) -> int:
        """Run ``frames`` frames; returns the number of callbacks invoked."""
        if frames < 0:
            raise ValueError(f"frames must be >= 0, got {frames}")
        invoked = 0
        for _ in range(frames):
            self._callbacks = [(h, fn) for h, fn in self._callbacks if not h.cancelled]
            for handle, tick_fn in list(self._callbacks):
                # A tick may cancel itself or a sibling.
                if handle.cancelled:
                    continue
                tick_fn()
                invoked += 1
        return invoked


class AsyncioScheduler:
    """Periodic callbacks on an asyncio loop via ``call_later``.

    Single threaded: ticks run on the loop thread between other tasks.

    Args:
        interval: Seconds between ticks (defaults to 60 fps).
        loop: Event loop to use. If None, the running loop at ``schedule()``
            time is used.
    """

    def __init__(
        self,
        interval: float = 1.0 / 60.0,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = float(interval)
        self._loop = loop

    def schedule(self, tick_fn: TickFn) -> CancelHandle:
        loop = self._loop or asyncio.get_running_loop()
        timer: asyncio.TimerHandle | None = None

        def _cancel_timer() -> None:
            if timer is not None:
                timer.cancel()

        handle = CancelHandle(on_cancel=_cancel_timer)

        def _run() -> None:
            nonlocal timer
            if handle.cancelled:
                return
            try:
                tick_fn()
            except Exception:
                logger.exception("Tick callback failed; stopping schedule")
                handle.cancel()
                raise
            if not handle.cancelled:
                timer = loop.call_later(self.interval, _run)

        timer = loop.call_later(self.interval, _run)
        return handle


__all__ = ["TickFn", "CancelHandle", "Scheduler", "ManualScheduler", "AsyncioScheduler"]
