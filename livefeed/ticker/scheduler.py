"""Repeating timers for the ticker clocks."""

import asyncio
from collections.abc import Callable
from typing import Protocol


class IntervalHandle(Protocol):
    """Handle for a repeating timer."""

    @property
    def active(self) -> bool:
        """Whether the timer will fire again."""
        ...

    def cancel(self) -> None:
        """Stop the timer. Cancelling twice is a no-op."""
        ...


class Scheduler(Protocol):
    """Source of repeating timers."""

    def call_every(
        self, interval_seconds: float, callback: Callable[[], None]
    ) -> IntervalHandle:
        """Invoke ``callback`` every ``interval_seconds`` until cancelled.

        The first call happens one interval after arming.
        """
        ...


class LoopInterval:
    """Repeating timer built from chained ``loop.call_later`` calls."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval_seconds: float,
        callback: Callable[[], None],
    ) -> None:
        self._loop = loop
        self._interval = interval_seconds
        self._callback = callback
        self._cancelled = False
        self._timer: asyncio.TimerHandle | None = loop.call_later(interval_seconds, self._fire)

    @property
    def active(self) -> bool:
        return not self._cancelled

    @property
    def interval_seconds(self) -> float:
        return self._interval

    def cancel(self) -> None:
        self._cancelled = True
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self) -> None:
        if self._cancelled:
            return
        # Re-arm first; the period does not include callback time
        self._timer = self._loop.call_later(self._interval, self._fire)
        self._callback()


class AsyncioScheduler:
    """Scheduler backed by the running asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_every(
        self, interval_seconds: float, callback: Callable[[], None]
    ) -> LoopInterval:
        loop = self._loop or asyncio.get_running_loop()
        return LoopInterval(loop, interval_seconds, callback)
