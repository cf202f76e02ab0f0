"""Rotation ticker: a live feed shown one item at a time."""

import asyncio
import time
from collections.abc import Callable, Sequence

import structlog

from livefeed.feeds.base import FeedSource
from livefeed.feeds.errors import EmptyResult, FeedSourceError
from livefeed.feeds.models import FeedItem
from livefeed.ticker.config import TickerConfig
from livefeed.ticker.metrics import TickerMetrics
from livefeed.ticker.models import REASON_FETCH_FAILED, REASON_NO_DATA, TickerSnapshot
from livefeed.ticker.scheduler import AsyncioScheduler, IntervalHandle, Scheduler
from livefeed.ticker.state_machine import (
    TickerLifecycle,
    TickerLifecycleError,
    TickerPhase,
    TickerPhaseMachine,
)


logger = structlog.get_logger()

Listener = Callable[[TickerSnapshot], None]


class RotationTicker:
    """Polls a FeedSource and rotates a single visible item.

    Runs two independent clocks on the event loop:
        - poll clock: re-fetches the feed every ``poll_interval_ms``
        - rotate clock: advances the display pointer every ``rotate_interval_ms``

    Phases follow LOADING -> READY | ERROR, then READY <-> ERROR. A failed
    or empty poll flips the phase to ERROR but keeps the last items on
    display. Fetch errors never propagate to the caller.

    Fetches are not cancelled by ``teardown()``. A fetch that settles after
    teardown, or after a later-issued fetch has been applied, is discarded.
    """

    def __init__(
        self,
        source: FeedSource,
        config: TickerConfig | None = None,
        scheduler: Scheduler | None = None,
        name: str = "ticker",
        metrics: TickerMetrics | None = None,
    ) -> None:
        """Initialize the ticker.

        Args:
            source: Feed to poll.
            config: Clock settings.
            scheduler: Timer source (default: the running asyncio loop).
            name: Ticker name for logging.
            metrics: Optional metrics instance.
        """
        self._source = source
        self._config = config or TickerConfig()
        self._scheduler = scheduler or AsyncioScheduler()
        self._name = name
        self._metrics = metrics or TickerMetrics.get_instance()

        self._items: tuple[FeedItem, ...] = ()
        self._index = 0
        self._error: str | None = None
        self._phase = TickerPhaseMachine(name)
        self._lifecycle = TickerLifecycle.IDLE

        self._poll_handle: IntervalHandle | None = None
        self._rotate_handle: IntervalHandle | None = None

        # Sequence numbers of issued / last applied fetches
        self._issued = 0
        self._applied = 0
        self._inflight: set[asyncio.Task[None]] = set()
        self._listeners: list[Listener] = []

        self._log = logger.bind(component="ticker", ticker=name)

    @property
    def config(self) -> TickerConfig:
        """Get the current clock settings."""
        return self._config

    @property
    def phase(self) -> TickerPhase:
        """Get the current phase."""
        return self._phase.state

    @property
    def lifecycle(self) -> TickerLifecycle:
        """Get the lifecycle state."""
        return self._lifecycle

    @property
    def is_running(self) -> bool:
        """Check if the ticker has been started and not torn down."""
        return self._lifecycle is TickerLifecycle.RUNNING

    @property
    def items(self) -> tuple[FeedItem, ...]:
        """Get the last successfully fetched items."""
        return self._items

    @property
    def index(self) -> int:
        """Get the display pointer."""
        return self._index

    @property
    def error(self) -> str | None:
        """Get the reason of the last failure, if in ERROR."""
        return self._error

    @property
    def current(self) -> FeedItem | None:
        """Get the item on display."""
        if not self._items:
            return None
        return self._items[self._index % len(self._items)]

    @property
    def poll_armed(self) -> bool:
        """Check if the poll clock is live."""
        return self._poll_handle is not None

    @property
    def rotate_armed(self) -> bool:
        """Check if the rotate clock is live."""
        return self._rotate_handle is not None

    def snapshot(self) -> TickerSnapshot:
        """Capture the observable outputs."""
        return TickerSnapshot(
            phase=self.phase,
            current=self.current,
            error=self._error,
            index=self._index,
            item_count=len(self._items),
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with a snapshot after each change.

        Args:
            listener: Callback receiving TickerSnapshot.

        Returns:
            Function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> asyncio.Task[None]:
        """Start the ticker and issue the first fetch immediately.

        Must be called from a running event loop. The clocks are armed
        once the first fetch settles; awaiting the returned task is
        optional.

        Returns:
            Task of the first fetch.

        Raises:
            TickerLifecycleError: If the ticker was already started.
        """
        if self._lifecycle is not TickerLifecycle.IDLE:
            raise TickerLifecycleError(self._name, self._lifecycle, "start")

        self._lifecycle = TickerLifecycle.RUNNING
        self._log.info(
            "ticker_started",
            poll_interval_ms=self._config.poll_interval_ms,
            rotate_interval_ms=self._config.rotate_interval_ms,
        )
        return self._spawn_fetch(initial=True)

    def teardown(self) -> None:
        """Cancel both clocks. Safe to call repeatedly or before start."""
        if self._lifecycle is not TickerLifecycle.RUNNING:
            return

        self._lifecycle = TickerLifecycle.STOPPED
        self._cancel_poll()
        self._cancel_rotate()
        self._log.info("ticker_stopped", inflight=len(self._inflight))

    async def drain(self) -> None:
        """Wait for every in-flight fetch to settle."""
        while self._inflight:
            await asyncio.gather(*self._inflight)

    def set_poll_interval(self, interval_ms: int) -> None:
        """Change the poll interval, re-arming only the poll clock.

        Args:
            interval_ms: New interval in milliseconds.
        """
        self._config = TickerConfig(
            poll_interval_ms=interval_ms,
            rotate_interval_ms=self._config.rotate_interval_ms,
        )
        if self._poll_handle is not None:
            self._cancel_poll()
            self._arm_poll()

    def set_rotate_interval(self, interval_ms: int) -> None:
        """Change the rotate interval, re-arming only the rotate clock.

        Args:
            interval_ms: New interval in milliseconds.
        """
        self._config = TickerConfig(
            poll_interval_ms=self._config.poll_interval_ms,
            rotate_interval_ms=interval_ms,
        )
        if self._rotate_handle is not None:
            self._cancel_rotate()
            self._arm_rotate()

    def _spawn_fetch(self, initial: bool = False) -> asyncio.Task[None]:
        loop = asyncio.get_running_loop()
        self._issued += 1
        task = loop.create_task(self._refresh(self._issued, initial))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        return task

    async def _refresh(self, seq: int, initial: bool) -> None:
        self._metrics.record_fetch()
        start = time.perf_counter()
        items: Sequence[FeedItem] = ()
        reason: str | None = None

        try:
            items = await self._source.fetch()
        except EmptyResult:
            reason = REASON_NO_DATA
        except FeedSourceError as e:
            reason = REASON_FETCH_FAILED
            self._log.warning("fetch_failed", seq=seq, **e.to_dict())
        except Exception as e:  # noqa: BLE001
            reason = REASON_FETCH_FAILED
            self._log.warning(
                "fetch_failed", seq=seq, error_type=type(e).__name__, error=str(e)
            )
        else:
            if not items:
                reason = REASON_NO_DATA

        duration_ms = (time.perf_counter() - start) * 1000
        self._metrics.record_duration(duration_ms)

        if not self.is_running or seq <= self._applied:
            self._metrics.record_stale()
            self._log.info(
                "stale_fetch_discarded",
                seq=seq,
                applied=self._applied,
                lifecycle=self._lifecycle.value,
            )
            return

        self._applied = seq
        if reason is None:
            self._apply_items(items)
        else:
            self._apply_failure(reason)

        self._log.info(
            "fetch_settled",
            seq=seq,
            phase=self.phase.value,
            items=len(items),
            duration_ms=round(duration_ms, 2),
        )

        if initial:
            self._arm_poll()
        if self._items and self._rotate_handle is None:
            self._arm_rotate()
        self._notify()

    def _apply_items(self, items: Sequence[FeedItem]) -> None:
        self._items = tuple(items)
        self._index %= len(self._items)
        self._error = None
        self._phase.to_ready()

    def _apply_failure(self, reason: str) -> None:
        if reason == REASON_NO_DATA:
            self._metrics.record_empty()
        else:
            self._metrics.record_failure()
        self._error = reason
        self._phase.to_error()

    def _on_poll_tick(self) -> None:
        if not self.is_running:
            return
        self._spawn_fetch()

    def _on_rotate_tick(self) -> None:
        if not self.is_running or not self._items:
            return
        self._index = (self._index + 1) % len(self._items)
        self._metrics.record_rotation()
        self._notify()

    def _arm_poll(self) -> None:
        self._poll_handle = self._scheduler.call_every(
            self._config.poll_interval_seconds, self._on_poll_tick
        )

    def _arm_rotate(self) -> None:
        self._rotate_handle = self._scheduler.call_every(
            self._config.rotate_interval_seconds, self._on_rotate_tick
        )

    def _cancel_poll(self) -> None:
        if self._poll_handle is not None:
            self._poll_handle.cancel()
            self._poll_handle = None

    def _cancel_rotate(self) -> None:
        if self._rotate_handle is not None:
            self._rotate_handle.cancel()
            self._rotate_handle = None

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
