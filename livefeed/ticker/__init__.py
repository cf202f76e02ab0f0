"""Live feed rotation ticker.

This module polls a FeedSource on one clock and rotates a single visible
item through the last-fetched list on another. Failures degrade to an
ERROR phase while the last good item stays on display.
"""

from livefeed.ticker.config import (
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_ROTATE_INTERVAL_MS,
    TickerConfig,
)
from livefeed.ticker.metrics import TickerMetrics
from livefeed.ticker.models import REASON_FETCH_FAILED, REASON_NO_DATA, TickerSnapshot
from livefeed.ticker.scheduler import (
    AsyncioScheduler,
    IntervalHandle,
    LoopInterval,
    Scheduler,
)
from livefeed.ticker.state_machine import (
    TickerLifecycle,
    TickerLifecycleError,
    TickerPhase,
    TickerPhaseMachine,
    TickerStateTransitionError,
)
from livefeed.ticker.ticker import RotationTicker


__all__ = [
    "DEFAULT_POLL_INTERVAL_MS",
    "DEFAULT_ROTATE_INTERVAL_MS",
    "REASON_FETCH_FAILED",
    "REASON_NO_DATA",
    "AsyncioScheduler",
    "IntervalHandle",
    "LoopInterval",
    "RotationTicker",
    "Scheduler",
    "TickerConfig",
    "TickerLifecycle",
    "TickerLifecycleError",
    "TickerMetrics",
    "TickerPhase",
    "TickerPhaseMachine",
    "TickerSnapshot",
    "TickerStateTransitionError",
]
