"""Data models for the rotation ticker."""

from dataclasses import dataclass

from livefeed.feeds.models import FeedItem
from livefeed.ticker.state_machine import TickerPhase


REASON_FETCH_FAILED = "fetch failed"
REASON_NO_DATA = "no data"


@dataclass(frozen=True)
class TickerSnapshot:
    """Observable outputs of a ticker at one instant.

    Attributes:
        phase: Current phase.
        current: Item on display, or None when nothing was ever fetched.
        error: Short reason for the last failure while in ERROR.
        index: Display pointer.
        item_count: Number of items in the current list.
    """

    phase: TickerPhase
    current: FeedItem | None
    error: str | None
    index: int
    item_count: int
