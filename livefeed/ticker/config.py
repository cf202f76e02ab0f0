"""Configuration for the rotation ticker."""

from typing import Annotated

from pydantic import Field

from livefeed.data_model import StrictBaseModel


DEFAULT_POLL_INTERVAL_MS = 60_000
DEFAULT_ROTATE_INTERVAL_MS = 4_000


class TickerConfig(StrictBaseModel):
    """Clock settings for a RotationTicker.

    Attributes:
        poll_interval_ms: How often the feed is re-fetched.
        rotate_interval_ms: How often the display pointer advances.
    """

    poll_interval_ms: Annotated[int, Field(ge=1)] = DEFAULT_POLL_INTERVAL_MS
    rotate_interval_ms: Annotated[int, Field(ge=1)] = DEFAULT_ROTATE_INTERVAL_MS

    @property
    def poll_interval_seconds(self) -> float:
        """Poll interval in seconds."""
        return self.poll_interval_ms / 1000

    @property
    def rotate_interval_seconds(self) -> float:
        """Rotate interval in seconds."""
        return self.rotate_interval_ms / 1000
