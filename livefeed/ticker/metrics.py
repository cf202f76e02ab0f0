"""Metrics collection for the rotation ticker."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class TickerMetrics:
    """Metrics for ticker operations.

    Attributes:
        fetches_total: Fetches issued (start-up and poll).
        fetch_failures: Fetches that raised.
        empty_results: Fetches that returned no items.
        stale_discarded: Fetch results dropped by the liveness guard.
        rotations: Rotate ticks that advanced the pointer.
        fetch_duration_ms_total: Summed duration of settled fetches.
        fetch_duration_count: Number of settled fetches timed.
    """

    fetches_total: int = 0
    fetch_failures: int = 0
    empty_results: int = 0
    stale_discarded: int = 0
    rotations: int = 0
    fetch_duration_ms_total: float = 0.0
    fetch_duration_count: int = 0

    _instance: ClassVar["TickerMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "TickerMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_fetch(self) -> None:
        """Record an issued fetch."""
        self.fetches_total += 1

    def record_failure(self) -> None:
        """Record a failed fetch."""
        self.fetch_failures += 1

    def record_empty(self) -> None:
        """Record an empty fetch result."""
        self.empty_results += 1

    def record_stale(self) -> None:
        """Record a discarded fetch result."""
        self.stale_discarded += 1

    def record_rotation(self) -> None:
        """Record a pointer advance."""
        self.rotations += 1

    def record_duration(self, duration_ms: float) -> None:
        """Record a fetch duration.

        Args:
            duration_ms: Duration in milliseconds.
        """
        self.fetch_duration_ms_total += duration_ms
        self.fetch_duration_count += 1

    def to_dict(self) -> dict[str, int | float]:
        """Export metrics as a flat dictionary.

        Returns:
            Counters plus the mean fetch duration.
        """
        count = self.fetch_duration_count
        return {
            "fetches_total": self.fetches_total,
            "fetch_failures": self.fetch_failures,
            "empty_results": self.empty_results,
            "stale_discarded": self.stale_discarded,
            "rotations": self.rotations,
            "fetch_duration_ms_avg": (
                round(self.fetch_duration_ms_total / count, 2) if count else 0.0
            ),
        }
