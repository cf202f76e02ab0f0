"""Unit tests for TickerConfig and TickerMetrics."""

import pytest
from pydantic import ValidationError

from livefeed.ticker import TickerConfig, TickerMetrics


class TestTickerConfig:
    """Tests for TickerConfig."""

    def test_defaults(self) -> None:
        """Default clocks match the live ticker widget."""
        config = TickerConfig()

        assert config.poll_interval_ms == 60_000
        assert config.rotate_interval_ms == 4_000
        assert config.poll_interval_seconds == 60.0
        assert config.rotate_interval_seconds == 4.0

    def test_rejects_non_positive(self) -> None:
        """Intervals must be at least 1 ms."""
        with pytest.raises(ValidationError):
            TickerConfig(poll_interval_ms=0)
        with pytest.raises(ValidationError):
            TickerConfig(rotate_interval_ms=-5)

    def test_frozen(self) -> None:
        """Config is immutable."""
        config = TickerConfig()
        with pytest.raises(ValidationError):
            config.poll_interval_ms = 1  # type: ignore[misc]

    def test_extra_forbidden(self) -> None:
        """Unknown options are rejected."""
        with pytest.raises(ValidationError):
            TickerConfig(refresh_ms=100)  # type: ignore[call-arg]


class TestTickerMetrics:
    """Tests for TickerMetrics."""

    def test_singleton_and_reset(self) -> None:
        """get_instance returns one instance until reset."""
        TickerMetrics.reset()
        first = TickerMetrics.get_instance()
        assert TickerMetrics.get_instance() is first

        TickerMetrics.reset()
        assert TickerMetrics.get_instance() is not first

    def test_to_dict(self) -> None:
        """Counters and mean duration are exported."""
        metrics = TickerMetrics()
        metrics.record_fetch()
        metrics.record_fetch()
        metrics.record_failure()
        metrics.record_rotation()
        metrics.record_duration(10.0)
        metrics.record_duration(20.0)

        assert metrics.to_dict() == {
            "fetches_total": 2,
            "fetch_failures": 1,
            "empty_results": 0,
            "stale_discarded": 0,
            "rotations": 1,
            "fetch_duration_ms_avg": 15.0,
        }

    def test_to_dict_without_durations(self) -> None:
        """Mean duration is 0 with no fetches."""
        assert TickerMetrics().to_dict()["fetch_duration_ms_avg"] == 0.0

    def test_durations_kept_as_running_totals(self) -> None:
        """Recording durations does not retain one entry per fetch."""
        metrics = TickerMetrics()
        for _ in range(10_000):
            metrics.record_duration(2.0)

        assert metrics.fetch_duration_count == 10_000
        assert metrics.fetch_duration_ms_total == 20_000.0
        assert metrics.to_dict()["fetch_duration_ms_avg"] == 2.0
        assert not any(isinstance(value, list) for value in vars(metrics).values())
