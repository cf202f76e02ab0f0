"""Unit tests for publish timestamp parsing."""

import math
from datetime import UTC, datetime, timedelta, timezone

import pytest

from livefeed.featured.recency import parse_published_at, recency_key


class TestParsePublishedAt:
    """Tests for parse_published_at."""

    def test_iso_with_z(self) -> None:
        """ISO-8601 with Z suffix is UTC."""
        assert parse_published_at("2025-08-01T09:30:00Z") == datetime(
            2025, 8, 1, 9, 30, tzinfo=UTC
        )

    def test_iso_with_offset(self) -> None:
        """Offsets are preserved."""
        dt = parse_published_at("2025-08-01T09:30:00+09:00")
        assert dt is not None
        assert dt.utcoffset() == timedelta(hours=9)

    def test_iso_date_only(self) -> None:
        """A bare date is midnight UTC."""
        assert parse_published_at("2025-08-01") == datetime(2025, 8, 1, tzinfo=UTC)

    def test_naive_is_utc(self) -> None:
        """Naive timestamps are taken as UTC."""
        dt = parse_published_at("2025-08-01T09:30:00")
        assert dt is not None
        assert dt.tzinfo == UTC

    def test_rfc2822(self) -> None:
        """RSS-style timestamps are accepted."""
        dt = parse_published_at("Fri, 01 Aug 2025 09:30:00 +0900")
        assert dt == datetime(2025, 8, 1, 9, 30, tzinfo=timezone(timedelta(hours=9)))

    @pytest.mark.parametrize("value", [None, "", "   ", "yesterday", "2025-13-45", "n/a"])
    def test_unparseable(self, value: str | None) -> None:
        """Empty or garbage input yields None."""
        assert parse_published_at(value) is None


class TestRecencyKey:
    """Tests for recency_key."""

    def test_orders_by_time(self) -> None:
        """Later timestamps have larger keys."""
        assert recency_key("2025-08-02") > recency_key("2025-08-01")

    def test_unparseable_is_lowest(self) -> None:
        """Unparseable values sort below everything."""
        assert recency_key("garbage") == -math.inf
        assert recency_key("") < recency_key("1900-01-01")
