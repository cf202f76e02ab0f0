"""Unit tests for fixed-size relevance selection."""

from collections.abc import Sequence

import pytest

from livefeed.featured.selector import select
from livefeed.feeds.models import FeedItem
from tests.helpers.feeds import make_item


def is_ai(item: FeedItem) -> bool:
    """Relevance predicate used across these tests."""
    return item.category == "ai"


def ai(title: str, published_at: str = "") -> FeedItem:
    return make_item(title, published_at=published_at, category="ai")


def other(title: str, published_at: str = "") -> FeedItem:
    return make_item(title, published_at=published_at, category="economy")


def assert_no_duplicates(pool: Sequence[FeedItem], result: list[FeedItem]) -> None:
    """No pool position is used twice."""
    positions = [next(i for i, p in enumerate(pool) if p is item) for item in result]
    assert len(positions) == len(set(positions))


class TestSelectSize:
    """Tests for output size."""

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 5, 10])
    def test_size_is_min_of_n_and_pool(self, n: int) -> None:
        """Result size is always min(n, len(pool))."""
        pool = [other("o1"), ai("a1"), other("o2"), ai("a2"), other("o3")]

        result = select(pool, is_ai, n)

        assert len(result) == min(n, len(pool))
        assert_no_duplicates(pool, result)

    def test_empty_pool(self) -> None:
        """Empty pool gives an empty result."""
        assert select([], is_ai, 3) == []

    def test_negative_n(self) -> None:
        """Negative target gives an empty result."""
        assert select([ai("a1")], is_ai, -1) == []

    def test_pool_smaller_than_n(self) -> None:
        """The whole pool is returned when it is short."""
        pool = [other("o1"), ai("a1")]

        result = select(pool, is_ai, 3)

        assert result == [pool[1], pool[0]]


class TestPrimarySelection:
    """Tests for the relevant-items portion."""

    def test_enough_matches_are_all_relevant(self) -> None:
        """With >= n matches every item satisfies the predicate."""
        pool = [
            ai("a1", "2025-08-01T00:00:00Z"),
            other("o1", "2025-09-01T00:00:00Z"),
            ai("a2", "2025-08-03T00:00:00Z"),
            ai("a3", "2025-08-02T00:00:00Z"),
            ai("a4", "2025-07-01T00:00:00Z"),
        ]

        result = select(pool, is_ai, 3)

        assert [i.title for i in result] == ["a2", "a3", "a1"]
        assert all(is_ai(i) for i in result)

    def test_ties_keep_pool_order(self) -> None:
        """Identical timestamps keep original relative order."""
        stamp = "2025-08-01T12:00:00+09:00"
        pool = [ai("first", stamp), ai("second", stamp), ai("third", stamp)]

        result = select(pool, is_ai, 3)

        assert [i.title for i in result] == ["first", "second", "third"]

    def test_unparseable_timestamps_sort_last(self) -> None:
        """Missing or garbage timestamps sort as oldest, in pool order."""
        pool = [
            ai("garbage", "not a date"),
            ai("dated", "2020-01-01"),
            ai("missing", ""),
        ]

        result = select(pool, is_ai, 3)

        assert [i.title for i in result] == ["dated", "garbage", "missing"]

    def test_mixed_timestamp_formats(self) -> None:
        """ISO-8601 and RFC 2822 timestamps are compared on one axis."""
        pool = [
            ai("iso", "2025-08-01T09:00:00Z"),
            ai("rfc", "Sat, 02 Aug 2025 09:00:00 +0000"),
        ]

        result = select(pool, is_ai, 2)

        assert [i.title for i in result] == ["rfc", "iso"]

    def test_all_match_no_backfill(self) -> None:
        """When everything matches, the primary selection alone fills n."""
        pool = [ai("a1", "2025-01-01"), ai("a2", "2025-01-03"), ai("a3", "2025-01-02")]

        result = select(pool, is_ai, 2)

        assert [i.title for i in result] == ["a2", "a3"]


class TestBackfill:
    """Tests for backfilling a short relevant set."""

    def test_backfill_in_pool_order(self) -> None:
        """k matches first, then n-k pool items in original order."""
        pool = [
            other("o1", "2025-09-05"),
            ai("a1", "2025-08-01"),
            other("o2", "2025-09-04"),
            other("o3", "2025-09-03"),
        ]

        result = select(pool, is_ai, 3)

        assert [i.title for i in result] == ["a1", "o1", "o2"]

    def test_backfill_skips_chosen(self) -> None:
        """Chosen items are not picked again by the backfill."""
        pool = [ai("a1"), other("o1"), ai("a2")]

        result = select(pool, lambda i: i.title == "a2", 3)

        assert [i.title for i in result] == ["a2", "a1", "o1"]

    def test_no_matches(self) -> None:
        """Without matches the result is the head of the pool."""
        pool = [other("o1"), other("o2"), other("o3"), other("o4")]

        result = select(pool, is_ai, 3)

        assert result == pool[:3]

    def test_equal_items_at_different_positions(self) -> None:
        """Value-equal items are distinct pool entries."""
        twin = other("twin")
        pool = [twin, twin, ai("a1")]

        result = select(pool, is_ai, 3)

        assert [i.title for i in result] == ["a1", "twin", "twin"]


class TestSelectGeneric:
    """Tests for selecting non-FeedItem values."""

    def test_custom_timestamp_accessor(self) -> None:
        """Any item type works with a custom accessor."""
        pool = [
            {"title": "x", "when": "2025-01-01"},
            {"title": "y", "when": "2025-02-01"},
            {"title": "z", "when": "2025-03-01"},
        ]

        result = select(
            pool,
            lambda d: d["title"] != "z",
            2,
            published_at=lambda d: d["when"],
        )

        assert [d["title"] for d in result] == ["y", "x"]

    def test_items_without_timestamp_attribute(self) -> None:
        """Items lacking published_at never raise."""
        pool = ["b", "a", "c"]

        assert select(pool, lambda s: s != "a", 3) == ["b", "c", "a"]
