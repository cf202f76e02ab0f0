"""FeedSource protocol and in-process adapters."""

from collections.abc import Awaitable, Callable, Sequence
from typing import Protocol, runtime_checkable

from livefeed.feeds.models import FeedItem


@runtime_checkable
class FeedSource(Protocol):
    """Anything that can be asked for the current list of items.

    Implementations raise ``FeedSourceError`` subclasses (or any other
    exception) on failure. Transport, auth and retry are their own concern.
    """

    async def fetch(self) -> Sequence[FeedItem]:
        """Fetch the current list of items.

        Returns:
            Ordered feed items.
        """
        ...


class StaticFeedSource:
    """FeedSource that always answers with the same items."""

    def __init__(self, items: Sequence[FeedItem]) -> None:
        self._items = tuple(items)

    async def fetch(self) -> Sequence[FeedItem]:
        return self._items


class CallableFeedSource:
    """FeedSource adapter around a coroutine function."""

    def __init__(self, fn: Callable[[], Awaitable[Sequence[FeedItem]]]) -> None:
        self._fn = fn

    async def fetch(self) -> Sequence[FeedItem]:
        return await self._fn()
