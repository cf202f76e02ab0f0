"""RSS/Atom FeedSource adapter."""

from urllib.parse import urlparse

import feedparser  # type: ignore[import-untyped]
import httpx

from livefeed.feeds.config import FeedSourceConfig
from livefeed.feeds.errors import FetchFailure
from livefeed.feeds.http import HttpFeedSource
from livefeed.feeds.models import DEFAULT_CATEGORY, DEFAULT_TITLE, FeedItem


class RssFeedSource(HttpFeedSource):
    """Feed source for RSS 2.0 and Atom 1.0 documents.

    Parses with feedparser. The publisher name comes from the channel
    title, falling back to the feed's host.
    """

    def __init__(
        self,
        url: str,
        config: FeedSourceConfig | None = None,
        client: httpx.AsyncClient | None = None,
        category: str = DEFAULT_CATEGORY,
    ) -> None:
        """Initialize the source.

        Args:
            url: Feed URL.
            config: Request configuration.
            client: Optional shared async client.
            category: Category used for entries without tags.
        """
        super().__init__(url, config, client)
        self._category = category

    def _decode(self, response: httpx.Response) -> list[FeedItem]:
        if not response.is_success:
            raise FetchFailure(
                f"HTTP {response.status_code}",
                source_url=self._url,
                status_code=response.status_code,
            )

        feed = feedparser.parse(response.content)
        if feed.bozo and not feed.entries:
            raise FetchFailure(
                f"Feed parsing failed: {feed.bozo_exception}",
                source_url=self._url,
                status_code=response.status_code,
            )
        if feed.bozo:
            self._log.warning("feed_parse_warning", bozo_exception=str(feed.bozo_exception))

        source = feed.feed.get("title") or urlparse(self._url).netloc
        return [self._to_item(entry, source) for entry in feed.entries]

    def _to_item(self, entry: feedparser.FeedParserDict, source: str) -> FeedItem:
        tags = entry.get("tags") or []
        category = tags[0].get("term") if tags else None
        return FeedItem(
            id=entry.get("id") or entry.get("link"),
            title=(entry.get("title") or "").strip() or DEFAULT_TITLE,
            source=source,
            category=category or self._category,
            published_at=entry.get("published") or entry.get("updated") or "",
            link=entry.get("link"),
            description=entry.get("summary") or "",
        )
