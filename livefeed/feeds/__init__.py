"""Feed sources consumed by the ticker and the featured selector.

A FeedSource is anything that can be asked for the current list of items.
This package provides the protocol, the item model, the error taxonomy
and concrete adapters over HTTP JSON endpoints and RSS/Atom feeds.
"""

from livefeed.feeds.base import CallableFeedSource, FeedSource, StaticFeedSource
from livefeed.feeds.config import FeedSourceConfig
from livefeed.feeds.errors import (
    EmptyResult,
    FeedErrorClass,
    FeedSourceError,
    FetchFailure,
)
from livefeed.feeds.http import EnvelopeFeedSource, HttpFeedSource, NewsApiFeedSource
from livefeed.feeds.models import FeedItem, RawNewsItem, normalize_news
from livefeed.feeds.rss import RssFeedSource


__all__ = [
    "CallableFeedSource",
    "EmptyResult",
    "EnvelopeFeedSource",
    "FeedErrorClass",
    "FeedItem",
    "FeedSource",
    "FeedSourceConfig",
    "FeedSourceError",
    "FetchFailure",
    "HttpFeedSource",
    "NewsApiFeedSource",
    "RawNewsItem",
    "RssFeedSource",
    "StaticFeedSource",
    "normalize_news",
]
