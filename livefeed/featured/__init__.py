"""Featured news selection.

Selects a fixed-size subset of a news pool by topical relevance, newest
first, backfilling from the pool so the section is never short.
"""

from livefeed.featured.featured import FeaturedSelector
from livefeed.featured.filters import filter_news
from livefeed.featured.recency import parse_published_at, recency_key
from livefeed.featured.selector import select
from livefeed.featured.topic_matcher import KeywordMatcher, topic_predicate


__all__ = [
    "FeaturedSelector",
    "KeywordMatcher",
    "filter_news",
    "parse_published_at",
    "recency_key",
    "select",
    "topic_predicate",
]
