"""Search and category filtering for the news grid."""

from collections.abc import Iterable

from livefeed.config.constants import CATEGORY_ALL
from livefeed.feeds.models import FeedItem


def filter_news(
    items: Iterable[FeedItem],
    query: str = "",
    category: str = CATEGORY_ALL,
) -> list[FeedItem]:
    """Filter items by a search query and a category.

    Args:
        items: Items to filter.
        query: Case-insensitive substring searched in title and description.
        category: Exact category, or "all" to keep every category.

    Returns:
        Matching items in input order.
    """
    q = query.lower()
    return [
        item
        for item in items
        if (q in item.title.lower() or q in item.description.lower())
        and (category == CATEGORY_ALL or item.category == category)
    ]
