"""Featured section selector."""

from collections.abc import Sequence

import structlog

from livefeed.config.schemas.topics import TopicsConfig
from livefeed.featured.selector import select
from livefeed.featured.topic_matcher import KeywordMatcher, topic_predicate
from livefeed.feeds.models import FeedItem


logger = structlog.get_logger()


class FeaturedSelector:
    """Picks the featured items of a news pool.

    Binds the topic keywords, searched fields and target count from a
    TopicsConfig to ``select()``.
    """

    def __init__(self, config: TopicsConfig | None = None) -> None:
        """Initialize the selector.

        Args:
            config: Topics configuration (default: the AI topic, 3 items).
        """
        self._config = config or TopicsConfig()
        self._matcher = KeywordMatcher(self._config.keywords)
        self._predicate = topic_predicate(self._matcher, self._config.featured.fields)
        self._log = logger.bind(component="featured")

    @property
    def count(self) -> int:
        """Get the target number of featured items."""
        return self._config.featured.count

    def is_relevant(self, item: FeedItem) -> bool:
        """Check if an item matches any configured topic."""
        return self._predicate(item)

    def select(self, pool: Sequence[FeedItem]) -> list[FeedItem]:
        """Select the featured items from a pool.

        Args:
            pool: Candidate items.

        Returns:
            Exactly ``min(count, len(pool))`` items.
        """
        featured = select(pool, self._predicate, self.count)
        # Backfill only happens once every relevant item is taken
        relevant = sum(1 for item in featured if self._predicate(item))
        self._log.info(
            "featured_selected",
            pool=len(pool),
            selected=len(featured),
            relevant=relevant,
            backfilled=len(featured) - relevant,
        )
        return featured
