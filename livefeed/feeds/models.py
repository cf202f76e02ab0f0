"""Data models for feed items and raw backend news records."""

from collections.abc import Iterable

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


DEFAULT_TITLE = "(untitled)"
DEFAULT_CATEGORY = "technology"
DEFAULT_SOURCE = "Unknown"


class FeedItem(BaseModel):
    """A single news item as delivered by a FeedSource.

    Immutable once fetched. ``published_at`` is kept as the raw string the
    backend sent; it is parsed lazily when recency matters.

    Attributes:
        title: Headline text.
        source: Publisher name.
        category: Category or topic label.
        published_at: ISO-8601 / RFC 2822 timestamp, or empty.
        link: Optional URL of the article.
        description: Optional summary text.
        id: Optional stable identifier.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    title: str
    source: str = ""
    category: str = ""
    published_at: str = Field(
        default="",
        validation_alias=AliasChoices("published_at", "publishedAt", "time"),
    )
    link: str | None = None
    description: str = ""
    id: str | None = None


class RawNewsItem(BaseModel):
    """News record as returned by the backend ``/news`` endpoint."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    link: str
    source: str | None = None
    title: str | None = None
    published: str | None = None
    summary: str | None = None
    authors: list[str] | None = None
    tags: list[str] | None = None


def normalize_news(raw: Iterable[RawNewsItem]) -> list[FeedItem]:
    """Map raw backend records onto FeedItems.

    The article link doubles as the item id. Missing fields fall back to
    display defaults so every item is renderable.

    Args:
        raw: Raw news records.

    Returns:
        Normalized feed items, in input order.
    """
    return [
        FeedItem(
            id=n.link,
            title=n.title or DEFAULT_TITLE,
            description=n.summary or "",
            category=n.tags[0] if n.tags else DEFAULT_CATEGORY,
            published_at=n.published or "",
            link=n.link,
            source=n.source or DEFAULT_SOURCE,
        )
        for n in raw
    ]
