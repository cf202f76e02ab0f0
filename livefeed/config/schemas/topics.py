"""Topics configuration schema."""

from typing import Annotated

from pydantic import Field, model_validator

from livefeed.config.constants import (
    AI_TOPIC_NAME,
    DEFAULT_AI_KEYWORDS,
    FEATURED_COUNT,
    FEATURED_FIELDS,
)
from livefeed.data_model import StrictBaseModel


class TopicConfig(StrictBaseModel):
    """Configuration for a single topic.

    Attributes:
        name: Topic name.
        keywords: Keywords for matching (at least 1).
    """

    name: Annotated[str, Field(min_length=1, max_length=100)]
    keywords: Annotated[list[str], Field(min_length=1)]

    @model_validator(mode="after")
    def validate_keywords_non_empty(self) -> "TopicConfig":
        """Ensure keywords list contains non-empty strings."""
        for keyword in self.keywords:
            if not keyword.strip():
                msg = "Keywords must be non-empty strings"
                raise ValueError(msg)
        return self


def _default_topics() -> list[TopicConfig]:
    return [TopicConfig(name=AI_TOPIC_NAME, keywords=list(DEFAULT_AI_KEYWORDS))]


class FeaturedConfig(StrictBaseModel):
    """Featured section configuration.

    Attributes:
        count: Exact number of featured items.
        fields: Item fields searched for topic keywords.
    """

    count: Annotated[int, Field(ge=0, le=100)] = FEATURED_COUNT
    fields: list[str] = Field(
        default_factory=lambda: list(FEATURED_FIELDS), min_length=1
    )


class TopicsConfig(StrictBaseModel):
    """Root topics configuration.

    Attributes:
        featured: Featured section settings.
        topics: Topics whose keywords mark an item as relevant.
    """

    featured: FeaturedConfig = Field(default_factory=FeaturedConfig)
    topics: list[TopicConfig] = Field(default_factory=_default_topics)

    @model_validator(mode="after")
    def validate_unique_names(self) -> "TopicsConfig":
        """Ensure topic names are unique."""
        names = [t.name for t in self.topics]
        if len(names) != len(set(names)):
            msg = "Topic names must be unique"
            raise ValueError(msg)
        return self

    @property
    def keywords(self) -> list[str]:
        """All keywords across topics, first occurrence wins."""
        seen: dict[str, None] = {}
        for topic in self.topics:
            for keyword in topic.keywords:
                seen.setdefault(keyword, None)
        return list(seen)
