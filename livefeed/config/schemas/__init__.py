"""Configuration schemas."""

from livefeed.config.schemas.topics import FeaturedConfig, TopicConfig, TopicsConfig


__all__ = [
    "FeaturedConfig",
    "TopicConfig",
    "TopicsConfig",
]
