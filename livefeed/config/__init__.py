"""Configuration for topics and the featured section."""

from livefeed.config.loader import ConfigValidationError, load_topics_config
from livefeed.config.schemas import FeaturedConfig, TopicConfig, TopicsConfig


__all__ = [
    "ConfigValidationError",
    "FeaturedConfig",
    "TopicConfig",
    "TopicsConfig",
    "load_topics_config",
]
