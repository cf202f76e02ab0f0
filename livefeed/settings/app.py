"""Application settings powered by Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, env_file=".env", env_file_encoding="utf-8"
    )

    realtime_url: str = Field(
        default="http://localhost:3000/api/naver/realtime-keywords",
        validation_alias="LIVEFEED_REALTIME_URL",
    )
    news_api_base: str = Field(
        default="http://localhost:8000", validation_alias="LIVEFEED_NEWS_API_BASE"
    )
    poll_interval_ms: int = Field(
        default=60_000, ge=1, validation_alias="LIVEFEED_POLL_INTERVAL_MS"
    )
    rotate_interval_ms: int = Field(
        default=4_000, ge=1, validation_alias="LIVEFEED_ROTATE_INTERVAL_MS"
    )
    featured_count: int = Field(
        default=3, ge=0, le=100, validation_alias="LIVEFEED_FEATURED_COUNT"
    )
    topics_path: str | None = Field(default=None, validation_alias="LIVEFEED_TOPICS")


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
