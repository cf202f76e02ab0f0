"""Unit tests for environment settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from livefeed.settings import AppSettings, get_settings


ENV_VARS = (
    "LIVEFEED_REALTIME_URL",
    "LIVEFEED_NEWS_API_BASE",
    "LIVEFEED_POLL_INTERVAL_MS",
    "LIVEFEED_ROTATE_INTERVAL_MS",
    "LIVEFEED_FEATURED_COUNT",
    "LIVEFEED_TOPICS",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """Clear livefeed variables and run away from any .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        """Defaults match the original page constants."""
        settings = get_settings()

        assert settings.realtime_url.endswith("/api/naver/realtime-keywords")
        assert settings.poll_interval_ms == 60_000
        assert settings.rotate_interval_ms == 4_000
        assert settings.featured_count == 3
        assert settings.topics_path is None

    def test_environment_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults."""
        clean_env.setenv("LIVEFEED_NEWS_API_BASE", "https://api.example")
        clean_env.setenv("LIVEFEED_POLL_INTERVAL_MS", "15000")
        clean_env.setenv("LIVEFEED_TOPICS", "config/topics.yaml")

        settings = AppSettings()

        assert settings.news_api_base == "https://api.example"
        assert settings.poll_interval_ms == 15_000
        assert settings.topics_path == "config/topics.yaml"

    def test_dotenv_file(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Values are read from .env in the working directory."""
        (tmp_path / ".env").write_text("LIVEFEED_ROTATE_INTERVAL_MS=2500\n", encoding="utf-8")

        assert AppSettings().rotate_interval_ms == 2_500

    def test_rejects_zero_interval(self, clean_env: pytest.MonkeyPatch) -> None:
        """Intervals must be positive."""
        clean_env.setenv("LIVEFEED_ROTATE_INTERVAL_MS", "0")

        with pytest.raises(ValidationError):
            AppSettings()
