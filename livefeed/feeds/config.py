"""Configuration models for HTTP feed sources."""

from typing import Annotated

from pydantic import Field

from livefeed.data_model import StrictBaseModel


class FeedSourceConfig(StrictBaseModel):
    """Configuration shared by the HTTP feed adapters."""

    user_agent: Annotated[str, Field(min_length=1, max_length=500)] = "livefeed/0.1"
    timeout_seconds: Annotated[float, Field(gt=0.0, le=300.0)] = 10.0

    def headers(self) -> dict[str, str]:
        """Build request headers.

        Every poll must see fresh data, so intermediaries are asked not
        to serve cached copies.
        """
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/json, application/rss+xml, */*",
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
        }
