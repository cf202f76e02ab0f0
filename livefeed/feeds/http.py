"""HTTP FeedSource adapters over httpx."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from livefeed.feeds.config import FeedSourceConfig
from livefeed.feeds.errors import EmptyResult, FetchFailure
from livefeed.feeds.models import FeedItem, RawNewsItem, normalize_news


logger = structlog.get_logger()

_FEED_ITEMS = TypeAdapter(list[FeedItem])
_RAW_NEWS = TypeAdapter(list[RawNewsItem])

DEFAULT_NEWS_LIMIT = 24


class HttpFeedSource(ABC):
    """Base class for feed sources that issue a single GET per fetch.

    Uses the injected ``httpx.AsyncClient`` when one is given, otherwise
    opens a short-lived client per fetch. Transport errors and timeouts
    surface as ``FetchFailure``.
    """

    def __init__(
        self,
        url: str,
        config: FeedSourceConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            url: URL to GET on every fetch.
            config: Request configuration.
            client: Optional shared async client.
        """
        self._url = url
        self._config = config or FeedSourceConfig()
        self._client = client
        self._log = logger.bind(component="feeds", url=url)

    @property
    def url(self) -> str:
        """Get the fetched URL."""
        return self._url

    async def fetch(self) -> Sequence[FeedItem]:
        """Fetch and decode the feed.

        Returns:
            Feed items, at least one.

        Raises:
            FetchFailure: On transport, status or decode errors.
            EmptyResult: When the feed carries no items.
        """
        response = await self._get()
        items = self._decode(response)
        if not items:
            raise EmptyResult(source_url=self._url)
        self._log.debug("feed_fetched", items=len(items), status_code=response.status_code)
        return items

    @abstractmethod
    def _decode(self, response: httpx.Response) -> list[FeedItem]:
        """Turn a response into feed items.

        Args:
            response: Response to the GET.

        Returns:
            Decoded items, possibly empty.

        Raises:
            FetchFailure: If the response cannot be decoded.
        """

    async def _get(self) -> httpx.Response:
        try:
            if self._client is not None:
                return await self._request(self._client)
            async with httpx.AsyncClient(follow_redirects=True) as client:
                return await self._request(client)
        except httpx.TimeoutException as e:
            raise FetchFailure(f"Request timed out: {e}", source_url=self._url) from e
        except httpx.HTTPError as e:
            raise FetchFailure(f"Request failed: {e}", source_url=self._url) from e

    async def _request(self, client: httpx.AsyncClient) -> httpx.Response:
        return await client.get(
            self._url,
            headers=self._config.headers(),
            timeout=self._config.timeout_seconds,
        )

    def _json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise FetchFailure(
                "Response is not valid JSON",
                source_url=self._url,
                status_code=response.status_code,
            ) from e


class EnvelopeFeedSource(HttpFeedSource):
    """Feed wrapped in a ``{"data": [...]}`` envelope.

    A non-2xx response that still carries items is accepted; the realtime
    keyword proxy answers that way when its upstream degrades.
    """

    def _decode(self, response: httpx.Response) -> list[FeedItem]:
        payload = self._json(response)
        data = payload.get("data") if isinstance(payload, dict) else None

        if not data:
            if response.is_success:
                return []
            raise FetchFailure(
                f"HTTP {response.status_code}",
                source_url=self._url,
                status_code=response.status_code,
            )

        try:
            return _FEED_ITEMS.validate_python(data)
        except ValidationError as e:
            raise FetchFailure(
                f"Malformed feed payload: {e.error_count()} errors",
                source_url=self._url,
                status_code=response.status_code,
            ) from e


class NewsApiFeedSource(HttpFeedSource):
    """Backend news list endpoint (``GET {base}/news?limit=N``)."""

    def __init__(
        self,
        base_url: str,
        config: FeedSourceConfig | None = None,
        client: httpx.AsyncClient | None = None,
        limit: int = DEFAULT_NEWS_LIMIT,
    ) -> None:
        """Initialize the source.

        Args:
            base_url: Backend base URL.
            config: Request configuration.
            client: Optional shared async client.
            limit: Maximum number of records requested.
        """
        super().__init__(f"{base_url.rstrip('/')}/news?limit={limit}", config, client)
        self._limit = limit

    def _decode(self, response: httpx.Response) -> list[FeedItem]:
        if not response.is_success:
            raise FetchFailure(
                "Failed to fetch /news",
                source_url=self._url,
                status_code=response.status_code,
            )
        try:
            raw = _RAW_NEWS.validate_python(self._json(response))
        except ValidationError as e:
            raise FetchFailure(
                f"Malformed news payload: {e.error_count()} errors",
                source_url=self._url,
                status_code=response.status_code,
            ) from e
        return normalize_news(raw)
