"""Error types for feed sources."""

from enum import Enum


class FeedErrorClass(str, Enum):
    """Classification of feed source errors.

    - FETCH_FAILURE: network, HTTP status or decode error
    - EMPTY_RESULT: well-formed response carrying zero items
    """

    FETCH_FAILURE = "FETCH_FAILURE"
    EMPTY_RESULT = "EMPTY_RESULT"


class FeedSourceError(Exception):
    """Base exception for feed source errors.

    Provides structured error information for logging and status reporting.
    """

    def __init__(
        self,
        error_class: FeedErrorClass,
        message: str,
        source_url: str | None = None,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        """Initialize the feed source error.

        Args:
            error_class: Classification of the error.
            message: Human-readable error message.
            source_url: URL of the feed that failed, if any.
            details: Additional structured error details.
        """
        super().__init__(message)
        self.error_class = error_class
        self.message = message
        self.source_url = source_url
        self.details = details or {}

    def to_dict(
        self,
    ) -> dict[str, str | int | bool | None | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for logging/serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error_class": self.error_class.value,
            "message": self.message,
            "source_url": self.source_url,
            "details": self.details,
        }


class FetchFailure(FeedSourceError):
    """The feed could not be fetched or decoded."""

    def __init__(
        self,
        message: str,
        source_url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        """Initialize the fetch failure.

        Args:
            message: Human-readable error message.
            source_url: URL of the feed.
            status_code: HTTP status code, when one was received.
        """
        super().__init__(
            error_class=FeedErrorClass.FETCH_FAILURE,
            message=message,
            source_url=source_url,
            details={"status_code": status_code},
        )
        self.status_code = status_code


class EmptyResult(FeedSourceError):
    """The feed answered correctly but carried no items."""

    def __init__(self, source_url: str | None = None) -> None:
        """Initialize the empty result error.

        Args:
            source_url: URL of the feed.
        """
        super().__init__(
            error_class=FeedErrorClass.EMPTY_RESULT,
            message="Feed returned no items",
            source_url=source_url,
        )
