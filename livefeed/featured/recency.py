"""Publish timestamp parsing for recency ordering."""

import math
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

from dateutil import parser as date_parser


def parse_published_at(value: str | None) -> datetime | None:
    """Parse a publish timestamp.

    Accepts ISO-8601 (``2024-05-01T09:00:00Z``, ``2024-05-01``) and RFC 2822
    (``Wed, 01 May 2024 09:00:00 +0900``). Naive results are taken as UTC.

    Args:
        value: Raw timestamp string.

    Returns:
        Aware datetime, or None if the value is empty or unparseable.
    """
    if not value or not value.strip():
        return None
    text = value.strip()

    dt: datetime | None
    try:
        dt = date_parser.isoparse(text)
    except (ValueError, OverflowError):
        try:
            dt = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError):
            return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def recency_key(value: str | None) -> float:
    """Sort key for recency: POSIX timestamp, or -inf when unparseable."""
    dt = parse_published_at(value)
    if dt is None:
        return -math.inf
    try:
        return dt.timestamp()
    except (OverflowError, OSError, ValueError):
        return -math.inf
