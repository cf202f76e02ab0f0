"""Topic keyword matching for featured selection.

Pre-compiles keyword patterns once so a predicate can be applied to every
item of a pool cheaply.
"""

import re
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from livefeed.config.constants import FEATURED_FIELDS


# Keywords this short are prone to substring false positives
# (e.g. "ai" in "said", "gpt" in "egypt"), so they get ASCII letter guards.
# A lowercase letter may precede an uppercase match ("GenAI", "xAI").
_SHORT_KEYWORD_THRESHOLD = 4

_ASCII_WORD_ONLY = re.compile(r"^[A-Za-z0-9]+$")


def _compile_keyword_pattern(keyword: str) -> re.Pattern[str]:
    """Compile a keyword into a regex pattern.

    Short ASCII keywords (<= _SHORT_KEYWORD_THRESHOLD chars) must not be
    followed by an ASCII letter, except for a plural "s". They must not be
    preceded by one either, unless the match is uppercase after a lowercase
    letter, as in camel-cased names ("GenAI", "StabilityAI"). The guard is
    ASCII only: Korean particles attach directly to the word ("AI가") and
    must still match. Other keywords use plain substring matching.

    Args:
        keyword: Raw keyword string.

    Returns:
        Compiled case-insensitive pattern.
    """
    escaped = re.escape(keyword)
    if len(keyword) <= _SHORT_KEYWORD_THRESHOLD and _ASCII_WORD_ONLY.match(keyword):
        upper = re.escape(keyword.upper())
        return re.compile(
            rf"(?:(?<![A-Za-z])(?i:{escaped})|(?<=[a-z]){upper})(?i:s)?(?![A-Za-z])"
        )
    return re.compile(escaped, re.IGNORECASE)


class KeywordMatcher:
    """Matches text against a keyword list using pre-compiled patterns."""

    def __init__(self, keywords: Iterable[str]) -> None:
        """Initialize the matcher.

        Args:
            keywords: Keywords to match; blank entries are ignored.
        """
        self._patterns: list[tuple[str, re.Pattern[str]]] = [
            (kw, _compile_keyword_pattern(kw)) for kw in keywords if kw.strip()
        ]

    @property
    def keyword_count(self) -> int:
        """Get number of compiled keywords."""
        return len(self._patterns)

    def find(self, text: str) -> str | None:
        """Return the first keyword found in ``text``, or None."""
        if not text:
            return None
        for keyword, pattern in self._patterns:
            if pattern.search(text):
                return keyword
        return None

    def matches(self, text: str) -> bool:
        """Check if any keyword occurs in ``text``."""
        return self.find(text) is not None


def topic_predicate(
    keywords: Iterable[str] | KeywordMatcher,
    fields: Sequence[str] = FEATURED_FIELDS,
) -> Callable[[Any], bool]:
    """Build a relevance predicate over item attributes.

    Args:
        keywords: Keywords, or an existing matcher.
        fields: Attribute names searched on each item. Missing or None
            attributes count as empty text.

    Returns:
        Predicate true when any field contains any keyword.
    """
    matcher = keywords if isinstance(keywords, KeywordMatcher) else KeywordMatcher(keywords)
    names = tuple(fields)

    def predicate(item: Any) -> bool:
        return any(matcher.matches(getattr(item, name, None) or "") for name in names)

    return predicate
