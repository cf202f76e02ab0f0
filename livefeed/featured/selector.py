"""Fixed-size relevance selection with deterministic backfill."""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from livefeed.featured.recency import recency_key


T = TypeVar("T")


def _published_at(item: Any) -> str | None:
    return getattr(item, "published_at", None)


def select(
    pool: Sequence[T],
    predicate: Callable[[T], bool],
    n: int,
    *,
    published_at: Callable[[T], str | None] = _published_at,
) -> list[T]:
    """Select exactly ``min(n, len(pool))`` items, most relevant first.

    Items satisfying ``predicate`` come first, newest first; items with
    equal or unparseable timestamps keep their pool order. When fewer than
    ``n`` items match, the rest is backfilled from the pool in original
    order. No pool position is used twice.

    Args:
        pool: Candidate items.
        predicate: Relevance test.
        n: Target size.
        published_at: Accessor for an item's raw publish timestamp.

    Returns:
        The selection, as a new list.
    """
    if n <= 0 or not pool:
        return []

    matching = [i for i, item in enumerate(pool) if predicate(item)]
    # list.sort is stable under reverse=True; ties keep pool order
    matching.sort(key=lambda i: recency_key(published_at(pool[i])), reverse=True)

    chosen = matching[:n]
    if len(chosen) < n:
        taken = set(chosen)
        for i in range(len(pool)):
            if len(chosen) == n:
                break
            if i not in taken:
                chosen.append(i)

    return [pool[i] for i in chosen]
