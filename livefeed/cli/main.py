"""CLI commands for the live feed engine."""

import asyncio
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import click
import structlog

from livefeed.config import ConfigValidationError, TopicsConfig, load_topics_config
from livefeed.config.constants import CATEGORY_ALL, CATEGORY_LABELS
from livefeed.featured import FeaturedSelector, filter_news
from livefeed.feeds import (
    EnvelopeFeedSource,
    FeedItem,
    FeedSource,
    FeedSourceError,
    NewsApiFeedSource,
    RssFeedSource,
)
from livefeed.observability import bind_session_context, configure_logging
from livefeed.settings import get_settings
from livefeed.ticker import RotationTicker, TickerConfig, TickerMetrics, TickerPhase
from livefeed.ticker.models import TickerSnapshot


logger = structlog.get_logger()

SOURCE_KINDS = ("envelope", "news", "rss")


@dataclass
class TickerOptions:
    """Options for the ticker command."""

    url: str
    kind: str
    poll_ms: int
    rotate_ms: int
    duration: float


def render_snapshot(snapshot: TickerSnapshot) -> str:
    """Render a ticker snapshot as a single display line.

    The last good item stays on display through ERROR; the error reason is
    only shown when there is nothing to display.
    """
    if snapshot.phase is TickerPhase.LOADING:
        return "loading..."
    item = snapshot.current
    if item is None:
        return snapshot.error or "no news to display"
    line = item.title
    if item.published_at:
        line = f"{line}  [{item.published_at}]"
    if item.link:
        line = f"{line}  <{item.link}>"
    if snapshot.phase is TickerPhase.ERROR:
        line = f"{line}  (stale: {snapshot.error})"
    return line


def _render_item(position: int, item: FeedItem) -> str:
    label = CATEGORY_LABELS.get(item.category, item.category)
    return f"{position}. [{label}] {item.title} ({item.source}, {item.published_at or '-'})"


def _setup_logging(command: str, json_logs: bool, verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.WARNING
    configure_logging(level=log_level, json_format=json_logs)
    bind_session_context(command)


def _build_source(kind: str, url: str) -> FeedSource:
    if kind == "news":
        return NewsApiFeedSource(url)
    if kind == "rss":
        return RssFeedSource(url)
    return EnvelopeFeedSource(url)


def _load_topics(topics_path: Path | None) -> TopicsConfig:
    if topics_path is None:
        return TopicsConfig()
    try:
        return load_topics_config(topics_path)
    except ConfigValidationError as e:
        click.echo(f"Configuration validation failed: {e.file_path}", err=True)
        for error in e.errors:
            click.echo(f"  - {error['loc']}: {error['msg']}", err=True)
        sys.exit(1)


def _with_featured_count(topics: TopicsConfig, count: int, override: bool) -> TopicsConfig:
    """Set the featured count unless the topics file already chose one."""
    if not override and "count" in topics.featured.model_fields_set:
        return topics
    featured = topics.featured.model_copy(update={"count": count})
    return topics.model_copy(update={"featured": featured})


async def _run_ticker(options: TickerOptions) -> dict[str, int | float]:
    ticker = RotationTicker(
        _build_source(options.kind, options.url),
        TickerConfig(poll_interval_ms=options.poll_ms, rotate_interval_ms=options.rotate_ms),
        name=options.kind,
    )
    last_line: list[str] = []

    def on_change(snapshot: TickerSnapshot) -> None:
        line = render_snapshot(snapshot)
        if not last_line or last_line[-1] != line:
            last_line.append(line)
            click.echo(line)

    ticker.subscribe(on_change)
    click.echo(render_snapshot(ticker.snapshot()))
    ticker.start()
    try:
        await asyncio.sleep(options.duration)
    finally:
        ticker.teardown()
        await ticker.drain()
    return TickerMetrics.get_instance().to_dict()


async def _fetch_news(api_base: str, limit: int) -> list[FeedItem]:
    return list(await NewsApiFeedSource(api_base, limit=limit).fetch())


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """Live AI-news feed engine CLI."""


@cli.command()
@click.option(
    "--url",
    type=str,
    default=None,
    help="Feed URL (default: LIVEFEED_REALTIME_URL, or LIVEFEED_NEWS_API_BASE for news).",
)
@click.option(
    "--kind",
    type=click.Choice(SOURCE_KINDS),
    default="envelope",
    show_default=True,
    help="Feed format: {data: [...]} envelope, backend /news list, or RSS/Atom.",
)
@click.option("--poll-ms", type=click.IntRange(min=1), default=None, help="Poll interval.")
@click.option(
    "--rotate-ms", type=click.IntRange(min=1), default=None, help="Rotate interval."
)
@click.option(
    "--duration",
    type=click.FloatRange(min=0.0),
    default=30.0,
    show_default=True,
    help="Seconds to run before tearing down.",
)
@click.option("--json-logs/--no-json-logs", default=False, help="Use JSON format for logs.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
def ticker(  # noqa: PLR0913
    url: str | None,
    kind: str,
    poll_ms: int | None,
    rotate_ms: int | None,
    duration: float,
    json_logs: bool,
    verbose: bool,
) -> None:
    """Run the rotating live ticker and print the item on display."""
    _setup_logging("ticker", json_logs, verbose)
    settings = get_settings()
    options = TickerOptions(
        url=url or (settings.news_api_base if kind == "news" else settings.realtime_url),
        kind=kind,
        poll_ms=poll_ms or settings.poll_interval_ms,
        rotate_ms=rotate_ms or settings.rotate_interval_ms,
        duration=duration,
    )
    logger.info("ticker_command_started", url=options.url, kind=kind, duration=duration)
    metrics = asyncio.run(_run_ticker(options))
    if verbose:
        click.echo(json.dumps(metrics, indent=2))


@cli.command()
@click.option("--api-base", type=str, default=None, help="Backend base URL.")
@click.option(
    "--limit", type=click.IntRange(min=1), default=24, show_default=True, help="News to fetch."
)
@click.option(
    "--topics",
    "topics_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to topics.yaml (default: built-in AI keywords).",
)
@click.option(
    "--count",
    type=click.IntRange(min=0, max=100),
    default=None,
    help="Featured items (default: topics file, then LIVEFEED_FEATURED_COUNT).",
)
@click.option("--json-output", is_flag=True, help="Output as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
def featured(  # noqa: PLR0913
    api_base: str | None,
    limit: int,
    topics_path: Path | None,
    count: int | None,
    json_output: bool,
    verbose: bool,
) -> None:
    """Fetch the news list once and print the featured selection."""
    _setup_logging("featured", json_logs=False, verbose=verbose)
    settings = get_settings()
    if topics_path is None and settings.topics_path:
        topics_path = Path(settings.topics_path)
    topics = _with_featured_count(
        _load_topics(topics_path),
        count if count is not None else settings.featured_count,
        override=count is not None,
    )

    try:
        news = asyncio.run(_fetch_news(api_base or settings.news_api_base, limit))
    except FeedSourceError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    selection = FeaturedSelector(topics).select(news)
    if json_output:
        click.echo(
            json.dumps([item.model_dump() for item in selection], ensure_ascii=False, indent=2)
        )
        return
    for position, item in enumerate(selection, start=1):
        click.echo(_render_item(position, item))


@cli.command()
@click.argument("query", default="")
@click.option("--api-base", type=str, default=None, help="Backend base URL.")
@click.option(
    "--category",
    type=click.Choice(list(CATEGORY_LABELS)),
    default=CATEGORY_ALL,
    show_default=True,
    help="Category filter.",
)
@click.option(
    "--limit", type=click.IntRange(min=1), default=24, show_default=True, help="News to fetch."
)
def search(query: str, api_base: str | None, category: str, limit: int) -> None:
    """Fetch the news list once and print items matching QUERY."""
    _setup_logging("search", json_logs=False, verbose=False)
    settings = get_settings()

    try:
        news = asyncio.run(_fetch_news(api_base or settings.news_api_base, limit))
    except FeedSourceError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    matches = filter_news(news, query=query, category=category)
    if not matches:
        click.echo("No news found.")
        return
    for position, item in enumerate(matches, start=1):
        click.echo(_render_item(position, item))


if __name__ == "__main__":
    cli()
