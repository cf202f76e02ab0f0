"""Structured logging for the live feed engine."""

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

import structlog


# Standard library loggers that log every request at INFO
NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def _renderer(json_format: bool, output: TextIO) -> structlog.types.Processor:
    if json_format:
        return structlog.processors.JSONRenderer(sort_keys=True, ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=output.isatty())


def configure_logging(
    level: int = logging.INFO,
    output: TextIO | None = None,
    json_format: bool = True,
    quiet_loggers: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Configure structlog and standard library logging.

    Ticker and selector events are emitted through structlog; HTTP client
    records go through the standard library and are held at WARNING unless
    ``level`` is stricter.

    Args:
        level: Minimum level for livefeed events (default: INFO).
        output: Output stream (default: stderr at call time).
        json_format: Render JSON lines instead of console output.
        quiet_loggers: Standard library loggers capped at WARNING.
    """
    stream = output or sys.stderr

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(json_format, stream),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(format="%(name)s %(levelname)s %(message)s", stream=stream, level=level)
    for name in quiet_loggers:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def bind_session_context(command: str, **context: str | int | float) -> None:
    """Bind CLI session fields to every subsequent event.

    Args:
        command: CLI command being run.
        **context: Extra fields, e.g. the feed URL.
    """
    structlog.contextvars.bind_contextvars(command=command, **context)


def clear_session_context() -> None:
    """Drop all bound session fields."""
    structlog.contextvars.clear_contextvars()
