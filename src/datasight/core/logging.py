"""Structured logging for the library and the CLI.

Library modules only ever call ``get_logger(__name__)``; output is decided
once, by whoever calls ``configure_logging`` (the CLI, or a host app).

- console: human-readable lines on stderr, colored on a terminal
- json: one JSON object per line, for piping into other tools

Usage:
    from datasight.core.logging import get_logger, log_context

    logger = get_logger(__name__)
    logger.info("table_loaded", file="sales.csv", rows=1000)

    with log_context(file="sales.csv", operation="remove_nulls"):
        logger.info("wrangle_applied", rows_before=1000, rows_after=990)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, cast

import structlog
from structlog.typing import FilteringBoundLogger, Processor

# Chatty third-party loggers, kept at WARNING unless we are debugging
_LIBRARY_LOGGERS = ("anthropic", "httpx", "httpcore", "openpyxl")

_scoped_context: ContextVar[dict[str, Any] | None] = ContextVar("datasight_log_context", default=None)


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "console"  # "console" or "json"
    show_timestamps: bool = True
    color: bool = True

    @property
    def numeric_level(self) -> int:
        return logging.getLevelNamesMapping()[self.level.upper()]


def _add_scoped_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Processor merging the active ``log_context`` into each event."""
    context = _scoped_context.get()
    if context:
        for key, value in context.items():
            event_dict.setdefault(key, value)
    return event_dict


def _renderer(config: LogConfig) -> Processor:
    if config.format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=config.color,
        exception_formatter=structlog.dev.plain_traceback,
    )


def _processors(config: LogConfig) -> list[Processor]:
    processors: list[Processor] = []
    if config.show_timestamps:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
    processors += [
        _add_scoped_context,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
    ]
    if config.format == "json":
        processors.append(structlog.processors.format_exc_info)
    processors.append(_renderer(config))
    return processors


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    show_timestamps: bool = True,
    color: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Output format ("console" or "json")
        show_timestamps: Whether to prefix events with an ISO timestamp
        color: Whether to use colors in console mode
    """
    config = LogConfig(
        level=log_level,
        format=log_format,
        show_timestamps=show_timestamps,
        color=color,
    )

    structlog.configure(
        processors=_processors(config),
        wrapper_class=structlog.make_filtering_bound_logger(config.numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # stdlib logging for third-party libraries
    logging.basicConfig(
        format="%(name)s: %(message)s",
        level=config.numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    library_level = config.numeric_level if config.numeric_level <= logging.DEBUG else logging.WARNING
    for name in _LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger (typically ``get_logger(__name__)``)."""
    return cast(FilteringBoundLogger, structlog.get_logger(name))


@contextmanager
def log_context(**context: Any) -> Iterator[None]:
    """Attach key/value pairs to every event logged inside the block.

    Nested blocks add to the outer context; explicit event fields win.
    """
    current = _scoped_context.get() or {}
    token = _scoped_context.set({**current, **context})
    try:
        yield
    finally:
        _scoped_context.reset(token)


# Quiet default until an application configures logging
configure_logging(log_level="WARNING", show_timestamps=False)
