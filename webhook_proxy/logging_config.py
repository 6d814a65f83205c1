"""Structured logging helpers."""

import logging
from typing import Optional, TextIO

import structlog
from structlog.typing import FilteringBoundLogger

from webhook_proxy.exceptions import ConfigurationError


def _drop_event(logger, method_name, event_dict):
    raise structlog.DropEvent


def discard_logger() -> FilteringBoundLogger:
    """Return a bound logger that drops everything logged through it."""
    return structlog.wrap_logger(
        structlog.ReturnLogger(),
        processors=[_drop_event],
        wrapper_class=structlog.make_filtering_bound_logger(logging.NOTSET),
    )


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure structlog for an application embedding the proxy.

    Args:
        level: Minimum log level name, e.g. ``"DEBUG"``
        json_output: Render JSON lines when True, human readable output otherwise
        stream: File to write to; defaults to standard output

    Raises:
        ConfigurationError: If ``level`` is not a known level name
    """
    level_no = logging.getLevelName(level.upper())
    if not isinstance(level_no, int):
        raise ConfigurationError(f"Unknown log level: {level!r}")

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        logger_factory=structlog.PrintLoggerFactory(stream),
    )
