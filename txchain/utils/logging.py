"""Structured logging setup."""

import logging
from typing import Any, Optional

import structlog

from ..config import ChainSettings


def setup_logging(level: str = "INFO", log_format: str = "json") -> Any:
    """Configure structlog for the process.

    Output goes straight to stdout through structlog's print logger; the
    standard library root logger is left untouched.

    Args:
        level: Standard logging level name
        log_format: ``json`` for machine-readable output, ``plain`` for console

    Returns:
        Bound logger for the caller
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    renderer: Any
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    return structlog.get_logger("txchain")


def configure_logging(settings: Optional[ChainSettings] = None) -> Any:
    """Configure structlog from chain settings.

    Args:
        settings: Settings to read ``log_level`` and ``log_format`` from;
            loaded from the environment when omitted

    Returns:
        Bound logger for the caller
    """
    settings = settings or ChainSettings()
    return setup_logging(settings.log_level, settings.log_format)
