import logging
import sys

import structlog

from astrid_logger.config import settings


def configure_logging(level: str | None = None, fmt: str | None = None):
    """Configure structlog for channel diagnostics.

    Diagnostics go to stderr; stdout is reserved for the log lines themselves.
    Defaults come from ASTRID_LOG_LEVEL and ASTRID_LOG_FORMAT.
    """
    level = logging.getLevelName((level or settings.LOG_LEVEL).upper())
    if not isinstance(level, int):
        level = logging.INFO
    fmt = (fmt or settings.LOG_FORMAT).lower()
    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
