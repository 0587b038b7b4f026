"""
Structlog configuration for the address book core.

Console output when debugging, JSON lines otherwise.

The package never configures logging on import. The application that
embeds it calls ``configure_logging()`` once from its entry point, before
the first storage call; until then structlog's defaults apply.
"""
import logging
from typing import Optional

import structlog

from config import settings


def configure_logging(debug: Optional[bool] = None) -> None:
    """Configure structlog processors and level. ``debug`` defaults to settings.debug."""
    if debug is None:
        debug = settings.debug

    log_level = logging.DEBUG if debug else logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
