"""Structured logging setup."""

import logging
import sys

import structlog
from structlog.stdlib import BoundLogger

from keyprobe.core.settings import LogLevel


def configure_logging(level: LogLevel = "debug", render_json: bool = False) -> None:
    """Configure structlog and the standard library root logger."""
    renderer = (
        structlog.processors.JSONRenderer()
        if render_json
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    numeric_level = logging.getLevelNamesMapping()[level.upper()]
    logging.basicConfig(
        format="%(message)s", stream=sys.stdout, level=numeric_level
    )
    logging.getLogger().setLevel(numeric_level)


def get_logger(name: str) -> BoundLogger:
    """Return a structlog logger bound to a module name."""
    return structlog.get_logger(name)
