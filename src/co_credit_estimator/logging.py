"""Structured logging configuration using structlog."""

import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

LOG_FORMATS = ("console", "json")


def configure_logging(
    level: str = "WARNING",
    log_format: Optional[str] = None,
) -> None:
    """
    Configure structlog for the command-line tools.

    Logs go to stderr so stdout stays free for estimates and reports.

    Args:
        level: Standard logging level name
        log_format: "json" for one JSON object per event, anything else for
            colored console output
    """
    shared_processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if (log_format or "").lower() == "json":
        processors: List[Processor] = [
            *shared_processors,
            structlog.processors.EventRenamer("message"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
        force=True,
    )


def get_logger(name: Optional[str] = None, **initial_values: Any) -> Any:
    """
    Get a structlog logger.

    Args:
        name: Logger name, usually the caller's __name__
        **initial_values: Key/value pairs bound to every event

    Returns:
        structlog logger; output follows whatever configure_logging set up
    """
    return structlog.get_logger(name, **initial_values)
