"""Structured logging configuration with structlog.

Production emits one JSON object per event; every other environment gets
the plain console renderer.

Usage:
    from roadregistry.core.logging import configure_logging

    configure_logging(environment="prod", log_level="INFO")

    import structlog
    logger = structlog.get_logger(__name__)
    logger.info("person_registered", identity="23ab!#XYKZ")
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.typing import Processor


def _level_from_name(level_name: str) -> int:
    return getattr(logging, level_name.upper(), logging.INFO)


def configure_logging(environment: str = "dev", log_level: str = "INFO") -> None:
    """Configure structlog for the process. Call once at startup.

    Args:
        environment: ``prod`` for JSON output, anything else for console.
        log_level: Minimum level name (``DEBUG``, ``INFO``, ...).
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "prod":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_level_from_name(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
