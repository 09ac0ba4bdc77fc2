"""
Structured logging configuration.
"""
import logging
import sys
import time
from contextlib import contextmanager
from typing import Any, Generator

import structlog
from structlog.types import Processor

from volleycoach.core.config import settings


def setup_logging() -> None:
    """Configure structured logging for the application."""

    # Common processors
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.LOG_FORMAT == "json":
        # JSON format for production
        renderer = structlog.processors.JSONRenderer()
    else:
        # Console format for development
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure root logger
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper()))

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DATABASE_ECHO else logging.WARNING
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


@contextmanager
def log_duration(
    logger: structlog.stdlib.BoundLogger,
    event: str,
    **extra: Any
) -> Generator[dict, None, None]:
    """
    Log how long a block took.

    The yielded dict can be filled with extra fields (counts, ids)
    that are only known once the block has run.

    Usage:
        with log_duration(logger, "Sessions persisted", plan_id=plan_id) as ctx:
            rows = await store.insert_many(...)
            ctx["count"] = len(rows)
    """
    fields: dict[str, Any] = dict(extra)
    start = time.perf_counter()
    try:
        yield fields
    except Exception as e:
        fields["error_type"] = type(e).__name__
        logger.warning(
            f"{event} failed",
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            **fields
        )
        raise
    logger.info(
        event,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
        **fields
    )
