"""
Structured logging utilities.

Provides process-wide logging setup and a context manager for timed,
structured operation logging.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from src.core.config.logging_config import LoggingConfig

logger = structlog.get_logger()


def configure_logging(logging_config: LoggingConfig) -> None:
    """Route structlog through the standard library logger at the configured level."""
    logging.basicConfig(
        level=getattr(logging, logging_config.level.upper(), logging.INFO),
        format=logging_config.format,
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@asynccontextmanager
async def log_operation(
    operation: str,
    subject_ids: dict[str, Any] | None = None,
    **context: Any,
) -> AsyncIterator[None]:
    """
    Context manager for structured operation logging.

    Logs operation start, completion, and errors with timing information.

    Args:
        operation: Name of the operation being performed
        subject_ids: Dictionary of subject identifiers (e.g., {"repo": "owner/repo", "pr": 123})
        **context: Additional context to include in logs

    Example:
        async with log_operation("specification_check", {"repo": repo, "pr": pr_number}):
            verdict = await check.validate(...)
    """
    start_time = time.time()
    log = logger.bind(operation=operation, **(subject_ids or {}), **context)

    log.info("operation_started")

    try:
        yield
    except Exception as e:
        latency_ms = int((time.time() - start_time) * 1000)
        log.error("operation_failed", error=str(e), latency_ms=latency_ms, exc_info=True)
        raise
    else:
        latency_ms = int((time.time() - start_time) * 1000)
        log.info("operation_completed", latency_ms=latency_ms)
