"""
Structured logging setup.
structlog is configured once at startup; modules only call structlog.get_logger.
"""

import logging
import sys
from contextlib import contextmanager

import structlog


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Log level name (DEBUG, INFO, ...)
        fmt: "json" for machine-readable output, "console" for development
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

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
        cache_logger_on_first_use=True,
    )


@contextmanager
def bind_job_context(job_id: str, handle: str):
    """Bind job identifiers to every log line emitted inside the block."""
    with structlog.contextvars.bound_contextvars(job_id=job_id, handle=handle):
        yield
