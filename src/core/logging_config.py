"""Structured logging configuration.

This module initializes loggers with a stable structured format.
Storage components receive a logger explicitly and stay silent otherwise.
"""

from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with JSON output.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def get_silent_logger() -> Any:
    """Return a logger that drops every event."""
    return structlog.wrap_logger(structlog.ReturnLogger(), processors=[])
