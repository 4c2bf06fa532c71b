"""Structured logging setup for the Hello World API.

Events are rendered as single-line JSON through the stdlib root logger, so
uvicorn and application output share one stream.
"""

from __future__ import annotations

import logging

import structlog


_CONFIGURED = False


def configure_logging(level: str = "INFO") -> None:
    """Route structlog through stdlib logging at ``level``; later calls are no-ops."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper(), logging.INFO))
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name) if name else structlog.get_logger()


__all__ = ["configure_logging", "get_logger"]
