"""Structured logging helpers.

Events are rendered by structlog and handed to the stdlib ``library_client``
logger, so nothing is emitted unless the application configures logging.
"""

from __future__ import annotations

import logging

import structlog

LOGGER_NAME = "library_client"


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
    )


logger = get_logger()

__all__ = ["LOGGER_NAME", "get_logger", "logger"]
