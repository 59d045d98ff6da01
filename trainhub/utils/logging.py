# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Logging setup for the TrainHub API.

TrainHub modules log through ``logging.getLogger(__name__)``; structlog sits
on top of the stdlib handlers and renders every record. The request
middleware binds the HTTP method and path for the lifetime of one request,
so store and generation log lines carry the endpoint that caused them.

Example:
    >>> setup_logging(get_settings())
    >>> bind_context(method="POST", path="/api/v1/bills")
    >>> get_logger("trainhub.api.requests").info("request_completed", status_code=201)
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from trainhub.core.config.settings import Settings

# LiteLLM logs every request at INFO
_QUIET_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "LiteLLM",
    "asyncio",
)


def _renderers(settings: "Settings") -> list[Processor]:
    if settings.is_development or settings.debug:
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def setup_logging(settings: "Settings") -> None:
    """Route TrainHub and third-party logging through structlog.

    Development (or debug) output is colored console text; anything else is
    one JSON object per line.

    Args:
        settings: Application settings; log_level applies to the trainhub
            logger tree.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_renderers(settings),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    for logger_name in _QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
    logging.getLogger("trainhub").setLevel(log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that accepts key-value event fields."""
    return structlog.get_logger(name)


def bind_context(**kwargs: object) -> None:
    """Attach request fields (method, path) to every log line until cleared."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop the fields bound for the current request."""
    structlog.contextvars.clear_contextvars()
