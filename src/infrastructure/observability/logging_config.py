"""
Structured logging configuration using structlog.

Both structlog loggers and plain ``logging.getLogger`` loggers (used by
the application services) end up on the same handler and are rendered
as one JSON object per line, or as coloured key/value pairs when
``json_logs`` is off for local development.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

SERVICE_NAME: str = "library-api"

# Third-party loggers that are too chatty at INFO.
_QUIET_LOGGERS: tuple[str, ...] = ("uvicorn.access", "sqlalchemy.engine")


def add_service_name(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Stamp every event with the service name."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def setup_logging(log_level: str = "INFO", *, json_logs: bool = True) -> None:
    """
    Configure structlog and the stdlib logging bridge.

    Call once at startup (the FastAPI ``lifespan`` does).

    Parameters
    ----------
    log_level:
        Minimum severity as a string (``DEBUG``, ``INFO``, ...). Unknown
        names fall back to ``INFO``.
    json_logs:
        Render JSON when true, a console renderer otherwise.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_name,  # type: ignore[list-item]
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        # Records from plain stdlib loggers still need the shared chain.
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Return a structlog logger bound to *name*.

    Extra context can be attached with ``.bind()``::

        log = get_logger("books").bind(author_id=str(author_id))
        log.info("book_upserted", outcome="created")
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
