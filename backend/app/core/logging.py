from __future__ import annotations

import logging
from typing import Any

import structlog


def configure_logging(debug: bool = False, *, service: str = "boiler-quote") -> None:
    """Configure structured logging for the API process."""

    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(format="%(message)s", level=level)

    renderer: Any
    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(service=service)


def get_logger(*args: Any, **kwargs: Any) -> structlog.BoundLogger:
    return structlog.get_logger(*args, **kwargs)


def mask_phone(phone: str | None) -> str:
    """Hide all but the last four digits of a phone number for log output."""

    if not phone:
        return ""
    visible = phone[-4:]
    return f"{'*' * max(len(phone) - 4, 0)}{visible}"
