"""Structured logging configuration using structlog."""

import logging
import re
import sys
from typing import Any, Literal

import structlog
from structlog.types import EventDict, WrappedLogger

REDACTED = "***"

# Event keys whose values must never reach a log sink
SENSITIVE_KEYS = frozenset(
    {"pin", "old_pin", "new_pin", "pin_hash", "access_token", "refresh_token", "authorization"}
)

_INLINE_SECRET = re.compile(r"\b(pin|pin_hash|token|authorization)=(\S+)", re.IGNORECASE)


def redact_secrets(_logger: WrappedLogger, _method_name: str, event_dict: EventDict) -> EventDict:
    """Mask PINs, hashes and tokens, whether passed as keys or inline as ``pin=...``."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    event = event_dict.get("event")
    if isinstance(event, str):
        event_dict["event"] = _INLINE_SECRET.sub(rf"\1={REDACTED}", event)
    return event_dict


def setup_logging(
    log_level: str = "INFO",
    log_format: Literal["json", "console"] = "json",
) -> None:
    """Configure structured logging with structlog.

    Args:
        log_level: Standard Python log level name (INFO, DEBUG, etc.).
        log_format: Output format, ``"json"`` for machine-readable output
            (staging/production) or ``"console"`` for coloured human-readable
            output (local development).
    """
    renderer: structlog.types.Processor = (
        structlog.dev.ConsoleRenderer()
        if log_format == "console"
        else structlog.processors.JSONRenderer()
    )
    level = getattr(logging, log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            redact_secrets,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Also configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Get a structlog logger."""
    return structlog.get_logger(name)
