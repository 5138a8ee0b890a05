"""
Structured logging: timestamp, identity_id, event_type.

structlog with ISO timestamps, log level, and consistent keys so reputation
updates can be aggregated downstream. Every module calls get_logger(__name__)
and logs a snake_case event_type plus keyword fields.

Uses only stdlib logging and structlog; no soulbound_reputation imports so
config and core can log without circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

# json for aggregation; console for local runs
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; keep message if present."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


IDENTITY_ID_MAX = 16


def _shorten_identity(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Truncate long identity ids (token addresses, DIDs) to a readable prefix."""
    identity_id = event_dict.get("identity_id")
    if isinstance(identity_id, str) and len(identity_id) > IDENTITY_ID_MAX:
        event_dict["identity_id"] = identity_id[:IDENTITY_ID_MAX] + "..."
    return event_dict


def configure_structlog(level: int = LOG_LEVEL_VALUE, fmt: str = LOG_FORMAT) -> None:
    """Configure structlog: JSON or console renderer, timestamp, level, event_type."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
        _shorten_identity,
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("reputation_updated", identity_id="sbt-1", overall_score=0.42)
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_identity(identity_id: str, name: str = "soulbound_reputation") -> structlog.BoundLogger:
    """Return the module logger with identity_id bound to all subsequent log calls."""
    return get_logger(name).bind(identity_id=identity_id)
