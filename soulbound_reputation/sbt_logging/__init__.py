"""
Structured logging for soulbound reputation scoring.

JSON logs with timestamp, identity_id and event_type. Use get_logger() in all
modules for aggregation-friendly output.
"""

from soulbound_reputation.sbt_logging.logger import (
    bind_identity,
    configure_structlog,
    get_logger,
)

__all__ = ["bind_identity", "configure_structlog", "get_logger"]
