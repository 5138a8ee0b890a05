"""
Test that sbt_logging can be imported without circular import and the logger works.
"""

from __future__ import annotations


def test_logging_import():
    """Import get_logger from sbt_logging and use the logger."""
    from soulbound_reputation.sbt_logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    logger.info("test_message", key="value")


def test_bind_identity():
    from soulbound_reputation.sbt_logging import bind_identity

    logger = bind_identity("sbt-1")
    logger.info("identity_bound_message", score=0.5)


def test_normalize_event_renames_event():
    from soulbound_reputation.sbt_logging.logger import _normalize_event

    out = _normalize_event(None, "info", {"event": "reputation_updated", "score": 1})
    assert out == {"event_type": "reputation_updated", "message": "reputation_updated", "score": 1}


def test_shorten_identity_truncates_long_ids():
    from soulbound_reputation.sbt_logging.logger import _shorten_identity

    long_id = "did:sbt:" + "f" * 40
    out = _shorten_identity(None, "info", {"identity_id": long_id})
    assert out["identity_id"] == long_id[:16] + "..."
    assert _shorten_identity(None, "info", {"identity_id": "sbt-1"}) == {"identity_id": "sbt-1"}
    assert _shorten_identity(None, "info", {"score": 0.5}) == {"score": 0.5}


def test_bind_identity_keeps_module_name():
    from structlog.testing import capture_logs

    from soulbound_reputation.sbt_logging import bind_identity

    with capture_logs() as logs:
        bind_identity("sbt-1", "soulbound_reputation.reputation_engine.registry").info("identity_event")
    assert logs[0]["identity_id"] == "sbt-1"
    assert logs[0]["logger"] == "soulbound_reputation.reputation_engine.registry"
