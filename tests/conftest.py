"""
Pytest fixtures for soulbound reputation tests.

Observation factory, a fresh registry per test, and a clean settings
environment so REPUTATION_* variables from the host never leak in.
"""

from __future__ import annotations

import pytest

from soulbound_reputation.emotional_memory import EmotionalObservation

REPUTATION_ENV_VARS = (
    "REPUTATION_HALF_LIFE_SECONDS",
    "REPUTATION_NEUTRAL_PRIOR",
    "REPUTATION_ALLOWED_CATEGORIES",
    "REPUTATION_HISTORY_MAX",
)


@pytest.fixture
def make_obs():
    """Build an EmotionalObservation; timestamp defaults to 0, dominance and arousal to 0.0."""

    def _make(valence=0.0, arousal=0.0, dominance=0.0, timestamp=0, confidence=0.8):
        return EmotionalObservation(
            valence=valence,
            arousal=arousal,
            dominance=dominance,
            timestamp=timestamp,
            confidence=confidence,
        )

    return _make


@pytest.fixture
def clean_settings_env(monkeypatch):
    """Unset REPUTATION_* env vars and drop the cached settings before and after the test."""
    from soulbound_reputation.config.settings import get_settings

    for name in REPUTATION_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def registry():
    """Registry with default config and room for long histories."""
    from soulbound_reputation.reputation_engine import ReputationRegistry

    return ReputationRegistry(history_max=500)
