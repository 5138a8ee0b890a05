"""
Tests for environment-driven settings (config.settings.get_settings).
"""

from __future__ import annotations

from soulbound_reputation.config import get_settings
from soulbound_reputation.reputation_engine import DEFAULT_HALF_LIFE_SEC


def test_defaults(clean_settings_env):
    settings = get_settings()
    assert settings.half_life_seconds == DEFAULT_HALF_LIFE_SEC
    assert settings.neutral_prior == 0.5
    assert settings.allowed_categories is None
    assert settings.history_max == 100


def test_env_overrides(clean_settings_env):
    clean_settings_env.setenv("REPUTATION_HALF_LIFE_SECONDS", "3600")
    clean_settings_env.setenv("REPUTATION_NEUTRAL_PRIOR", "0.25")
    clean_settings_env.setenv("REPUTATION_ALLOWED_CATEGORIES", "community_engagement, temporal_stability,")
    clean_settings_env.setenv("REPUTATION_HISTORY_MAX", "10")
    settings = get_settings()
    assert settings.half_life_seconds == 3600.0
    assert settings.neutral_prior == 0.25
    assert settings.allowed_categories == frozenset({"community_engagement", "temporal_stability"})
    assert settings.history_max == 10

    config = settings.reputation_config()
    assert config.half_life_seconds == 3600.0
    assert config.neutral_prior == 0.25
    assert config.allowed_categories == settings.allowed_categories


def test_invalid_values_fall_back(clean_settings_env):
    clean_settings_env.setenv("REPUTATION_HALF_LIFE_SECONDS", "soon")
    clean_settings_env.setenv("REPUTATION_NEUTRAL_PRIOR", "3")
    clean_settings_env.setenv("REPUTATION_HISTORY_MAX", "-4")
    settings = get_settings()
    assert settings.half_life_seconds == DEFAULT_HALF_LIFE_SEC
    assert settings.neutral_prior == 0.5
    assert settings.history_max == 100


def test_settings_are_cached(clean_settings_env):
    first = get_settings()
    clean_settings_env.setenv("REPUTATION_HALF_LIFE_SECONDS", "60")
    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().half_life_seconds == 60.0
