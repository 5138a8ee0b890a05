"""
Application settings and environment configuration.

- REPUTATION_HALF_LIFE_SECONDS: decay half-life (default 604800 = 7 days)
- REPUTATION_NEUTRAL_PRIOR: starting score for a first-seen category (default 0.5)
- REPUTATION_ALLOWED_CATEGORIES: comma-separated allow-list; empty = accept any category
- REPUTATION_HISTORY_MAX: reputation points kept per identity (default 100)
- LOG_LEVEL / LOG_FORMAT: read by sbt_logging at import

Loads .env from the project root when present. Invalid numbers fall back to
defaults with a warning.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from soulbound_reputation.reputation_engine.registry import DEFAULT_HISTORY_MAX
from soulbound_reputation.reputation_engine.reputation_memory import (
    DEFAULT_HALF_LIFE_SEC,
    NEUTRAL_PRIOR,
    ReputationConfig,
)
from soulbound_reputation.sbt_logging import get_logger

logger = get_logger(__name__)

# config is soulbound_reputation/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_ROOT = _CONFIG_DIR.parent.parent
_ENV_PATH = _ROOT / ".env"


def load_env() -> None:
    """Load .env from project root. Existing environment variables win."""
    load_dotenv(_ENV_PATH)


def _env_float(name: str, default: float, *, positive: bool = False) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("settings_invalid_number", name=name, value=raw, default=default)
        return default
    if positive and value <= 0:
        logger.warning("settings_non_positive", name=name, value=value, default=default)
        return default
    return value


def _env_categories(name: str) -> frozenset[str] | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    return frozenset(c.strip() for c in raw.split(",") if c.strip())


@dataclass(frozen=True)
class Settings:
    """Typed settings for the reputation engine and registry."""

    half_life_seconds: float = DEFAULT_HALF_LIFE_SEC
    neutral_prior: float = NEUTRAL_PRIOR
    allowed_categories: frozenset[str] | None = None
    history_max: int = DEFAULT_HISTORY_MAX

    def reputation_config(self) -> ReputationConfig:
        return ReputationConfig(
            half_life_seconds=self.half_life_seconds,
            neutral_prior=self.neutral_prior,
            allowed_categories=self.allowed_categories,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the current application settings (cached; call get_settings.cache_clear() to reload).
    """
    load_env()
    prior = _env_float("REPUTATION_NEUTRAL_PRIOR", NEUTRAL_PRIOR)
    if not 0.0 <= prior <= 1.0:
        logger.warning("settings_out_of_range", name="REPUTATION_NEUTRAL_PRIOR", value=prior)
        prior = NEUTRAL_PRIOR
    settings = Settings(
        half_life_seconds=_env_float(
            "REPUTATION_HALF_LIFE_SECONDS", DEFAULT_HALF_LIFE_SEC, positive=True
        ),
        neutral_prior=prior,
        allowed_categories=_env_categories("REPUTATION_ALLOWED_CATEGORIES"),
        history_max=int(_env_float("REPUTATION_HISTORY_MAX", DEFAULT_HISTORY_MAX, positive=True)),
    )
    logger.debug(
        "settings_loaded",
        half_life_seconds=settings.half_life_seconds,
        neutral_prior=settings.neutral_prior,
        allowed_categories=sorted(settings.allowed_categories or []),
        history_max=settings.history_max,
    )
    return settings
