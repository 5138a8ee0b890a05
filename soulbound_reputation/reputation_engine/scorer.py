"""
Reputation score computation: weighted recombination and verification multiplier.

Five canonical categories carry fixed weights; any other category lives in the
per-category map only. Missing canonical categories count as 0.0 here.
"""

from __future__ import annotations

from collections.abc import Mapping

from soulbound_reputation.core.validation import clamp
from soulbound_reputation.reputation_engine.models import (
    VERIFICATION_MULTIPLIERS,
    VerificationLevel,
)

EMOTIONAL_CONSISTENCY = "emotional_consistency"
CREATIVE_OUTPUT_QUALITY = "creative_output_quality"
COMMUNITY_ENGAGEMENT = "community_engagement"
CROSS_CHAIN_ACTIVITY = "cross_chain_activity"
TEMPORAL_STABILITY = "temporal_stability"

CATEGORY_WEIGHTS: dict[str, float] = {
    EMOTIONAL_CONSISTENCY: 0.25,
    CREATIVE_OUTPUT_QUALITY: 0.25,
    COMMUNITY_ENGAGEMENT: 0.20,
    CROSS_CHAIN_ACTIVITY: 0.15,
    TEMPORAL_STABILITY: 0.15,
}


def base_score(
    category_scores: Mapping[str, float],
    weights: Mapping[str, float] | None = None,
) -> float:
    """Linear combination of the weighted categories; absent ones contribute 0."""
    weights = CATEGORY_WEIGHTS if weights is None else weights
    return sum(w * category_scores.get(name, 0.0) for name, w in weights.items())


def verification_multiplier(
    level: VerificationLevel,
    multipliers: Mapping[VerificationLevel, float] | None = None,
) -> float:
    table = VERIFICATION_MULTIPLIERS if multipliers is None else multipliers
    return table[VerificationLevel(level)]


def compute_overall_score(
    category_scores: Mapping[str, float],
    verification_level: VerificationLevel,
    *,
    weights: Mapping[str, float] | None = None,
    multipliers: Mapping[VerificationLevel, float] | None = None,
) -> float:
    """
    Compute the overall reputation (0–1) from category scores and verification tier.

    overall = clamp(base_score * multiplier, 0, 1). No state; callers store the result.
    """
    return clamp(
        base_score(category_scores, weights)
        * verification_multiplier(verification_level, multipliers)
    )
