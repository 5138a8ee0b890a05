"""
Reputation engine package — time-decayed, verification-adjusted identity reputation.

Consumes Activity records (including the emotional consistency derived from an
analyzed trajectory) and produces ReputationState values for callers to persist.
"""

from soulbound_reputation.reputation_engine.models import (
    VERIFICATION_MULTIPLIERS,
    Activity,
    Badge,
    CommunityEngagement,
    InteractionType,
    ReputationMetrics,
    ReputationPoint,
    ReputationState,
    VerificationLevel,
)
from soulbound_reputation.reputation_engine.scorer import (
    CATEGORY_WEIGHTS,
    base_score,
    compute_overall_score,
    verification_multiplier,
)
from soulbound_reputation.reputation_engine.reputation_memory import (
    DEFAULT_HALF_LIFE_SEC,
    ReputationConfig,
    apply_activity,
    decay_factor,
    rescore,
)
from soulbound_reputation.reputation_engine.activity import (
    build_community_activity,
    build_emotional_activity,
    emotional_consistency,
    update_community_engagement,
)
from soulbound_reputation.reputation_engine.trajectory import (
    compute_reputation_metrics,
    creativity_index,
    engagement_score,
    reputation_complexity,
)
from soulbound_reputation.reputation_engine.registry import ReputationRegistry

__all__ = [
    "VERIFICATION_MULTIPLIERS",
    "Activity",
    "Badge",
    "CommunityEngagement",
    "InteractionType",
    "ReputationMetrics",
    "ReputationPoint",
    "ReputationState",
    "VerificationLevel",
    "CATEGORY_WEIGHTS",
    "base_score",
    "compute_overall_score",
    "verification_multiplier",
    "DEFAULT_HALF_LIFE_SEC",
    "ReputationConfig",
    "apply_activity",
    "decay_factor",
    "rescore",
    "build_community_activity",
    "build_emotional_activity",
    "emotional_consistency",
    "update_community_engagement",
    "compute_reputation_metrics",
    "creativity_index",
    "engagement_score",
    "reputation_complexity",
    "ReputationRegistry",
]
