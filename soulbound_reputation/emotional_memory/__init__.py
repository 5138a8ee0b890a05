# Emotional memory: observation models and the stateless trajectory analyzer.
# Statistical only; no ML.

from soulbound_reputation.emotional_memory.models import (
    EmotionalObservation,
    EmotionalProfile,
    EmotionalTrajectory,
    TrendType,
)
from soulbound_reputation.emotional_memory.analyzer import (
    classify_trend,
    complexity,
    compute_emotional_profile,
    emotional_category,
    predict_next_observation,
    variance_complexity,
)

__all__ = [
    "EmotionalObservation",
    "EmotionalProfile",
    "EmotionalTrajectory",
    "TrendType",
    "classify_trend",
    "complexity",
    "compute_emotional_profile",
    "emotional_category",
    "predict_next_observation",
    "variance_complexity",
]
