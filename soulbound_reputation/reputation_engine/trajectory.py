"""
Metrics over an identity's score trajectory (the registry's ReputationPoint history).

Scores live in [0, 1]. Creativity is measured on the 0-100 scale the metric was
tuned for, so the raw spread of changes is multiplied by CREATIVITY_SCALE.
"""

from __future__ import annotations

import statistics
from collections.abc import Sequence

from soulbound_reputation.core.validation import clamp
from soulbound_reputation.reputation_engine.models import ReputationMetrics, ReputationPoint

CREATIVITY_MIN_POINTS = 3
CREATIVITY_SCALE = 10.0  # stdev on 0-100 scores, divided by 10
ENGAGEMENT_INTERACTION_CAP = 1000
ENGAGEMENT_VOLUME_WEIGHT = 0.7
ENGAGEMENT_COMPLEXITY_WEIGHT = 0.3


def _score_changes(trajectory: Sequence[ReputationPoint]) -> list[float]:
    return [b.score - a.score for a, b in zip(trajectory, trajectory[1:])]


def reputation_complexity(trajectory: Sequence[ReputationPoint]) -> float:
    """Sum of absolute score steps divided by the number of points; 0 below two points."""
    if len(trajectory) < 2:
        return 0.0
    total = sum(abs(c) for c in _score_changes(trajectory))
    return clamp(total / len(trajectory))


def creativity_index(trajectory: Sequence[ReputationPoint]) -> float:
    """Population stdev of score changes; steady growth scores 0, erratic growth higher."""
    if len(trajectory) < CREATIVITY_MIN_POINTS:
        return 0.0
    return clamp(statistics.pstdev(_score_changes(trajectory)) * CREATIVITY_SCALE)


def engagement_score(interactions: int, complexity: float) -> float:
    volume = min(interactions / ENGAGEMENT_INTERACTION_CAP, 1.0)
    return ENGAGEMENT_VOLUME_WEIGHT * volume + ENGAGEMENT_COMPLEXITY_WEIGHT * complexity


def compute_reputation_metrics(
    trajectory: Sequence[ReputationPoint],
    interactions: int,
) -> ReputationMetrics:
    complexity = reputation_complexity(trajectory)
    return ReputationMetrics(
        complexity=complexity,
        creativity_index=creativity_index(trajectory),
        engagement_score=engagement_score(interactions, complexity),
    )
