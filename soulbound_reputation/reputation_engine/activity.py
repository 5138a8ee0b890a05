"""
Build Activity records from emotional trajectories and community interactions.

The analyzer reports variance (higher = less steady); reputation wants
consistency (higher = better). The inversion lives here, on the caller side.
Community interactions accumulate a capped bonus that becomes the
community_engagement category score.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace

from soulbound_reputation.emotional_memory import EmotionalTrajectory, variance_complexity
from soulbound_reputation.reputation_engine.models import (
    Activity,
    CommunityEngagement,
    InteractionType,
)
from soulbound_reputation.reputation_engine.scorer import (
    COMMUNITY_ENGAGEMENT,
    EMOTIONAL_CONSISTENCY,
)

COMMUNITY_BUILDING_MAX = 1.0
INTERACTION_BONUS: dict[InteractionType, float] = {
    InteractionType.COLLABORATION: 0.1,
    InteractionType.MENTORSHIP: 0.15,
    InteractionType.LEADERSHIP: 0.2,
    InteractionType.OTHER: 0.05,
}


def emotional_consistency(trajectory: EmotionalTrajectory) -> float:
    """1 - variance_complexity: 1.0 for a perfectly steady trajectory."""
    return 1.0 - variance_complexity(trajectory)


def build_emotional_activity(
    trajectory: EmotionalTrajectory,
    occurred_at: int,
    extra_scores: Mapping[str, float] | None = None,
) -> Activity:
    """
    Activity with emotional_consistency derived from the trajectory.

    extra_scores are merged in as-is (validated later by apply_activity); an
    explicit emotional_consistency there is overwritten by the derived value.
    """
    scores = dict(extra_scores or {})
    scores[EMOTIONAL_CONSISTENCY] = emotional_consistency(trajectory)
    return Activity(category_scores=scores, occurred_at=occurred_at)


def update_community_engagement(
    engagement: CommunityEngagement,
    interaction_type: InteractionType | str,
    is_positive: bool = True,
) -> CommunityEngagement:
    """Return the tally after one more interaction; unknown types earn the OTHER bonus."""
    kind = InteractionType.parse(interaction_type)
    building = min(engagement.community_building + INTERACTION_BONUS[kind], COMMUNITY_BUILDING_MAX)
    return replace(
        engagement,
        total_interactions=engagement.total_interactions + 1,
        positive_feedback=engagement.positive_feedback + (1 if is_positive else 0),
        community_building=building,
    )


def build_community_activity(
    engagement: CommunityEngagement,
    occurred_at: int,
    extra_scores: Mapping[str, float] | None = None,
) -> Activity:
    """Activity whose community_engagement score is the tally's community_building."""
    scores = dict(extra_scores or {})
    scores[COMMUNITY_ENGAGEMENT] = engagement.community_building
    return Activity(category_scores=scores, occurred_at=occurred_at)
