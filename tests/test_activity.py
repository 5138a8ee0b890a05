"""
Tests for building Activity records from trajectories and feeding them to the engine.
"""

from __future__ import annotations

import pytest

from soulbound_reputation.emotional_memory import variance_complexity
from soulbound_reputation.reputation_engine import (
    CommunityEngagement,
    InteractionType,
    ReputationState,
    VerificationLevel,
    apply_activity,
    build_community_activity,
    build_emotional_activity,
    emotional_consistency,
    update_community_engagement,
)


def test_steady_trajectory_is_fully_consistent(make_obs):
    traj = [make_obs(valence=0.4, arousal=0.1, timestamp=t) for t in range(4)]
    assert emotional_consistency(traj) == 1.0


def test_consistency_is_inverted_variance(make_obs):
    traj = [make_obs(valence=0.0, timestamp=0), make_obs(valence=0.2, timestamp=1)]
    assert emotional_consistency(traj) == pytest.approx(1.0 - variance_complexity(traj))
    assert emotional_consistency(traj) == pytest.approx(0.9)


def test_extra_scores_merged_and_consistency_derived(make_obs):
    traj = [make_obs(timestamp=0), make_obs(timestamp=1)]
    activity = build_emotional_activity(
        traj,
        occurred_at=500,
        extra_scores={"creative_output_quality": 0.7, "emotional_consistency": 0.1},
    )
    assert activity.occurred_at == 500
    assert activity.category_scores == {
        "creative_output_quality": 0.7,
        "emotional_consistency": 1.0,
    }


def test_trajectory_flows_into_reputation(make_obs):
    """Steady emotions long after the last update -> emotional_consistency ~1.0 -> 0.25 verified."""
    traj = [make_obs(valence=0.3, arousal=0.3, timestamp=t) for t in range(3)]
    now = 10**9
    activity = build_emotional_activity(traj, occurred_at=now)
    state = ReputationState.initial(now=0, verification_level=VerificationLevel.VERIFIED)
    new_state = apply_activity(state, activity, now=now)
    assert new_state.category_scores["emotional_consistency"] == pytest.approx(1.0)
    assert new_state.overall_score == pytest.approx(0.25)


@pytest.mark.parametrize(
    "interaction_type,bonus",
    [
        ("collaboration", 0.1),
        ("mentorship", 0.15),
        (InteractionType.LEADERSHIP, 0.2),
        ("Leadership", 0.2),
        ("karaoke", 0.05),
    ],
)
def test_interaction_bonus(interaction_type, bonus):
    engagement = update_community_engagement(CommunityEngagement(), interaction_type)
    assert engagement.community_building == pytest.approx(bonus)
    assert engagement.total_interactions == 1
    assert engagement.positive_feedback == 1


def test_negative_interaction_not_counted_as_positive():
    engagement = update_community_engagement(CommunityEngagement(), "collaboration", is_positive=False)
    assert engagement.total_interactions == 1
    assert engagement.positive_feedback == 0
    assert engagement.community_building == pytest.approx(0.1)


def test_community_building_capped():
    engagement = CommunityEngagement()
    for _ in range(8):
        engagement = update_community_engagement(engagement, "leadership")
    assert engagement.community_building == 1.0
    assert engagement.total_interactions == 8


def test_update_does_not_mutate_input():
    before = CommunityEngagement(total_interactions=2, positive_feedback=1, community_building=0.3)
    update_community_engagement(before, "mentorship")
    assert before == CommunityEngagement(total_interactions=2, positive_feedback=1, community_building=0.3)


def test_community_activity_carries_building_score():
    engagement = CommunityEngagement(total_interactions=3, positive_feedback=3, community_building=0.35)
    activity = build_community_activity(
        engagement,
        occurred_at=42,
        extra_scores={"community_engagement": 0.9, "temporal_stability": 0.6},
    )
    assert activity.occurred_at == 42
    assert activity.category_scores == {"community_engagement": 0.35, "temporal_stability": 0.6}
