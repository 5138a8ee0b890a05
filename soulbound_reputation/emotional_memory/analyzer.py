"""
Emotional trajectory analyzer: trend, complexity, volatility, prediction.

Pure functions over an ordered sequence of observations. Short trajectories
degrade to neutral results (stable / 0.0) instead of raising; out-of-range
axes raise InvalidRangeError. Deterministic and explainable; no ML.
"""

from __future__ import annotations

import math
import statistics
from typing import Any

from soulbound_reputation.core.validation import clamp, require_in_range
from soulbound_reputation.emotional_memory.models import (
    AXIS_MAX,
    AXIS_MIN,
    EmotionalObservation,
    EmotionalProfile,
    EmotionalTrajectory,
    TrendType,
)
from soulbound_reputation.sbt_logging import get_logger

logger = get_logger(__name__)

# Most recent observations considered by classify_trend
TREND_WINDOW = 5
# |diff| below this on both axes -> stable
TREND_STABLE_THRESHOLD = 0.1
# |diff| above this on either axis -> volatile
TREND_VOLATILE_THRESHOLD = 0.3
# Prediction: weight of the latest step vs the one before it
PREDICTION_RECENT_WEIGHT = 0.7
PREDICTION_PRIOR_WEIGHT = 0.3
PREDICTION_HORIZON_SEC = 3600
MIN_POINTS_FOR_PREDICTION = 3
# Largest (valence, arousal) distance from a mean point, used to normalize consistency
_MAX_PLANAR_SPREAD = math.sqrt(2.0)

CATEGORY_EXCITED = "Excited"
CATEGORY_HAPPY = "Happy"
CATEGORY_ANXIOUS = "Anxious"
CATEGORY_CALM = "Calm"


def _validated(trajectory: EmotionalTrajectory) -> list[Any]:
    """Return the trajectory as a list after checking every axis is within [-1, 1]."""
    points = list(trajectory)
    for obs in points:
        for axis in ("valence", "arousal", "dominance"):
            require_in_range(axis, getattr(obs, axis), AXIS_MIN, AXIS_MAX)
    return points


def classify_trend(trajectory: EmotionalTrajectory) -> TrendType:
    """
    Classify the short-term direction of a trajectory.

    Compares the newest and oldest of the last TREND_WINDOW observations. Rules
    apply in order: both diffs small -> stable; any diff large -> volatile; any
    diff rising -> ascending; any diff falling -> descending; otherwise stable.
    Fewer than two observations -> stable.
    """
    points = _validated(trajectory)
    if len(points) < 2:
        return TrendType.STABLE

    window = points[-TREND_WINDOW:]
    oldest, newest = window[0], window[-1]
    valence_diff = newest.valence - oldest.valence
    arousal_diff = newest.arousal - oldest.arousal

    if abs(valence_diff) < TREND_STABLE_THRESHOLD and abs(arousal_diff) < TREND_STABLE_THRESHOLD:
        trend = TrendType.STABLE
    elif abs(valence_diff) > TREND_VOLATILE_THRESHOLD or abs(arousal_diff) > TREND_VOLATILE_THRESHOLD:
        trend = TrendType.VOLATILE
    elif valence_diff > TREND_STABLE_THRESHOLD or arousal_diff > TREND_STABLE_THRESHOLD:
        trend = TrendType.ASCENDING
    elif valence_diff < -TREND_STABLE_THRESHOLD or arousal_diff < -TREND_STABLE_THRESHOLD:
        trend = TrendType.DESCENDING
    else:
        # Boundary values that satisfy none of the rules above.
        trend = TrendType.STABLE

    logger.debug(
        "emotional_trend_classified",
        trend=trend.value,
        valence_diff=round(valence_diff, 4),
        arousal_diff=round(arousal_diff, 4),
        window=len(window),
    )
    return trend


def complexity(trajectory: EmotionalTrajectory) -> float:
    """
    Distance traveled in the (valence, arousal) plane per observation, in [0, 1].

    Sum of Euclidean steps between consecutive observations divided by the
    trajectory length. Fewer than two observations -> 0.0.
    """
    points = _validated(trajectory)
    if len(points) < 2:
        return 0.0
    total = 0.0
    for prev, curr in zip(points, points[1:]):
        total += math.hypot(curr.valence - prev.valence, curr.arousal - prev.arousal)
    return clamp(total / len(points))


def variance_complexity(trajectory: EmotionalTrajectory) -> float:
    """
    sqrt of the summed population variance of valence, arousal and dominance, in [0, 1].

    Callers feeding this into reputation as emotional_consistency invert it
    (1 - value); see reputation_engine.activity.
    """
    points = _validated(trajectory)
    if not points:
        return 0.0
    total_variance = (
        statistics.pvariance([p.valence for p in points])
        + statistics.pvariance([p.arousal for p in points])
        + statistics.pvariance([p.dominance for p in points])
    )
    return clamp(math.sqrt(total_variance))


def emotional_category(valence: float, arousal: float) -> str:
    """Human-readable quadrant: Excited, Happy, Anxious or Calm."""
    if valence > 0.5 and arousal > 0.5:
        return CATEGORY_EXCITED
    if valence > 0.5:
        return CATEGORY_HAPPY
    if arousal > 0.5:
        return CATEGORY_ANXIOUS
    return CATEGORY_CALM


def _extrapolate(latest: float, previous: float, older: float) -> float:
    return (
        latest
        + (latest - previous) * PREDICTION_RECENT_WEIGHT
        + (previous - older) * PREDICTION_PRIOR_WEIGHT
    )


def predict_next_observation(
    trajectory: EmotionalTrajectory,
    horizon: int = PREDICTION_HORIZON_SEC,
) -> EmotionalObservation | None:
    """
    Linear extrapolation of the next reading from the last three observations.

    Each axis moves by 0.7 * last step + 0.3 * step before, clamped to its range.
    Returns None with fewer than MIN_POINTS_FOR_PREDICTION observations.
    """
    points = _validated(trajectory)
    if len(points) < MIN_POINTS_FOR_PREDICTION:
        return None
    older, previous, latest = points[-3], points[-2], points[-1]

    def axis(name: str, low: float, high: float) -> float:
        return clamp(
            _extrapolate(getattr(latest, name), getattr(previous, name), getattr(older, name)),
            low,
            high,
        )

    return EmotionalObservation(
        valence=axis("valence", AXIS_MIN, AXIS_MAX),
        arousal=axis("arousal", AXIS_MIN, AXIS_MAX),
        dominance=axis("dominance", AXIS_MIN, AXIS_MAX),
        confidence=axis("confidence", 0.0, 1.0),
        timestamp=latest.timestamp + horizon,
    )


def compute_emotional_profile(trajectory: EmotionalTrajectory) -> EmotionalProfile:
    """Averages, range, consistency, volatility and maturity of a trajectory."""
    points = _validated(trajectory)
    if not points:
        return EmotionalProfile()

    count = len(points)
    avg_valence = statistics.fmean(p.valence for p in points)
    avg_arousal = statistics.fmean(p.arousal for p in points)

    distances_sq = [
        (p.valence - avg_valence) ** 2 + (p.arousal - avg_arousal) ** 2 for p in points
    ]
    emotional_range = math.sqrt(max(distances_sq))
    spread = math.sqrt(sum(distances_sq) / count)

    if count > 1:
        growth = (points[-1].confidence - points[0].confidence) / count
        maturity = (growth + 1.0) / 2.0
    else:
        maturity = points[0].confidence

    return EmotionalProfile(
        avg_valence=avg_valence,
        avg_arousal=avg_arousal,
        emotional_range=emotional_range,
        consistency_score=clamp(1.0 - spread / _MAX_PLANAR_SPREAD),
        volatility=clamp(spread),
        maturity=clamp(maturity),
    )
