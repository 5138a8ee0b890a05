"""
Reputation memory: time-decayed blending of activity scores.

Each applied activity pulls the touched categories toward the new scores. How
far depends on the time since the last update: exponential decay with a fixed
half-life, so a fresh update barely moves a category while one after a long
silence nearly replaces it. Categories not named by the activity are left as
they are. The overall score is then recomputed from the category map.

Pure: apply_activity returns a new ReputationState and never mutates its input.
Serialize calls per identity (see registry.ReputationRegistry).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from soulbound_reputation.core.exceptions import (
    EmptyActivityError,
    NonMonotonicTimeError,
    UnknownCategoryError,
)
from soulbound_reputation.core.validation import clamp, require_in_range
from soulbound_reputation.reputation_engine.models import (
    VERIFICATION_MULTIPLIERS,
    Activity,
    ReputationState,
    VerificationLevel,
)
from soulbound_reputation.reputation_engine.scorer import (
    CATEGORY_WEIGHTS,
    compute_overall_score,
)
from soulbound_reputation.sbt_logging import get_logger

logger = get_logger(__name__)

SECONDS_PER_DAY = 86400
DEFAULT_HALF_LIFE_SEC = 7 * SECONDS_PER_DAY
# Prior for a category the identity has never been scored on
NEUTRAL_PRIOR = 0.5


@dataclass
class ReputationConfig:
    """
    Tunables for the reputation engine.

    half_life_seconds: Elapsed time after which an old category score keeps half its weight.
    category_weights: Canonical category -> weight in the overall score.
    verification_multipliers: Tier -> multiplier applied after weighting.
    neutral_prior: Starting value for a first-seen category.
    allowed_categories: If set, categories outside it are rejected (UnknownCategoryError).
    """

    half_life_seconds: float = DEFAULT_HALF_LIFE_SEC
    category_weights: dict[str, float] = field(default_factory=lambda: dict(CATEGORY_WEIGHTS))
    verification_multipliers: dict[VerificationLevel, float] = field(
        default_factory=lambda: dict(VERIFICATION_MULTIPLIERS)
    )
    neutral_prior: float = NEUTRAL_PRIOR
    allowed_categories: frozenset[str] | None = None

    def __post_init__(self) -> None:
        if not self.half_life_seconds > 0:
            raise ValueError(f"half_life_seconds must be > 0, got {self.half_life_seconds!r}")
        self.neutral_prior = require_in_range("neutral_prior", self.neutral_prior, 0.0, 1.0)
        missing = set(VerificationLevel) - set(self.verification_multipliers)
        if missing:
            raise ValueError(f"verification_multipliers missing {sorted(m.value for m in missing)}")
        if self.allowed_categories is not None:
            self.allowed_categories = frozenset(self.allowed_categories)


def decay_factor(elapsed: float, half_life: float = DEFAULT_HALF_LIFE_SEC) -> float:
    """Weight kept by the previous score after elapsed seconds; 1.0 at 0, 0.5 at one half-life."""
    return math.exp(-math.log(2) * elapsed / half_life)


def _validate_activity(
    state: ReputationState,
    activity: Activity,
    now: int,
    config: ReputationConfig,
) -> dict[str, float]:
    """Check the activity against the state; return validated scores. Raises ReputationError."""
    if not activity.category_scores:
        raise EmptyActivityError()
    if now < state.last_updated:
        raise NonMonotonicTimeError(now, state.last_updated)
    scores: dict[str, float] = {}
    for category, value in activity.category_scores.items():
        if config.allowed_categories is not None and category not in config.allowed_categories:
            raise UnknownCategoryError(category)
        scores[category] = require_in_range(category, value, 0.0, 1.0)
    return scores


def blend_category(current: float, new: float, decay: float) -> float:
    """Decayed current plus the new score weighted by what decay released."""
    return clamp(current * decay + new * (1.0 - decay))


def apply_activity(
    state: ReputationState,
    activity: Activity,
    now: int,
    config: ReputationConfig | None = None,
) -> ReputationState:
    """
    Apply one activity to a reputation state and return the new state.

    Steps: decay = exp(-ln2 * (now - last_updated) / half_life); each category in
    the activity becomes clamp(current * decay + new * (1 - decay)) with current
    defaulting to the neutral prior; the overall score is recomputed from the
    weighted canonical categories times the verification multiplier.

    Raises EmptyActivityError, NonMonotonicTimeError, InvalidRangeError or
    UnknownCategoryError before anything is computed; the input state is untouched.
    """
    config = config or ReputationConfig()
    scores = _validate_activity(state, activity, now, config)

    elapsed = now - state.last_updated
    decay = decay_factor(elapsed, config.half_life_seconds)

    category_scores = dict(state.category_scores)
    for category, new_score in scores.items():
        current = category_scores.get(category, config.neutral_prior)
        category_scores[category] = blend_category(current, new_score, decay)

    overall = compute_overall_score(
        category_scores,
        state.verification_level,
        weights=config.category_weights,
        multipliers=config.verification_multipliers,
    )
    new_state = ReputationState(
        overall_score=overall,
        category_scores=category_scores,
        verification_level=state.verification_level,
        last_updated=now,
    )
    logger.debug(
        "reputation_activity_applied",
        elapsed=elapsed,
        decay=round(decay, 6),
        categories=sorted(scores),
        overall_score=round(overall, 6),
    )
    return new_state


def rescore(state: ReputationState, config: ReputationConfig | None = None) -> ReputationState:
    """Recompute overall_score for the state's current map and tier (e.g. after a tier change)."""
    config = config or ReputationConfig()
    return ReputationState(
        overall_score=compute_overall_score(
            state.category_scores,
            state.verification_level,
            weights=config.category_weights,
            multipliers=config.verification_multipliers,
        ),
        category_scores=dict(state.category_scores),
        verification_level=state.verification_level,
        last_updated=state.last_updated,
    )
