"""
Data models for reputation engine input and output.

Activity records coming in, ReputationState going out, plus the verification
tier table and the per-identity trajectory/badge types kept by the registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class VerificationLevel(str, Enum):
    """How strongly an identity's authenticity has been attested."""

    BASIC = "basic"
    VERIFIED = "verified"
    ENHANCED = "enhanced"
    PREMIUM = "premium"

    @property
    def multiplier(self) -> float:
        return VERIFICATION_MULTIPLIERS[self]


VERIFICATION_MULTIPLIERS: dict[VerificationLevel, float] = {
    VerificationLevel.BASIC: 0.8,
    VerificationLevel.VERIFIED: 1.0,
    VerificationLevel.ENHANCED: 1.2,
    VerificationLevel.PREMIUM: 1.5,
}


class Badge(str, Enum):
    PIONEER = "pioneer"
    MASTER = "master"


@dataclass
class Activity:
    """
    One external event's contribution to reputation.

    category_scores: category name -> score in [0, 1]; validated when applied.
    occurred_at: Unix seconds of the event.
    """

    category_scores: dict[str, float]
    occurred_at: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_scores": dict(self.category_scores),
            "occurred_at": self.occurred_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Activity:
        return cls(
            category_scores=dict(data.get("category_scores") or {}),
            occurred_at=int(data["occurred_at"]),
        )


@dataclass
class ReputationState:
    """
    Reputation state for one soulbound identity.

    overall_score: Weighted, verification-adjusted score in [0, 1]; always
        derived from category_scores and verification_level, never set directly.
    category_scores: category -> decayed blended score in [0, 1].
    verification_level: Trust tier applied as a multiplier.
    last_updated: Unix seconds of the last applied activity.
    """

    overall_score: float = 0.0
    category_scores: dict[str, float] = field(default_factory=dict)
    verification_level: VerificationLevel = VerificationLevel.BASIC
    last_updated: int = 0

    @classmethod
    def initial(
        cls,
        now: int = 0,
        verification_level: VerificationLevel = VerificationLevel.BASIC,
    ) -> ReputationState:
        return cls(verification_level=verification_level, last_updated=now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall_score": self.overall_score,
            "category_scores": dict(self.category_scores),
            "verification_level": self.verification_level.value,
            "last_updated": self.last_updated,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReputationState:
        return cls(
            overall_score=float(data.get("overall_score", 0.0)),
            category_scores={k: float(v) for k, v in (data.get("category_scores") or {}).items()},
            verification_level=VerificationLevel(data.get("verification_level", "basic")),
            last_updated=int(data.get("last_updated", 0)),
        )


@dataclass(frozen=True)
class ReputationPoint:
    """Overall score of an identity at one point in time."""

    score: float
    timestamp: int

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "timestamp": self.timestamp}


@dataclass(frozen=True)
class ReputationMetrics:
    """
    Shape of an identity's score trajectory.

    complexity: Mean absolute step between consecutive scores, in [0, 1].
    creativity_index: Spread of the score changes; 0 until three points exist.
    engagement_score: 0.7 * interaction volume (saturating at 1000) + 0.3 * complexity.
    """

    complexity: float = 0.0
    creativity_index: float = 0.0
    engagement_score: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "complexity": self.complexity,
            "creativity_index": self.creativity_index,
            "engagement_score": self.engagement_score,
        }


class InteractionType(str, Enum):
    COLLABORATION = "collaboration"
    MENTORSHIP = "mentorship"
    LEADERSHIP = "leadership"
    OTHER = "other"

    @classmethod
    def parse(cls, value: InteractionType | str) -> InteractionType:
        """Known types by value; anything else counts as OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class CommunityEngagement:
    """
    Running tally of community interactions for one identity.

    community_building: Accumulated interaction bonus, capped at 1.0; feeds the
        community_engagement category.
    """

    total_interactions: int = 0
    positive_feedback: int = 0
    community_building: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_interactions": self.total_interactions,
            "positive_feedback": self.positive_feedback,
            "community_building": self.community_building,
        }
