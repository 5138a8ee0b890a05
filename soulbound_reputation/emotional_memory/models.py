"""
Data models for emotional memory.

Observations on the valence/arousal/dominance axes, trend classification,
and the summary profile of a trajectory. All immutable; no scoring logic.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from soulbound_reputation.core.validation import require_in_range

AXIS_MIN = -1.0
AXIS_MAX = 1.0
DEFAULT_CONFIDENCE = 0.8


class TrendType(str, Enum):
    """Short-term direction of an emotional trajectory."""

    ASCENDING = "ascending"
    DESCENDING = "descending"
    STABLE = "stable"
    VOLATILE = "volatile"


@dataclass(frozen=True)
class EmotionalObservation:
    """
    One emotional reading for an identity.

    valence: Positivity, -1 (negative) to 1 (positive).
    arousal: Intensity, -1 to 1.
    dominance: Sense of control, -1 to 1.
    timestamp: Unix seconds when the reading was captured.
    confidence: Sensor confidence in [0, 1].
    """

    valence: float
    arousal: float
    dominance: float
    timestamp: int
    confidence: float = DEFAULT_CONFIDENCE

    def __post_init__(self) -> None:
        for name in ("valence", "arousal", "dominance"):
            value = require_in_range(name, getattr(self, name), AXIS_MIN, AXIS_MAX)
            object.__setattr__(self, name, value)
        object.__setattr__(
            self, "confidence", require_in_range("confidence", self.confidence, 0.0, 1.0)
        )
        object.__setattr__(self, "timestamp", int(self.timestamp))

    def to_dict(self) -> dict[str, Any]:
        return {
            "valence": self.valence,
            "arousal": self.arousal,
            "dominance": self.dominance,
            "timestamp": self.timestamp,
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmotionalObservation:
        return cls(
            valence=data["valence"],
            arousal=data["arousal"],
            dominance=data.get("dominance", 0.0),
            timestamp=data["timestamp"],
            confidence=data.get("confidence", DEFAULT_CONFIDENCE),
        )


# Ascending by timestamp; order is the caller's contract.
EmotionalTrajectory = Sequence[EmotionalObservation]


@dataclass(frozen=True)
class EmotionalProfile:
    """
    Summary of a trajectory for display and reputation inputs.

    emotional_range: Largest (valence, arousal) distance from the mean point.
    consistency_score: 1 minus normalized spread around the mean; 1 = perfectly steady.
    volatility: Root-mean-square distance from the mean point, clamped to [0, 1].
    maturity: Confidence growth from first to last reading, mapped to [0, 1].
    """

    avg_valence: float = 0.0
    avg_arousal: float = 0.0
    emotional_range: float = 0.0
    consistency_score: float = 0.0
    volatility: float = 0.0
    maturity: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "avg_valence": self.avg_valence,
            "avg_arousal": self.avg_arousal,
            "emotional_range": self.emotional_range,
            "consistency_score": self.consistency_score,
            "volatility": self.volatility,
            "maturity": self.maturity,
        }
