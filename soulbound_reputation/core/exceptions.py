"""
Application-level exceptions.

All of these are synchronous validation failures raised before any state is
replaced. They subclass ValueError so callers that already treat bad input as
ValueError keep working.
"""

from __future__ import annotations

from typing import Any


class ReputationError(ValueError):
    """Base class for rejected analyzer or reputation inputs."""

    code = "reputation_error"

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": str(self)}


class InvalidRangeError(ReputationError):
    """An emotional axis or category score lies outside its declared bounds."""

    code = "invalid_range"

    def __init__(self, field: str, value: float, low: float, high: float) -> None:
        self.field = field
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{field}={value!r} outside [{low}, {high}]")

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out.update(field=self.field, value=self.value, low=self.low, high=self.high)
        return out


class EmptyActivityError(ReputationError):
    """Activity carries no category scores."""

    code = "empty_activity"

    def __init__(self) -> None:
        super().__init__("activity has no category scores")


class NonMonotonicTimeError(ReputationError):
    """Update time precedes the state's last update."""

    code = "non_monotonic_time"

    def __init__(self, now: int, last_updated: int) -> None:
        self.now = now
        self.last_updated = last_updated
        super().__init__(f"now={now} precedes last_updated={last_updated}")

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out.update(now=self.now, last_updated=self.last_updated)
        return out


class UnknownCategoryError(ReputationError):
    """Category not in the configured allow-list."""

    code = "unknown_category"

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"unknown category {category!r}")

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["category"] = self.category
        return out
