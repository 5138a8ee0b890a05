"""Range checks shared by observation and activity models."""

from __future__ import annotations

from soulbound_reputation.core.exceptions import InvalidRangeError


def require_in_range(field: str, value: float, low: float, high: float) -> float:
    """Return value as float, or raise InvalidRangeError (NaN is always out of range)."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidRangeError(field, value, low, high) from None
    if not low <= number <= high:
        raise InvalidRangeError(field, number, low, high)
    return number


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))
