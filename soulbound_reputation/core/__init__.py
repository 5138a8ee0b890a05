"""
Core utilities — exceptions shared by the analyzer, the reputation engine and the CLI.
"""

from soulbound_reputation.core.exceptions import (
    EmptyActivityError,
    InvalidRangeError,
    NonMonotonicTimeError,
    ReputationError,
    UnknownCategoryError,
)

__all__ = [
    "EmptyActivityError",
    "InvalidRangeError",
    "NonMonotonicTimeError",
    "ReputationError",
    "UnknownCategoryError",
]
