"""
Soulbound reputation — emotional trend analysis and time-decayed reputation scoring.

Classifies emotional trajectories, measures their complexity, and blends
timestamped activity scores into a per-identity, verification-adjusted
reputation. Pure computation: network clients, persistence and UI live
outside this package and exchange plain data with it.
"""

__version__ = "0.1.0"
