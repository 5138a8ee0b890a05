"""
Configuration management for soulbound reputation scoring.

Loads settings from environment variables and an optional .env file.
"""

from soulbound_reputation.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
