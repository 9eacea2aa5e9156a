"""Configuration module using Pydantic Settings.

Usage:
    from fleetpool.config import PoolSettings

    settings = PoolSettings(key_separator=" / ")
"""

from fleetpool.config.settings import PoolSettings

__all__ = [
    "PoolSettings",
]
