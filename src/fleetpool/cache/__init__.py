"""Interning cache: canonical storage for shared car state."""

from fleetpool.cache.interning import InterningCache
from fleetpool.cache.models import CacheEvent, CacheEventKind, CacheReport, CacheStats
from fleetpool.cache.protocol import SharedStateCache

__all__ = [
    "InterningCache",
    "SharedStateCache",
    "CacheEvent",
    "CacheEventKind",
    "CacheReport",
    "CacheStats",
]
