"""Cache protocol for swappable interning backends.

The cache layer abstracts shared-state interning, enabling:
- Local in-memory, single-threaded (default)
- Lock-guarded or concurrent-map backends (future)

A concurrent backend must make the lookup-then-insert step of
``get_or_insert`` atomic, otherwise two callers can store two copies of the
same value.

Usage:
    cache: SharedStateCache = InterningCache()
    car = Car(cache, "Toyota", "Prius", "White")
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from fleetpool.cache.models import CacheReport
from fleetpool.core.state import SharedState


class SharedStateCache(Protocol):
    """Abstract interning interface. Implementations own the stored values."""

    def get_or_insert(self, candidate: SharedState) -> SharedState:
        """Return the canonical stored equivalent of candidate, storing it if new."""
        ...

    def size(self) -> int:
        """Count distinct stored values."""
        ...

    def enumerate(self) -> Iterator[tuple[str, SharedState]]:
        """Iterate (key, stored value) pairs."""
        ...

    def report(self) -> CacheReport:
        """Log and return the current contents."""
        ...
