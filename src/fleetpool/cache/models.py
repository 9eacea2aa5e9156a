"""Cache models: lookup events, counters and reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CacheEventKind(Enum):
    """Outcome of a single get_or_insert call."""

    CREATED = "created"  # Miss: candidate adopted as a new entry
    REUSED = "reused"  # Hit: existing entry returned, candidate discarded


@dataclass(frozen=True, slots=True)
class CacheEvent:
    """One recorded get_or_insert outcome."""

    kind: CacheEventKind
    key: str


@dataclass(slots=True)
class CacheStats:
    """Running hit/miss counters for an interning cache.

    Attributes:
        hits: Lookups answered by an existing entry.
        misses: Lookups that created a new entry.
    """

    hits: int = 0
    misses: int = 0

    @property
    def lookups(self) -> int:
        """Total get_or_insert calls observed."""
        return self.hits + self.misses

    @property
    def hit_ratio(self) -> float:
        """Fraction of lookups that reused an entry (0.0 before any lookup)."""
        if not self.lookups:
            return 0.0
        return self.hits / self.lookups

    def record(self, kind: CacheEventKind) -> None:
        if kind is CacheEventKind.REUSED:
            self.hits += 1
        else:
            self.misses += 1


@dataclass(frozen=True, slots=True)
class CacheReport:
    """Point-in-time listing of a cache's contents.

    Attributes:
        size: Number of distinct stored shared states.
        keys: String keys of every stored entry, in enumeration order.
    """

    size: int
    keys: tuple[str, ...]
