"""In-memory interning cache for shared car state.

Holds at most one stored SharedState per distinct (brand, model, color)
triple. Entries are never removed, so every returned object stays valid for
the cache's lifetime.

Usage:
    cache = InterningCache()
    first = cache.get_or_insert(SharedState("Tesla", "Model 3", "Black"))
    second = cache.get_or_insert(SharedState("Tesla", "Model 3", "Black"))
    assert first is second
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator

from fleetpool.cache.models import CacheEvent, CacheEventKind, CacheReport, CacheStats
from fleetpool.config import PoolSettings
from fleetpool.core.state import SharedState
from fleetpool.exceptions import UnknownSharedStateError

_logger = logging.getLogger(__name__)


class InterningCache:
    """Dict-based interning cache, single-threaded.

    Structure:
        _entries[shared_state] = stored representative

    Entries are keyed by the SharedState value itself, so two states are
    interchangeable exactly when all three fields match. The string key
    (``SharedState.key``) is only used for reporting and ``lookup``.

    Args:
        seed: States to pre-populate. Duplicates overwrite earlier entries
            (last write wins); callers should avoid passing them.
        separator: Key separator, overrides ``settings.key_separator``.
        settings: Pool settings (defaults to ``PoolSettings()``).
    """

    def __init__(
        self,
        seed: Iterable[SharedState] = (),
        *,
        separator: str | None = None,
        settings: PoolSettings | None = None,
    ) -> None:
        """Initialize the cache and store every seed state.

        Args:
            seed: States to pre-populate.
            separator: Key separator override.
            settings: Pool settings.
        """
        self._settings = settings if settings is not None else PoolSettings()
        self._separator = separator if separator is not None else self._settings.key_separator
        self._entries: dict[SharedState, SharedState] = {}
        self._stats = CacheStats()
        self._events: deque[CacheEvent] | None = None
        if self._settings.event_history:
            self._events = deque(maxlen=self._settings.event_history)

        for state in seed:
            if state in self._entries:
                _logger.debug("Seed overwrites existing shared state %s", self._key(state))
            self._entries[state] = state

    def _key(self, state: SharedState) -> str:
        return state.key(self._separator)

    def _record(self, kind: CacheEventKind, key: str) -> None:
        self._stats.record(kind)
        if self._events is not None:
            self._events.append(CacheEvent(kind=kind, key=key))

    @property
    def separator(self) -> str:
        """Separator used to build string keys."""
        return self._separator

    @property
    def stats(self) -> CacheStats:
        """Hit/miss counters since construction. Seeding is not counted."""
        return self._stats

    @property
    def events(self) -> tuple[CacheEvent, ...]:
        """Most recent lookup outcomes, oldest first.

        Empty unless ``settings.event_history`` is positive.
        """
        if self._events is None:
            return ()
        return tuple(self._events)

    def get_or_insert(self, candidate: SharedState) -> SharedState:
        """Return the canonical stored equivalent of candidate.

        If an equal state is stored, it is returned and candidate is
        discarded. Otherwise candidate is adopted as the stored entry and
        returned. Exactly one create/reuse event is logged per call.

        Args:
            candidate: State to intern.

        Returns:
            The stored representative, identical for all equal candidates.
        """
        key = self._key(candidate)
        stored = self._entries.get(candidate)
        if stored is None:
            _logger.info("Can't find a shared state, creating new one: %s", key)
            # Frozen, so adopting the candidate is equivalent to storing a copy.
            self._entries[candidate] = candidate
            self._record(CacheEventKind.CREATED, key)
            return candidate

        _logger.info("Reusing existing shared state: %s", key)
        self._record(CacheEventKind.REUSED, key)
        return stored

    def lookup(self, key: str) -> SharedState:
        """Find a stored state by its string key.

        Args:
            key: String key as produced by ``SharedState.key``.

        Returns:
            The stored representative.

        Raises:
            UnknownSharedStateError: If no stored state has this key.
        """
        for stored_key, state in self.enumerate():
            if stored_key == key:
                return state
        raise UnknownSharedStateError(key)

    def size(self) -> int:
        """Count distinct stored states."""
        return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._entries

    def enumerate(self) -> Iterator[tuple[str, SharedState]]:
        """Iterate over stored entries.

        Order is insertion order but callers should not depend on it. Call
        again to restart.

        Yields:
            (key, stored state) for each entry.
        """
        for state in self._entries.values():
            yield self._key(state), state

    def keys(self) -> Iterator[str]:
        """Iterate over string keys of stored entries."""
        for key, _ in self.enumerate():
            yield key

    def report(self) -> CacheReport:
        """Log the current size and every stored key.

        Returns:
            Snapshot of size and keys at the time of the call.
        """
        report = CacheReport(size=self.size(), keys=tuple(self.keys()))
        _logger.info("%s size: %d", self._settings.report_name, report.size)
        for key in report.keys:
            _logger.info("%s", key)
        return report
