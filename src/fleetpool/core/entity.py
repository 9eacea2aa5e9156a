"""Car entity: exclusive unique state plus a borrowed, interned shared state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fleetpool.core.state import SharedState, UniqueState

if TYPE_CHECKING:
    from fleetpool.cache.protocol import SharedStateCache


class Car:
    """One car.

    The unique state belongs to this car alone. The shared state is the
    cache's stored representative and is shared with every other car of
    the same brand, model and color.

    Args:
        cache: Cache that owns the shared state.
        brand: Car brand.
        model: Car model.
        color: Car color.
    """

    __slots__ = ("_shared", "unique")

    def __init__(self, cache: SharedStateCache, brand: str, model: str, color: str) -> None:
        self._shared = cache.get_or_insert(SharedState(brand=brand, model=model, color=color))
        self.unique = UniqueState()

    @property
    def shared(self) -> SharedState:
        """Canonical shared state, identical to the cache's stored entry."""
        return self._shared

    def assign_shared_from(self, other: Car) -> None:
        """Adopt other's brand, model and color.

        Re-points this car at other's stored shared state. Unique state is
        untouched and the cache is not modified.
        """
        if other is self:
            return
        self._shared = other._shared

    def __str__(self) -> str:
        return " ".join(
            (self.unique.owner, self.unique.plates, self._shared.brand, self._shared.model)
        )

    def __repr__(self) -> str:
        return f"Car(shared={self._shared!r}, unique={self.unique!r})"
