"""Car builder: accumulates unique state, then builds cars of one variant.

Usage:
    builder = combustion_builder(cache)
    builder.add_buff("Buff 0")
    builder.set_owner("Person 0")
    car = builder.build()
"""

from __future__ import annotations

from fleetpool.builders.variants import COMBUSTION, ELECTRIC, CarVariant
from fleetpool.cache.protocol import SharedStateCache
from fleetpool.core.entity import Car
from fleetpool.core.state import derive_plates


class CarBuilder:
    """Accumulates per-car fields and builds cars of a fixed variant.

    State persists across ``build()`` calls until ``reset()`` is called, so
    consecutive builds without a reset carry forward earlier buffs.

    Args:
        cache: Cache used to intern the variant's shared state.
        variant: Fixed brand, model, color and engine of built cars.
    """

    def __init__(self, cache: SharedStateCache, variant: CarVariant) -> None:
        self._cache = cache
        self._variant = variant
        self._buffs: list[str] = []
        self._owner = ""
        self._plates = ""
        self._trip_computer = ""
        self._has_autopilot = False

    @property
    def variant(self) -> CarVariant:
        return self._variant

    @property
    def buffs(self) -> tuple[str, ...]:
        return tuple(self._buffs)

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def plates(self) -> str:
        """Plates derived from the last owner set."""
        return self._plates

    @property
    def trip_computer(self) -> str:
        return self._trip_computer

    @property
    def has_autopilot(self) -> bool:
        return self._has_autopilot

    def add_buff(self, buff: str) -> None:
        self._buffs.append(buff)

    def set_owner(self, owner: str) -> None:
        """Set the owner and derive plates from it."""
        self._owner = owner
        self._plates = derive_plates(owner)

    def set_trip_computer(self, trip_computer: str) -> None:
        self._trip_computer = trip_computer

    def toggle_autopilot(self) -> None:
        self._has_autopilot = not self._has_autopilot

    def reset(self) -> None:
        """Clear accumulated fields. The variant is kept."""
        self._buffs.clear()
        self._owner = ""
        self._plates = ""
        self._trip_computer = ""
        self._has_autopilot = False

    def build(self) -> Car:
        """Build a new car from the variant and the accumulated fields.

        The car gets its own copy of the buffs list, so later builder
        changes do not affect it.

        Returns:
            Newly built car, owned by the caller.
        """
        variant = self._variant
        car = Car(self._cache, variant.brand, variant.model, variant.color)
        unique = car.unique
        unique.engine = variant.engine
        unique.buffs = list(self._buffs)
        unique.has_autopilot = self._has_autopilot
        unique.trip_computer = self._trip_computer
        unique.plates = self._plates
        unique.owner = self._owner
        return car


def combustion_builder(cache: SharedStateCache) -> CarBuilder:
    """Builder for red Toyota Land Cruiser Prados."""
    return CarBuilder(cache, COMBUSTION)


def electric_builder(cache: SharedStateCache) -> CarBuilder:
    """Builder for black Tesla Model 3s."""
    return CarBuilder(cache, ELECTRIC)
