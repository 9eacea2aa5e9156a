"""Car variants: the fixed brand, model, color and engine a builder produces.

Usage:
    builder = CarBuilder(cache, get_variant("electric"))

    # Adding a variant:
    VARIANTS.register("hybrid", CarVariant("Toyota", "Prius", "White", EngineKind.COMBUSTION))
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from fleetpool.core.state import EngineKind
from fleetpool.exceptions import UnknownVariantError


@dataclass(frozen=True, slots=True)
class CarVariant:
    """Fixed identity of every car a builder produces."""

    brand: str
    model: str
    color: str
    engine: EngineKind


COMBUSTION = CarVariant(
    brand="Toyota", model="Land Cruiser Prado", color="Red", engine=EngineKind.COMBUSTION
)
ELECTRIC = CarVariant(brand="Tesla", model="Model 3", color="Black", engine=EngineKind.ELECTRIC)


class VariantRegistry:
    """Name to variant mapping."""

    def __init__(self) -> None:
        self._by_name: dict[str, CarVariant] = {}

    def register(self, name: str, variant: CarVariant) -> CarVariant:
        """Register a variant under name.

        Re-registering the same variant under the same name is a no-op.

        Raises:
            ValueError: If name is already bound to a different variant.
        """
        existing = self._by_name.get(name)
        if existing is not None and existing != variant:
            raise ValueError(f"Variant name {name!r} already registered as {existing}")
        self._by_name[name] = variant
        return variant

    def get(self, name: str) -> CarVariant:
        """Look up a variant by name.

        Raises:
            UnknownVariantError: If name is not registered.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownVariantError(name, known=self.names()) from None

    def names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)


VARIANTS = VariantRegistry()
VARIANTS.register("combustion", COMBUSTION)
VARIANTS.register("electric", ELECTRIC)


def get_variant(name: str) -> CarVariant:
    """Look up a registered variant by name."""
    return VARIANTS.get(name)
