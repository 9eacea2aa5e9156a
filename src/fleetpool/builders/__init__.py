"""Builders: incremental car assembly over fixed variants."""

from fleetpool.builders.builder import CarBuilder, combustion_builder, electric_builder
from fleetpool.builders.variants import (
    COMBUSTION,
    ELECTRIC,
    VARIANTS,
    CarVariant,
    VariantRegistry,
    get_variant,
)

__all__ = [
    # Variants
    "CarVariant",
    "VariantRegistry",
    "VARIANTS",
    "COMBUSTION",
    "ELECTRIC",
    "get_variant",
    # Builder
    "CarBuilder",
    "combustion_builder",
    "electric_builder",
]
