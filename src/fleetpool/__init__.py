"""fleetpool: interning cache for shared car state.

Usage:
    from fleetpool import InterningCache, Car, combustion_builder

    cache = InterningCache()
    builder = combustion_builder(cache)
    builder.set_owner("Person 0")
    first = builder.build()
    second = builder.build()
    assert first.shared is second.shared
    assert cache.size() == 1
"""

__version__ = "0.1.0"

# Core primitives
from fleetpool.core import (
    Car,
    EngineKind,
    SharedState,
    UniqueState,
    derive_plates,
)

# Cache
from fleetpool.cache import (
    CacheEvent,
    CacheEventKind,
    CacheReport,
    CacheStats,
    InterningCache,
    SharedStateCache,
)

# Builders
from fleetpool.builders import (
    COMBUSTION,
    ELECTRIC,
    VARIANTS,
    CarBuilder,
    CarVariant,
    combustion_builder,
    electric_builder,
    get_variant,
)

# Config and errors
from fleetpool.config import PoolSettings
from fleetpool.exceptions import FleetPoolError, UnknownSharedStateError, UnknownVariantError
from fleetpool.scenario import ScenarioResult, run_reference_scenario

__all__ = [
    # Version
    "__version__",
    # Core
    "Car",
    "EngineKind",
    "SharedState",
    "UniqueState",
    "derive_plates",
    # Cache
    "InterningCache",
    "SharedStateCache",
    "CacheEvent",
    "CacheEventKind",
    "CacheReport",
    "CacheStats",
    # Builders
    "CarBuilder",
    "CarVariant",
    "COMBUSTION",
    "ELECTRIC",
    "VARIANTS",
    "combustion_builder",
    "electric_builder",
    "get_variant",
    # Config
    "PoolSettings",
    # Errors
    "FleetPoolError",
    "UnknownSharedStateError",
    "UnknownVariantError",
    # Scenario
    "ScenarioResult",
    "run_reference_scenario",
]
