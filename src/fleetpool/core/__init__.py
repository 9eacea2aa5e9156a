"""Core primitives: shared/unique state models and the Car entity.

Architecture Note:
    core/ holds the value types and the entity that composes them.
    Stateful services live in cache/ (interning) and builders/ (assembly).
"""

from fleetpool.core.entity import Car
from fleetpool.core.state import (
    DEFAULT_KEY_SEPARATOR,
    EngineKind,
    SharedState,
    UniqueState,
    derive_plates,
)

__all__ = [
    # State
    "DEFAULT_KEY_SEPARATOR",
    "EngineKind",
    "SharedState",
    "UniqueState",
    "derive_plates",
    # Entity
    "Car",
]
