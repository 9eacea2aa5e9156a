"""Exception hierarchy for fleetpool.

Interning itself never fails; these cover lookups by name or key.
"""

from __future__ import annotations


class FleetPoolError(Exception):
    """Base exception for all fleetpool errors."""


class UnknownSharedStateError(FleetPoolError, KeyError):
    """No stored shared state has the requested string key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"No shared state stored under key {self.key!r}"


class UnknownVariantError(FleetPoolError, KeyError):
    """No car variant is registered under the requested name."""

    def __init__(self, name: str, known: tuple[str, ...] = ()) -> None:
        self.name = name
        self.known = known
        super().__init__(name)

    def __str__(self) -> str:
        if self.known:
            return f"Unknown car variant {self.name!r} (known: {', '.join(self.known)})"
        return f"Unknown car variant {self.name!r}"
