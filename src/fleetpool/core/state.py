"""State models: the shared (interned) and unique (per-car) halves of a car.

Usage:
    shared = SharedState(brand="Toyota", model="Prius", color="White")
    unique = UniqueState(owner="Person 0", plates=derive_plates("Person 0"))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

DEFAULT_KEY_SEPARATOR = " - "


class EngineKind(Enum):
    """Drivetrain of a car."""

    ELECTRIC = auto()
    COMBUSTION = auto()


@dataclass(frozen=True, slots=True)
class SharedState:
    """Immutable attribute bundle shared by every car of the same make.

    Equality and hashing cover all three fields, exact and case-sensitive.
    Empty strings are valid values.
    """

    brand: str
    model: str
    color: str

    def key(self, separator: str = DEFAULT_KEY_SEPARATOR) -> str:
        """Build the string cache key for this state.

        Args:
            separator: Text placed between brand, model and color.

        Returns:
            ``brand + separator + model + separator + color``.
        """
        return separator.join((self.brand, self.model, self.color))

    def __str__(self) -> str:
        return f"[ {self.brand} , {self.model} , {self.color} ]"


@dataclass(slots=True)
class UniqueState:
    """Per-car attributes. Never deduplicated."""

    owner: str = ""
    plates: str = ""
    trip_computer: str = ""
    has_autopilot: bool = False
    engine: EngineKind | None = None
    buffs: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"[ {self.owner} , {self.plates} ]"


def derive_plates(owner: str) -> str:
    """Derive license plates from an owner name.

    Plates are the decimal sum of the UTF-8 byte values of ``owner``,
    e.g. ``derive_plates("Person 0") == "711"``.
    """
    return str(sum(owner.encode("utf-8")))
