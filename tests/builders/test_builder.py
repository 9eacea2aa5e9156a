"""Tests for CarBuilder and the variant registry."""

import pytest

from fleetpool.builders import (
    COMBUSTION,
    ELECTRIC,
    CarBuilder,
    CarVariant,
    VariantRegistry,
    combustion_builder,
    electric_builder,
    get_variant,
)
from fleetpool.core import EngineKind, UniqueState
from fleetpool.exceptions import UnknownVariantError


@pytest.fixture
def builder(cache):
    return combustion_builder(cache)


def test_build_uses_variant_identity(cache):
    car = electric_builder(cache).build()

    assert (car.shared.brand, car.shared.model, car.shared.color) == ("Tesla", "Model 3", "Black")
    assert car.unique.engine is EngineKind.ELECTRIC


def test_build_copies_accumulated_state(builder):
    builder.add_buff("Buff 0")
    builder.add_buff("Buff 1")
    builder.toggle_autopilot()
    builder.set_owner("Person 0")
    builder.set_trip_computer("CarPlay")

    car = builder.build()

    assert car.unique == UniqueState(
        owner="Person 0",
        plates="711",
        trip_computer="CarPlay",
        has_autopilot=True,
        engine=EngineKind.COMBUSTION,
        buffs=["Buff 0", "Buff 1"],
    )


def test_set_owner_derives_plates(builder):
    builder.set_owner("Person 0")

    assert builder.owner == "Person 0"
    assert builder.plates == "711"


def test_toggle_autopilot_starts_false(builder):
    assert builder.has_autopilot is False

    builder.toggle_autopilot()
    assert builder.has_autopilot is True

    builder.toggle_autopilot()
    assert builder.has_autopilot is False


def test_state_carries_across_builds_without_reset(builder):
    builder.add_buff("Buff 0")
    first = builder.build()
    builder.add_buff("Buff 1")
    second = builder.build()

    assert first.unique.buffs == ["Buff 0"]
    assert second.unique.buffs == ["Buff 0", "Buff 1"]


def test_built_car_buffs_are_independent_of_builder(builder):
    builder.add_buff("Buff 0")
    car = builder.build()

    builder.add_buff("Buff 1")
    builder.reset()

    assert car.unique.buffs == ["Buff 0"]


def test_reset_clears_state_but_keeps_variant(builder):
    builder.add_buff("Buff 0")
    builder.toggle_autopilot()
    builder.set_owner("Person 0")
    builder.set_trip_computer("CarPlay")

    builder.reset()
    car = builder.build()

    assert car.shared.brand == "Toyota"
    assert car.unique.engine is EngineKind.COMBUSTION
    assert car.unique.owner == ""
    assert car.unique.plates == ""
    assert car.unique.trip_computer == ""
    assert car.unique.buffs == []
    assert car.unique.has_autopilot is False


def test_builds_of_one_variant_share_state(cache, builder):
    cars = [builder.build() for _ in range(3)]

    assert all(car.shared is cars[0].shared for car in cars)
    assert cache.size() == 1
    assert cache.stats.hits == 2


def test_builders_share_cache(cache):
    combustion_builder(cache).build()
    electric_builder(cache).build()
    CarBuilder(cache, COMBUSTION).build()

    assert cache.size() == 2


def test_custom_variant(cache):
    hybrid = CarVariant(brand="Toyota", model="Prius", color="White", engine=EngineKind.COMBUSTION)

    car = CarBuilder(cache, hybrid).build()

    assert str(car.shared) == "[ Toyota , Prius , White ]"
    assert car.unique.engine is EngineKind.COMBUSTION


# Registry


def test_builtin_variants_registered():
    assert get_variant("combustion") is COMBUSTION
    assert get_variant("electric") is ELECTRIC


def test_unknown_variant_raises():
    with pytest.raises(UnknownVariantError) as exc_info:
        get_variant("diesel")

    assert isinstance(exc_info.value, KeyError)
    assert "combustion" in str(exc_info.value)


def test_registry_rejects_conflicting_name():
    registry = VariantRegistry()
    registry.register("main", COMBUSTION)
    registry.register("main", COMBUSTION)

    with pytest.raises(ValueError, match="already registered"):
        registry.register("main", ELECTRIC)

    assert list(registry) == ["main"]
    assert "main" in registry
