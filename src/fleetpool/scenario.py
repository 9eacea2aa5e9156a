"""Reference scenario: two batches of built cars plus one ad-hoc car.

Usage:
    result = run_reference_scenario()
    assert [r.size for r in result.reports] == [1, 2, 3]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fleetpool.builders import CarBuilder, combustion_builder, electric_builder
from fleetpool.cache import CacheReport, InterningCache, SharedStateCache
from fleetpool.config import PoolSettings
from fleetpool.core import Car

_logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScenarioResult:
    """Cars built by the scenario and the cache report after each phase."""

    cars: list[Car] = field(default_factory=list)
    reports: list[CacheReport] = field(default_factory=list)


def _build_batch(builder: CarBuilder, trip_computer: str, count: int) -> list[Car]:
    # No reset between builds: buffs and the autopilot toggle carry forward.
    cars = []
    for i in range(count):
        builder.add_buff(f"Buff {i}")
        builder.toggle_autopilot()
        builder.set_owner(f"Person {i}")
        builder.set_trip_computer(trip_computer)
        car = builder.build()
        _logger.info("%s", car)
        cars.append(car)
    return cars


def run_reference_scenario(
    cache: SharedStateCache | None = None,
    *,
    batch_size: int | None = None,
    settings: PoolSettings | None = None,
) -> ScenarioResult:
    """Run the reference driving sequence against a cache.

    Builds ``batch_size`` combustion cars, then as many electric cars, then
    one white Toyota Prius, reporting the cache after each phase.

    Args:
        cache: Cache to use (a new empty InterningCache if None).
        batch_size: Cars per batch, overrides ``settings.scenario_batch_size``.
        settings: Pool settings (defaults to ``PoolSettings()``).

    Returns:
        All built cars in build order and the three cache reports.
    """
    settings = settings if settings is not None else PoolSettings()
    if cache is None:
        cache = InterningCache(settings=settings)
    count = batch_size if batch_size is not None else settings.scenario_batch_size

    result = ScenarioResult()
    result.cars.extend(_build_batch(combustion_builder(cache), "CarPlay", count))
    result.reports.append(cache.report())

    result.cars.extend(_build_batch(electric_builder(cache), "Tesla", count))
    result.reports.append(cache.report())

    car = Car(cache, "Toyota", "Prius", "White")
    _logger.info("%s", car)
    result.cars.append(car)
    result.reports.append(cache.report())
    return result
