"""Run the reference scenario: ``python -m fleetpool``."""

from __future__ import annotations

import logging

from fleetpool.config import PoolSettings
from fleetpool.scenario import run_reference_scenario


def main() -> None:
    settings = PoolSettings()
    logging.basicConfig(level=settings.log_level.upper(), format="%(name)s: %(message)s")
    run_reference_scenario(settings=settings)


if __name__ == "__main__":
    main()
