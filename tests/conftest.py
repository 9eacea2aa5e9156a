"""Shared test fixtures."""

import logging

import pytest

from fleetpool import InterningCache, PoolSettings, SharedState


@pytest.fixture
def settings():
    """Default settings, ignoring any .env file."""
    return PoolSettings(_env_file=None)


@pytest.fixture
def cache(settings):
    """Fresh empty InterningCache."""
    return InterningCache(settings=settings)


@pytest.fixture
def prado():
    return SharedState(brand="Toyota", model="Land Cruiser Prado", color="Red")


@pytest.fixture
def tesla():
    return SharedState(brand="Tesla", model="Model 3", color="Black")


@pytest.fixture
def cache_log(caplog):
    """caplog capturing INFO from the interning cache."""
    caplog.set_level(logging.INFO, logger="fleetpool.cache.interning")
    return caplog
