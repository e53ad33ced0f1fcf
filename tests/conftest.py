"""
Global pytest configuration and shared fixtures.

Provides the reference strategies, vehicles and a quiet logger so tests
run without console noise.
"""

import pytest

from emissioncheck.engine.models.result_table import ResultTable
from emissioncheck.engine.models.vehicle import GasVehicle, ElectricVehicle
from emissioncheck.engine.services.emission_strategies import (
    GasEmissionStrategy,
    ElectricEmissionStrategy,
)
from emissioncheck.engine.services.fleet import build_default_fleet


@pytest.fixture
def gas_strategy():
    return GasEmissionStrategy()


@pytest.fixture
def electric_strategy():
    return ElectricEmissionStrategy()


@pytest.fixture
def gas_vehicle(gas_strategy):
    """GasVehicle(age=5, BS6, 2000cc): emits 200, fails at 180."""
    return GasVehicle(age=5, emission_standard="BS6", strategy=gas_strategy, engine_size=2000.0)


@pytest.fixture
def electric_vehicle(electric_strategy):
    """ElectricVehicle(age=2, EV, 50kWh): emits 0, passes."""
    return ElectricVehicle(age=2, emission_standard="EV", strategy=electric_strategy, battery_capacity=50.0)


@pytest.fixture
def default_fleet():
    return build_default_fleet()


@pytest.fixture
def results():
    return ResultTable()


# Performance optimization: disable logging during tests unless explicitly enabled
@pytest.fixture(autouse=True)
def fast_logging():
    """
    Reduce logging verbosity during tests for better performance.
    """
    import logging
    import bittensor as bt
    
    # Set higher log level to reduce output during tests
    logging.getLogger().setLevel(logging.WARNING)
    bt.logging.set_debug(False)
    
    yield
    
    # Restore normal logging after tests
    logging.getLogger().setLevel(logging.INFO)
