"""Essential tests for the single-vehicle test runner."""

from unittest.mock import Mock, patch

import pytest

from emissioncheck.engine.interfaces.emission_strategy import EmissionStrategy
from emissioncheck.engine.models.vehicle import GasVehicle
from emissioncheck.engine.services.runner import run_test


class NegativeEmissionStrategy(EmissionStrategy):
    def calculate(self, parameter: float) -> float:
        return -parameter


class BrokenStrategy(EmissionStrategy):
    def calculate(self, parameter: float) -> float:
        raise ZeroDivisionError("sensor offline")


class TestRunTest:
    """Test running and recording one vehicle."""
    
    def test_records_fail(self, gas_vehicle, results):
        """Should store False for a vehicle over the limit."""
        compliant = run_test(gas_vehicle, "Vehicle_1", 180.0, results)
        
        assert compliant is False
        assert results.to_dict() == {"Vehicle_1": False}
    
    def test_records_pass(self, electric_vehicle, results):
        """Should store True for a vehicle under the limit."""
        compliant = run_test(electric_vehicle, "Vehicle_2", 180.0, results)
        
        assert compliant is True
        assert results.to_dict() == {"Vehicle_2": True}
    
    def test_negative_emission_is_not_recorded(self, results):
        """Should log the invalid argument and leave the table untouched."""
        vehicle = GasVehicle(age=1, emission_standard="X", strategy=NegativeEmissionStrategy(), engine_size=10.0)
        
        with patch('emissioncheck.engine.services.runner.bt') as mock_bt:
            compliant = run_test(vehicle, "Vehicle_9", 180.0, results)
        
        assert compliant is None
        assert "Vehicle_9" not in results
        message = mock_bt.logging.error.call_args[0][0]
        assert message.startswith("Invalid argument for Vehicle ID Vehicle_9")
        assert "Invalid emission level." in message
    
    def test_unexpected_error_is_not_recorded(self, results):
        """Should catch any other error generically."""
        vehicle = GasVehicle(age=1, emission_standard="X", strategy=BrokenStrategy(), engine_size=10.0)
        
        with patch('emissioncheck.engine.services.runner.bt') as mock_bt:
            compliant = run_test(vehicle, "Vehicle_4", 180.0, results)
        
        assert compliant is None
        assert len(results) == 0
        message = mock_bt.logging.error.call_args[0][0]
        assert message == "Error for Vehicle ID Vehicle_4: sensor offline"
    
    def test_uses_given_limit(self, gas_vehicle, results):
        """A higher limit lets the same vehicle pass."""
        assert run_test(gas_vehicle, "Vehicle_1", 250.0, results) is True
    
    def test_uses_vehicle_strategy(self, results):
        """Emission comes from the vehicle's own strategy."""
        strategy = Mock(spec=EmissionStrategy)
        strategy.calculate.return_value = 42.0
        vehicle = GasVehicle(age=1, emission_standard="X", strategy=strategy, engine_size=1000.0)
        
        assert run_test(vehicle, "Vehicle_1", 180.0, results) is True
        strategy.calculate.assert_called_once_with(1000.0)
