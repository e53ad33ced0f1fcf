"""Reference fleet used by the console program."""

from typing import List

from ..models.vehicle import Vehicle, GasVehicle, ElectricVehicle
from .emission_strategies import GasEmissionStrategy, ElectricEmissionStrategy


def build_default_fleet() -> List[Vehicle]:
    """
    Build the three reference vehicles.
    
    One strategy instance is shared by all vehicles of the same type.
    """
    gas_strategy = GasEmissionStrategy()
    electric_strategy = ElectricEmissionStrategy()
    
    return [
        GasVehicle(age=5, emission_standard="BS6", strategy=gas_strategy, engine_size=2000.0),
        ElectricVehicle(age=2, emission_standard="EV", strategy=electric_strategy, battery_capacity=50.0),
        GasVehicle(age=10, emission_standard="BS4", strategy=gas_strategy, engine_size=1500.0),
    ]
