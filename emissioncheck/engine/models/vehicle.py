"""Vehicle models that delegate emission calculation to a strategy."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List

from ..interfaces.emission_strategy import EmissionStrategy


class VehicleType(Enum):
    GAS = "Gas"
    ELECTRIC = "Electric"


def _format_number(value: float) -> str:
    """Shortest general form: 2000.0 -> '2000', 12.5 -> '12.5'."""
    return f"{value:g}"


@dataclass(frozen=True)
class Vehicle(ABC):
    """
    Base vehicle with identity fields and an attached emission strategy.
    
    Vehicles are immutable once built. The strategy is shared between
    vehicles of the same type.
    """
    age: int
    emission_standard: str
    strategy: EmissionStrategy
    
    vehicle_type: ClassVar[VehicleType]
    
    @property
    @abstractmethod
    def emission_parameter(self) -> float:
        """The value fed into the emission strategy."""
        pass
    
    @abstractmethod
    def _specific_details(self) -> str:
        """Type-specific detail line."""
        pass
    
    def get_emission_level(self) -> float:
        """Calculate this vehicle's emission level using its strategy."""
        return self.strategy.calculate(self.emission_parameter)
    
    def details(self) -> str:
        """Human-readable description, one field per line."""
        lines: List[str] = [
            f"Vehicle Type: {self.vehicle_type.value}",
            f"Age: {self.age}",
            f"Emission Standard: {self.emission_standard}",
            self._specific_details(),
        ]
        return "\n".join(lines)
    
    def display_details(self, output=print) -> None:
        """Print the vehicle details to the console."""
        output(self.details())


@dataclass(frozen=True)
class GasVehicle(Vehicle):
    engine_size: float = 0.0  # cc
    
    vehicle_type: ClassVar[VehicleType] = VehicleType.GAS
    
    @property
    def emission_parameter(self) -> float:
        return self.engine_size
    
    def _specific_details(self) -> str:
        return f"Engine Size: {_format_number(self.engine_size)} cc"


@dataclass(frozen=True)
class ElectricVehicle(Vehicle):
    battery_capacity: float = 0.0  # kWh
    
    vehicle_type: ClassVar[VehicleType] = VehicleType.ELECTRIC
    
    @property
    def emission_parameter(self) -> float:
        return self.battery_capacity
    
    def _specific_details(self) -> str:
        return f"Battery Capacity: {_format_number(self.battery_capacity)} kWh"
