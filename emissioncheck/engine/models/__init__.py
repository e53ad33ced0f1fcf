"""Data models for the emission testing engine."""

from .vehicle import Vehicle, VehicleType, GasVehicle, ElectricVehicle
from .emission_test import EmissionTest, EmissionTestStatus
from .result_table import ResultTable

__all__ = [
    "Vehicle",
    "VehicleType",
    "GasVehicle",
    "ElectricVehicle",
    "EmissionTest",
    "EmissionTestStatus",
    "ResultTable",
]
