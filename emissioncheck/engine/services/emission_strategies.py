"""Concrete emission strategies for gas and electric vehicles."""

from ..interfaces.emission_strategy import EmissionStrategy
from ...utils.config import GAS_EMISSION_FACTOR


class GasEmissionStrategy(EmissionStrategy):
    """Linear emission model based on engine size in cc."""
    
    def calculate(self, parameter: float) -> float:
        return parameter * GAS_EMISSION_FACTOR
    
    def __repr__(self) -> str:
        return "GasEmissionStrategy()"


class ElectricEmissionStrategy(EmissionStrategy):
    """Electric vehicles have zero tailpipe emissions."""
    
    def calculate(self, parameter: float) -> float:
        return 0.0
    
    def __repr__(self) -> str:
        return "ElectricEmissionStrategy()"
