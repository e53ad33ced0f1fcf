"""Abstract interface for emission calculation strategies."""

from abc import ABC, abstractmethod


class EmissionStrategy(ABC):
    """Abstract interface for emission calculation strategies."""
    
    @abstractmethod
    def calculate(self, parameter: float) -> float:
        """Calculate an emission level from a vehicle-specific parameter."""
        pass
