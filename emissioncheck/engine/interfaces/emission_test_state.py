"""Abstract interface for emission test states."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.emission_test import EmissionTest, EmissionTestStatus
    from ..models.vehicle import Vehicle


class EmissionTestState(ABC):
    """
    One step of the emission test lifecycle.
    
    Each handler either moves the test forward to its next state or,
    for the terminal state, leaves it where it is.
    """
    
    @property
    @abstractmethod
    def status(self) -> "EmissionTestStatus":
        """Return the status this state represents."""
        pass
    
    @abstractmethod
    def handle(
        self,
        test: "EmissionTest",
        vehicle: "Vehicle",
        legal_limit: float
    ) -> None:
        """
        Handle the test while it is in this state.
        
        Args:
            test: The test being driven
            vehicle: Vehicle under test
            legal_limit: Maximum emission level that still passes
        """
        pass
