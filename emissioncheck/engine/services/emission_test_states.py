"""Concrete states of the emission test lifecycle."""

import bittensor as bt

from ..interfaces.emission_test_state import EmissionTestState
from ..models.emission_test import EmissionTestStatus
from ...utils.error_handling import ErrorMessages, log_and_raise_validation_error


class PendingState(EmissionTestState):
    """Test has been created but not started."""
    
    @property
    def status(self) -> EmissionTestStatus:
        return EmissionTestStatus.PENDING
    
    def handle(self, test, vehicle, legal_limit: float) -> None:
        bt.logging.info(f"Test for {test.vehicle_id} is now in progress.")
        test.set_state(InProgressState())


class InProgressState(EmissionTestState):
    """Measures the vehicle and decides compliance."""
    
    @property
    def status(self) -> EmissionTestStatus:
        return EmissionTestStatus.IN_PROGRESS
    
    def handle(self, test, vehicle, legal_limit: float) -> None:
        emission_level = vehicle.get_emission_level()
        if emission_level < 0:
            log_and_raise_validation_error(
                ErrorMessages.INVALID_EMISSION_LEVEL,
                data={'emission_level': emission_level},
                context_info={'vehicle_id': test.vehicle_id}
            )
        
        compliant = emission_level <= legal_limit
        test.compliance_status = compliant
        test.emission_level = emission_level
        test.set_state(CompletedState())
        
        bt.logging.info(
            f"Vehicle ID: {test.vehicle_id} | Emission Level: {emission_level:g} "
            f"| Compliance: {'Pass' if compliant else 'Fail'}"
        )


class CompletedState(EmissionTestState):
    """Terminal state. Further handling is a no-op."""
    
    @property
    def status(self) -> EmissionTestStatus:
        return EmissionTestStatus.COMPLETED
    
    def handle(self, test, vehicle, legal_limit: float) -> None:
        bt.logging.info(f"Test for {test.vehicle_id} is already completed.")
