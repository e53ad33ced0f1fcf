"""Runs a single emission test and records its result."""

from typing import Optional

import bittensor as bt

from ..models.emission_test import EmissionTest
from ..models.result_table import ResultTable
from ..models.vehicle import Vehicle
from .emission_test_states import PendingState


def run_test(
    vehicle: Vehicle,
    vehicle_id: str,
    legal_limit: float,
    results: ResultTable
) -> Optional[bool]:
    """
    Run one emission test from Pending to Completed and store the result.
    
    Errors are logged per vehicle and never propagate; a failed vehicle
    is simply left out of the result table.
    
    Args:
        vehicle: Vehicle under test
        vehicle_id: ID the result is stored under
        legal_limit: Maximum emission level that still passes
        results: Shared result table
        
    Returns:
        The compliance status, or None if the test failed
    """
    try:
        test = EmissionTest(vehicle_id, PendingState())
        compliant = test.perform_test(vehicle, legal_limit)
        
        results.record(vehicle_id, compliant)
        return compliant
        
    except ValueError as e:
        bt.logging.error(f"Invalid argument for Vehicle ID {vehicle_id}: {e}")
    except Exception as e:
        bt.logging.error(f"Error for Vehicle ID {vehicle_id}: {e}")
    return None
