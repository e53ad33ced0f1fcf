"""
Failure reporting for emission tests.

Test handlers reject bad measurements and illegal state changes through
these helpers, so every failure is logged once through ``bt.logging``
before the exception reaches the per-vehicle worker boundary.
"""

import bittensor as bt
from typing import Any, Dict, Optional

MAX_LOGGED_VALUE_LENGTH = 200


def log_and_raise_validation_error(
    message: str,
    data: Optional[Dict[str, Any]] = None,
    context_info: Optional[Dict[str, Any]] = None
) -> None:
    """
    Report a rejected measurement and raise ValueError.
    
    Args:
        message: What was rejected, e.g. ``ErrorMessages.INVALID_EMISSION_LEVEL``
        data: Offending values (long reprs are shortened in the log)
        context_info: Where it happened, e.g. ``{'vehicle_id': 'Vehicle_1'}``
        
    Raises:
        ValueError: Carrying ``message`` unchanged
    """
    logged_values = str(data) if data else None
    if logged_values and len(logged_values) > MAX_LOGGED_VALUE_LENGTH:
        logged_values = logged_values[:MAX_LOGGED_VALUE_LENGTH] + "..."
    
    where = ", ".join(f"{k}={v}" for k, v in (context_info or {}).items())
    bt.logging.error(
        f"Rejected measurement ({where or 'no context'}): {message}",
        extra={'values': logged_values}
    )
    
    raise ValueError(message)


def log_and_raise_transition_error(
    vehicle_id: str,
    current_status: Any,
    requested_status: Any
) -> None:
    """
    Log an illegal test state transition and raise RuntimeError.
    
    Args:
        vehicle_id: Vehicle whose test attempted the transition
        current_status: Status the test is currently in
        requested_status: Status the test was asked to move to
        
    Raises:
        RuntimeError: Always raises with formatted message
    """
    bt.logging.error(
        f"Illegal transition for {vehicle_id}: {current_status} -> {requested_status}",
        extra={
            'vehicle_id': vehicle_id,
            'current_status': str(current_status),
            'requested_status': str(requested_status)
        }
    )
    raise RuntimeError(
        f"Test for {vehicle_id} cannot move from {current_status} to {requested_status}"
    )


class ErrorMessages:
    """User-facing messages shared by the test handlers and the menu."""
    
    # Test errors
    INVALID_EMISSION_LEVEL = "Invalid emission level."
    
    # Menu errors
    INVALID_VEHICLE_ID = "Invalid Vehicle ID."
    INVALID_CHOICE = "Invalid choice. Please try again."
