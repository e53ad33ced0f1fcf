"""Shared utilities: configuration, error handling and vehicle ID helpers."""

from .error_handling import (
    ErrorMessages,
    log_and_raise_validation_error,
    log_and_raise_transition_error,
)
from .vehicle_ids import format_vehicle_id, parse_vehicle_id

__all__ = [
    "ErrorMessages",
    "log_and_raise_validation_error",
    "log_and_raise_transition_error",
    "format_vehicle_id",
    "parse_vehicle_id",
]
