"""Helpers for building and parsing vehicle IDs (Vehicle_1, Vehicle_2, ...)."""

from .config import VEHICLE_ID_PREFIX


def format_vehicle_id(number: int) -> str:
    """Return the ID for the vehicle at 1-based position ``number``."""
    return f"{VEHICLE_ID_PREFIX}{number}"


def parse_vehicle_id(vehicle_id: str) -> int:
    """
    Parse the numeric suffix of a vehicle ID.
    
    Args:
        vehicle_id: ID of the form ``Vehicle_<n>``
        
    Returns:
        The 1-based vehicle number ``n``
        
    Raises:
        ValueError: If the prefix is missing or the suffix is not an integer
    """
    text = vehicle_id.strip()
    if not text.startswith(VEHICLE_ID_PREFIX):
        raise ValueError(f"Vehicle ID must start with {VEHICLE_ID_PREFIX!r}: {vehicle_id!r}")
    
    suffix = text[len(VEHICLE_ID_PREFIX):]
    if not suffix.isdigit():
        raise ValueError(f"Vehicle ID has a non-numeric suffix: {vehicle_id!r}")
    return int(suffix)


def vehicle_sort_key(vehicle_id: str):
    """Sort key ordering IDs by vehicle number, unparsable IDs last."""
    try:
        return (0, parse_vehicle_id(vehicle_id), vehicle_id)
    except ValueError:
        return (1, 0, vehicle_id)
