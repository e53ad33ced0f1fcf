"""Core interfaces for the emission testing engine."""

from .emission_strategy import EmissionStrategy
from .emission_test_state import EmissionTestState

__all__ = [
    "EmissionStrategy",
    "EmissionTestState",
]
