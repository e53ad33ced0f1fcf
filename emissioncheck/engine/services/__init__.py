"""Core services for the emission testing engine."""

from .emission_strategies import GasEmissionStrategy, ElectricEmissionStrategy
from .emission_test_states import PendingState, InProgressState, CompletedState
from .runner import run_test
from .fleet import build_default_fleet

__all__ = [
    "GasEmissionStrategy",
    "ElectricEmissionStrategy",
    "PendingState",
    "InProgressState",
    "CompletedState",
    "run_test",
    "build_default_fleet",
]
