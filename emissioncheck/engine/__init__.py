"""
Emission testing engine.

This module provides the vehicle models, pluggable emission strategies,
the emission test state machine and the concurrent test orchestrator.
"""

from .orchestrator import EmissionTestOrchestrator

__all__ = [
    "EmissionTestOrchestrator",
]
