"""Thread-safe table of emission test results."""

from threading import Lock
from typing import Dict, List, Optional, Tuple

from ...utils.vehicle_ids import vehicle_sort_key


class ResultTable:
    """
    Maps vehicle IDs to compliance results.
    
    Shared by all test workers. Entries are only ever inserted; every
    access goes through a single lock.
    """
    
    def __init__(self):
        self._results: Dict[str, bool] = {}
        self._lock = Lock()
    
    def record(self, vehicle_id: str, compliant: bool):
        """Store the result for a vehicle."""
        with self._lock:
            self._results[vehicle_id] = compliant
    
    def get(self, vehicle_id: str) -> Optional[bool]:
        """Get the result for a vehicle, or None if it was never recorded."""
        with self._lock:
            return self._results.get(vehicle_id)
    
    def items(self) -> List[Tuple[str, bool]]:
        """Snapshot of all results ordered by vehicle number."""
        with self._lock:
            snapshot = list(self._results.items())
        return sorted(snapshot, key=lambda item: vehicle_sort_key(item[0]))
    
    def passed_count(self) -> int:
        return sum(1 for _, compliant in self.items() if compliant)
    
    def failed_count(self) -> int:
        return sum(1 for _, compliant in self.items() if not compliant)
    
    def to_dict(self) -> Dict[str, bool]:
        """Convert to dictionary for serialization."""
        with self._lock:
            return dict(self._results)
    
    def __contains__(self, vehicle_id: str) -> bool:
        with self._lock:
            return vehicle_id in self._results
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
    
    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"ResultTable({len(self)} results)"
