"""Runs emission tests for a fleet concurrently, one thread per vehicle."""

import threading
from typing import List, Optional

import bittensor as bt

from .models.result_table import ResultTable
from .models.vehicle import Vehicle
from .services.runner import run_test
from ..utils.config import LEGAL_LIMIT
from ..utils.vehicle_ids import format_vehicle_id


class EmissionTestOrchestrator:
    """Coordinates the emission test run for a whole fleet."""

    def __init__(
        self,
        legal_limit: float = LEGAL_LIMIT,
        results: Optional[ResultTable] = None
    ):
        self.legal_limit = legal_limit
        self.results = results if results is not None else ResultTable()

    def run_tests(self, vehicles: List[Vehicle]) -> ResultTable:
        """
        Test every vehicle in parallel and wait for all of them.

        Vehicles are assigned IDs Vehicle_1..Vehicle_n in list order.
        Each vehicle gets its own thread; every thread is started before
        any is joined.

        Returns:
            The shared result table
        """
        if not vehicles:
            bt.logging.warning("No vehicles to test")
            return self.results

        bt.logging.info(
            f"Testing {len(vehicles)} vehicles against legal limit {self.legal_limit:g}"
        )

        threads = [
            threading.Thread(
                target=run_test,
                args=(vehicle, format_vehicle_id(number), self.legal_limit, self.results),
                name=f"emission-test-{format_vehicle_id(number)}"
            )
            for number, vehicle in enumerate(vehicles, 1)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        bt.logging.info(
            f"✅ Emission tests complete: {self.results.passed_count()} passed, "
            f"{self.results.failed_count()} failed, "
            f"{len(vehicles) - len(self.results)} errored"
        )
        return self.results
