"""Text menu over the accumulated test results and the vehicle list."""

from typing import Callable, List, Optional

import bittensor as bt

from ..engine.models.result_table import ResultTable
from ..engine.models.vehicle import Vehicle
from ..utils.error_handling import ErrorMessages
from ..utils.vehicle_ids import parse_vehicle_id

MENU_TEXT = (
    "\nMenu:\n"
    "1. View Test Results\n"
    "2. Check Vehicle Details\n"
    "3. Exit"
)

VIEW_RESULTS = 1
CHECK_VEHICLE = 2
EXIT = 3


class ConsoleMenu:
    """
    Interactive menu loop.
    
    Input and output are injectable so the loop can be driven from tests.
    """
    
    def __init__(
        self,
        vehicles: List[Vehicle],
        results: ResultTable,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None
    ):
        self.vehicles = vehicles
        self.results = results
        self._input = input_func or input
        self._output = output or print
    
    def run(self) -> int:
        """Serve the menu until the user exits. Returns the exit code."""
        while True:
            self._output(MENU_TEXT)
            try:
                raw_choice = self._input("Enter your choice: ")
            except EOFError:
                bt.logging.debug("End of input - exiting menu")
                return 0
            
            try:
                choice = int(raw_choice.strip())
            except ValueError:
                self._output(ErrorMessages.INVALID_CHOICE)
                continue
            
            if choice == VIEW_RESULTS:
                self.show_results()
            elif choice == CHECK_VEHICLE:
                try:
                    vehicle_id = self._input("\nEnter Vehicle ID to see details (e.g., Vehicle_1): ")
                except EOFError:
                    return 0
                self.show_vehicle(vehicle_id)
            elif choice == EXIT:
                return 0
            else:
                self._output(ErrorMessages.INVALID_CHOICE)
    
    def show_results(self):
        """Print every stored result as ``<id>: Pass|Fail``."""
        self._output("\nTest Results:")
        for vehicle_id, compliant in self.results.items():
            self._output(f"{vehicle_id}: {'Pass' if compliant else 'Fail'}")
    
    def show_vehicle(self, vehicle_id: str):
        """Print details for the vehicle named by ``vehicle_id``."""
        try:
            index = parse_vehicle_id(vehicle_id) - 1
        except ValueError as e:
            bt.logging.debug(f"Could not parse vehicle ID: {e}")
            self._output(ErrorMessages.INVALID_VEHICLE_ID)
            return
        
        if 0 <= index < len(self.vehicles):
            self.vehicles[index].display_details(output=self._output)
        else:
            self._output(ErrorMessages.INVALID_VEHICLE_ID)
