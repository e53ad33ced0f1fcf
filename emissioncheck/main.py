#!/usr/bin/env python3
"""
Vehicle emission testing console.

Tests the reference fleet concurrently, then serves an interactive menu
to view results or vehicle details.

Usage:
    emissioncheck [--debug | --trace]
"""

import argparse
import sys

import bittensor as bt

from emissioncheck.console.menu import ConsoleMenu
from emissioncheck.engine.orchestrator import EmissionTestOrchestrator
from emissioncheck.engine.services.fleet import build_default_fleet
from emissioncheck.utils.config import LEGAL_LIMIT, __version__


def main(argv=None) -> int:
    """Run the emission tests and the result menu."""
    parser = argparse.ArgumentParser(
        description="Simulate vehicle emission testing"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace logging"
    )
    args = parser.parse_args(argv)
    
    if args.trace:
        bt.logging.set_trace(True)
    elif args.debug:
        bt.logging.set_debug(True)
    
    bt.logging.info(f"🚗 Emission testing v{__version__}")
    
    vehicles = build_default_fleet()
    orchestrator = EmissionTestOrchestrator(legal_limit=LEGAL_LIMIT)
    results = orchestrator.run_tests(vehicles)
    
    try:
        return ConsoleMenu(vehicles, results).run()
    except KeyboardInterrupt:
        bt.logging.info("\nCancelled by user")
        return 0


if __name__ == "__main__":
    sys.exit(main())
