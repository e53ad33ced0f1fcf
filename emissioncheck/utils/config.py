import bittensor as bt

__version__ = "1.0.0"

# Legal emission limit every test is compared against
LEGAL_LIMIT = 180.0

# Gas emission formula: emission = engine size (cc) * factor
GAS_EMISSION_FACTOR = 0.1

# Vehicle IDs are assigned as Vehicle_1, Vehicle_2, ... in fleet order
VEHICLE_ID_PREFIX = "Vehicle_"

bt.logging.debug(f"LEGAL_LIMIT: {LEGAL_LIMIT}")
bt.logging.debug(f"GAS_EMISSION_FACTOR: {GAS_EMISSION_FACTOR}")
bt.logging.debug(f"VEHICLE_ID_PREFIX: {VEHICLE_ID_PREFIX}")
