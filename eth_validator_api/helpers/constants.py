"""Common configuration constants used across the application."""

# HTTP and Network Constants
DEFAULT_TIMEOUT = 30.0
"""Default per-call upstream timeout in seconds"""

DEFAULT_API_HOST = "0.0.0.0"  # noqa: S104
"""Default bind address for the HTTP server"""

DEFAULT_API_PORT = 8080
"""Default port for the HTTP server"""

# Beacon node REST endpoints
BLOCK_ENDPOINT = "/eth/v2/beacon/blocks/{slot}"
"""Signed beacon block by slot"""

VALIDATOR_ENDPOINT = "/eth/v1/beacon/states/head/validators/{index}"
"""Single validator record at head"""

VALIDATORS_ENDPOINT = "/eth/v1/beacon/states/head/validators"
"""Full validator set at head (large response)"""

HEADERS_ENDPOINT = "/eth/v1/beacon/headers"
"""Beacon block headers, first entry is the head"""

SYNC_COMMITTEES_ENDPOINT = "/eth/v1/beacon/states/{slot}/sync_committees"
"""Sync committee membership for the state at a slot"""

# Reward economics
BASE_REWARD_FACTOR = 64
"""Protocol base reward factor"""

MAX_EFFECTIVE_BALANCE_GWEI = 32_000_000_000
"""Effective balance cap (32 ETH) in Gwei"""

GWEI_PER_ETH = 1e9
"""Divisor applied to the combined reward before formatting"""

REWARD_DECIMALS = 3
"""Number of decimals in the formatted reward"""

MAX_UINT64 = 2**64 - 1
"""Largest value accepted when parsing hex quantities"""

# Block classification labels
MEV_RELAY_STATUS = "MEV Relay"
VANILLA_BLOCK_STATUS = "Vanilla Block"


__all__ = [
    "BASE_REWARD_FACTOR",
    "BLOCK_ENDPOINT",
    "DEFAULT_API_HOST",
    "DEFAULT_API_PORT",
    "DEFAULT_TIMEOUT",
    "GWEI_PER_ETH",
    "HEADERS_ENDPOINT",
    "MAX_EFFECTIVE_BALANCE_GWEI",
    "MAX_UINT64",
    "MEV_RELAY_STATUS",
    "REWARD_DECIMALS",
    "SYNC_COMMITTEES_ENDPOINT",
    "VALIDATORS_ENDPOINT",
    "VALIDATOR_ENDPOINT",
    "VANILLA_BLOCK_STATUS",
]
