"""Constants for relay classification."""

# Lowercase name fragments matched against decoded block extra_data
KNOWN_RELAY_FRAGMENTS = [
    "aestus",
    "agnostic",  # Agnostic Gnosis
    "bloxroute",  # Covers both max-profit and regulated
    "eden",  # Eden Network
    "flashbots",
    "manifold",
    "ultra",  # Ultra Sound
    "wenmerge",
    "titan",  # Titan Relay
]
