"""MEV relay detection from block extra_data.

Classification is a best-effort heuristic: the hex-encoded extra_data is decoded,
lowercased and searched for known relay name fragments. Matching is by plain
substring, so unrelated extra_data containing a fragment is a false positive.
"""

import binascii

from eth_validator_api.data.relays.constants import KNOWN_RELAY_FRAGMENTS
from eth_validator_api.helpers.constants import MEV_RELAY_STATUS, VANILLA_BLOCK_STATUS
from eth_validator_api.helpers.logging import get_logger


logger = get_logger(__name__)


def decode_extra_data(extra_data: str | None) -> str | None:
    """Decode 0x-prefixed hex extra_data into lowercase text.

    Args:
        extra_data: Hex string of extra_data from the block

    Returns:
        Lowercased decoded text with invalid bytes as U+FFFD, or None if the
        hex cannot be decoded

    Example:
        >>> decode_extra_data("0x466c617368626f7473")
        'flashbots'
    """
    if not extra_data or len(extra_data) < 2:
        return None

    try:
        raw = binascii.unhexlify(extra_data[2:])
    except (binascii.Error, ValueError):
        return None

    return raw.decode("utf-8", errors="replace").lower()


class RelayClassifier:
    """Classifies blocks as relay-built or vanilla from extra_data."""

    def __init__(self, relay_fragments: list[str] | None = None) -> None:
        """Initialize classifier.

        Args:
            relay_fragments: Relay name fragments, defaults to KNOWN_RELAY_FRAGMENTS
        """
        fragments = (
            KNOWN_RELAY_FRAGMENTS if relay_fragments is None else relay_fragments
        )
        self.relay_fragments = [f.lower() for f in fragments if f]

    def matching_relay(self, extra_data: str | None) -> str | None:
        """Return the first relay fragment found in extra_data, if any."""
        decoded = decode_extra_data(extra_data)
        if decoded is None:
            logger.debug("Undecodable extra_data %r, treating as vanilla", extra_data)
            return None

        for fragment in self.relay_fragments:
            if fragment in decoded:
                return fragment
        return None

    def is_mev_block(self, extra_data: str | None) -> bool:
        """Check whether extra_data names a known MEV relay.

        Decoding failures count as non-MEV and are never raised.
        """
        return self.matching_relay(extra_data) is not None

    def classify(self, extra_data: str | None) -> str:
        """Return the block status label for extra_data."""
        return MEV_RELAY_STATUS if self.is_mev_block(extra_data) else VANILLA_BLOCK_STATUS


__all__ = ["RelayClassifier", "decode_extra_data"]
