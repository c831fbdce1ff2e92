"""Sync committee duties lookup proxied from the beacon node."""

from collections.abc import Callable

import httpx

from eth_validator_api.data.duties.models import SyncDuties
from eth_validator_api.helpers.beacon import BeaconClient
from eth_validator_api.helpers.constants import DEFAULT_TIMEOUT
from eth_validator_api.helpers.errors import (
    ParseError,
    SyncDutiesError,
    TransportError,
    UpstreamStatusError,
    ValidatorAPIError,
)
from eth_validator_api.helpers.http import create_http_client
from eth_validator_api.helpers.logging import get_logger
from eth_validator_api.helpers.parsers import parse_slot


logger = get_logger(__name__)

UPSTREAM_STATUS_MESSAGES = {
    404: "Slot not found or no duties available",
    500: "Unexpected server error",
}
"""Messages for proxied upstream statuses"""

DEFAULT_UPSTREAM_MESSAGE = "Upstream request failed"


class SyncDutiesService:
    """Looks up sync committee membership for a slot."""

    def __init__(
        self,
        beacon: BeaconClient,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self.beacon = beacon
        self.client_factory = client_factory or (
            lambda: create_http_client(timeout=DEFAULT_TIMEOUT)
        )

    async def get_duties(self, slot_param: str | int) -> SyncDuties:
        """Get sync committee validators for a slot.

        Args:
            slot_param: Raw slot parameter

        Returns:
            SyncDuties for the slot

        Raises:
            ValidationError: If the slot is invalid
            SyncDutiesError: If the slot is beyond head or the lookup fails
        """
        slot = parse_slot(slot_param)

        async with self.client_factory() as client:
            try:
                head_slot = await self.beacon.fetch_head_slot(client)
            except ValidatorAPIError as e:
                logger.warning("Failed to fetch latest slot: %s", e.message)
                msg = "Failed to fetch latest slot"
                raise SyncDutiesError(msg) from e

            if slot > head_slot:
                msg = "Requested slot is too far in the future to have duties available"
                raise SyncDutiesError(msg, status_code=400)

            try:
                validators = await self.beacon.fetch_sync_committee(client, slot)
            except UpstreamStatusError as e:
                status = e.upstream_status
                msg = UPSTREAM_STATUS_MESSAGES.get(status, DEFAULT_UPSTREAM_MESSAGE)
                raise SyncDutiesError(msg, status_code=status) from e
            except TransportError as e:
                msg = "Failed to fetch data"
                raise SyncDutiesError(msg) from e
            except ParseError as e:
                msg = "Failed to parse response"
                raise SyncDutiesError(msg) from e

        logger.info("Slot %d has %d sync committee validators", slot, len(validators))
        return SyncDuties(slot=slot, validators=validators)


__all__ = ["SyncDutiesService"]
