"""Beacon node REST API client."""

from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from eth_validator_api.helpers.constants import (
    BLOCK_ENDPOINT,
    DEFAULT_TIMEOUT,
    HEADERS_ENDPOINT,
    SYNC_COMMITTEES_ENDPOINT,
    VALIDATOR_ENDPOINT,
    VALIDATORS_ENDPOINT,
)
from eth_validator_api.helpers.errors import ParseError
from eth_validator_api.helpers.http import fetch_json
from eth_validator_api.helpers.logging import get_logger
from eth_validator_api.helpers.models import (
    BeaconBlock,
    BeaconBlockMessage,
    Validator,
    ValidatorEntry,
)
from eth_validator_api.helpers.parsers import parse_decimal_int


logger = get_logger(__name__)

_validator_list = TypeAdapter(list[ValidatorEntry])


def _data(payload: dict[str, Any], what: str) -> Any:
    if "data" not in payload:
        msg = f"unexpected {what} response: missing 'data'"
        raise ParseError(msg)
    return payload["data"]


class BeaconClient:
    """Read-only client for the beacon node endpoints used by the API."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize beacon client.

        Args:
            base_url: Beacon node base URL
            timeout: Default timeout for requests in seconds

        Raises:
            ValueError: If base_url is empty or None
        """
        if not base_url:
            msg = "Beacon node URL cannot be empty"
            raise ValueError(msg)

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def _get(self, client: httpx.AsyncClient, path: str, what: str) -> Any:
        payload = await fetch_json(
            client, f"{self.base_url}{path}", what=what, timeout=self.timeout
        )
        return _data(payload, what)

    async def fetch_block(self, client: httpx.AsyncClient, slot: int) -> BeaconBlock:
        """Fetch the canonical block for a slot.

        Args:
            client: HTTP client instance
            slot: Beacon chain slot

        Returns:
            BeaconBlock

        Raises:
            NotFoundError: If no block exists for the slot
            TransportError: If the request fails
            ParseError: If the payload is malformed or has no execution payload
        """
        data = await self._get(client, BLOCK_ENDPOINT.format(slot=slot), "block data")

        try:
            message = BeaconBlockMessage.model_validate(data["message"])
        except (KeyError, TypeError, PydanticValidationError) as e:
            msg = f"malformed block data for slot {slot}"
            raise ParseError(msg) from e

        block = BeaconBlock.from_message(message)
        if block is None:
            msg = f"block at slot {slot} has no execution payload"
            raise ParseError(msg)
        return block

    async def fetch_validator(
        self, client: httpx.AsyncClient, index: int
    ) -> Validator:
        """Fetch a validator record at head.

        Raises:
            TransportError: If the request fails
            ParseError: If the payload is malformed
        """
        data = await self._get(
            client, VALIDATOR_ENDPOINT.format(index=index), "validator"
        )

        try:
            entry = ValidatorEntry.model_validate(data)
        except PydanticValidationError as e:
            msg = f"malformed validator record for index {index}"
            raise ParseError(msg) from e

        return Validator(
            index=index,
            effective_balance=parse_decimal_int(
                entry.validator.effective_balance, "effective balance"
            ),
        )

    async def fetch_validator_balance(
        self, client: httpx.AsyncClient, index: int
    ) -> int:
        """Fetch a validator's effective balance in Gwei."""
        validator = await self.fetch_validator(client, index)
        return validator.effective_balance

    async def fetch_total_stake(self, client: httpx.AsyncClient) -> int:
        """Sum effective balances across the full validator set at head.

        The validator list is large (over a million entries on mainnet), the
        timeout applies to the whole download.

        Returns:
            Total effective balance in Gwei

        Raises:
            TransportError: If the request fails
            ParseError: If any entry is malformed
        """
        data = await self._get(client, VALIDATORS_ENDPOINT, "validators")

        try:
            entries = _validator_list.validate_python(data)
        except PydanticValidationError as e:
            msg = "malformed validators list"
            raise ParseError(msg) from e

        total = sum(
            parse_decimal_int(entry.validator.effective_balance, "effective balance")
            for entry in entries
        )
        logger.debug("Total stake %d Gwei across %d validators", total, len(entries))
        return total

    async def fetch_head_slot(self, client: httpx.AsyncClient) -> int:
        """Fetch the slot of the current head header.

        Raises:
            TransportError: If the request fails
            ParseError: If the headers payload is malformed
        """
        data = await self._get(client, HEADERS_ENDPOINT, "headers")

        try:
            slot = data[0]["header"]["message"]["slot"]
        except (IndexError, KeyError, TypeError) as e:
            msg = "malformed headers response"
            raise ParseError(msg) from e
        return parse_decimal_int(slot, "head slot")

    async def fetch_sync_committee(
        self, client: httpx.AsyncClient, slot: int
    ) -> list[str]:
        """Fetch validators in the sync committee for the state at a slot.

        Raises:
            UpstreamStatusError: If the node answers with a non-success status
            TransportError: If the request fails
            ParseError: If the payload is malformed
        """
        data = await self._get(
            client, SYNC_COMMITTEES_ENDPOINT.format(slot=slot), "sync committee"
        )

        validators = data.get("validators") if isinstance(data, dict) else None
        if not isinstance(validators, list):
            msg = "malformed sync committee response"
            raise ParseError(msg)
        return [str(v) for v in validators]


__all__ = ["BeaconClient"]
