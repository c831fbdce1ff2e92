"""Ethereum JSON-RPC client utilities."""

from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from eth_validator_api.helpers.constants import DEFAULT_TIMEOUT
from eth_validator_api.helpers.errors import NotFoundError, ParseError, TransportError
from eth_validator_api.helpers.http import post_json
from eth_validator_api.helpers.logging import get_logger
from eth_validator_api.helpers.models import ExecutionBlock
from eth_validator_api.helpers.rpc_models import (
    EthGetBlockByNumberRequest,
    JsonRpcRequest,
    JsonRpcResponse,
)


logger = get_logger(__name__)


class RPCClient:
    """Ethereum JSON-RPC client."""

    def __init__(self, rpc_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize RPC client.

        Args:
            rpc_url: Ethereum JSON-RPC endpoint URL
            timeout: Default timeout for requests in seconds

        Raises:
            ValueError: If rpc_url is empty or None
        """
        if not rpc_url:
            msg = "RPC URL cannot be empty"
            raise ValueError(msg)

        self.rpc_url = rpc_url
        self.timeout = timeout

    async def send(
        self,
        client: httpx.AsyncClient,
        request: JsonRpcRequest,
        *,
        timeout: float | None = None,
    ) -> Any:
        """Send a JSON-RPC request and return its result.

        Args:
            client: HTTP client instance
            request: Request model
            timeout: Optional timeout override

        Returns:
            RPC result value

        Raises:
            TransportError: If the HTTP request fails or the response has an error
            ParseError: If the response is not a JSON-RPC response
        """
        data = await post_json(
            client,
            self.rpc_url,
            request.model_dump(),
            what=request.method,
            timeout=timeout or self.timeout,
        )

        try:
            response = JsonRpcResponse.model_validate(data)
        except PydanticValidationError as e:
            msg = f"malformed {request.method} response: {e.error_count()} errors"
            raise ParseError(msg) from e

        if response.error is not None:
            msg = f"RPC error: {response.error.message} (code {response.error.code})"
            raise TransportError(msg)

        return response.result

    async def get_block_by_number(
        self,
        client: httpx.AsyncClient,
        block_number: int,
    ) -> ExecutionBlock:
        """Fetch an execution block with full transaction objects.

        Args:
            client: HTTP client instance
            block_number: Execution block number

        Returns:
            ExecutionBlock

        Raises:
            NotFoundError: If the node returns a null block
            ParseError: If the block payload is malformed

        Example:
            ```python
            rpc = RPCClient(rpc_url)
            async with create_http_client() as client:
                block = await rpc.get_block_by_number(client, 20_000_000)
            ```
        """
        request = EthGetBlockByNumberRequest.for_block(block_number)
        result = await self.send(client, request)

        if result is None:
            msg = f"execution block {block_number} not found"
            raise NotFoundError(msg)

        try:
            block = ExecutionBlock.model_validate(result)
        except PydanticValidationError as e:
            msg = f"malformed execution block {block_number}: {e.error_count()} errors"
            raise ParseError(msg) from e

        logger.debug(
            "Fetched execution block %d with %d transactions",
            block_number,
            len(block.transactions),
        )
        return block


__all__ = [
    "RPCClient",
]
