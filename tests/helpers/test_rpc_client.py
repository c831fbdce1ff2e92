"""Tests for RPC client."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from eth_validator_api.helpers.errors import NotFoundError, ParseError, TransportError
from eth_validator_api.helpers.models import ExecutionBlock
from eth_validator_api.helpers.rpc import RPCClient
from eth_validator_api.helpers.rpc_models import JsonRpcRequest


def _mock_client(body: Any) -> AsyncMock:
    mock_http_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = MagicMock()
    mock_response.is_success = True
    mock_response.json.return_value = body
    mock_http_client.post.return_value = mock_response
    return mock_http_client


class TestRPCClient:
    """Tests for RPCClient class."""

    def test_init_with_valid_url(self) -> None:
        """Test RPCClient initialization with valid URL."""
        client = RPCClient("https://eth.llamarpc.com")

        assert client.rpc_url == "https://eth.llamarpc.com"
        assert client.timeout == 30.0

    def test_init_with_custom_timeout(self) -> None:
        client = RPCClient("https://eth.llamarpc.com", timeout=60.0)

        assert client.timeout == 60.0

    def test_init_with_empty_url_raises(self) -> None:
        with pytest.raises(ValueError, match="RPC URL cannot be empty"):
            RPCClient("")

    @pytest.mark.asyncio
    async def test_send_request(self) -> None:
        """Test sending a single JSON-RPC request."""
        client = RPCClient("https://test.rpc")
        mock_http_client = _mock_client({"jsonrpc": "2.0", "id": 1, "result": "0x1000"})

        result = await client.send(
            mock_http_client, JsonRpcRequest(method="eth_blockNumber", id=1)
        )

        assert result == "0x1000"
        mock_http_client.post.assert_called_once()
        call_args = mock_http_client.post.call_args
        assert call_args.args[0] == "https://test.rpc"
        assert call_args.kwargs["json"] == {
            "jsonrpc": "2.0",
            "method": "eth_blockNumber",
            "params": [],
            "id": 1,
        }
        assert call_args.kwargs["timeout"] == 30.0

    @pytest.mark.asyncio
    async def test_send_timeout_override(self) -> None:
        client = RPCClient("https://test.rpc")
        mock_http_client = _mock_client({"jsonrpc": "2.0", "id": 1, "result": "0x1"})

        await client.send(
            mock_http_client,
            JsonRpcRequest(method="eth_blockNumber", id=1),
            timeout=2.5,
        )

        assert mock_http_client.post.call_args.kwargs["timeout"] == 2.5

    @pytest.mark.asyncio
    async def test_get_block_with_rpc_error(self) -> None:
        """Test RPC response that carries an error object."""
        client = RPCClient("https://test.rpc")
        mock_http_client = _mock_client(
            {
                "jsonrpc": "2.0",
                "id": 1,
                "error": {"code": -32000, "message": "header not found"},
            }
        )

        with pytest.raises(TransportError, match="RPC error: header not found"):
            await client.get_block_by_number(mock_http_client, 5)

    @pytest.mark.asyncio
    async def test_get_block_with_non_success_status(self) -> None:
        client = RPCClient("https://test.rpc")
        mock_http_client = AsyncMock(spec=httpx.AsyncClient)
        mock_response = MagicMock()
        mock_response.is_success = False
        mock_response.status_code = 502
        mock_response.text = "Bad Gateway"
        mock_http_client.post.return_value = mock_response

        with pytest.raises(TransportError, match="status code: 502"):
            await client.get_block_by_number(mock_http_client, 5)

    @pytest.mark.asyncio
    async def test_send_rejects_non_rpc_body(self) -> None:
        client = RPCClient("https://test.rpc")
        mock_http_client = _mock_client({"jsonrpc": "2.0", "id": 1, "error": "oops"})

        with pytest.raises(ParseError, match="malformed eth_blockNumber response"):
            await client.send(
                mock_http_client, JsonRpcRequest(method="eth_blockNumber", id=1)
            )

    @pytest.mark.asyncio
    async def test_get_block_by_number_requests_full_transactions(
        self, mev_execution_block: dict[str, Any]
    ) -> None:
        client = RPCClient("https://test.rpc")
        mock_http_client = _mock_client(
            {"jsonrpc": "2.0", "id": 1, "result": mev_execution_block}
        )

        block = await client.get_block_by_number(mock_http_client, 20_000_000)

        payload = mock_http_client.post.call_args.kwargs["json"]
        assert payload["method"] == "eth_getBlockByNumber"
        assert payload["params"] == ["0x1312d00", True]
        assert isinstance(block, ExecutionBlock)
        assert block.base_fee_per_gas == "0x2540be400"
        assert len(block.transactions) == 3
        assert block.transactions[1].max_priority_fee_per_gas is None

    @pytest.mark.asyncio
    async def test_get_block_by_number_null_result(self) -> None:
        client = RPCClient("https://test.rpc")
        mock_http_client = _mock_client({"jsonrpc": "2.0", "id": 1, "result": None})

        with pytest.raises(NotFoundError, match="execution block 5 not found"):
            await client.get_block_by_number(mock_http_client, 5)

    @pytest.mark.asyncio
    async def test_get_block_by_number_hash_only_transactions(self) -> None:
        """Hash-only transaction lists cannot be used for fee arithmetic."""
        client = RPCClient("https://test.rpc")
        mock_http_client = _mock_client(
            {
                "jsonrpc": "2.0",
                "id": 1,
                "result": {"baseFeePerGas": "0x1", "transactions": ["0xabc"]},
            }
        )

        with pytest.raises(ParseError, match="malformed execution block"):
            await client.get_block_by_number(mock_http_client, 5)

    @pytest.mark.asyncio
    async def test_timeout_surfaces_as_transport_error(self) -> None:
        client = RPCClient("https://test.rpc", timeout=1.0)
        mock_http_client = AsyncMock(spec=httpx.AsyncClient)
        mock_http_client.post.side_effect = httpx.ReadTimeout("Timeout")

        with pytest.raises(TransportError, match="timed out"):
            await client.get_block_by_number(mock_http_client, 5)
