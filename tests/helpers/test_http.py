"""Tests for HTTP helpers and upstream error mapping."""

import httpx
import pytest
from pytest_httpx import HTTPXMock

from eth_validator_api.helpers.errors import (
    NotFoundError,
    ParseError,
    TransportError,
    UpstreamStatusError,
)
from eth_validator_api.helpers.http import create_http_client, fetch_json, post_json


class TestCreateHttpClient:
    """Tests for create_http_client."""

    @pytest.mark.asyncio
    async def test_creates_async_client_with_timeout(self) -> None:
        async with create_http_client(timeout=5.0) as client:
            assert isinstance(client, httpx.AsyncClient)
            assert client.timeout.read == 5.0


class TestFetchJson:
    """Tests for fetch_json."""

    @pytest.mark.asyncio
    async def test_fetch_json_success(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url="https://api.example.com/data",
            json={"data": {"count": 42}},
        )

        async with httpx.AsyncClient() as client:
            result = await fetch_json(client, "https://api.example.com/data")

        assert result == {"data": {"count": 42}}

    @pytest.mark.asyncio
    async def test_fetch_json_404_raises_not_found(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url="https://api.example.com/missing", status_code=404)

        async with httpx.AsyncClient() as client:
            with pytest.raises(NotFoundError) as exc_info:
                await fetch_json(client, "https://api.example.com/missing", what="block")

        assert exc_info.value.upstream_status == 404
        assert "failed to fetch block, status code: 404" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_fetch_json_500_raises_upstream_status(
        self, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            url="https://api.example.com/error",
            status_code=503,
            text="Service Unavailable",
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(UpstreamStatusError) as exc_info:
                await fetch_json(client, "https://api.example.com/error")

        assert not isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.upstream_status == 503
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_fetch_json_timeout_raises_transport_error(
        self, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_exception(
            httpx.ReadTimeout("Timeout"), url="https://api.example.com/slow"
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(TransportError, match="timed out fetching headers"):
                await fetch_json(client, "https://api.example.com/slow", what="headers")

    @pytest.mark.asyncio
    async def test_fetch_json_connect_error(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_exception(
            httpx.ConnectError("refused"), url="https://api.example.com/down"
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(TransportError, match="refused"):
                await fetch_json(client, "https://api.example.com/down")

    @pytest.mark.asyncio
    async def test_fetch_json_malformed_body(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url="https://api.example.com/bad", text="not json")

        async with httpx.AsyncClient() as client:
            with pytest.raises(ParseError, match="malformed JSON"):
                await fetch_json(client, "https://api.example.com/bad")

    @pytest.mark.asyncio
    async def test_fetch_json_rejects_non_object(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url="https://api.example.com/list", json=[1, 2, 3])

        async with httpx.AsyncClient() as client:
            with pytest.raises(ParseError, match="expected JSON object"):
                await fetch_json(client, "https://api.example.com/list")


class TestPostJson:
    """Tests for post_json."""

    @pytest.mark.asyncio
    async def test_post_json_success(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url="https://rpc.example.com/v1",
            method="POST",
            json={"jsonrpc": "2.0", "id": 1, "result": "0x1"},
        )

        async with httpx.AsyncClient() as client:
            result = await post_json(
                client, "https://rpc.example.com/v1", {"method": "eth_blockNumber"}
            )

        assert result["result"] == "0x1"
        request = httpx_mock.get_request()
        assert request is not None
        assert request.method == "POST"

    @pytest.mark.asyncio
    async def test_post_json_error_status(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url="https://rpc.example.com/v1", method="POST", status_code=429
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(UpstreamStatusError) as exc_info:
                await post_json(client, "https://rpc.example.com/v1", {})

        assert exc_info.value.upstream_status == 429
