"""HTTP client utilities and helpers.

Upstream failures are never retried or suppressed here: every httpx failure is
mapped into the error taxonomy and raised so the calling step fails fast.
"""

from typing import Any

import httpx

from eth_validator_api.helpers.constants import DEFAULT_TIMEOUT
from eth_validator_api.helpers.errors import (
    NotFoundError,
    ParseError,
    TransportError,
    UpstreamStatusError,
)
from eth_validator_api.helpers.http_models import JsonObject
from eth_validator_api.helpers.logging import get_logger


logger = get_logger(__name__)


def create_http_client(
    timeout: float = DEFAULT_TIMEOUT, **kwargs: Any
) -> httpx.AsyncClient:
    """Create a configured httpx AsyncClient.

    Args:
        timeout: Per-call timeout in seconds (default: DEFAULT_TIMEOUT)
        **kwargs: Additional httpx.AsyncClient kwargs

    Returns:
        Configured AsyncClient instance

    Example:
        ```python
        from eth_validator_api.helpers.http import create_http_client

        async with create_http_client(timeout=10.0) as client:
            response = await client.get("https://example.com")
        ```
    """
    return httpx.AsyncClient(timeout=timeout, **kwargs)


def decode_json_object(response: httpx.Response, what: str) -> JsonObject:
    """Decode a response body that must be a JSON object.

    Raises:
        ParseError: If the body is not JSON or not an object
    """
    try:
        data = response.json()
    except ValueError as e:
        msg = f"malformed JSON in {what} response: {e}"
        raise ParseError(msg) from e

    if not isinstance(data, dict):
        msg = f"unexpected {what} response: expected JSON object"
        raise ParseError(msg)
    return data


def raise_for_upstream_status(response: httpx.Response, what: str) -> None:
    """Raise UpstreamStatusError (or NotFoundError for 404) on non-2xx status."""
    if response.is_success:
        return

    status = response.status_code
    logger.warning(
        "%s request failed with status %d: %s",
        what,
        status,
        response.text[:100] if response.text else "",
    )
    msg = f"failed to fetch {what}, status code: {status}"
    if status == httpx.codes.NOT_FOUND:
        raise NotFoundError(msg)
    raise UpstreamStatusError(msg, status)


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    what: str = "data",
    timeout: float | None = None,
) -> JsonObject:
    """Fetch a JSON object from a URL.

    Args:
        client: HTTP client instance
        url: URL to fetch
        what: Description of the resource for error messages
        timeout: Optional timeout override

    Returns:
        Parsed JSON object

    Raises:
        TransportError: On network failure or timeout
        UpstreamStatusError: On non-success status
        ParseError: On malformed JSON

    Example:
        ```python
        async with create_http_client() as client:
            data = await fetch_json(client, f"{base_url}/eth/v1/beacon/headers")
        ```
    """
    try:
        if timeout is None:
            response = await client.get(url)
        else:
            response = await client.get(url, timeout=timeout)
    except httpx.TimeoutException as e:
        logger.warning("Timeout fetching %s", what)
        msg = f"timed out fetching {what}"
        raise TransportError(msg) from e
    except httpx.HTTPError as e:
        logger.warning("HTTP error fetching %s: %s", what, e)
        msg = f"failed to fetch {what}: {e}"
        raise TransportError(msg) from e

    raise_for_upstream_status(response, what)
    return decode_json_object(response, what)


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    data: dict[str, Any],
    *,
    what: str = "data",
    timeout: float | None = None,
) -> JsonObject:
    """Post JSON data to a URL and return the JSON object response.

    Raises:
        TransportError: On network failure or timeout
        UpstreamStatusError: On non-success status
        ParseError: On malformed JSON
    """
    try:
        if timeout is None:
            response = await client.post(url, json=data)
        else:
            response = await client.post(url, json=data, timeout=timeout)
    except httpx.TimeoutException as e:
        logger.warning("Timeout sending %s request", what)
        msg = f"timed out fetching {what}"
        raise TransportError(msg) from e
    except httpx.HTTPError as e:
        logger.warning("HTTP error sending %s request: %s", what, e)
        msg = f"failed to send {what} request: {e}"
        raise TransportError(msg) from e

    raise_for_upstream_status(response, what)
    return decode_json_object(response, what)


__all__ = [
    "create_http_client",
    "decode_json_object",
    "fetch_json",
    "post_json",
    "raise_for_upstream_status",
]
