"""Configuration management and environment variable utilities."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from eth_validator_api.helpers.constants import (
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_TIMEOUT,
)


# Load environment variables from .env file
load_dotenv()


def get_optional_env(key: str, default: str | None = None) -> str | None:
    """Get an optional environment variable with a default value.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_beacon_node_url(url: str | None = None) -> str:
    """Get the beacon node base URL from parameter or environment.

    Args:
        url: Optional URL to use directly

    Returns:
        Beacon node base URL without a trailing slash

    Raises:
        ValueError: If no URL is provided and BEACON_NODE_URL is not set
    """
    if url:
        return url.rstrip("/")

    env_url = os.getenv("BEACON_NODE_URL")
    if not env_url:
        msg = "Beacon node URL must be provided or set in BEACON_NODE_URL"
        raise ValueError(msg)

    return env_url.rstrip("/")


def get_eth_rpc_url(rpc_url: str | None = None, fallback: str | None = None) -> str:
    """Get Ethereum JSON-RPC URL from parameter, environment or fallback.

    Most hosted providers serve the beacon API and the execution JSON-RPC from
    the same base URL, so the beacon URL is accepted as ``fallback``.

    Args:
        rpc_url: Optional RPC URL to use directly
        fallback: URL used when neither rpc_url nor ETH_RPC_URL is set

    Returns:
        Ethereum RPC URL

    Raises:
        ValueError: If no URL can be resolved

    Example:
        ```python
        from eth_validator_api.helpers.config import (
            get_beacon_node_url,
            get_eth_rpc_url,
        )

        rpc_url = get_eth_rpc_url(fallback=get_beacon_node_url())
        ```
    """
    if rpc_url:
        return rpc_url

    env_rpc_url = os.getenv("ETH_RPC_URL") or fallback
    if not env_rpc_url:
        msg = "Ethereum RPC URL must be provided or set in ETH_RPC_URL"
        raise ValueError(msg)

    return env_rpc_url


def get_request_timeout() -> float:
    """Get the per-call upstream timeout in seconds.

    Raises:
        ValueError: If REQUEST_TIMEOUT is not a positive number
    """
    raw = get_optional_env("REQUEST_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT

    try:
        timeout = float(raw)
    except ValueError:
        msg = f"REQUEST_TIMEOUT must be a number, got {raw!r}"
        raise ValueError(msg) from None

    if timeout <= 0:
        msg = f"REQUEST_TIMEOUT must be positive, got {timeout}"
        raise ValueError(msg)
    return timeout


def get_known_relays() -> list[str] | None:
    """Get the relay name fragments override from KNOWN_RELAYS.

    Returns:
        Lowercased, comma-separated fragments, or None when unset
    """
    raw = get_optional_env("KNOWN_RELAYS")
    if not raw:
        return None
    return [part.strip().lower() for part in raw.split(",") if part.strip()]


class APISettings(BaseModel):
    """Resolved runtime settings passed to clients and services."""

    beacon_node_url: str
    eth_rpc_url: str
    request_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    known_relays: list[str] | None = None
    host: str = DEFAULT_API_HOST
    port: int = DEFAULT_API_PORT
    log_level: str = "INFO"
    log_color: bool = False


def load_settings(
    beacon_node_url: str | None = None, eth_rpc_url: str | None = None
) -> APISettings:
    """Resolve settings from arguments and environment variables.

    Args:
        beacon_node_url: Optional beacon node URL override
        eth_rpc_url: Optional execution RPC URL override

    Returns:
        APISettings instance

    Raises:
        ValueError: If required settings are missing or invalid
    """
    beacon_url = get_beacon_node_url(beacon_node_url)
    return APISettings(
        beacon_node_url=beacon_url,
        eth_rpc_url=get_eth_rpc_url(eth_rpc_url, fallback=beacon_url),
        request_timeout=get_request_timeout(),
        known_relays=get_known_relays(),
        host=get_optional_env("API_HOST", DEFAULT_API_HOST) or DEFAULT_API_HOST,
        port=int(get_optional_env("API_PORT", str(DEFAULT_API_PORT)) or DEFAULT_API_PORT),
        log_level=(get_optional_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        log_color=(get_optional_env("LOG_COLOR", "") or "").lower()
        in {"1", "true", "yes"},
    )


__all__ = [
    "APISettings",
    "get_beacon_node_url",
    "get_eth_rpc_url",
    "get_known_relays",
    "get_optional_env",
    "get_request_timeout",
    "load_settings",
]
