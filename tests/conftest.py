"""Pytest configuration and shared fixtures for API tests."""

import os
from collections.abc import Callable, Generator
from typing import Any

import pytest

from payloads import GETH_EXTRA_DATA


ENV_KEYS = [
    "TEST_KEY",
    "BEACON_NODE_URL",
    "ETH_RPC_URL",
    "REQUEST_TIMEOUT",
    "KNOWN_RELAYS",
    "API_HOST",
    "API_PORT",
    "LOG_LEVEL",
    "LOG_COLOR",
]


@pytest.fixture
def clean_env() -> Generator[None]:
    """Clear configuration variables before the test and restore them after."""
    saved_env = {key: os.environ.get(key) for key in ENV_KEYS}

    for key in saved_env:
        if key in os.environ:
            del os.environ[key]

    yield

    for key, value in saved_env.items():
        if value is not None:
            os.environ[key] = value
        elif key in os.environ:
            del os.environ[key]


@pytest.fixture
def make_block_payload() -> Callable[..., dict[str, Any]]:
    """Build a /eth/v2/beacon/blocks/{slot} response body."""

    def _make(
        slot: int = 9_000_000,
        proposer_index: str = "12345",
        block_number: str = "20000000",
        extra_data: str = GETH_EXTRA_DATA,
    ) -> dict[str, Any]:
        return {
            "version": "deneb",
            "execution_optimistic": False,
            "finalized": True,
            "data": {
                "message": {
                    "slot": str(slot),
                    "proposer_index": proposer_index,
                    "parent_root": "0x" + "11" * 32,
                    "state_root": "0x" + "22" * 32,
                    "body": {
                        "execution_payload": {
                            "parent_hash": "0x" + "33" * 32,
                            "fee_recipient": "0x95222290dd7278aa3ddd389cc1e1d165cc4bafe5",
                            "block_number": block_number,
                            "gas_limit": "30000000",
                            "gas_used": "121000",
                            "base_fee_per_gas": "10000000000",
                            "extra_data": extra_data,
                            "transactions": ["0x02f8", "0xf86c"],
                            "withdrawals": [
                                {
                                    "index": "1",
                                    "validator_index": "77",
                                    "address": "0x" + "44" * 20,
                                    "amount": "17000000",
                                },
                            ],
                        },
                    },
                },
                "signature": "0x" + "55" * 96,
            },
        }

    return _make


@pytest.fixture
def validator_payload() -> dict[str, Any]:
    """/eth/v1/beacon/states/head/validators/12345 response body."""
    return {
        "execution_optimistic": False,
        "finalized": False,
        "data": {
            "index": "12345",
            "balance": "32001234567",
            "status": "active_ongoing",
            "validator": {
                "pubkey": "0x" + "aa" * 48,
                "effective_balance": "32000000000",
                "slashed": False,
            },
        },
    }


@pytest.fixture
def validators_payload() -> dict[str, Any]:
    """Validator set whose effective balances sum to 4e16 Gwei (sqrt = 2e8)."""
    return {
        "execution_optimistic": False,
        "finalized": False,
        "data": [
            {
                "index": str(i),
                "status": "active_ongoing",
                "validator": {"effective_balance": "20000000000000000"},
            }
            for i in range(2)
        ],
    }


@pytest.fixture
def mev_execution_block() -> dict[str, Any]:
    """eth_getBlockByNumber result with one legacy and two fee-market txs."""
    return {
        "number": "0x1312d00",
        "hash": "0x" + "66" * 32,
        "baseFeePerGas": "0x2540be400",
        "transactions": [
            {
                "hash": "0x01",
                "type": "0x2",
                "gas": "0x5208",
                "gasPrice": "0x28fa6ae00",
                "maxPriorityFeePerGas": "0x3b9aca00",
                "maxFeePerGas": "0x4a817c800",
            },
            {
                "hash": "0x02",
                "type": "0x0",
                "gas": "0x5208",
                "gasPrice": "0x28fa6ae00",
            },
            {
                "hash": "0x03",
                "type": "0x2",
                "gas": "0x186a0",
                "gasPrice": "0x2cb417800",
                "maxPriorityFeePerGas": "0x77359400",
                "maxFeePerGas": "0x4a817c800",
            },
        ],
    }


@pytest.fixture
def vanilla_execution_block() -> dict[str, Any]:
    """eth_getBlockByNumber result with one tip above and one below base fee."""
    return {
        "number": "0x1312d00",
        "hash": "0x" + "77" * 32,
        "baseFeePerGas": "0x2540be400",
        "transactions": [
            {"hash": "0x01", "type": "0x0", "gas": "0x5208", "gasPrice": "0x28fa6ae00"},
            {
                "hash": "0x02",
                "type": "0x2",
                "gas": "0x186a0",
                "gasPrice": "0x218711a00",
                "maxPriorityFeePerGas": "0x0",
            },
        ],
    }

