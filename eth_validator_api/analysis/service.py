"""Block reward service.

Runs the reward pipeline for one slot:

    validate slot -> fetch beacon block -> classify -> resolve proposer
    -> base reward -> fetch execution block -> MEV payment | tips
    -> combine -> format

Each step fails fast. The first error aborts the computation and is re-raised as
a RewardPipelineError naming the step. Every call opens its own HTTP client and
re-fetches all upstream data, nothing is shared between calls.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeAlias

import httpx

from eth_validator_api.analysis.models import RewardBreakdown, RewardResult
from eth_validator_api.analysis.rewards import (
    calculate_base_reward,
    calculate_mev_payment,
    calculate_transaction_tips,
    total_reward,
)
from eth_validator_api.data.relays.classifier import RelayClassifier
from eth_validator_api.helpers.beacon import BeaconClient
from eth_validator_api.helpers.constants import (
    DEFAULT_TIMEOUT,
    MEV_RELAY_STATUS,
    VANILLA_BLOCK_STATUS,
)
from eth_validator_api.helpers.errors import RewardPipelineError, ValidatorAPIError
from eth_validator_api.helpers.http import create_http_client
from eth_validator_api.helpers.logging import get_logger
from eth_validator_api.helpers.parsers import parse_decimal_int, parse_slot
from eth_validator_api.helpers.rpc import RPCClient


logger = get_logger(__name__)

ClientFactory: TypeAlias = Callable[[], httpx.AsyncClient]


@contextmanager
def pipeline_step(step: str, message: str) -> Iterator[None]:
    """Wrap API errors raised inside a step with the step's message.

    Args:
        step: Step name recorded on the error
        message: Human-readable prefix, e.g. "Failed to fetch block data"

    Raises:
        RewardPipelineError: If the wrapped block raises a ValidatorAPIError
    """
    try:
        yield
    except ValidatorAPIError as e:
        logger.debug("Step %s failed: %s", step, e.message)
        raise RewardPipelineError(step, f"{message}: {e.message}") from e


class RewardService:
    """Computes block rewards from beacon and execution data."""

    def __init__(
        self,
        beacon: BeaconClient,
        rpc: RPCClient,
        classifier: RelayClassifier | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        """Initialize the reward service.

        Args:
            beacon: Beacon node client
            rpc: Execution JSON-RPC client
            classifier: Relay classifier, defaults to the known relay list
            client_factory: Creates the per-call HTTP client
        """
        self.beacon = beacon
        self.rpc = rpc
        self.classifier = classifier or RelayClassifier()
        self.client_factory = client_factory or (
            lambda: create_http_client(timeout=DEFAULT_TIMEOUT)
        )

    async def compute(self, slot_param: str | int) -> RewardResult:
        """Compute the block reward for a slot.

        Args:
            slot_param: Raw slot parameter

        Returns:
            RewardResult with status label and formatted reward

        Raises:
            ValidationError: If the slot is invalid, before any upstream call
            RewardPipelineError: If any later step fails
        """
        slot = parse_slot(slot_param)

        async with self.client_factory() as client:
            return await self._compute(client, slot)

    async def _compute(self, client: httpx.AsyncClient, slot: int) -> RewardResult:
        with pipeline_step("fetch_block", "Failed to fetch block data"):
            block = await self.beacon.fetch_block(client, slot)

        relay = self.classifier.matching_relay(block.extra_data)
        is_mev = relay is not None
        status = MEV_RELAY_STATUS if is_mev else VANILLA_BLOCK_STATUS
        logger.info("Slot %d classified as %s (relay=%s)", slot, status, relay)

        with pipeline_step("resolve_proposer", "Invalid proposer index"):
            proposer_index = parse_decimal_int(block.proposer_index, "proposer index")

        with pipeline_step("base_reward", "Failed to calculate base reward"):
            with pipeline_step("base_reward", "failed to fetch validator balance"):
                effective_balance = await self.beacon.fetch_validator_balance(
                    client, proposer_index
                )
            with pipeline_step("base_reward", "failed to fetch total staked"):
                total_stake = await self.beacon.fetch_total_stake(client)
            base_reward = calculate_base_reward(effective_balance, total_stake)
        logger.debug("Slot %d base reward %.6f Gwei", slot, base_reward)

        with pipeline_step("resolve_block_number", "Invalid block number"):
            block_number = parse_decimal_int(block.block_number, "block number")

        with pipeline_step("fetch_execution_block", "Failed to fetch block details"):
            execution_block = await self.rpc.get_block_by_number(client, block_number)

        if is_mev:
            with pipeline_step("mev_payment", "Failed to calculate proposer payment"):
                block_component = calculate_mev_payment(execution_block)
        else:
            with pipeline_step(
                "transaction_fees", "Failed to calculate transaction fees"
            ):
                block_component = calculate_transaction_tips(execution_block)

        reward = total_reward(base_reward, block_component)
        breakdown = RewardBreakdown(
            slot=slot,
            proposer_index=proposer_index,
            block_number=block_number,
            fee_recipient=block.fee_recipient,
            effective_balance=effective_balance,
            total_stake=total_stake,
            base_reward=base_reward,
            block_component=block_component,
            relay=relay,
        )
        logger.debug("Slot %d reward breakdown: %s", slot, breakdown.model_dump())
        logger.info(
            "Slot %d (block %d) reward %s Gwei [%s]",
            slot,
            block_number,
            reward,
            status,
        )
        return RewardResult(status=status, reward=reward, breakdown=breakdown)


__all__ = ["RewardService", "pipeline_step"]
