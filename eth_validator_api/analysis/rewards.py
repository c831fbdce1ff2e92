"""Block reward arithmetic.

The total reward is the proposer's base issuance reward plus exactly one block
component: the MEV payment for relay-built blocks, or the priority tips for
vanilla blocks.

Units: the base reward is in Gwei while the block components are Wei-scale gas
arithmetic. Both are summed and divided by 1e9 once in ``combine_reward``. This
mixed-unit figure is the published output contract and is kept as is.
"""

import math

from eth_validator_api.helpers.constants import (
    BASE_REWARD_FACTOR,
    GWEI_PER_ETH,
    MAX_EFFECTIVE_BALANCE_GWEI,
)
from eth_validator_api.helpers.errors import CalculationError, ParseError
from eth_validator_api.helpers.models import ExecutionBlock
from eth_validator_api.helpers.parsers import format_reward, hex_to_number


def calculate_base_reward(effective_balance: int, total_stake: int) -> float:
    """Calculate the validator base reward.

    ``BASE_REWARD_FACTOR * min(effective_balance, MAX) / sqrt(total_stake)``,
    a simplified form of the protocol formula without the per-epoch
    normalisation constants.

    Args:
        effective_balance: Validator effective balance in Gwei
        total_stake: Sum of effective balances in Gwei

    Returns:
        Base reward in Gwei

    Raises:
        CalculationError: If total_stake is not positive
    """
    if total_stake <= 0:
        msg = f"total network stake must be positive, got {total_stake}"
        raise CalculationError(msg)

    balance = min(effective_balance, MAX_EFFECTIVE_BALANCE_GWEI)
    return BASE_REWARD_FACTOR * balance / math.sqrt(total_stake)


def calculate_mev_payment(block: ExecutionBlock) -> int:
    """Estimate the proposer payment of a relay-built block.

    Sums ``maxPriorityFeePerGas * gas`` over transactions that carry a
    priority fee. Transactions without ``maxPriorityFeePerGas`` (legacy) or
    without ``gas`` are excluded from the sum.

    Args:
        block: Execution block with full transactions

    Returns:
        Payment in Wei

    Raises:
        ParseError: If a present field is not valid hex
    """
    payment = 0
    for tx in block.transactions:
        if not tx.max_priority_fee_per_gas:
            continue
        priority_fee = hex_to_number(
            tx.max_priority_fee_per_gas, "maxPriorityFeePerGas"
        )

        if not tx.gas:
            continue
        gas_used = hex_to_number(tx.gas, "gas used")

        payment += priority_fee * gas_used
    return payment


def calculate_transaction_tips(block: ExecutionBlock) -> int:
    """Sum priority tips of a vanilla block.

    ``(gasPrice - baseFeePerGas) * gas`` for every transaction. Tips below
    the base fee are negative and are summed as is, so the total can be
    negative.

    Args:
        block: Execution block with full transactions

    Returns:
        Tip total in Wei

    Raises:
        ParseError: If the base fee or a transaction field is missing or invalid
    """
    if block.base_fee_per_gas is None:
        msg = "execution block has no baseFeePerGas"
        raise ParseError(msg)
    base_fee = hex_to_number(block.base_fee_per_gas, "base fee per gas")

    total = 0
    for tx in block.transactions:
        gas_used = hex_to_number(tx.gas, "gas used")
        gas_price = hex_to_number(tx.gas_price, "gas price")
        total += (gas_price - base_fee) * gas_used
    return total


def combine_reward(base_reward: float, block_component: int) -> float:
    """Combine the base reward with the block component and scale by 1e9."""
    return (base_reward + block_component) / GWEI_PER_ETH


def total_reward(base_reward: float, block_component: int) -> str:
    """Combine and format the final reward string."""
    return format_reward(combine_reward(base_reward, block_component))


__all__ = [
    "calculate_base_reward",
    "calculate_mev_payment",
    "calculate_transaction_tips",
    "combine_reward",
    "total_reward",
]
