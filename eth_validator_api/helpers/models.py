"""Common Pydantic models for beacon and execution payloads."""

from pydantic import BaseModel, ConfigDict, Field


class Withdrawal(BaseModel):
    """Execution payload withdrawal, amount in Gwei."""

    index: str | None = None
    validator_index: str | None = None
    address: str | None = None
    amount: int

    model_config = ConfigDict(extra="ignore")


class ExecutionPayload(BaseModel):
    """Execution payload embedded in a post-merge beacon block body."""

    fee_recipient: str = Field(..., description="Fee recipient address")
    block_number: str = Field(..., description="Execution block number, decimal")
    gas_limit: int | None = None
    gas_used: int | None = None
    base_fee_per_gas: int | None = Field(
        default=None, description="Base fee per gas in Wei, decimal"
    )
    extra_data: str = Field(default="0x", description="Extra data as 0x hex")
    transactions: list[str] = Field(default_factory=list)
    withdrawals: list[Withdrawal] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class BeaconBlockBody(BaseModel):
    """Beacon block body, only the execution payload is used."""

    execution_payload: ExecutionPayload | None = None

    model_config = ConfigDict(extra="ignore")


class BeaconBlockMessage(BaseModel):
    """Beacon block message from /eth/v2/beacon/blocks/{slot}."""

    slot: int
    proposer_index: str
    body: BeaconBlockBody

    model_config = ConfigDict(extra="ignore")


class BeaconBlock(BaseModel):
    """Canonical beacon block flattened to the fields used for reward attribution.

    ``proposer_index`` and ``block_number`` keep the raw decimal strings so that
    a malformed value fails the step that resolves it.
    """

    slot: int
    proposer_index: str
    fee_recipient: str
    block_number: str
    extra_data: str
    gas_limit: int | None = None
    gas_used: int | None = None
    base_fee_per_gas: int | None = None
    transaction_count: int = 0
    withdrawal_amounts: list[int] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_message(cls, message: BeaconBlockMessage) -> "BeaconBlock | None":
        """Flatten a block message, None for pre-merge blocks."""
        payload = message.body.execution_payload
        if payload is None:
            return None
        return cls(
            slot=message.slot,
            proposer_index=message.proposer_index,
            fee_recipient=payload.fee_recipient,
            block_number=payload.block_number,
            extra_data=payload.extra_data,
            gas_limit=payload.gas_limit,
            gas_used=payload.gas_used,
            base_fee_per_gas=payload.base_fee_per_gas,
            transaction_count=len(payload.transactions),
            withdrawal_amounts=[w.amount for w in payload.withdrawals],
        )


class ValidatorRecord(BaseModel):
    """Validator record fields used for rewards."""

    pubkey: str | None = None
    effective_balance: str = Field(..., description="Effective balance in Gwei")

    model_config = ConfigDict(extra="ignore")


class ValidatorEntry(BaseModel):
    """Entry of /eth/v1/beacon/states/{state}/validators."""

    index: str | None = None
    status: str | None = None
    validator: ValidatorRecord

    model_config = ConfigDict(extra="ignore")


class Validator(BaseModel):
    """Validator with its effective balance in Gwei."""

    index: int
    effective_balance: int

    model_config = ConfigDict(frozen=True)


class Transaction(BaseModel):
    """Execution transaction with the fee fields used for reward arithmetic.

    Every field is optional: legacy transactions carry no
    ``maxPriorityFeePerGas``, and absent fields stay None instead of failing
    the record. ``gas`` is the transaction gas limit, used as gas used.
    """

    hash: str | None = None
    type: str | None = None
    gas: str | None = Field(default=None, description="Gas as hex")
    gas_price: str | None = Field(
        default=None, description="Gas price in Wei as hex", alias="gasPrice"
    )
    max_priority_fee_per_gas: str | None = Field(
        default=None,
        description="Max priority fee per gas in Wei as hex",
        alias="maxPriorityFeePerGas",
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ExecutionBlock(BaseModel):
    """Execution block returned by eth_getBlockByNumber with full transactions."""

    number: str | None = Field(default=None, description="Block number as hex")
    hash: str | None = None
    base_fee_per_gas: str | None = Field(
        default=None, description="Base fee per gas as hex", alias="baseFeePerGas"
    )
    transactions: list[Transaction] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


__all__ = [
    "BeaconBlock",
    "BeaconBlockBody",
    "BeaconBlockMessage",
    "ExecutionBlock",
    "ExecutionPayload",
    "Transaction",
    "Validator",
    "ValidatorEntry",
    "ValidatorRecord",
    "Withdrawal",
]
