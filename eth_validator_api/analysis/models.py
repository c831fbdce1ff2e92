"""Models for block reward results."""

from typing import Literal

from pydantic import BaseModel, Field


class RewardBreakdown(BaseModel):
    """Intermediate figures behind a block reward, logged but not served."""

    slot: int
    proposer_index: int
    block_number: int
    fee_recipient: str
    effective_balance: int
    total_stake: int
    base_reward: float
    block_component: int
    relay: str | None = None


class BlockRewardResponse(BaseModel):
    """Body of GET /blockreward/{slot}."""

    status: Literal["MEV Relay", "Vanilla Block"]
    reward: str = Field(..., description="Total reward in Gwei, three decimals")


class RewardResult(BlockRewardResponse):
    """Block reward for a slot with its breakdown."""

    breakdown: RewardBreakdown | None = None

    @property
    def is_mev(self) -> bool:
        return self.status == "MEV Relay"

    def to_response(self) -> BlockRewardResponse:
        return BlockRewardResponse(status=self.status, reward=self.reward)


__all__ = ["BlockRewardResponse", "RewardBreakdown", "RewardResult"]
