"""Pydantic models for the adapter HTTP API."""

from pydantic import BaseModel, Field

from swap_adapters.models.swaps import SwapSide
from swap_adapters.models.types import UINT256_MAX, Address, Uint256


class SwapDataRequest(BaseModel):
    """Request to compile a swap through a virtual pool."""

    token_in: Address = Field(alias="tokenIn")
    token_out: Address = Field(alias="tokenOut")
    amount: Uint256 = Field(description="Exact input for sell, exact output for buy")
    side: SwapSide = SwapSide.SELL

    model_config = {"populate_by_name": True}


class BatchSwapRequest(SwapDataRequest):
    """Request to compile and encode a Vault batchSwap call."""

    sender: Address
    recipient: Address
    deadline: int = Field(ge=0, le=UINT256_MAX, description="Unix timestamp")
    from_internal_balance: bool = Field(default=False, alias="fromInternalBalance")
    to_internal_balance: bool = Field(default=False, alias="toInternalBalance")


class BatchSwapResponse(BaseModel):
    """Encoded call ready to submit."""

    to: Address
    data: str


class SnapshotSummary(BaseModel):
    """Result of loading a batch of pool metadata."""

    virtual_pool_count: int = Field(alias="virtualPoolCount")
    skipped_linear_pools: list[str] = Field(alias="skippedLinearPools")
    invalid_pool_count: int = Field(alias="invalidPoolCount")

    model_config = {"populate_by_name": True}
