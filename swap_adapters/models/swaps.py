"""Pydantic models for compiled Balancer batch swaps.

Field aliases follow the Vault's ``BatchSwapStep`` struct so a plan
serializes straight into what encoders and JSON clients expect.
"""

from enum import Enum, IntEnum

from pydantic import BaseModel, Field, model_validator

from swap_adapters.models.types import Bytes, Uint256


class SwapKind(IntEnum):
    """Vault ``SwapKind``: which side of the batch is fixed."""

    GIVEN_IN = 0
    GIVEN_OUT = 1


class SwapSide(str, Enum):
    """Pricing direction as seen by the routing service."""

    SELL = "sell"
    BUY = "buy"

    @property
    def swap_kind(self) -> SwapKind:
        return SwapKind.GIVEN_IN if self is SwapSide.SELL else SwapKind.GIVEN_OUT


# Amount of a chained step: "use what the previous step produced"
CHAINED_AMOUNT = "0"

# Empty pool-specific payload
EMPTY_USER_DATA = "0x"


class SwapStep(BaseModel):
    """One hop of a batch swap."""

    pool_id: str = Field(alias="poolId")
    asset_in_index: int = Field(alias="assetInIndex", ge=0)
    asset_out_index: int = Field(alias="assetOutIndex", ge=0)
    amount: Uint256
    user_data: Bytes = Field(default=EMPTY_USER_DATA, alias="userData")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def is_chained(self) -> bool:
        return self.amount == CHAINED_AMOUNT


class SwapPlan(BaseModel):
    """Ordered assets, hops and per-asset limits for a batch swap."""

    assets: tuple[str, ...]
    swaps: tuple[SwapStep, ...]
    limits: tuple[str, ...]

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_shape(self) -> "SwapPlan":
        if len(self.assets) != len(self.swaps) + 1:
            raise ValueError(
                f"Plan needs one more asset than swaps: {len(self.assets)} assets, "
                f"{len(self.swaps)} swaps"
            )
        if len(self.limits) != len(self.assets):
            raise ValueError(
                f"Plan needs one limit per asset: {len(self.limits)} limits, "
                f"{len(self.assets)} assets"
            )
        for step in self.swaps:
            if max(step.asset_in_index, step.asset_out_index) >= len(self.assets):
                raise ValueError(f"Swap step references unknown asset: {step}")
        return self
