"""Data models for pool metadata and swap plans."""

from swap_adapters.models.pools import SubgraphPool, SubgraphToken
from swap_adapters.models.swaps import (
    CHAINED_AMOUNT,
    EMPTY_USER_DATA,
    SwapKind,
    SwapPlan,
    SwapSide,
    SwapStep,
)
from swap_adapters.models.types import (
    INT256_MAX,
    UINT256_MAX,
    Address,
    Bytes,
    Uint256,
    is_valid_address,
    is_valid_pool_id,
    normalize_address,
)

__all__ = [
    # Pool metadata
    "SubgraphPool",
    "SubgraphToken",
    # Swap plans
    "SwapKind",
    "SwapSide",
    "SwapStep",
    "SwapPlan",
    "CHAINED_AMOUNT",
    "EMPTY_USER_DATA",
    # Types
    "Address",
    "Bytes",
    "Uint256",
    "UINT256_MAX",
    "INT256_MAX",
    "normalize_address",
    "is_valid_address",
    "is_valid_pool_id",
]
