"""Balancer V2 virtual boosted pool routing.

A virtual boosted pool exposes direct main-token trading over a phantom
pool and the linear pools feeding it. This package discovers that topology
from pool metadata, lists the virtual pools, and compiles the three-hop
batch swap for any pair of their main tokens.
"""

# Encoding
from .encoding import (
    BATCH_SWAP_SELECTOR,
    QUERY_BATCH_SWAP_SELECTOR,
    FundManagement,
    decode_asset_deltas,
    encode_batch_swap,
    encode_query_batch_swap,
)

# Errors
from .errors import (
    BalancerError,
    InvalidTokenPair,
    InvalidVirtualPoolId,
    LiquidityUnavailable,
    TokenMissing,
    UnknownVirtualPool,
    VirtualPoolError,
)

# Pool dataclasses
from .pools import (
    LinearPool,
    MainToken,
    PhantomPool,
    VirtualBoostedPoolInfo,
    VirtualBoostedPoolPairData,
)

# Swap compilation
from .swap_data import get_swap_data

# Topology
from .topology import (
    VirtualBoostedPools,
    create_pools,
    index_virtual_pools,
    make_virtual_pool_descriptors,
    parse_subgraph_pools,
)

# Adapter
from .virtual_boosted import VirtualBoostedPool

# On-chain verification
from .vault_query import VaultQuerier, Web3VaultQuerier

__all__ = [
    # Pool dataclasses
    "LinearPool",
    "PhantomPool",
    "MainToken",
    "VirtualBoostedPoolInfo",
    "VirtualBoostedPoolPairData",
    # Topology
    "VirtualBoostedPools",
    "create_pools",
    "index_virtual_pools",
    "make_virtual_pool_descriptors",
    "parse_subgraph_pools",
    # Adapter
    "VirtualBoostedPool",
    "get_swap_data",
    # Encoding
    "FundManagement",
    "encode_batch_swap",
    "encode_query_batch_swap",
    "decode_asset_deltas",
    "BATCH_SWAP_SELECTOR",
    "QUERY_BATCH_SWAP_SELECTOR",
    # On-chain verification
    "VaultQuerier",
    "Web3VaultQuerier",
    # Errors
    "BalancerError",
    "VirtualPoolError",
    "UnknownVirtualPool",
    "InvalidVirtualPoolId",
    "TokenMissing",
    "InvalidTokenPair",
    "LiquidityUnavailable",
]
