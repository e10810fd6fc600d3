"""Shared token and pool constants for tests.

All addresses are lowercase for consistency with normalize_address().

Usage:
    from tests.helpers import DAI, USDC
    # or
    from tests.helpers.constants import BBAUSD_ID
"""

# =============================================================================
# Mainnet tokens
# =============================================================================

WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"  # Wrapped Ether (18 decimals)
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"  # USD Coin (6 decimals)
DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"  # Dai Stablecoin (18 decimals)
USDT = "0xdac17f958d2ee523a2206206994597c13d831ec7"  # Tether USD (6 decimals)

# =============================================================================
# bb-a-USD boosted pool (mainnet)
# =============================================================================

# Phantom pool
BBAUSD_ID = "0x7b50775383d3d6f0215a8f290f2c9e2eebbeceb20000000000000000000000fe"
BBAUSD_ADDR = "0x7b50775383d3d6f0215a8f290f2c9e2eebbeceb2"

# Linear pools (address is also the pool token)
BBA_USDC_ID = "0x9210f1204b5a24742eba12f710636d76240df3d00000000000000000000000fc"
BBA_USDC_ADDR = "0x9210f1204b5a24742eba12f710636d76240df3d0"
BBA_DAI_ID = "0x804cdb9116a10bb78768d3252355a1b18067bf8f0000000000000000000000fb"
BBA_DAI_ADDR = "0x804cdb9116a10bb78768d3252355a1b18067bf8f"
BBA_USDT_ID = "0x2bbf681cc4eb09218bee85ea2a5d3d13fa40fc0c0000000000000000000000fd"
BBA_USDT_ADDR = "0x2bbf681cc4eb09218bee85ea2a5d3d13fa40fc0c"

# Wrapped (aToken) tokens held by the linear pools
WA_USDC = "0xd093fa4fb80d09bb30817fdcd442d4d02ed3e5de"
WA_DAI = "0x02d60b84491589974263d922d9cc7a3152618ef6"
WA_USDT = "0xf8fd466f12e236f4c96f7cce6c79eadb819abf58"

VIRTUAL_SUFFIX = "virtualboosted"
BBAUSD_VIRTUAL_ID = BBAUSD_ID + VIRTUAL_SUFFIX

# Unbounded batch swap limit (int256 max)
MAX_INT = "57896044618658097711785492504343953926634992332820282019728792003956564819967"

# Holder used for on-chain queries
DAI_HOLDER = "0x28c6c06298d514db089934071355e5743bf21d60"


__all__ = [
    "WETH",
    "USDC",
    "DAI",
    "USDT",
    "BBAUSD_ID",
    "BBAUSD_ADDR",
    "BBAUSD_VIRTUAL_ID",
    "BBA_USDC_ID",
    "BBA_USDC_ADDR",
    "BBA_DAI_ID",
    "BBA_DAI_ADDR",
    "BBA_USDT_ID",
    "BBA_USDT_ADDR",
    "WA_USDC",
    "WA_DAI",
    "WA_USDT",
    "VIRTUAL_SUFFIX",
    "MAX_INT",
    "DAI_HOLDER",
]
