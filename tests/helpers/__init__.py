"""Test helpers module for shared test utilities.

- constants: Token addresses and bb-a-USD pool ids
- factories: Pool metadata factory functions
"""

from tests.helpers.constants import (
    BBA_DAI_ADDR,
    BBA_DAI_ID,
    BBA_USDC_ADDR,
    BBA_USDC_ID,
    BBA_USDT_ADDR,
    BBA_USDT_ID,
    BBAUSD_ADDR,
    BBAUSD_ID,
    BBAUSD_VIRTUAL_ID,
    DAI,
    DAI_HOLDER,
    MAX_INT,
    USDC,
    USDT,
    VIRTUAL_SUFFIX,
    WA_DAI,
    WA_USDC,
    WA_USDT,
    WETH,
)
from tests.helpers.factories import make_bbausd_pools, make_linear_pool, make_phantom_pool

__all__ = [
    # Constants
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
    # Factories
    "make_bbausd_pools",
    "make_linear_pool",
    "make_phantom_pool",
]
