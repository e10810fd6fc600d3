"""Batch swap compilation for virtual boosted pools.

Every main token reaches the phantom pool only through its own linear pool,
so a trade between two main tokens is always three hops:

    main_in -> linear_in bpt -> linear_out bpt -> main_out
      (linear_in)    (phantom)      (linear_out)

Only the first step of the batch carries an amount. The remaining steps use
amount 0, which tells the Vault to chain the previous step's result.
"""

from __future__ import annotations

import structlog

from swap_adapters.constants import MAX_INT
from swap_adapters.models.swaps import CHAINED_AMOUNT, EMPTY_USER_DATA, SwapKind, SwapPlan, SwapStep
from swap_adapters.models.types import normalize_address, validate_uint256

from .errors import InvalidTokenPair, InvalidVirtualPoolId, TokenMissing
from .pools import MainToken, VirtualBoostedPoolInfo
from .topology import VirtualBoostedPoolDictionary

logger = structlog.get_logger()


def _find_main_token(info: VirtualBoostedPoolInfo, token: str, role: str) -> MainToken:
    main_token = info.get_main_token(token)
    if main_token is None:
        logger.debug(
            "virtual_pool_token_missing",
            virtual_pool_id=info.id,
            token=token,
            role=role,
        )
        raise TokenMissing(info.id, token)
    return main_token


def get_swap_data(
    token_in: str,
    token_out: str,
    virtual_pool_id: str,
    amount: str | int,
    dictionary: VirtualBoostedPoolDictionary,
    kind: SwapKind = SwapKind.GIVEN_IN,
) -> SwapPlan:
    """Compile the batch swap for a trade through a virtual boosted pool.

    Args:
        token_in: Main token sold
        token_out: Main token bought
        virtual_pool_id: Virtual pool id (phantom pool id + suffix)
        amount: Exact input (GIVEN_IN) or exact output (GIVEN_OUT)
        dictionary: Virtual pool dictionary of the current snapshot
        kind: Which side of the trade is fixed

    Returns:
        SwapPlan with assets [token_in, bpt_in, bpt_out, token_out]

    Raises:
        InvalidVirtualPoolId: If the pool id is not in the dictionary
        TokenMissing: If either token is not a main token of the pool
        InvalidTokenPair: If token_in and token_out are the same token
        ValueError: If amount is zero or not a valid uint256
    """
    info = dictionary.get(virtual_pool_id)
    if info is None:
        logger.debug("virtual_pool_id_invalid", virtual_pool_id=virtual_pool_id)
        raise InvalidVirtualPoolId(virtual_pool_id)

    main_in = _find_main_token(info, token_in, "input")
    main_out = _find_main_token(info, token_out, "output")

    if normalize_address(main_in.address) == normalize_address(main_out.address):
        raise InvalidTokenPair(info.id, token_in)

    requested = validate_uint256(amount)
    # The Vault rejects a zero amount in the first step of a batch
    if requested == CHAINED_AMOUNT:
        raise ValueError("Swap amount must be positive")

    assets = (
        token_in,
        main_in.linear_pool_addr,
        main_out.linear_pool_addr,
        token_out,
    )

    hops = [
        (main_in.linear_pool_id, 0, 1),
        (info.phantom_pool_id, 1, 2),
        (main_out.linear_pool_id, 2, 3),
    ]
    # GIVEN_OUT batches start at the fixed output and walk back to the input
    if kind == SwapKind.GIVEN_OUT:
        hops.reverse()

    swaps = tuple(
        SwapStep(
            pool_id=pool_id,
            asset_in_index=asset_in,
            asset_out_index=asset_out,
            amount=requested if i == 0 else CHAINED_AMOUNT,
            user_data=EMPTY_USER_DATA,
        )
        for i, (pool_id, asset_in, asset_out) in enumerate(hops)
    )

    return SwapPlan(
        assets=assets,
        swaps=swaps,
        limits=tuple(MAX_INT for _ in assets),
    )
