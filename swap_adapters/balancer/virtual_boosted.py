"""Virtual boosted pool adapter.

Ties the topology snapshot, pair resolution, the liquidity gate and swap
compilation together behind the interface the pricing pipeline uses for
every Balancer pool type.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import structlog

from swap_adapters.config import DEFAULT_BOOSTED_POOL_CONFIG, BoostedPoolConfig
from swap_adapters.constants import BALANCER_VAULT, VIRTUAL_BOOSTED_POOL_TYPE
from swap_adapters.models.pools import SubgraphPool
from swap_adapters.models.swaps import SwapKind, SwapPlan, SwapSide

from .encoding import FundManagement, encode_batch_swap
from .errors import LiquidityUnavailable, UnknownVirtualPool
from .pools import VirtualBoostedPoolPairData
from .swap_data import get_swap_data
from .topology import VirtualBoostedPoolDictionary, VirtualBoostedPools, create_pools

logger = structlog.get_logger()


class VirtualBoostedPool:
    """Adapter for Balancer virtual boosted pools.

    Stateless apart from the Vault address: every call takes the snapshot
    (or its dictionary) explicitly, so one instance serves all cycles.
    """

    pool_type = VIRTUAL_BOOSTED_POOL_TYPE

    def __init__(
        self,
        vault_address: str = BALANCER_VAULT,
        config: BoostedPoolConfig = DEFAULT_BOOSTED_POOL_CONFIG,
    ) -> None:
        self.vault_address = vault_address
        self.config = config

    @staticmethod
    def create_pools(
        pools: Iterable[SubgraphPool | Mapping[str, Any]],
        config: BoostedPoolConfig = DEFAULT_BOOSTED_POOL_CONFIG,
    ) -> VirtualBoostedPools:
        """Build the topology snapshot for one batch of pool metadata."""
        return create_pools(pools, config)

    def parse_pool_pair_data(
        self,
        pool: SubgraphPool,
        pool_state: Mapping[str, Any] | None,
        token_in: str,
        token_out: str,
        dictionary: VirtualBoostedPoolDictionary,
    ) -> VirtualBoostedPoolPairData:
        """Resolve pair context for a quote against a virtual pool listing.

        Token membership is not checked here; get_swap_data does that for
        the pools that survive the liquidity gate.

        Args:
            pool: Virtual pool listing
            pool_state: Current pool state (unused, may be empty)
            token_in: Requested input token
            token_out: Requested output token
            dictionary: Virtual pool dictionary of the current snapshot

        Raises:
            UnknownVirtualPool: If the listing id is not in the dictionary
        """
        info = dictionary.get(pool.id)
        if info is None:
            logger.debug("virtual_pool_unknown", virtual_pool_id=pool.id)
            raise UnknownVirtualPool(pool.id)

        return VirtualBoostedPoolPairData(
            token_in=token_in,
            token_out=token_out,
            virtual_pool_id=pool.id,
            phantom_pool_id=info.phantom_pool_id,
        )

    def check_balance(
        self,
        balances: Sequence[int],
        amount: int,
        side: SwapSide,
        pair_data: VirtualBoostedPoolPairData,
    ) -> bool:
        """Liquidity gate: whether reserves confirm the pool can serve the trade.

        Fails closed. The pool is unusable unless exactly two balances are
        given and both are positive, and a buy must ask for less than the
        whole output balance.

        Args:
            balances: Exactly [balance_in, balance_out] for the pair
            amount: Requested amount (input for SELL, output for BUY)
            side: Trade direction
            pair_data: Pair context from parse_pool_pair_data
        """
        if len(balances) != 2:
            logger.debug(
                "virtual_pool_balance_unknown",
                virtual_pool_id=pair_data.virtual_pool_id,
                balance_count=len(balances),
            )
            return False

        balance_in, balance_out = balances
        if balance_in <= 0 or balance_out <= 0:
            logger.debug(
                "virtual_pool_zero_balance",
                virtual_pool_id=pair_data.virtual_pool_id,
                balance_in=balance_in,
                balance_out=balance_out,
            )
            return False

        if amount <= 0:
            return False

        if side == SwapSide.BUY and amount >= balance_out:
            logger.debug(
                "virtual_pool_insufficient_output",
                virtual_pool_id=pair_data.virtual_pool_id,
                amount=amount,
                balance_out=balance_out,
            )
            return False

        return True

    def require_balance(
        self,
        balances: Sequence[int],
        amount: int,
        side: SwapSide,
        pair_data: VirtualBoostedPoolPairData,
    ) -> None:
        """Raise instead of returning False from check_balance.

        Raises:
            LiquidityUnavailable: If the gate refuses the trade
        """
        if not self.check_balance(balances, amount, side, pair_data):
            raise LiquidityUnavailable(
                f"Liquidity unavailable for {pair_data.token_in} -> {pair_data.token_out} "
                f"in {pair_data.virtual_pool_id}"
            )

    @staticmethod
    def get_swap_data(
        token_in: str,
        token_out: str,
        virtual_pool_id: str,
        amount: str | int,
        dictionary: VirtualBoostedPoolDictionary,
        kind: SwapKind = SwapKind.GIVEN_IN,
    ) -> SwapPlan:
        """Compile the batch swap for a trade. See swap_data.get_swap_data."""
        return get_swap_data(token_in, token_out, virtual_pool_id, amount, dictionary, kind)

    def build_batch_swap(
        self,
        token_in: str,
        token_out: str,
        virtual_pool_id: str,
        amount: str | int,
        dictionary: VirtualBoostedPoolDictionary,
        funds: FundManagement,
        deadline: int,
        side: SwapSide = SwapSide.SELL,
    ) -> tuple[str, str]:
        """Compile and encode a Vault batchSwap call.

        Returns:
            Tuple of (target_address, calldata)
        """
        kind = side.swap_kind
        plan = get_swap_data(token_in, token_out, virtual_pool_id, amount, dictionary, kind)
        return self.vault_address, encode_batch_swap(plan, kind, funds, deadline)
