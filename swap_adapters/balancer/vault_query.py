"""On-chain verification of compiled batch swaps via Vault.queryBatchSwap."""

from __future__ import annotations

from typing import Protocol

import structlog

from swap_adapters.constants import BALANCER_VAULT
from swap_adapters.models.swaps import SwapKind, SwapPlan

from .encoding import FundManagement, decode_asset_deltas, encode_query_batch_swap

logger = structlog.get_logger()


class VaultQuerier(Protocol):
    """Protocol for batch swap simulators.

    Allows swapping the RPC-backed querier for a stub in tests.
    """

    def query_batch_swap(
        self,
        plan: SwapPlan,
        kind: SwapKind,
        funds: FundManagement,
    ) -> list[int] | None:
        """Simulate a batch swap.

        Returns:
            Asset deltas aligned with plan.assets, or None if the query fails
        """
        ...


class Web3VaultQuerier:
    """Querier that eth_calls Vault.queryBatchSwap over RPC."""

    def __init__(
        self,
        web3_provider: str,
        vault_address: str = BALANCER_VAULT,
        block_identifier: int | str = "latest",
    ):
        """Initialize querier with web3 provider.

        Args:
            web3_provider: HTTP RPC URL (e.g., "https://eth.llamarpc.com")
            vault_address: Balancer Vault address
            block_identifier: Block to query at (needs an archive node if historical)
        """
        try:
            from web3 import Web3
        except ImportError as e:
            raise ImportError(
                "web3 package required for Web3VaultQuerier. Install with: pip install web3"
            ) from e

        self.w3 = Web3(Web3.HTTPProvider(web3_provider))
        self.vault_address = Web3.to_checksum_address(vault_address)
        self.block_identifier = block_identifier

    def query_batch_swap(
        self,
        plan: SwapPlan,
        kind: SwapKind,
        funds: FundManagement,
    ) -> list[int] | None:
        """Run queryBatchSwap via eth_call and decode the deltas."""
        try:
            calldata = encode_query_batch_swap(plan, kind, funds)
            result = self.w3.eth.call(
                {"to": self.vault_address, "data": calldata},
                self.block_identifier,
            )
            return decode_asset_deltas(bytes(result))
        except Exception as e:
            logger.warning(
                "vault_query_batch_swap_failed",
                assets=list(plan.assets),
                kind=kind.name,
                error=str(e),
            )
            return None
