"""Tests for the RPC-backed Vault querier with a stubbed web3 client."""

import pytest
from eth_abi import encode  # type: ignore[attr-defined]

from swap_adapters.balancer import (
    QUERY_BATCH_SWAP_SELECTOR,
    FundManagement,
    VirtualBoostedPools,
    get_swap_data,
)
from swap_adapters.models import SwapKind
from tests.helpers import BBAUSD_VIRTUAL_ID, DAI, USDC

pytest.importorskip("web3")

SENDER = "0x" + "11" * 20


class StubEth:
    """Records eth_call arguments and returns a canned result."""

    def __init__(self, result: bytes | None = None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls: list[tuple[dict, object]] = []

    def call(self, tx: dict, block_identifier: object) -> bytes:
        self.calls.append((tx, block_identifier))
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


class StubWeb3:
    def __init__(self, eth: StubEth):
        self.eth = eth


def _querier(eth: StubEth, block_identifier: int | str = "latest"):
    from swap_adapters.balancer import Web3VaultQuerier

    querier = Web3VaultQuerier("http://localhost:8545", block_identifier=block_identifier)
    querier.w3 = StubWeb3(eth)  # type: ignore[assignment]
    return querier


class TestWeb3VaultQuerier:
    """Tests for Web3VaultQuerier.query_batch_swap."""

    def test_returns_decoded_deltas(self, virtual_pools: VirtualBoostedPools) -> None:
        deltas = [10**18, 0, 0, -999_500]
        eth = StubEth(result=encode(["int256[]"], [deltas]))
        plan = get_swap_data(DAI, USDC, BBAUSD_VIRTUAL_ID, 10**18, virtual_pools.dictionary)

        result = _querier(eth, block_identifier=16_000_000).query_batch_swap(
            plan, SwapKind.GIVEN_IN, FundManagement(sender=SENDER, recipient=SENDER)
        )

        assert result == deltas
        tx, block = eth.calls[0]
        assert tx["data"].startswith("0x" + QUERY_BATCH_SWAP_SELECTOR.hex())
        assert tx["to"].lower() == "0xba12222222228d8ba445958a75a0704d566bf2c8"
        assert block == 16_000_000

    def test_call_failure_returns_none(self, virtual_pools: VirtualBoostedPools) -> None:
        """Reverts and transport errors are logged and reported as None."""
        eth = StubEth(error=RuntimeError("execution reverted: BAL#211"))
        plan = get_swap_data(DAI, USDC, BBAUSD_VIRTUAL_ID, 10**18, virtual_pools.dictionary)

        result = _querier(eth).query_batch_swap(
            plan, SwapKind.GIVEN_IN, FundManagement(sender=SENDER, recipient=SENDER)
        )

        assert result is None
