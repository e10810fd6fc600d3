"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from swap_adapters.balancer import VirtualBoostedPool, VirtualBoostedPools, create_pools
from tests.helpers import make_bbausd_pools


@pytest.fixture
def bbausd_pools() -> list[dict[str, Any]]:
    """Raw subgraph metadata for bb-a-USD and its linear pools."""
    return make_bbausd_pools()


@pytest.fixture
def virtual_pools(bbausd_pools: list[dict[str, Any]]) -> VirtualBoostedPools:
    """Topology snapshot built from bb-a-USD metadata."""
    return create_pools(bbausd_pools)


@pytest.fixture
def adapter() -> VirtualBoostedPool:
    """Virtual boosted pool adapter on the mainnet Vault."""
    return VirtualBoostedPool()
