"""Swap adapters - Balancer virtual boosted pool routing."""

from swap_adapters.balancer import VirtualBoostedPool, create_pools, get_swap_data

__version__ = "0.1.0"
__all__ = ["VirtualBoostedPool", "create_pools", "get_swap_data", "__version__"]
