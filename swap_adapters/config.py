"""Configuration for the swap adapters.

Per-network contract addresses live in one table keyed by the closed
``Network`` enum. The table is checked at import time, so a network without
an entry (or with a malformed address) fails on startup instead of on the
first quote.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from swap_adapters.constants import (
    BALANCER_VAULT,
    LINEAR_POOL_TYPES,
    PHANTOM_POOL_TYPES,
    VIRTUAL_BOOSTED_POOL_TYPE,
)
from swap_adapters.models.types import is_valid_address


class Network(str, Enum):
    """Networks the adapters are deployed on."""

    MAINNET = "mainnet"
    POLYGON = "polygon"
    ARBITRUM = "arbitrum"
    GNOSIS = "gnosis"


@dataclass(frozen=True)
class NetworkConfig:
    """Contract addresses for one network.

    Attributes:
        chain_id: EIP-155 chain id
        vault: Balancer V2 Vault address (target of batchSwap)
    """

    chain_id: int
    vault: str


@dataclass(frozen=True)
class BoostedPoolConfig:
    """How pool metadata is classified when building virtual boosted pools.

    Attributes:
        linear_pool_types: Pool types wrapping a single main token
        phantom_pool_types: Pool types whose tokens are linear pool tokens
        virtual_pool_type: Type tag given to synthesized virtual pools
    """

    linear_pool_types: frozenset[str] = LINEAR_POOL_TYPES
    phantom_pool_types: frozenset[str] = PHANTOM_POOL_TYPES
    virtual_pool_type: str = VIRTUAL_BOOSTED_POOL_TYPE

    @property
    def suffix(self) -> str:
        """Suffix appended to phantom pool id/address for the virtual pool."""
        return self.virtual_pool_type.lower()


DEFAULT_BOOSTED_POOL_CONFIG = BoostedPoolConfig()


def _validate_network_configs(
    configs: dict[Network, NetworkConfig],
) -> MappingProxyType[Network, NetworkConfig]:
    """Check that every network has a well-formed entry.

    Raises:
        ValueError: If a network is missing or an address is invalid
    """
    missing = [network.value for network in Network if network not in configs]
    if missing:
        raise ValueError(f"Missing network configuration for: {', '.join(missing)}")
    for network, config in configs.items():
        if not is_valid_address(config.vault):
            raise ValueError(f"Invalid vault address for {network.value}: {config.vault}")
        if config.chain_id <= 0:
            raise ValueError(f"Invalid chain id for {network.value}: {config.chain_id}")
    return MappingProxyType(dict(configs))


NETWORK_CONFIGS = _validate_network_configs(
    {
        Network.MAINNET: NetworkConfig(chain_id=1, vault=BALANCER_VAULT),
        Network.POLYGON: NetworkConfig(chain_id=137, vault=BALANCER_VAULT),
        Network.ARBITRUM: NetworkConfig(chain_id=42161, vault=BALANCER_VAULT),
        Network.GNOSIS: NetworkConfig(chain_id=100, vault=BALANCER_VAULT),
    }
)


def get_network_config(network: Network | str) -> NetworkConfig:
    """Get the configuration for a network.

    Raises:
        ValueError: If the network name is unknown
    """
    return NETWORK_CONFIGS[Network(network)]


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the adapter service.

    Attributes:
        network: Network the service prices for
        host: API bind host
        port: API bind port
        rpc_url: Optional RPC endpoint for on-chain verification
    """

    network: Network = Network.MAINNET
    host: str = "0.0.0.0"
    port: int = 8000
    rpc_url: str | None = None

    @property
    def network_config(self) -> NetworkConfig:
        return NETWORK_CONFIGS[self.network]


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build settings from environment variables.

    Configuration via environment variables:
    - SWAP_ADAPTERS_NETWORK: Network name (default: mainnet)
    - SWAP_ADAPTERS_HOST: Host to bind to (default: 0.0.0.0)
    - SWAP_ADAPTERS_PORT: Port to bind to (default: 8000)
    - RPC_URL: RPC endpoint (default: unset)

    Raises:
        ValueError: If the network name or port is invalid
    """
    env = os.environ if environ is None else environ
    network_raw = env.get("SWAP_ADAPTERS_NETWORK", Network.MAINNET.value)
    try:
        network = Network(network_raw.lower())
    except ValueError as err:
        valid = ", ".join(n.value for n in Network)
        raise ValueError(f"Unknown network '{network_raw}' (valid: {valid})") from err

    port_raw = env.get("SWAP_ADAPTERS_PORT", "8000")
    try:
        port = int(port_raw)
    except ValueError as err:
        raise ValueError(f"Invalid port: '{port_raw}'") from err

    return Settings(
        network=network,
        host=env.get("SWAP_ADAPTERS_HOST", "0.0.0.0"),
        port=port,
        rpc_url=env.get("RPC_URL") or None,
    )
