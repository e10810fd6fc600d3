"""Protocol constants for the swap adapters.

Centralizes well-known addresses and protocol parameters.
"""

from swap_adapters.models.types import INT256_MAX, is_valid_address


def _validate_contract_address(name: str, address: str) -> str:
    """Validate and return a contract address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Balancer V2 Vault (same address on every supported network, lowercase)
BALANCER_VAULT = _validate_contract_address(
    "Balancer Vault", "0xba12222222228d8ba445958a75a0704d566bf2c8"
)

# Per-asset limit meaning "no limit" in a batch swap
MAX_INT = str(INT256_MAX)

# Pool type tag of synthesized virtual pools
VIRTUAL_BOOSTED_POOL_TYPE = "VirtualBoosted"

# Pool types that wrap one main token
LINEAR_POOL_TYPES = frozenset(
    {"AaveLinear", "ERC4626Linear", "EulerLinear", "GearboxLinear", "Linear"}
)

# Pool types aggregating linear pool tokens
PHANTOM_POOL_TYPES = frozenset({"StablePhantom"})
