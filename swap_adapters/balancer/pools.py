"""Balancer pool dataclasses.

Data structures for the physical pools that make up a virtual boosted pool
and for the virtual pool itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from swap_adapters.models.pools import SubgraphPool, SubgraphToken
from swap_adapters.models.types import normalize_address


@dataclass(frozen=True)
class LinearPool:
    """Pool wrapping exactly one main token.

    Attributes:
        id: balancerPoolId (32-byte hex string)
        address: Pool contract address, which is also its pool token (bpt)
        tokens: Ordered token list (bpt, main token, wrapped token in some order)
        main_index: Index of the main token in ``tokens``
        wrapped_index: Index of the wrapped token in ``tokens``
    """

    id: str
    address: str
    tokens: tuple[SubgraphToken, ...]
    main_index: int
    wrapped_index: int | None = None

    @property
    def pool_token(self) -> str:
        return self.address

    @property
    def main_token(self) -> SubgraphToken:
        return self.tokens[self.main_index]

    @classmethod
    def from_subgraph(cls, pool: SubgraphPool) -> LinearPool | None:
        """Build from metadata, or None when the main index is unusable."""
        if pool.main_index is None or pool.main_index >= len(pool.tokens):
            return None
        return cls(
            id=pool.id,
            address=pool.address,
            tokens=pool.tokens,
            main_index=pool.main_index,
            wrapped_index=pool.wrapped_index,
        )


@dataclass(frozen=True)
class PhantomPool:
    """Pool whose tokens are linear pool tokens (plus its own bpt).

    Attributes:
        id: balancerPoolId
        address: Pool contract address
        tokens: Ordered token list
    """

    id: str
    address: str
    tokens: tuple[SubgraphToken, ...]

    @classmethod
    def from_subgraph(cls, pool: SubgraphPool) -> PhantomPool:
        return cls(id=pool.id, address=pool.address, tokens=pool.tokens)


@dataclass(frozen=True)
class MainToken:
    """A real asset reachable through a virtual boosted pool.

    Attributes:
        address: Main token address
        decimals: Main token decimals
        linear_pool_addr: Address (= pool token) of the linear pool wrapping it
        linear_pool_id: balancerPoolId of that linear pool
    """

    address: str
    decimals: int
    linear_pool_addr: str
    linear_pool_id: str


@dataclass(frozen=True)
class VirtualBoostedPoolInfo:
    """Topology of one virtual boosted pool.

    Attributes:
        id: Virtual pool id (phantom pool id + type suffix)
        phantom_pool_id: balancerPoolId of the phantom pool
        phantom_pool_addr: Phantom pool address
        main_tokens: Main tokens in the order their linear pool tokens
            appear in the phantom pool's token list
    """

    id: str
    phantom_pool_id: str
    phantom_pool_addr: str
    main_tokens: tuple[MainToken, ...]

    def get_main_token(self, token: str) -> MainToken | None:
        """Get the main token entry for an address (any case)."""
        token_lower = normalize_address(token)
        for main_token in self.main_tokens:
            if normalize_address(main_token.address) == token_lower:
                return main_token
        return None


@dataclass(frozen=True)
class VirtualBoostedPoolPairData:
    """Pair context resolved for one quote request.

    Attributes:
        token_in: Requested input token, unchanged
        token_out: Requested output token, unchanged
        virtual_pool_id: Id of the virtual pool listing
        phantom_pool_id: Phantom pool id of the virtual pool
    """

    token_in: str
    token_out: str
    virtual_pool_id: str
    phantom_pool_id: str
