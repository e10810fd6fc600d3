"""Virtual boosted pool topology.

Builds, from one batch of pool metadata, the dictionary of virtual boosted
pools (phantom pool + the linear pools feeding it) and the pool listings
that expose them to the pricing pipeline.

The result is a snapshot: it is rebuilt wholesale whenever fresh metadata
arrives and is never modified afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import structlog
from pydantic import ValidationError

from swap_adapters.config import DEFAULT_BOOSTED_POOL_CONFIG, BoostedPoolConfig
from swap_adapters.models.pools import SubgraphPool, SubgraphToken
from swap_adapters.models.types import normalize_address

from .errors import UnknownVirtualPool
from .pools import LinearPool, MainToken, PhantomPool, VirtualBoostedPoolInfo

logger = structlog.get_logger()

VirtualBoostedPoolDictionary = Mapping[str, VirtualBoostedPoolInfo]


@dataclass(frozen=True)
class VirtualBoostedPools:
    """Immutable topology snapshot for one refresh cycle.

    Attributes:
        dictionary: Virtual pool id -> pool info (read-only mapping)
        subgraph: Virtual pool listings, in dictionary order
        skipped_linear_pools: Ids of linear pools that could not be attached
            to a phantom pool in this batch
        invalid_pool_count: Metadata records rejected by validation
    """

    dictionary: VirtualBoostedPoolDictionary = field(
        default_factory=lambda: MappingProxyType({})
    )
    subgraph: tuple[SubgraphPool, ...] = ()
    skipped_linear_pools: tuple[str, ...] = ()
    invalid_pool_count: int = 0

    def __len__(self) -> int:
        return len(self.dictionary)

    def get(self, pool_id: str) -> VirtualBoostedPoolInfo:
        """Get a virtual pool by id.

        Raises:
            UnknownVirtualPool: If the id is not in this snapshot
        """
        info = self.dictionary.get(pool_id)
        if info is None:
            raise UnknownVirtualPool(pool_id)
        return info

    def get_pools_for_pair(self, token_a: str, token_b: str) -> list[SubgraphPool]:
        """Get virtual pool listings that contain both tokens (any order, any case)."""
        if normalize_address(token_a) == normalize_address(token_b):
            return []
        return [
            pool for pool in self.subgraph if pool.has_token(token_a) and pool.has_token(token_b)
        ]


def parse_subgraph_pools(
    pools: Iterable[SubgraphPool | Mapping[str, Any]],
) -> tuple[list[SubgraphPool], int]:
    """Validate raw metadata records.

    Records that fail validation are logged and dropped.

    Returns:
        Tuple of (valid pools, number of rejected records)
    """
    parsed: list[SubgraphPool] = []
    rejected = 0
    for raw in pools:
        if isinstance(raw, SubgraphPool):
            parsed.append(raw)
            continue
        try:
            parsed.append(SubgraphPool.model_validate(raw))
        except ValidationError as e:
            rejected += 1
            logger.warning(
                "subgraph_pool_invalid",
                pool_id=raw.get("id") if isinstance(raw, Mapping) else None,
                error_count=e.error_count(),
            )
    return parsed, rejected


def index_virtual_pools(
    pools: Iterable[SubgraphPool],
    config: BoostedPoolConfig = DEFAULT_BOOSTED_POOL_CONFIG,
) -> tuple[dict[str, VirtualBoostedPoolInfo], list[str]]:
    """Discover virtual boosted pools in a batch of pool metadata.

    Each linear pool is attached to the phantom pool whose token list
    contains the linear pool's own token. Main tokens keep the order in which
    their linear pool tokens appear in the phantom pool's token list.

    Args:
        pools: Pool metadata for one refresh cycle
        config: Pool type classification

    Returns:
        Tuple of (dictionary keyed by phantom id + suffix, ids of skipped
        linear pools)
    """
    linear_pools: dict[str, LinearPool] = {}
    phantom_pools: list[PhantomPool] = []
    skipped: list[str] = []

    for pool in pools:
        if pool.pool_type in config.linear_pool_types:
            linear = LinearPool.from_subgraph(pool)
            if linear is None:
                logger.warning(
                    "linear_pool_invalid_main_index",
                    pool_id=pool.id,
                    main_index=pool.main_index,
                    token_count=len(pool.tokens),
                )
                skipped.append(pool.id)
                continue
            addr = normalize_address(linear.address)
            if addr in linear_pools:
                logger.warning(
                    "linear_pool_duplicate",
                    pool_id=pool.id,
                    kept_pool_id=linear_pools[addr].id,
                )
                skipped.append(pool.id)
                continue
            linear_pools[addr] = linear
        elif pool.pool_type in config.phantom_pool_types:
            phantom_pools.append(PhantomPool.from_subgraph(pool))

    dictionary: dict[str, VirtualBoostedPoolInfo] = {}
    attached: set[str] = set()

    for phantom in phantom_pools:
        main_tokens: list[MainToken] = []
        # Main token -> id of the linear pool already wrapping it
        seen: dict[str, str] = {}
        for token in phantom.tokens:
            # Phantom's own bpt and non-linear tokens have no linear pool
            linear = linear_pools.get(normalize_address(token.address))
            if linear is None:
                continue
            attached.add(normalize_address(linear.address))

            main_addr = normalize_address(linear.main_token.address)
            if main_addr in seen:
                logger.warning(
                    "linear_pool_duplicate_main_token",
                    pool_id=linear.id,
                    phantom_pool_id=phantom.id,
                    main_token=main_addr,
                    kept_pool_id=seen[main_addr],
                )
                skipped.append(linear.id)
                continue
            seen[main_addr] = linear.id
            main_tokens.append(_main_token(linear))

        if not main_tokens:
            logger.debug("phantom_pool_without_linear_pools", pool_id=phantom.id)
            continue

        virtual_id = phantom.id + config.suffix
        if virtual_id in dictionary:
            logger.warning("phantom_pool_duplicate", pool_id=phantom.id)
            continue

        dictionary[virtual_id] = VirtualBoostedPoolInfo(
            id=virtual_id,
            phantom_pool_id=phantom.id,
            phantom_pool_addr=phantom.address,
            main_tokens=tuple(main_tokens),
        )

    for addr, linear in linear_pools.items():
        if addr not in attached:
            skipped.append(linear.id)

    if skipped:
        logger.warning(
            "linear_pools_skipped",
            count=len(skipped),
            pool_ids=skipped,
            message="No phantom pool in this batch (possible partial metadata fetch)",
        )

    return dictionary, skipped


def _main_token(linear: LinearPool) -> MainToken:
    main: SubgraphToken = linear.main_token
    return MainToken(
        address=main.address,
        decimals=main.decimals,
        linear_pool_addr=linear.pool_token,
        linear_pool_id=linear.id,
    )


def make_virtual_pool_descriptors(
    dictionary: VirtualBoostedPoolDictionary,
    config: BoostedPoolConfig = DEFAULT_BOOSTED_POOL_CONFIG,
) -> list[SubgraphPool]:
    """Synthesize pool listings for virtual boosted pools.

    Listings look like any physical pool: id/address are the phantom pool's
    with the type suffix appended, and only main tokens are exposed.
    """
    return [
        SubgraphPool(
            id=info.id,
            address=info.phantom_pool_addr + config.suffix,
            pool_type=config.virtual_pool_type,
            tokens=tuple(
                SubgraphToken(address=t.address, decimals=t.decimals) for t in info.main_tokens
            ),
        )
        for info in dictionary.values()
    ]


def create_pools(
    pools: Iterable[SubgraphPool | Mapping[str, Any]],
    config: BoostedPoolConfig = DEFAULT_BOOSTED_POOL_CONFIG,
) -> VirtualBoostedPools:
    """Build the virtual boosted pool snapshot for one batch of metadata.

    Args:
        pools: Pool metadata (models or raw dicts with camelCase keys)
        config: Pool type classification

    Returns:
        VirtualBoostedPools snapshot
    """
    parsed, rejected = parse_subgraph_pools(pools)
    dictionary, skipped = index_virtual_pools(parsed, config)
    subgraph = make_virtual_pool_descriptors(dictionary, config)

    logger.info(
        "virtual_pools_built",
        pool_count=len(parsed),
        virtual_pool_count=len(dictionary),
        skipped_linear_pools=len(skipped),
        invalid_pools=rejected,
    )

    return VirtualBoostedPools(
        dictionary=MappingProxyType(dictionary),
        subgraph=tuple(subgraph),
        skipped_linear_pools=tuple(skipped),
        invalid_pool_count=rejected,
    )
