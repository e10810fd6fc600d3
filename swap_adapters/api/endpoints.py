"""API endpoints for virtual boosted pools."""

from typing import Any

import structlog
from eth_abi.exceptions import EncodingError
from fastapi import APIRouter, Depends, HTTPException, Request

from swap_adapters.balancer import (
    FundManagement,
    InvalidTokenPair,
    InvalidVirtualPoolId,
    TokenMissing,
    VirtualBoostedPool,
    VirtualBoostedPools,
    create_pools,
    encode_batch_swap,
)
from swap_adapters.models.pools import SubgraphPool
from swap_adapters.models.requests import (
    BatchSwapRequest,
    BatchSwapResponse,
    SnapshotSummary,
    SwapDataRequest,
)
from swap_adapters.models.swaps import SwapPlan

logger = structlog.get_logger()

router = APIRouter()


def get_snapshot(request: Request) -> VirtualBoostedPools:
    """Dependency provider for the current topology snapshot.

    Override this in tests to inject a prepared snapshot:
        app.dependency_overrides[get_snapshot] = lambda: snapshot
    """
    snapshot: VirtualBoostedPools = request.app.state.snapshot
    return snapshot


def get_adapter(request: Request) -> VirtualBoostedPool:
    """Dependency provider for the virtual boosted pool adapter."""
    adapter: VirtualBoostedPool = request.app.state.adapter
    return adapter


@router.post("/virtual-pools", response_model=SnapshotSummary)
def load_virtual_pools(pools: list[dict[str, Any]], request: Request) -> SnapshotSummary:
    """Rebuild the topology snapshot from a fresh batch of pool metadata.

    The previous snapshot is replaced as a whole; requests already holding
    it keep a consistent view.
    """
    snapshot = create_pools(pools, request.app.state.adapter.config)
    request.app.state.snapshot = snapshot

    logger.info(
        "snapshot_replaced",
        virtual_pool_count=len(snapshot),
        skipped_linear_pools=len(snapshot.skipped_linear_pools),
    )

    return SnapshotSummary(
        virtual_pool_count=len(snapshot),
        skipped_linear_pools=list(snapshot.skipped_linear_pools),
        invalid_pool_count=snapshot.invalid_pool_count,
    )


@router.get("/virtual-pools", response_model=list[SubgraphPool])
def list_virtual_pools(
    token_a: str | None = None,
    token_b: str | None = None,
    snapshot: VirtualBoostedPools = Depends(get_snapshot),
) -> list[SubgraphPool]:
    """List virtual pool listings, optionally only those holding the given tokens."""
    if token_a and token_b:
        return snapshot.get_pools_for_pair(token_a, token_b)
    token = token_a or token_b
    if token:
        return [pool for pool in snapshot.subgraph if pool.has_token(token)]
    return list(snapshot.subgraph)


def _compile(
    pool_id: str,
    body: SwapDataRequest,
    snapshot: VirtualBoostedPools,
) -> SwapPlan:
    try:
        return VirtualBoostedPool.get_swap_data(
            body.token_in,
            body.token_out,
            pool_id,
            body.amount,
            snapshot.dictionary,
            body.side.swap_kind,
        )
    except InvalidVirtualPoolId as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except (TokenMissing, InvalidTokenPair, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.post("/virtual-pools/{pool_id}/swap-data", response_model=SwapPlan)
def swap_data(
    pool_id: str,
    body: SwapDataRequest,
    snapshot: VirtualBoostedPools = Depends(get_snapshot),
) -> SwapPlan:
    """Compile the batch swap for a trade through a virtual pool.

    Error Handling:
        - Unknown pool id: 404
        - Token not in pool, same token in and out, zero amount: 400
        - Invalid request schema: 422 (Pydantic)
    """
    return _compile(pool_id, body, snapshot)


@router.post("/virtual-pools/{pool_id}/batch-swap", response_model=BatchSwapResponse)
def batch_swap(
    pool_id: str,
    body: BatchSwapRequest,
    snapshot: VirtualBoostedPools = Depends(get_snapshot),
    adapter: VirtualBoostedPool = Depends(get_adapter),
) -> BatchSwapResponse:
    """Compile and encode a Vault batchSwap call for a trade."""
    plan = _compile(pool_id, body, snapshot)

    funds = FundManagement(
        sender=body.sender,
        recipient=body.recipient,
        from_internal_balance=body.from_internal_balance,
        to_internal_balance=body.to_internal_balance,
    )
    try:
        data = encode_batch_swap(plan, body.side.swap_kind, funds, body.deadline)
    except (ValueError, EncodingError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    logger.info(
        "batch_swap_encoded",
        virtual_pool_id=pool_id,
        token_in=body.token_in,
        token_out=body.token_out,
        side=body.side.value,
    )

    return BatchSwapResponse(to=adapter.vault_address, data=data)
