"""Balancer Vault calldata encoding for batch swaps."""

from __future__ import annotations

from dataclasses import dataclass

from eth_abi import decode, encode  # type: ignore[attr-defined]

from swap_adapters.models.swaps import SwapKind, SwapPlan, SwapStep
from swap_adapters.models.types import is_valid_pool_id, normalize_address

# batchSwap(uint8,(bytes32,uint256,uint256,uint256,bytes)[],address[],(address,bool,address,bool),int256[],uint256)
BATCH_SWAP_SELECTOR = bytes.fromhex("945bcec9")

# queryBatchSwap(uint8,(bytes32,uint256,uint256,uint256,bytes)[],address[],(address,bool,address,bool))
QUERY_BATCH_SWAP_SELECTOR = bytes.fromhex("f84d066e")

_SWAP_STEP_TYPE = "(bytes32,uint256,uint256,uint256,bytes)[]"
_FUNDS_TYPE = "(address,bool,address,bool)"

QUERY_BATCH_SWAP_TYPES = ["uint8", _SWAP_STEP_TYPE, "address[]", _FUNDS_TYPE]
BATCH_SWAP_TYPES = [*QUERY_BATCH_SWAP_TYPES, "int256[]", "uint256"]


@dataclass(frozen=True)
class FundManagement:
    """Vault ``FundManagement`` struct.

    Attributes:
        sender: Account the Vault pulls input tokens from
        recipient: Account receiving output tokens
        from_internal_balance: Use the sender's Vault internal balance
        to_internal_balance: Credit the recipient's Vault internal balance
    """

    sender: str
    recipient: str
    from_internal_balance: bool = False
    to_internal_balance: bool = False

    def as_tuple(self) -> tuple[str, bool, str, bool]:
        return (
            normalize_address(self.sender, validate=True),
            self.from_internal_balance,
            normalize_address(self.recipient, validate=True),
            self.to_internal_balance,
        )


def _encode_step(step: SwapStep) -> tuple[bytes, int, int, int, bytes]:
    if not is_valid_pool_id(step.pool_id):
        raise ValueError(f"Invalid pool id: {step.pool_id} (must be 0x + 64 hex chars)")
    return (
        bytes.fromhex(step.pool_id[2:]),
        step.asset_in_index,
        step.asset_out_index,
        int(step.amount),
        bytes.fromhex(step.user_data[2:]),
    )


def _query_args(plan: SwapPlan, kind: SwapKind, funds: FundManagement) -> list[object]:
    return [
        int(kind),
        [_encode_step(step) for step in plan.swaps],
        [normalize_address(asset, validate=True) for asset in plan.assets],
        funds.as_tuple(),
    ]


def encode_batch_swap(
    plan: SwapPlan,
    kind: SwapKind,
    funds: FundManagement,
    deadline: int,
    limits: list[int] | None = None,
) -> str:
    """Encode Vault.batchSwap.

    Args:
        plan: Compiled swap plan
        kind: GIVEN_IN or GIVEN_OUT
        funds: Sender/recipient settings
        deadline: Unix timestamp after which the swap reverts
        limits: Per-asset limits overriding the plan's (same length as assets)

    Returns:
        Hex-encoded calldata with 0x prefix

    Raises:
        ValueError: If an address, pool id or the limits length is invalid
    """
    if limits is None:
        limits = [int(limit) for limit in plan.limits]
    if len(limits) != len(plan.assets):
        raise ValueError(f"Expected {len(plan.assets)} limits, got {len(limits)}")

    params = encode(BATCH_SWAP_TYPES, [*_query_args(plan, kind, funds), limits, deadline])
    return "0x" + (BATCH_SWAP_SELECTOR + params).hex()


def encode_query_batch_swap(plan: SwapPlan, kind: SwapKind, funds: FundManagement) -> str:
    """Encode Vault.queryBatchSwap (returns asset deltas when eth_call'ed)."""
    params = encode(QUERY_BATCH_SWAP_TYPES, _query_args(plan, kind, funds))
    return "0x" + (QUERY_BATCH_SWAP_SELECTOR + params).hex()


def decode_asset_deltas(data: bytes | str) -> list[int]:
    """Decode the int256[] returned by queryBatchSwap.

    Positive deltas are sent to the Vault, negative deltas received.
    """
    if isinstance(data, str):
        data = bytes.fromhex(data[2:] if data.startswith("0x") else data)
    (deltas,) = decode(["int256[]"], data)
    return list(deltas)
