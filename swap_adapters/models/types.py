"""Shared type definitions for pool metadata and swap plans.

Amounts travel as decimal strings so they survive JSON without precision
loss; addresses and pool ids are 0x-prefixed hex.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

UINT256_MAX = 2**256 - 1

# Vault limits are int256, so "unbounded" is the signed maximum
INT256_MAX = 2**255 - 1

ADDRESS_HEX_LENGTH = 40
POOL_ID_HEX_LENGTH = 64


def validate_uint256(value: Any) -> str:
    """Coerce an amount to its canonical uint256 decimal string.

    Accepts ints and decimal strings; "0001" becomes "1" so equal amounts
    compare equal downstream.

    Raises:
        ValueError: For bools, floats, non-decimal strings, negatives and
            values above 2^256-1
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    try:
        amount = int(value)
    except ValueError as err:
        raise ValueError(f"Uint256 must be a decimal integer string: '{value}'") from err

    if not 0 <= amount <= UINT256_MAX:
        raise ValueError(f"Uint256 out of range [0, 2^256-1]: {value}")
    return str(amount)


Address = Annotated[str, Field(pattern=rf"^0x[a-fA-F0-9]{{{ADDRESS_HEX_LENGTH}}}$")]

Uint256 = Annotated[
    str,
    BeforeValidator(validate_uint256),
    Field(description="256-bit unsigned integer as decimal string"),
]

Bytes = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]*$")]


def _is_prefixed_hex(value: Any, hex_length: int) -> bool:
    if not isinstance(value, str) or not value.startswith("0x"):
        return False
    if len(value) != hex_length + 2:
        return False
    try:
        int(value, 16)
    except ValueError:
        return False
    return True


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Lowercase an address and make sure it carries the 0x prefix.

    Without ``validate`` the input is not checked, only normalized.

    Raises:
        ValueError: If validate=True and the result is not a valid address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a 20-byte address (0x + 40 hex chars)."""
    return _is_prefixed_hex(address, ADDRESS_HEX_LENGTH)


def is_valid_pool_id(pool_id: str) -> bool:
    """Check if a string is a 32-byte Balancer pool id (0x + 64 hex chars)."""
    return _is_prefixed_hex(pool_id, POOL_ID_HEX_LENGTH)
