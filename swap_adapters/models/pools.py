"""Pydantic models for pool metadata as delivered by the pool-metadata provider.

The same shape is used for physical pools (input) and for synthesized
virtual pool listings (output), so both can sit in one pool catalog.
"""

from pydantic import BaseModel, Field

from swap_adapters.models.types import Address, normalize_address


class SubgraphToken(BaseModel):
    """A token entry of a pool's ordered token list."""

    address: Address
    # Some exotic tokens may use more than 18 decimals, so we allow up to 77 (max for uint256)
    decimals: int = Field(ge=0, le=77)

    model_config = {"frozen": True}


class SubgraphPool(BaseModel):
    """Pool metadata record.

    Pool addresses are plain strings rather than ``Address`` because
    virtual pool listings carry a type suffix after the phantom address.
    """

    id: str = Field(min_length=1)
    address: str = Field(min_length=1)
    pool_type: str = Field(alias="poolType")
    tokens: tuple[SubgraphToken, ...] = ()
    main_index: int | None = Field(default=None, alias="mainIndex", ge=0)
    wrapped_index: int | None = Field(default=None, alias="wrappedIndex", ge=0)

    model_config = {"populate_by_name": True, "frozen": True}

    def has_token(self, token: str) -> bool:
        """Whether ``token`` appears in the pool's token list (any case)."""
        token_norm = normalize_address(token)
        return any(normalize_address(t.address) == token_norm for t in self.tokens)
