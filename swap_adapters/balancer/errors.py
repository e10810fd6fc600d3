"""Balancer error classes.

Virtual pool errors mean "this pool cannot serve this request": callers
drop the pool and keep evaluating alternatives instead of retrying.
"""


class BalancerError(Exception):
    """Base error for Balancer operations."""

    pass


class VirtualPoolError(BalancerError):
    """Base error for virtual boosted pool routing."""

    pass


class UnknownVirtualPool(VirtualPoolError):
    """Pool id is not present in the current topology snapshot."""

    def __init__(self, pool_id: str) -> None:
        super().__init__(f"Unknown VirtualBoostedPool: {pool_id}")
        self.pool_id = pool_id


class InvalidVirtualPoolId(VirtualPoolError):
    """Pool id passed to swap compilation is not in the snapshot."""

    def __init__(self, pool_id: str) -> None:
        super().__init__(f"Invalid VirtualBoostedPool ID: {pool_id}")
        self.pool_id = pool_id


class TokenMissing(VirtualPoolError):
    """Requested token is not one of the virtual pool's main tokens."""

    def __init__(self, pool_id: str, token: str) -> None:
        super().__init__(f"Token missing: {token} not in {pool_id}")
        self.pool_id = pool_id
        self.token = token


class InvalidTokenPair(VirtualPoolError):
    """Token in and token out are the same main token."""

    def __init__(self, pool_id: str, token: str) -> None:
        super().__init__(f"Invalid token pair: {token} -> {token} in {pool_id}")
        self.pool_id = pool_id
        self.token = token


class LiquidityUnavailable(VirtualPoolError):
    """Reserves could not be confirmed for the requested amount."""

    pass
