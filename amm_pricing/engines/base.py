"""Pricing engine interface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from amm_pricing.pool import PoolState


@runtime_checkable
class PricingEngine(Protocol):
    """Protocol for two-asset pool pricing engines.

    Both the exact-integer constant-product engine and the floating-point
    weighted engine implement this interface over a PoolState, so a caller
    can pick one per pool (see amm_pricing.pool.select_engine) and use it
    without knowing which formula is behind it.

    All methods are pure: they read the pool and return a 64-bit amount, or
    raise a PricingError / SafeMathError that the host must treat as
    "abort the whole operation".
    """

    name: str

    def get_amount_out(self, pool: PoolState, amount_in: int) -> int:
        """Calculate output amount for a given input.

        Args:
            pool: Current pool state (reserves, weights, fee)
            amount_in: Input token amount

        Returns:
            Output token amount (rounded down)
        """
        ...

    def get_amount_in(self, pool: PoolState, amount_out: int) -> int:
        """Calculate required input for a desired output.

        Args:
            pool: Current pool state (reserves, weights, fee)
            amount_out: Desired output token amount

        Returns:
            Required input token amount (rounded up)
        """
        ...

    def quote(self, pool: PoolState, amount_a: int) -> int:
        """Convert an amount at the current spot price, ignoring fees.

        Args:
            pool: Current pool state; reserve_in prices amount_a
            amount_a: Amount of the input-side asset

        Returns:
            Equivalent amount of the output-side asset (rounded down)
        """
        ...
