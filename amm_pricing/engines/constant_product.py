"""Constant-product pricing engine.

Equal-weight pools use the constant product formula: x * y = k
With a fee in pips (default 30 = 0.3%) taken from the input amount.

Every product runs through the 128-bit Wide intermediate, so results are
exact integers and never wrap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import structlog

from amm_pricing.constants import DEFAULT_FEE, FEE_DENOMINATOR
from amm_pricing.engines.guards import fee_multiplier, require_liquidity
from amm_pricing.errors import InsufficientAmount, InsufficientInput, InsufficientOutput
from amm_pricing.safe_math import W, div, mul, uint64

if TYPE_CHECKING:
    from amm_pricing.pool import PoolState

logger = structlog.get_logger()


def get_amount_out(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    fee: int = DEFAULT_FEE,
) -> int:
    """Calculate the maximum output amount for a given input.

    Formula: amount_out = (in * (10000 - fee) * res_out) / (res_in * 10000 + in * (10000 - fee))

    Example:
        >>> get_amount_out(10000, 45851931234, 125682033533)
        27328

    Args:
        amount_in: Input token amount
        reserve_in: Reserve of input token in pool
        reserve_out: Reserve of output token in pool
        fee: Trading fee in pips (default 30 for 0.3%)

    Returns:
        Output token amount, rounded down

    Raises:
        InsufficientInput: If amount_in is zero
        InsufficientLiquidity: If either reserve is zero
        InvalidFee: If fee is outside [0, 10000)
        Overflow: If an intermediate exceeds 128 bits
    """
    amount_in, reserve_in, reserve_out = uint64(amount_in), uint64(reserve_in), uint64(reserve_out)
    if amount_in == 0:
        raise InsufficientInput("amount_in must be positive")
    require_liquidity(reserve_in, reserve_out)
    multiplier = fee_multiplier(fee)

    amount_in_with_fee = W(amount_in) * multiplier
    numerator = amount_in_with_fee * reserve_out
    denominator = W(reserve_in) * FEE_DENOMINATOR + amount_in_with_fee

    return (numerator // denominator).narrow()


def get_amount_in(
    amount_out: int,
    reserve_in: int,
    reserve_out: int,
    fee: int = DEFAULT_FEE,
) -> int:
    """Calculate the required input for a desired output.

    Formula: amount_in = (res_in * out * 10000) / ((res_out - out) * (10000 - fee)) + 1

    The +1 rounds up so the pool is never under-paid by truncation.

    Example:
        >>> get_amount_in(27328, 45851931234, 125682033533)
        10000

    Args:
        amount_out: Desired output token amount
        reserve_in: Reserve of input token in pool
        reserve_out: Reserve of output token in pool
        fee: Trading fee in pips (default 30 for 0.3%)

    Returns:
        Required input token amount, rounded up

    Raises:
        InsufficientOutput: If amount_out is zero
        InsufficientLiquidity: If either reserve is zero
        InvalidFee: If fee is outside [0, 10000)
        Underflow: If amount_out > reserve_out
        DivisionByZero: If amount_out == reserve_out
        Overflow: If an intermediate exceeds 128 bits or the result exceeds 64 bits
    """
    amount_out, reserve_in, reserve_out = uint64(amount_out), uint64(reserve_in), uint64(reserve_out)
    if amount_out == 0:
        raise InsufficientOutput("amount_out must be positive")
    require_liquidity(reserve_in, reserve_out)
    multiplier = fee_multiplier(fee)

    numerator = W(reserve_in) * amount_out * FEE_DENOMINATOR
    denominator = (W(reserve_out) - amount_out) * multiplier

    return ((numerator // denominator) + 1).narrow()


def quote(amount_a: int, reserve_a: int, reserve_b: int) -> int:
    """Convert amount_a to the equivalent amount of the other asset.

    Formula: amount_b = amount_a * reserve_b / reserve_a

    Fee-free spot conversion used when sizing liquidity deposits and
    withdrawals, not for trades.

    Example:
        >>> quote(10000, 45851931234, 125682033533)
        27410

    Raises:
        InsufficientAmount: If amount_a is zero
        InsufficientLiquidity: If either reserve is zero
        Overflow: If amount_a * reserve_b exceeds 64 bits
    """
    amount_a, reserve_a, reserve_b = uint64(amount_a), uint64(reserve_a), uint64(reserve_b)
    if amount_a == 0:
        raise InsufficientAmount("amount_a must be positive")
    require_liquidity(reserve_a, reserve_b)

    return div(mul(amount_a, reserve_b), reserve_a)


class ConstantProductEngine:
    """Exact-integer pricing for equal-weight pools.

    Prices against the pool's reserves and fee only. Weights are ignored,
    so this engine should only be selected for equal-weight pools.
    """

    name: ClassVar[str] = "constant_product"

    def get_amount_out(self, pool: PoolState, amount_in: int) -> int:
        """Output amount for selling amount_in into the pool."""
        amount_out = get_amount_out(amount_in, pool.reserve_in, pool.reserve_out, pool.fee)
        logger.debug(
            "constant_product_amount_out",
            amount_in=amount_in,
            amount_out=amount_out,
            reserve_in=pool.reserve_in,
            reserve_out=pool.reserve_out,
            fee=pool.fee,
        )
        return amount_out

    def get_amount_in(self, pool: PoolState, amount_out: int) -> int:
        """Input amount required to buy amount_out from the pool."""
        amount_in = get_amount_in(amount_out, pool.reserve_in, pool.reserve_out, pool.fee)
        logger.debug(
            "constant_product_amount_in",
            amount_in=amount_in,
            amount_out=amount_out,
            reserve_in=pool.reserve_in,
            reserve_out=pool.reserve_out,
            fee=pool.fee,
        )
        return amount_in

    def quote(self, pool: PoolState, amount_a: int) -> int:
        amount_b = quote(amount_a, pool.reserve_in, pool.reserve_out)
        logger.debug("constant_product_quote", amount_a=amount_a, amount_b=amount_b)
        return amount_b


# Singleton instance
constant_product_engine = ConstantProductEngine()
