"""Weighted pricing engine.

Weighted pools generalize the constant product invariant to the geometric
mean: reserve_in^weight_in * reserve_out^weight_out = k

The exponent weight_in / weight_out is not an integer, so get_amount_out
evaluates the power in floating point and truncates the result to a 64-bit
amount. get_amount_in and quote only scale by the weight ratio, which is
rational, so they stay in exact Wide integer arithmetic with the weights
reduced to lowest terms.

At equal weights get_amount_out reduces algebraically to the constant product
formula, but the float path does not reproduce the integer engine bit for bit.
The gap is bounded by EQUAL_WEIGHT_TOLERANCE units for representative
reserves and amounts; it is a known approximation, not reconciled.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, ClassVar

import structlog

from amm_pricing.constants import DEFAULT_FEE, FEE_DENOMINATOR
from amm_pricing.engines.guards import fee_multiplier, require_liquidity, require_weights
from amm_pricing.errors import InsufficientAmount, InsufficientInput, InsufficientOutput
from amm_pricing.safe_math import W, narrow, uint64

if TYPE_CHECKING:
    from amm_pricing.pool import PoolState

logger = structlog.get_logger()

# Max difference (in output units) against the constant product engine when
# weight_in == weight_out
EQUAL_WEIGHT_TOLERANCE = 2


def get_amount_out(
    amount_in: int,
    reserve_in: int,
    weight_in: int,
    reserve_out: int,
    weight_out: int,
    fee: int = DEFAULT_FEE,
) -> int:
    """Calculate the output amount for a given input (sell order).

    Formula:
        base = res_in * 10000 / (res_in * 10000 + in * (10000 - fee))
        amount_out = res_out * (1 - base^(weight_in / weight_out))

    base^ratio is evaluated as exp(-ratio * log1p(x)) with
    x = in * (10000 - fee) / (res_in * 10000), which is the same value
    without the cancellation of 1 - base for small trades.

    Args:
        amount_in: Input token amount
        reserve_in: Reserve of input token in pool
        weight_in: Weight of input token
        reserve_out: Reserve of output token in pool
        weight_out: Weight of output token
        fee: Trading fee in pips (default 30 for 0.3%)

    Returns:
        Output token amount, truncated

    Raises:
        InsufficientInput: If amount_in is zero
        InsufficientLiquidity: If either reserve is zero
        InvalidWeight: If either weight is zero
        InvalidFee: If fee is outside [0, 10000)
    """
    amount_in, reserve_in, reserve_out = uint64(amount_in), uint64(reserve_in), uint64(reserve_out)
    weight_in, weight_out = uint64(weight_in), uint64(weight_out)
    if amount_in == 0:
        raise InsufficientInput("amount_in must be positive")
    require_liquidity(reserve_in, reserve_out)
    require_weights(weight_in, weight_out)
    multiplier = fee_multiplier(fee)

    weight_ratio = weight_in / weight_out
    amount_in_with_fee = W(amount_in) * multiplier
    scaled_reserve_in = W(reserve_in) * FEE_DENOMINATOR

    # 1 - base^ratio, with base = 1 / (1 + x)
    x = amount_in_with_fee.value / scaled_reserve_in.value
    complement = -math.expm1(-weight_ratio * math.log1p(x))

    # The exact value is strictly below reserve_out
    amount_out = min(int(reserve_out * complement), reserve_out - 1)
    return narrow(max(amount_out, 0))


def _reduced_ratio(weight_a: int, weight_b: int) -> tuple[int, int]:
    """weight_a / weight_b in lowest terms, so only the ratio reaches the math."""
    g = math.gcd(weight_a, weight_b)
    return weight_a // g, weight_b // g


def get_amount_in(
    amount_out: int,
    reserve_in: int,
    weight_in: int,
    reserve_out: int,
    weight_out: int,
    fee: int = DEFAULT_FEE,
) -> int:
    """Calculate the required input for a desired output (buy order).

    Formula:
        amount_in = (res_in * out * 10000) / ((res_out - out) * (10000 - fee) * weight_in / weight_out) + 1

    The weight ratio is rational, so the division is carried out exactly in
    Wide as (res_in * out * 10000 * weight_out) // ((res_out - out) * (10000 - fee) * weight_in).
    The +1 rounds up, as in the constant product engine.

    Args:
        amount_out: Desired output token amount
        reserve_in: Reserve of input token in pool
        weight_in: Weight of input token
        reserve_out: Reserve of output token in pool
        weight_out: Weight of output token
        fee: Trading fee in pips (default 30 for 0.3%)

    Returns:
        Required input token amount, rounded up

    Raises:
        InsufficientOutput: If amount_out is zero
        InsufficientLiquidity: If either reserve is zero
        InvalidWeight: If either weight is zero
        InvalidFee: If fee is outside [0, 10000)
        Underflow: If amount_out > reserve_out
        DivisionByZero: If amount_out == reserve_out
        Overflow: If an intermediate exceeds 128 bits or the result exceeds 64 bits
    """
    amount_out, reserve_in, reserve_out = uint64(amount_out), uint64(reserve_in), uint64(reserve_out)
    weight_in, weight_out = uint64(weight_in), uint64(weight_out)
    if amount_out == 0:
        raise InsufficientOutput("amount_out must be positive")
    require_liquidity(reserve_in, reserve_out)
    require_weights(weight_in, weight_out)
    multiplier = fee_multiplier(fee)

    weight_in, weight_out = _reduced_ratio(weight_in, weight_out)
    numerator = W(reserve_in) * amount_out * FEE_DENOMINATOR * weight_out
    denominator = (W(reserve_out) - amount_out) * multiplier * weight_in

    return ((numerator // denominator) + 1).narrow()


def quote(
    amount_a: int,
    reserve_a: int,
    weight_a: int,
    reserve_b: int,
    weight_b: int,
) -> int:
    """Convert amount_a to the equivalent amount of the other asset.

    Each reserve is scaled by 10000 / weight before the plain ratio is
    applied:
        amount_b = amount_a * (res_b * 10000 / weight_b) / (res_a * 10000 / weight_a)

    The 10000 factors cancel, leaving the exact integer form
    (amount_a * res_b * weight_a) // (res_a * weight_b) with the weights in
    lowest terms. Equal weights give exactly the unweighted quote.

    Raises:
        InsufficientAmount: If amount_a is zero
        InsufficientLiquidity: If either reserve is zero
        InvalidWeight: If either weight is zero
        Overflow: If amount_a * res_b * weight_a exceeds 128 bits or the result exceeds 64 bits
    """
    amount_a, reserve_a, reserve_b = uint64(amount_a), uint64(reserve_a), uint64(reserve_b)
    weight_a, weight_b = uint64(weight_a), uint64(weight_b)
    if amount_a == 0:
        raise InsufficientAmount("amount_a must be positive")
    require_liquidity(reserve_a, reserve_b)
    require_weights(weight_a, weight_b)

    weight_a, weight_b = _reduced_ratio(weight_a, weight_b)
    numerator = W(amount_a) * reserve_b * weight_a
    denominator = W(reserve_a) * weight_b

    return (numerator // denominator).narrow()


class WeightedEngine:
    """Floating-point pricing for pools with arbitrary weight ratios."""

    name: ClassVar[str] = "weighted"

    def get_amount_out(self, pool: PoolState, amount_in: int) -> int:
        amount_out = get_amount_out(
            amount_in,
            pool.reserve_in,
            pool.weight_in,
            pool.reserve_out,
            pool.weight_out,
            pool.fee,
        )
        logger.debug(
            "weighted_amount_out",
            amount_in=amount_in,
            amount_out=amount_out,
            reserve_in=pool.reserve_in,
            reserve_out=pool.reserve_out,
            weight_in=pool.weight_in,
            weight_out=pool.weight_out,
            fee=pool.fee,
        )
        return amount_out

    def get_amount_in(self, pool: PoolState, amount_out: int) -> int:
        amount_in = get_amount_in(
            amount_out,
            pool.reserve_in,
            pool.weight_in,
            pool.reserve_out,
            pool.weight_out,
            pool.fee,
        )
        logger.debug(
            "weighted_amount_in",
            amount_in=amount_in,
            amount_out=amount_out,
            reserve_in=pool.reserve_in,
            reserve_out=pool.reserve_out,
            weight_in=pool.weight_in,
            weight_out=pool.weight_out,
            fee=pool.fee,
        )
        return amount_in

    def quote(self, pool: PoolState, amount_a: int) -> int:
        amount_b = quote(
            amount_a,
            pool.reserve_in,
            pool.weight_in,
            pool.reserve_out,
            pool.weight_out,
        )
        logger.debug("weighted_quote", amount_a=amount_a, amount_b=amount_b)
        return amount_b


# Singleton instance
weighted_engine = WeightedEngine()
