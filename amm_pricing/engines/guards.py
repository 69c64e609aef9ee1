"""Precondition checks shared by the pricing engines."""

from amm_pricing.constants import FEE_DENOMINATOR
from amm_pricing.errors import InsufficientLiquidity, InvalidFee, InvalidWeight


def fee_multiplier(fee: int) -> int:
    """Fee multiplier for pricing math (10000 - fee).

    For 30 pips (0.3%), this returns 9970.

    Raises:
        InvalidFee: If fee is not an int in [0, 10000)
    """
    if isinstance(fee, bool) or not isinstance(fee, int):
        raise InvalidFee(f"fee must be int, got {type(fee).__name__}")
    if not 0 <= fee < FEE_DENOMINATOR:
        raise InvalidFee(f"fee must be in [0, {FEE_DENOMINATOR}), got {fee}")
    return FEE_DENOMINATOR - fee


def require_liquidity(reserve_a: int, reserve_b: int) -> None:
    """Raise InsufficientLiquidity unless both reserves are positive."""
    if reserve_a <= 0 or reserve_b <= 0:
        raise InsufficientLiquidity(f"reserves must be positive: {reserve_a}, {reserve_b}")


def require_weights(weight_a: int, weight_b: int) -> None:
    """Raise InvalidWeight unless both weights are positive."""
    if weight_a <= 0 or weight_b <= 0:
        raise InvalidWeight(f"weights must be positive: {weight_a}, {weight_b}")
