"""Pricing error classes.

Each precondition failure maps to an ErrorKind so that an embedding host can
reject the whole operation with a stable error tag.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    """Kinds of pricing failures."""

    INSUFFICIENT_INPUT = "insufficient_input"
    INSUFFICIENT_OUTPUT = "insufficient_output"
    INSUFFICIENT_AMOUNT = "insufficient_amount"
    INSUFFICIENT_LIQUIDITY = "insufficient_liquidity"
    INVALID_WEIGHT = "invalid_weight"
    INVALID_FEE = "invalid_fee"
    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    DIVISION_BY_ZERO = "division_by_zero"


class PricingError(Exception):
    """Base error for pricing preconditions.

    Attributes:
        kind: ErrorKind reported to the host
        code: Host-facing message tag
    """

    kind: ClassVar[ErrorKind]
    code: ClassVar[str]


class InsufficientInput(PricingError):
    """Input amount is zero."""

    kind = ErrorKind.INSUFFICIENT_INPUT
    code = "INSUFFICIENT_INPUT_AMOUNT"


class InsufficientOutput(PricingError):
    """Output amount is zero."""

    kind = ErrorKind.INSUFFICIENT_OUTPUT
    code = "INSUFFICIENT_OUTPUT_AMOUNT"


class InsufficientAmount(PricingError):
    """Quoted amount is zero."""

    kind = ErrorKind.INSUFFICIENT_AMOUNT
    code = "INSUFFICIENT_AMOUNT"


class InsufficientLiquidity(PricingError):
    """A pool reserve is zero."""

    kind = ErrorKind.INSUFFICIENT_LIQUIDITY
    code = "INSUFFICIENT_LIQUIDITY"


class InvalidWeight(PricingError):
    """A pool weight is zero."""

    kind = ErrorKind.INVALID_WEIGHT
    code = "INVALID_WEIGHT"


class InvalidFee(PricingError):
    """Fee must be in range [0, 10000) pips."""

    kind = ErrorKind.INVALID_FEE
    code = "INVALID_FEE"


def error_kind(exc: BaseException) -> ErrorKind | None:
    """Return the ErrorKind carried by a pricing or arithmetic error.

    Returns None for exceptions outside both families.
    """
    kind = getattr(type(exc), "kind", None)
    if isinstance(kind, ErrorKind):
        return kind
    return None
