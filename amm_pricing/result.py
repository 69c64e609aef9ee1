"""Pricing result type for hosts without exception-based aborts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import structlog

from amm_pricing.errors import ErrorKind, PricingError, error_kind
from amm_pricing.safe_math import SafeMathError

logger = structlog.get_logger()


@dataclass(frozen=True)
class PricingResult:
    """Result of a pricing call.

    Provides explicit success/failure handling so a host can map the error
    kind to "reject this operation" without catching exceptions itself.

    Attributes:
        amount: The computed amount, or None if the call failed.
        error: If the call failed, the kind of failure.
        error_detail: Optional human-readable detail about the error.

    Examples:
        # Successful calculation
        result = PricingResult.ok(27328)
        assert result.is_valid
        assert result.unwrap() == 27328

        # Error case
        result = try_price(get_amount_out, 0, 100, 100)
        assert result.error is ErrorKind.INSUFFICIENT_INPUT
    """

    amount: int | None
    error: ErrorKind | None = None
    error_detail: str | None = None
    _exception: Exception | None = field(default=None, repr=False, compare=False)

    @property
    def is_valid(self) -> bool:
        """True if the call succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if the call failed."""
        return self.error is not None

    def unwrap(self) -> int:
        """Return the amount, re-raising the original error on failure.

        Raises:
            ValueError: If the result carries neither an amount nor an exception
        """
        if self._exception is not None:
            raise self._exception
        if self.amount is None:
            raise ValueError(f"PricingResult has no amount (error={self.error})")
        return self.amount

    @classmethod
    def ok(cls, amount: int) -> PricingResult:
        """Create a successful result."""
        return cls(amount=amount)

    @classmethod
    def failed(cls, exc: PricingError | SafeMathError) -> PricingResult:
        """Create an error result from a pricing or arithmetic error."""
        return cls(amount=None, error=error_kind(exc), error_detail=str(exc), _exception=exc)


def try_price(fn: Callable[..., int], *args: object, **kwargs: object) -> PricingResult:
    """Call a pricing function and capture its failure as a PricingResult.

    Only PricingError and SafeMathError are captured; anything else (e.g. a
    TypeError from a bad argument) propagates.

    Args:
        fn: Engine function or bound engine method
        *args: Positional arguments for fn
        **kwargs: Keyword arguments for fn

    Returns:
        PricingResult with the amount or the error kind
    """
    try:
        amount = fn(*args, **kwargs)
    except (PricingError, SafeMathError) as exc:
        kind = error_kind(exc)
        logger.debug(
            "pricing_rejected",
            function=getattr(fn, "__qualname__", repr(fn)),
            error=kind.value if kind else None,
            detail=str(exc),
        )
        return PricingResult.failed(exc)
    return PricingResult.ok(amount)
