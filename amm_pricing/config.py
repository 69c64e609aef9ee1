"""Pricing configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from amm_pricing.constants import DEFAULT_FEE, FEE_DENOMINATOR


@dataclass(frozen=True)
class PricingConfig:
    """Centralized configuration for pool pricing.

    Attributes:
        default_fee: Fee in pips applied to pools that do not set one
            (default: 30 = 0.3%)
        prefer_exact_for_equal_weights: If True, equal-weight pools are priced
            with the exact integer engine. If False, every pool goes through
            the weighted engine.
    """

    default_fee: int = DEFAULT_FEE
    prefer_exact_for_equal_weights: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.default_fee, bool) or not isinstance(self.default_fee, int):
            raise ValueError(f"default_fee must be int, got {type(self.default_fee).__name__}")
        if not 0 <= self.default_fee < FEE_DENOMINATOR:
            raise ValueError(f"default_fee must be in [0, {FEE_DENOMINATOR}), got {self.default_fee}")

    @classmethod
    def from_env(cls) -> PricingConfig:
        """Build a config from environment variables with sensible defaults.

        Variables:
            AMM_PRICING_DEFAULT_FEE: Default fee in pips
            AMM_PRICING_PREFER_EXACT: "true"/"1"/"yes" to price equal-weight
                pools with the integer engine

        Raises:
            ValueError: If a variable holds an invalid value
        """
        raw_fee = os.environ.get("AMM_PRICING_DEFAULT_FEE", str(DEFAULT_FEE))
        try:
            fee = int(raw_fee)
        except ValueError as err:
            raise ValueError(f"AMM_PRICING_DEFAULT_FEE must be an integer: '{raw_fee}'") from err
        prefer_exact = os.environ.get("AMM_PRICING_PREFER_EXACT", "true").lower() in (
            "true",
            "1",
            "yes",
        )
        return cls(default_fee=fee, prefer_exact_for_equal_weights=prefer_exact)


# Default configuration instance
DEFAULT_PRICING_CONFIG = PricingConfig()
