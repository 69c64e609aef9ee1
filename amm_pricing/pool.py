"""Pool state value type and engine selection.

PoolState is what a host reads from persisted pool storage before each
pricing call. It holds no behavior beyond validation; pricing happens in the
engines.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from amm_pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig
from amm_pricing.constants import FEE_DENOMINATOR, UINT64_MAX
from amm_pricing.engines.base import PricingEngine
from amm_pricing.engines.constant_product import constant_product_engine
from amm_pricing.engines.weighted import weighted_engine

# 64-bit unsigned integer (reserves, weights, amounts)
Uint64 = Annotated[
    int,
    Field(ge=0, le=UINT64_MAX, description="64-bit unsigned integer"),
]

# Fee in pips (parts per 10000)
FeePips = Annotated[
    int,
    Field(ge=0, lt=FEE_DENOMINATOR, description="Trading fee in pips (1/100 of 1%)"),
]


def _default_fee() -> int:
    return DEFAULT_PRICING_CONFIG.default_fee


class PoolState(BaseModel):
    """Reserves, weights and fee of a two-asset pool, oriented for one trade.

    The "in" side is the asset the trader sells. Zero reserves or weights are
    representable (an empty pool) and are rejected by the engines at pricing
    time.

    Attributes:
        reserve_in: Reserve of the input asset
        reserve_out: Reserve of the output asset
        weight_in: Weight of the input asset (default 1)
        weight_out: Weight of the output asset (default 1)
        fee: Trading fee in pips (default from DEFAULT_PRICING_CONFIG)
    """

    model_config = ConfigDict(frozen=True, strict=True)

    reserve_in: Uint64
    reserve_out: Uint64
    weight_in: Uint64 = 1
    weight_out: Uint64 = 1
    fee: FeePips = Field(default_factory=_default_fee)

    @property
    def is_equal_weight(self) -> bool:
        """True if both weights are equal (constant product pool)."""
        return self.weight_in == self.weight_out

    def reversed(self) -> PoolState:
        """Same pool, oriented for a trade in the opposite direction."""
        return PoolState(
            reserve_in=self.reserve_out,
            reserve_out=self.reserve_in,
            weight_in=self.weight_out,
            weight_out=self.weight_in,
            fee=self.fee,
        )


def select_engine(
    pool: PoolState,
    config: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> PricingEngine:
    """Pick the pricing engine for a pool.

    Equal-weight pools get the exact integer engine unless the config asks
    for the weighted engine everywhere.
    """
    if pool.is_equal_weight and config.prefer_exact_for_equal_weights:
        return constant_product_engine
    return weighted_engine
