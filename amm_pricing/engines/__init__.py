"""Pricing engines for two-asset pools.

- constant_product: exact integer pricing for equal-weight pools
- weighted: floating-point pricing for arbitrary weight ratios
"""

from amm_pricing.engines.base import PricingEngine
from amm_pricing.engines.constant_product import ConstantProductEngine, constant_product_engine
from amm_pricing.engines.weighted import EQUAL_WEIGHT_TOLERANCE, WeightedEngine, weighted_engine

__all__ = [
    "PricingEngine",
    # Constant product
    "ConstantProductEngine",
    "constant_product_engine",
    # Weighted
    "WeightedEngine",
    "weighted_engine",
    "EQUAL_WEIGHT_TOLERANCE",
]
