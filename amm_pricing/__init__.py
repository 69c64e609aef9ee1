"""Two-asset AMM pricing core.

Stateless exchange-rate calculations for constant-product and weighted
pools. Each call validates its inputs, computes, and returns a 64-bit amount
or raises; the embedding host owns balances and reserve storage.
"""

from amm_pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig
from amm_pricing.engines import (
    EQUAL_WEIGHT_TOLERANCE,
    ConstantProductEngine,
    PricingEngine,
    WeightedEngine,
    constant_product_engine,
    weighted_engine,
)
from amm_pricing.errors import (
    ErrorKind,
    InsufficientAmount,
    InsufficientInput,
    InsufficientLiquidity,
    InsufficientOutput,
    InvalidFee,
    InvalidWeight,
    PricingError,
    error_kind,
)
from amm_pricing.pool import PoolState, select_engine
from amm_pricing.result import PricingResult, try_price
from amm_pricing.safe_math import DivisionByZero, Overflow, SafeMathError, Underflow

__version__ = "0.1.0"
__all__ = [
    # Engines
    "PricingEngine",
    "ConstantProductEngine",
    "WeightedEngine",
    "constant_product_engine",
    "weighted_engine",
    "EQUAL_WEIGHT_TOLERANCE",
    # Pool
    "PoolState",
    "select_engine",
    # Results
    "PricingResult",
    "try_price",
    # Config
    "PricingConfig",
    "DEFAULT_PRICING_CONFIG",
    # Errors
    "ErrorKind",
    "error_kind",
    "PricingError",
    "InsufficientInput",
    "InsufficientOutput",
    "InsufficientAmount",
    "InsufficientLiquidity",
    "InvalidWeight",
    "InvalidFee",
    "SafeMathError",
    "Overflow",
    "Underflow",
    "DivisionByZero",
    "__version__",
]
