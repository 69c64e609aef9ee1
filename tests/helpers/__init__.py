"""Test helpers module for shared test utilities.

- constants: Example reserves and trade amounts
- factories: PoolState factory
"""

from tests.helpers.constants import (
    EXAMPLE_AMOUNT_IN,
    EXAMPLE_AMOUNT_OUT,
    EXAMPLE_QUOTE,
    RESERVE_IN,
    RESERVE_OUT,
    RESERVE_PAIRS,
    TRADE_AMOUNTS,
)
from tests.helpers.factories import make_pool

__all__ = [
    # Constants
    "RESERVE_IN",
    "RESERVE_OUT",
    "EXAMPLE_AMOUNT_IN",
    "EXAMPLE_AMOUNT_OUT",
    "EXAMPLE_QUOTE",
    "RESERVE_PAIRS",
    "TRADE_AMOUNTS",
    # Factories
    "make_pool",
]
