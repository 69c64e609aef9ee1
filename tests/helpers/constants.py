"""Shared pool constants for tests.

Usage:
    from tests.helpers import RESERVE_IN, RESERVE_OUT
    # or
    from tests.helpers.constants import RESERVE_IN, RESERVE_OUT
"""

from amm_pricing.constants import UINT64_MAX

# =============================================================================
# Documented example pool (fee 30 pips)
# =============================================================================

RESERVE_IN = 45_851_931_234
RESERVE_OUT = 125_682_033_533
EXAMPLE_AMOUNT_IN = 10_000
EXAMPLE_AMOUNT_OUT = 27_328
EXAMPLE_QUOTE = 27_410

# =============================================================================
# Magnitudes used by property tests
# =============================================================================

# (reserve_in, reserve_out) pairs spanning small to near-uint64 pools
RESERVE_PAIRS = [
    (1_000_000, 1_000_000),
    (100_000_000, 400_000_000),
    (RESERVE_IN, RESERVE_OUT),
    (10**15, 3 * 10**12),
    (UINT64_MAX // 4, UINT64_MAX // 8),
]

TRADE_AMOUNTS = [1, 1_000, 10_000, 123_456, 10**6]
