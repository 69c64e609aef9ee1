"""Numeric constants for AMM pricing.

Centralizes integer widths and fee parameters shared by both engines.
"""

# Unsigned integer widths
UINT64_MAX = 2**64 - 1
UINT128_MAX = 2**128 - 1

# Fees are expressed in pips (1/100 of 1%), i.e. a numerator over 10000
FEE_DENOMINATOR = 10_000

# 30 pips = 0.3%, the standard constant-product fee
DEFAULT_FEE = 30
