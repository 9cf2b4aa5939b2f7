"""
Numeric constants for key digesting and node weighting.

These values are part of the interoperability contract: any other
system ranking the same nodes for the same keys must use them verbatim.
"""

# 32-bit FNV-1a
FNV32_OFFSET_BASIS = 2166136261
FNV32_PRIME = 16777619

# Linear congruential mixing
LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = (1 << 31) - 1

UINT32_MASK = 0xFFFFFFFF
INT32_SIGN_BIT = 0x80000000
