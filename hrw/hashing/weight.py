from .constants import LCG_INCREMENT, LCG_MODULUS, LCG_MULTIPLIER
from .int32 import to_int32


def weight(node: int, seed: int) -> int:
    """
    Score a node for a key seed.

    Computes A * ((A * node + C) ^ seed + C) with every step wrapped to
    a signed 32-bit integer, then shifts negative results up by 2**31 - 1.
    """
    mixed = to_int32(LCG_MULTIPLIER * to_int32(node) + LCG_INCREMENT)
    mixed = to_int32((mixed ^ to_int32(seed)) + LCG_INCREMENT)

    value = to_int32(LCG_MULTIPLIER * mixed)
    if value < 0:
        value += LCG_MODULUS

    return value
