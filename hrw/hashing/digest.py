"""
Key digesting for Highest Random Weight ranking.

Keys are reduced to a 32-bit seed with FNV-1a, then reinterpreted as a
signed 32-bit integer so the weight function can mix it with two's
complement arithmetic.
"""

from .constants import FNV32_OFFSET_BASIS, FNV32_PRIME, UINT32_MASK
from .int32 import to_int32


Key = bytes | bytearray | memoryview | str


def fnv1a_32(data: bytes | bytearray | memoryview) -> int:
    """
    Compute the unsigned 32-bit FNV-1a hash of data.

    Args:
        data: Bytes to hash

    Returns:
        Hash value in [0, 2**32)
    """
    value = FNV32_OFFSET_BASIS
    for byte in bytes(data):
        value = ((value ^ byte) * FNV32_PRIME) & UINT32_MASK

    return value


def digest(key: Key) -> int:
    """
    Reduce a key to the signed 32-bit seed used for weighting.

    str keys are encoded as UTF-8 first. The unsigned FNV-1a value keeps
    its bit pattern, so the seed may be negative.

    Args:
        key: The key to digest (e.g. an object path or job id)

    Returns:
        Seed value in [-2**31, 2**31)
    """
    if isinstance(key, str):
        key = key.encode("utf-8")

    return to_int32(fnv1a_32(key))
