from .constants import INT32_SIGN_BIT, UINT32_MASK


def to_uint32(value: int) -> int:
    return value & UINT32_MASK


def to_int32(value: int) -> int:
    value &= UINT32_MASK
    if value & INT32_SIGN_BIT:
        return value - (UINT32_MASK + 1)

    return value
