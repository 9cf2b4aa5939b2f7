from __future__ import annotations

from typing import Iterable, Iterator

from hrw.errors import InvalidArgument
from hrw.hashing import Key
from hrw.hashing.constants import UINT32_MASK

from .ranker import HighestRandomWeight, Node, get_default_ranker


def sequential_keys(
    count: int,
    width: int = 4,
    start: int = 0,
) -> Iterator[bytes]:
    """
    Yield count keys whose first four bytes are the big-endian index,
    zero padded to width bytes.
    """
    if width < 4:
        raise InvalidArgument(
            f"width must be at least 4 bytes, got {width}",
            context={"width": width},
        )

    padding = bytes(width - 4)
    for index in range(start, start + count):
        yield (index & UINT32_MASK).to_bytes(4, "big") + padding


def key_distribution(
    nodes: Iterable[Node],
    keys: Iterable[Key],
    ranker: HighestRandomWeight | None = None,
) -> dict[Node, int]:
    """
    Count how many keys each node ranks first for.

    Every node appears in the result, including nodes that own no keys.
    """
    if ranker is None:
        ranker = get_default_ranker()

    candidates = list(nodes)
    distribution: dict[Node, int] = {node: 0 for node in candidates}
    if not candidates:
        return distribution

    for key in keys:
        distribution[ranker.select(candidates, key)] += 1

    return distribution


def max_deviation(distribution: dict[Node, int]) -> float:
    """
    Largest relative deviation of any node's count from the uniform mean.
    """
    total = sum(distribution.values())
    if not distribution or total == 0:
        return 0.0

    mean = total / len(distribution)
    return max(abs(count - mean) for count in distribution.values()) / mean
