"""
Test: Key Distribution

Validates the distribution helpers and the uniformity of first choices
over sequential big-endian integer keys.

Run with: pytest tests/unit/ranking/test_distribution.py
"""

import pytest

from hrw import (
    HighestRandomWeight,
    InvalidArgument,
    key_distribution,
    max_deviation,
    sequential_keys,
)
from hrw.env import Env


def test_sequential_keys_layout():
    """Test that keys carry the big-endian index followed by zero padding."""
    assert list(sequential_keys(3)) == [
        b"\x00\x00\x00\x00",
        b"\x00\x00\x00\x01",
        b"\x00\x00\x00\x02",
    ]

    wide = list(sequential_keys(2, width=16, start=258))
    assert wide == [
        b"\x00\x00\x01\x02" + bytes(12),
        b"\x00\x00\x01\x03" + bytes(12),
    ]


def test_sequential_keys_rejects_narrow_width():
    """Test that keys narrower than the 4-byte index are rejected."""
    with pytest.raises(InvalidArgument):
        list(sequential_keys(1, width=3))


def test_uniform_distribution(quiet_env: Env):
    """Test that each node ranks first for close to a quarter of the keys."""
    ranker = HighestRandomWeight(quiet_env)
    nodes = [1, 2, 3, 4]

    distribution = key_distribution(nodes, sequential_keys(100_000), ranker=ranker)

    assert distribution == {1: 25047, 2: 24774, 3: 25291, 4: 24888}
    assert max_deviation(distribution) < 0.02, (
        f"Distribution {distribution} deviates more than 2% from uniform"
    )


def test_uniform_distribution_padded_keys(quiet_env: Env):
    """Test uniformity with the index embedded in a 16-byte key."""
    ranker = HighestRandomWeight(quiet_env)
    nodes = [1, 2, 3, 4]

    distribution = key_distribution(
        nodes,
        sequential_keys(100_000, width=16),
        ranker=ranker,
    )

    assert sum(distribution.values()) == 100_000
    assert max_deviation(distribution) < 0.02


def test_key_distribution_includes_idle_nodes(quiet_env: Env):
    """Test that every node is reported, even with no keys."""
    ranker = HighestRandomWeight(quiet_env)

    distribution = key_distribution([1, 2, 3], [], ranker=ranker)
    assert distribution == {1: 0, 2: 0, 3: 0}

    assert key_distribution([], sequential_keys(10), ranker=ranker) == {}


def test_key_distribution_uses_default_ranker():
    """Test that the default ranker is used when none is supplied."""
    distribution = key_distribution([1, 2, 3, 4, 5], [b"hello, world"])
    assert distribution == {1: 0, 2: 0, 3: 0, 4: 0, 5: 1}


def test_max_deviation():
    """Test relative deviation from the uniform mean."""
    assert max_deviation({}) == 0.0
    assert max_deviation({1: 0, 2: 0}) == 0.0
    assert max_deviation({1: 10, 2: 10}) == 0.0
    assert max_deviation({1: 10, 2: 30}) == pytest.approx(0.5)
