"""
Highest Random Weight (rendezvous) hashing.

Deterministically ranks candidate nodes for a key so that removing or
adding a node only moves the keys whose top choice changed.
"""

from hrw.errors import (
    HRWError as HRWError,
    InvalidArgument as InvalidArgument,
)
from hrw.hashing import (
    digest as digest,
    fnv1a_32 as fnv1a_32,
    weight as weight,
)
from hrw.ranking import (
    HighestRandomWeight as HighestRandomWeight,
    key_distribution as key_distribution,
    max_deviation as max_deviation,
    rank_all as rank_all,
    select as select,
    sequential_keys as sequential_keys,
    top_n as top_n,
)

__version__ = "0.1.0"
