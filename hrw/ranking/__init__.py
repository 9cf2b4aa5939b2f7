from .distribution import (
    key_distribution as key_distribution,
    max_deviation as max_deviation,
    sequential_keys as sequential_keys,
)
from .ranker import (
    HighestRandomWeight as HighestRandomWeight,
    Node as Node,
    get_default_ranker as get_default_ranker,
    rank_all as rank_all,
    reset_default_ranker as reset_default_ranker,
    select as select,
    top_n as top_n,
)
