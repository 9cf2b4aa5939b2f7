"""
Highest Random Weight (rendezvous) ranking.

Every node is scored independently against a key digest and nodes are
ordered by descending score. Because scores do not depend on the other
members of the node set, removing a node only reassigns the keys whose
top choice was that node, and adding a node only claims the keys for
which it now scores highest.

Usage:
    ranker = HighestRandomWeight()

    # Full preference order for a key
    ranked = ranker.rank_all([1, 2, 3, 4, 5], b"hello, world")

    # Replica set for a key
    replicas = ranker.top_n([1, 2, 3, 4, 5], b"hello, world", 3)

The module-level rank_all, top_n and select delegate to a shared ranker
configured from the environment on first use.
"""

from __future__ import annotations

import heapq
import operator
import threading
from typing import Iterable

from hrw.env import Env, load_env
from hrw.errors import InvalidArgument
from hrw.hashing import Key, digest, weight
from hrw.logging import Logger, LoggingConfig

from .logging_models import RankingDebug, RankingRejected, RankingTrace


Node = int

_logger = Logger()


def _rank_key(scored: tuple[int, Node]) -> tuple[int, Node]:
    # Descending weight, then ascending node so ties never depend on input order.
    node_weight, node = scored
    return (-node_weight, node)


class HighestRandomWeight:
    """
    Stateless HRW ranker.

    Holds configuration only; node sets and keys are supplied on every
    call and never retained, so one instance may be shared across
    threads.

    Ties between equal weights are broken by ascending node value, which
    makes every ranking a function of the node set and key alone.
    """

    __slots__ = (
        "_env",
        "_selection",
        "_logger",
    )

    def __init__(self, env: Env | None = None) -> None:
        if env is None:
            env = Env()

        self._env = env
        self._selection = env.HRW_TOP_N_SELECTION

        LoggingConfig().update(
            log_level=env.HRW_LOG_LEVEL,
            log_output=env.HRW_LOG_OUTPUT,
            log_format=env.HRW_LOG_FORMAT,
        )

        self._logger = _logger.get_stream(
            name="hrw.ranking",
            template=env.HRW_LOG_TEMPLATE,
        )

        self._logger.log(
            RankingDebug(
                message="Ranker initialized",
                strategy=self._selection,
                log_level=env.HRW_LOG_LEVEL,
            )
        )

    @property
    def env(self) -> Env:
        return self._env

    @property
    def selection(self) -> str:
        return self._selection

    def rank_all(self, nodes: Iterable[Node], key: Key) -> list[Node]:
        """
        Rank every node for a key.

        Args:
            nodes: Candidate node ids
            key: The key to rank for (bytes-like, or str encoded as UTF-8)

        Returns:
            Nodes ordered from most to least preferred
        """
        scored, seed = self._score(nodes, key)
        scored.sort(key=_rank_key)

        self._logger.log(
            RankingTrace(
                message="Ranked nodes",
                operation="rank_all",
                node_count=len(scored),
                key_digest=seed,
                selected=len(scored),
            )
        )

        return [node for _, node in scored]

    def top_n(self, nodes: Iterable[Node], key: Key, n: int) -> list[Node]:
        """
        Return the n most preferred nodes for a key.

        The result always equals rank_all(nodes, key)[:n]; the heap
        strategy only avoids ordering the tail of the ranking.

        Args:
            nodes: Candidate node ids
            key: The key to rank for
            n: Number of nodes to return, 0 <= n <= len(nodes)

        Returns:
            The first n nodes of the full ranking

        Raises:
            InvalidArgument: If n is not an integer in [0, len(nodes)]
        """
        candidates = list(nodes)
        count = self._check_count(n, len(candidates))

        scored, seed = self._score(candidates, key)

        if self._selection == "heap":
            selected = heapq.nsmallest(count, scored, key=_rank_key)

        else:
            scored.sort(key=_rank_key)
            selected = scored[:count]

        self._logger.log(
            RankingTrace(
                message="Selected top nodes",
                operation="top_n",
                node_count=len(candidates),
                key_digest=seed,
                selected=count,
                strategy=self._selection,
            )
        )

        return [node for _, node in selected]

    def select(self, nodes: Iterable[Node], key: Key) -> Node | None:
        """
        Return the most preferred node for a key, or None if there are no
        nodes.
        """
        scored, seed = self._score(nodes, key)
        if not scored:
            return None

        _, node = min(scored, key=_rank_key)

        self._logger.log(
            RankingTrace(
                message="Selected node",
                operation="select",
                node_count=len(scored),
                key_digest=seed,
                selected=1,
            )
        )

        return node

    def _score(
        self,
        nodes: Iterable[Node],
        key: Key,
    ) -> tuple[list[tuple[int, Node]], int]:
        seed = digest(key)
        return [(weight(node, seed), node) for node in nodes], seed

    def _check_count(self, n: int, node_count: int) -> int:
        try:
            count = operator.index(n)

        except TypeError:
            self._reject(n, node_count)
            raise InvalidArgument(
                f"n must be an integer, got {type(n).__name__}",
                context={"n": repr(n), "node_count": node_count},
            ) from None

        if count < 0 or count > node_count:
            self._reject(count, node_count)
            raise InvalidArgument(
                f"n={count} is out of range (0..{node_count})",
                context={"n": count, "node_count": node_count},
            )

        return count

    def _reject(self, n: object, node_count: int) -> None:
        self._logger.log(
            RankingRejected(
                message="Rejected top_n request",
                operation="top_n",
                node_count=node_count,
                requested=n if isinstance(n, int) else repr(n),
            )
        )


_default_ranker: HighestRandomWeight | None = None
_default_lock = threading.Lock()


def get_default_ranker() -> HighestRandomWeight:
    global _default_ranker

    if _default_ranker is None:
        with _default_lock:
            if _default_ranker is None:
                _default_ranker = HighestRandomWeight(load_env(Env))

    return _default_ranker


def reset_default_ranker() -> None:
    global _default_ranker

    with _default_lock:
        _default_ranker = None


def rank_all(nodes: Iterable[Node], key: Key) -> list[Node]:
    return get_default_ranker().rank_all(nodes, key)


def top_n(nodes: Iterable[Node], key: Key, n: int) -> list[Node]:
    return get_default_ranker().top_n(nodes, key, n)


def select(nodes: Iterable[Node], key: Key) -> Node | None:
    return get_default_ranker().select(nodes, key)
