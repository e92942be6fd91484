"""
Floyd-Warshall all-pairs engine.

Runs the classic triple loop over any Graph implementation, with the path
arithmetic supplied by a PathAlgebra (shortest path by default).
"""

from typing import Any, Dict, Hashable, List, Optional
import logging

from algorithms import AllPairsEngine, AllPairsResult
from distance_matrix import NO_PATH, DistanceMatrix, NegativeCycleDetected
from errors import InvalidGraphError
from graph import Graph
from path_algebra import SHORTEST_PATH, Combine, IsBetter, PathAlgebra, add, less_than

log = logging.getLogger(__name__)


class FloydWarshallEngine(AllPairsEngine):
    """
    All-pairs relaxation through every intermediate node.

    Complexity:
        O(n^3) combine/compare calls, O(n^2) memory.
    """

    def __init__(self, algebra: PathAlgebra = SHORTEST_PATH, track_next_hops: bool = False) -> None:
        self.algebra = algebra
        self.track_next_hops = track_next_hops

    def compute(self, graph: Graph) -> AllPairsResult:
        nodes = list(graph.nodes())
        index = self._index_nodes(nodes)
        n = len(nodes)
        combine = self.algebra.combine
        is_better = self.algebra.is_better
        identity = self.algebra.identity

        log.debug("floyd-warshall (%s) over %d nodes", self.algebra.name, n)

        dist: List[List[Any]] = [[NO_PATH] * n for _ in range(n)]
        nxt: Optional[List[List[Optional[Hashable]]]] = None
        if self.track_next_hops:
            nxt = [[None] * n for _ in range(n)]

        for i, node in enumerate(nodes):
            dist[i][i] = identity
            if nxt is not None:
                nxt[i][i] = node

        # Validate every edge before any relaxation work.
        for u, v, w in graph.edges():
            if w is None:
                continue
            i = index.get(u)
            j = index.get(v)
            if i is None or j is None:
                missing = u if i is None else v
                raise InvalidGraphError(f"edge {u!r} -> {v!r} references unknown node {missing!r}")
            if i == j:
                # Self-loops only matter when they beat the empty path.
                if self._beats_identity(w):
                    dist[i][i] = w
                continue
            dist[i][j] = w
            if nxt is not None:
                nxt[i][j] = v

        for k in range(n):
            row_k = dist[k]
            for i in range(n):
                # Paths starting or ending at k cannot improve by visiting k.
                if i == k:
                    continue
                d_ik = dist[i][k]
                if d_ik is NO_PATH:
                    continue
                row_i = dist[i]
                for j in range(n):
                    if j == k:
                        continue
                    d_kj = row_k[j]
                    if d_kj is NO_PATH:
                        continue
                    candidate = combine(d_ik, d_kj)
                    current = row_i[j]
                    if current is NO_PATH or is_better(candidate, current):
                        row_i[j] = candidate
                        if nxt is not None:
                            nxt[i][j] = nxt[i][k]

        matrix = DistanceMatrix(nodes, dist, self.algebra, nxt)

        cycle_nodes = frozenset(
            node for i, node in enumerate(nodes) if self._beats_identity(dist[i][i])
        )
        if cycle_nodes:
            log.warning(
                "negative cycle detected through %d node(s) under %s",
                len(cycle_nodes),
                self.algebra.name,
            )
            return NegativeCycleDetected(cycle_nodes, matrix)

        log.debug("floyd-warshall finished: %d pairs", n * n)
        return matrix

    def _beats_identity(self, weight: Any) -> bool:
        # Strictly better: a tie-accepting is_better must not flag w == identity.
        identity = self.algebra.identity
        return self.algebra.is_better(weight, identity) and not self.algebra.is_better(identity, weight)

    @staticmethod
    def _index_nodes(nodes: List[Hashable]) -> Dict[Hashable, int]:
        if not nodes:
            raise InvalidGraphError("graph has no nodes")
        index: Dict[Hashable, int] = {}
        for i, node in enumerate(nodes):
            if node in index:
                raise InvalidGraphError(f"duplicate node {node!r}")
            index[node] = i
        return index


def floyd_warshall(
    graph: Graph,
    combine: Combine = add,
    is_better: IsBetter = less_than,
    identity: Any = 0,
    track_next_hops: bool = False,
) -> AllPairsResult:
    """
    One-shot helper taking the operators directly.

    Either operator can be overridden on its own; the rest keep the
    shortest-path defaults.
    """
    algebra = PathAlgebra(combine, is_better, identity)
    return FloydWarshallEngine(algebra, track_next_hops=track_next_hops).compute(graph)
