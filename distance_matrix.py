"""
Result types of an all-pairs computation.

A DistanceMatrix answers "best weight from u to v" for every ordered pair.
Unreachable pairs hold NO_PATH (None); they are never turned into a large
number. When relaxation finds a cycle that beats the identity, the engine
returns NegativeCycleDetected instead, because the matrix is then unsound.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Hashable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from errors import NegativeCycleError, NextHopsNotTrackedError
from path_algebra import PathAlgebra

NO_PATH = None


class DistanceMatrix:
    """
    Dense n x n table of best path weights indexed by node.

    The matrix is owned by the caller; the engine keeps no reference to it.
    """

    def __init__(
        self,
        nodes: Sequence[Hashable],
        dist: List[List[Any]],
        algebra: PathAlgebra,
        next_hops: Optional[List[List[Optional[Hashable]]]] = None,
    ) -> None:
        self._nodes: Tuple[Hashable, ...] = tuple(nodes)
        self._index: Dict[Hashable, int] = {node: i for i, node in enumerate(self._nodes)}
        self._dist = dist
        self._next = next_hops
        self.algebra = algebra

    # --- Lookups -------------------------------------------------------------

    @property
    def nodes(self) -> Tuple[Hashable, ...]:
        return self._nodes

    def _pos(self, node: Hashable) -> int:
        try:
            return self._index[node]
        except KeyError:
            raise KeyError(f"node {node!r} is not in the distance matrix") from None

    def get(self, src: Hashable, dst: Hashable) -> Any:
        """Best weight src -> dst, or NO_PATH."""
        return self._dist[self._pos(src)][self._pos(dst)]

    def __getitem__(self, pair: Tuple[Hashable, Hashable]) -> Any:
        src, dst = pair
        return self.get(src, dst)

    def has_path(self, src: Hashable, dst: Hashable) -> bool:
        return self.get(src, dst) is not NO_PATH

    def row(self, src: Hashable) -> Dict[Hashable, Any]:
        """
        Costs from src to every reachable node.

        Unreachable nodes are absent, matching a single-source cost map.
        """
        values = self._dist[self._pos(src)]
        return {dst: w for dst, w in zip(self._nodes, values) if w is not NO_PATH}

    def items(self) -> Iterator[Tuple[Hashable, Hashable, Any]]:
        """Yield (src, dst, weight) for every ordered pair, NO_PATH included."""
        for i, src in enumerate(self._nodes):
            for j, dst in enumerate(self._nodes):
                yield src, dst, self._dist[i][j]

    def __len__(self) -> int:
        return len(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DistanceMatrix):
            return NotImplemented
        return self._nodes == other._nodes and self._dist == other._dist

    def __repr__(self) -> str:
        return f"DistanceMatrix(nodes={len(self._nodes)}, algebra={self.algebra.name!r})"

    # --- Paths ---------------------------------------------------------------

    @property
    def tracks_next_hops(self) -> bool:
        return self._next is not None

    def next_hop(self, src: Hashable, dst: Hashable) -> Optional[Hashable]:
        """First hop on the best path src -> dst (src itself when src == dst)."""
        if self._next is None:
            raise NextHopsNotTrackedError("engine was built without track_next_hops=True")
        return self._next[self._pos(src)][self._pos(dst)]

    def path(self, src: Hashable, dst: Hashable) -> Optional[List[Hashable]]:
        """
        Node sequence of the best path src -> dst, endpoints included.

        Returns None when dst is unreachable. Walks next hops, so it needs a
        matrix computed with next-hop tracking.
        """
        hop = self.next_hop(src, dst)
        if hop is None:
            return None
        path = [src]
        current = src
        # A sound matrix reaches dst in at most n hops.
        for _ in range(len(self._nodes)):
            if current == dst:
                return path
            current = self.next_hop(current, dst)
            if current is None:
                return None
            path.append(current)
        return path if current == dst else None

    # --- Checks and export ---------------------------------------------------

    def is_closed(self) -> bool:
        """
        True when no entry can be improved by routing through another node,
        i.e. dist(u, v) is never worse than combine(dist(u, w), dist(w, v)).
        """
        combine = self.algebra.combine
        is_better = self.algebra.is_better
        n = len(self._nodes)
        for w in range(n):
            row_w = self._dist[w]
            for u in range(n):
                d_uw = self._dist[u][w]
                if d_uw is NO_PATH:
                    continue
                row_u = self._dist[u]
                for v in range(n):
                    d_wv = row_w[v]
                    if d_wv is NO_PATH:
                        continue
                    current = row_u[v]
                    if current is NO_PATH or is_better(combine(d_uw, d_wv), current):
                        return False
        return True

    def to_numpy(self, missing: float = np.inf, dtype=float) -> np.ndarray:
        """Dense array in node order; NO_PATH cells become ``missing``."""
        n = len(self._nodes)
        out = np.full((n, n), missing, dtype=dtype)
        for i, row in enumerate(self._dist):
            for j, w in enumerate(row):
                if w is not NO_PATH:
                    out[i, j] = w
        return out


@dataclass(frozen=True)
class NegativeCycleDetected:
    """
    Outcome of a computation in which some node's distance to itself beat
    the identity, meaning a cycle can be traversed to improve paths forever.

    Attributes:
        nodes:
            Nodes whose diagonal entry ended better than the identity. Every
            node on a negative cycle is included.
        matrix:
            The matrix as it stood after relaxation. Entries for pairs that
            can route through a cycle are meaningless; it is kept for
            diagnostics only.
    """

    nodes: FrozenSet[Hashable]
    matrix: DistanceMatrix

    def is_affected(self, src: Hashable, dst: Hashable) -> bool:
        """True when some path src -> dst can pass through a cycle node."""
        return any(
            self.matrix.has_path(src, c) and self.matrix.has_path(c, dst)
            for c in self.nodes
        )

    def raise_error(self) -> None:
        raise NegativeCycleError(self.nodes)
