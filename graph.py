"""
Weighted graph capability interface consumed by the all-pairs engine.

Nodes are any hashable values. Edges are directed: u -> v with one weight per
ordered pair. Undirected graphs expose both (u, v) and (v, u).
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterable, Iterator, Mapping, Optional, Tuple

Edge = Tuple[Hashable, Hashable, Any]


class Graph(ABC):
    """Directed, weighted graph over hashable nodes."""

    @abstractmethod
    def nodes(self) -> Iterable[Hashable]:
        """Return all nodes in the graph, in a stable order."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node: Hashable) -> Mapping[Hashable, Any]:
        """
        Outgoing neighbors and edge weights for a given node.

        Returns: dict[node, weight]
        """
        raise NotImplementedError

    def edges(self) -> Iterator[Edge]:
        """Yield every edge as (src, dst, weight)."""
        for u in self.nodes():
            for v, w in self.outgoing(u).items():
                yield u, v, w

    def edge_weight(self, src: Hashable, dst: Hashable) -> Optional[Any]:
        """Weight of src -> dst, or None when the edge does not exist."""
        return self.outgoing(src).get(dst)
