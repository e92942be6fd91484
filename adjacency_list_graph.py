"""
Concrete weighted graph backed by an adjacency list.

Implements the Graph interface with a node -> (neighbor -> weight) mapping,
either directed or undirected.
"""

from typing import Any, Dict, Hashable, Iterable, Mapping

from graph import Edge, Graph


class AdjacencyListGraph(Graph):
    """
    Weighted graph backed by a node -> (neighbor -> weight) mapping.

    Undirected graphs store every edge in both directions with the same
    weight, so consumers only ever see ordered pairs.
    """

    def __init__(self, directed: bool = True) -> None:
        self.directed = directed
        self._adj: Dict[Hashable, Dict[Hashable, Any]] = {}

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Edge],
        directed: bool = True,
        nodes: Iterable[Hashable] = (),
    ) -> "AdjacencyListGraph":
        """
        Build a graph from (src, dst, weight) triples.

        Extra isolated nodes can be passed via ``nodes``; they are added
        first so they keep their position in the node order.
        """
        g = cls(directed=directed)
        for node in nodes:
            g.add_node(node)
        for src, dst, weight in edges:
            g.add_edge(src, dst, weight)
        return g

    # --- Mutation API (not part of Graph interface) -------------------------

    def add_node(self, node: Hashable) -> None:
        """Ensure node exists in the graph."""
        self._adj.setdefault(node, {})

    def add_edge(self, src: Hashable, dst: Hashable, weight: Any) -> None:
        """
        Add or update the edge src -> dst with weight.
        Auto-adds nodes if they don't exist; the last weight for a pair wins.
        """
        self.add_node(src)
        self.add_node(dst)
        self._adj[src][dst] = weight
        if not self.directed:
            self._adj[dst][src] = weight

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> Iterable[Hashable]:
        return self._adj.keys()

    def outgoing(self, node: Hashable) -> Mapping[Hashable, Any]:
        return dict(self._adj.get(node, {}))

    def edge_weight(self, src: Hashable, dst: Hashable) -> Any:
        return self._adj.get(src, {}).get(dst)

    def __len__(self) -> int:
        return len(self._adj)
