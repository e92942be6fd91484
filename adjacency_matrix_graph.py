"""
Dense weighted graph backed by a numpy adjacency matrix.

Cell [i, j] holds the weight of labels[i] -> labels[j]. Non-finite cells
(nan, +inf, -inf) mean "no edge", the usual convention for dense
adjacency matrices.
"""

from typing import Dict, Hashable, Iterable, Mapping, Optional, Sequence

import numpy as np

from errors import InvalidGraphError
from graph import Graph


class AdjacencyMatrixGraph(Graph):
    """Read-only Graph view over a square numpy array."""

    def __init__(self, weights, labels: Optional[Sequence[Hashable]] = None) -> None:
        matrix = np.array(weights, dtype=float)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise InvalidGraphError(
                f"adjacency matrix must be square, got shape {matrix.shape}"
            )
        n = matrix.shape[0]
        if labels is None:
            labels = list(range(n))
        labels = list(labels)
        if len(labels) != n:
            raise InvalidGraphError(
                f"expected {n} labels for a {n}x{n} matrix, got {len(labels)}"
            )
        if len(set(labels)) != n:
            raise InvalidGraphError("matrix labels must be unique")

        self._matrix = matrix
        self._matrix.setflags(write=False)
        self._labels = labels
        self._index: Dict[Hashable, int] = {label: i for i, label in enumerate(labels)}

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    def nodes(self) -> Iterable[Hashable]:
        return list(self._labels)

    def outgoing(self, node: Hashable) -> Mapping[Hashable, float]:
        i = self._index.get(node)
        if i is None:
            return {}
        row = self._matrix[i]
        (present,) = np.nonzero(np.isfinite(row))
        return {self._labels[j]: float(row[j]) for j in present}

    def edge_weight(self, src: Hashable, dst: Hashable) -> Optional[float]:
        i = self._index.get(src)
        j = self._index.get(dst)
        if i is None or j is None:
            return None
        w = self._matrix[i, j]
        return float(w) if np.isfinite(w) else None
