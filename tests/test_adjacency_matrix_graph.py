import math

import numpy as np
import pytest

from adjacency_matrix_graph import AdjacencyMatrixGraph
from errors import InvalidGraphError


def test_non_finite_cells_are_missing_edges():
    weights = np.array(
        [
            [0.0, 3.0, np.inf],
            [np.nan, 0.0, 4.0],
            [-np.inf, np.inf, 0.0],
        ]
    )
    g = AdjacencyMatrixGraph(weights, labels=["A", "B", "C"])

    assert list(g.nodes()) == ["A", "B", "C"]
    assert g.outgoing("A") == {"A": 0.0, "B": 3.0}
    assert g.outgoing("B") == {"B": 0.0, "C": 4.0}
    assert g.outgoing("C") == {"C": 0.0}
    assert g.edge_weight("A", "C") is None
    assert g.edge_weight("B", "C") == 4.0


def test_labels_default_to_indices():
    g = AdjacencyMatrixGraph([[math.inf, 1.0], [math.inf, math.inf]])

    assert list(g.nodes()) == [0, 1]
    assert list(g.edges()) == [(0, 1, 1.0)]


def test_caller_array_is_not_shared():
    weights = np.array([[0.0, 1.0], [1.0, 0.0]])
    g = AdjacencyMatrixGraph(weights)
    weights[0, 1] = 9.0

    assert g.edge_weight(0, 1) == 1.0
    assert not g.matrix.flags.writeable


def test_rejects_non_square_matrix():
    with pytest.raises(InvalidGraphError):
        AdjacencyMatrixGraph(np.zeros((2, 3)))


def test_rejects_label_mismatch():
    with pytest.raises(InvalidGraphError):
        AdjacencyMatrixGraph(np.zeros((2, 2)), labels=["A"])
    with pytest.raises(InvalidGraphError):
        AdjacencyMatrixGraph(np.zeros((2, 2)), labels=["A", "A"])
