"""
Cross-check distances against networkx's Floyd-Warshall.
"""

import math
import random

import networkx as nx
import pytest

from adjacency_list_graph import AdjacencyListGraph
from distance_matrix import NO_PATH
from floyd_warshall_engine import FloydWarshallEngine


def random_graph(seed: int, n: int = 12, p: float = 0.25):
    rng = random.Random(seed)
    g = AdjacencyListGraph()
    nxg = nx.DiGraph()
    for i in range(n):
        g.add_node(i)
        nxg.add_node(i)
    for u in range(n):
        for v in range(n):
            if u != v and rng.random() < p:
                w = rng.randint(1, 20)
                g.add_edge(u, v, w)
                nxg.add_edge(u, v, weight=w)
    return g, nxg


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_matches_networkx(seed):
    g, nxg = random_graph(seed)

    dist = FloydWarshallEngine().compute(g)
    expected = nx.floyd_warshall(nxg, weight="weight")

    for u in g.nodes():
        for v in g.nodes():
            want = expected[u][v]
            if math.isinf(want):
                assert dist[u, v] is NO_PATH
            else:
                assert dist[u, v] == want
