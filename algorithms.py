"""
Algorithm interfaces for all-pairs path computation.

Keeps the relaxation engines separate from graph storage and result types.
"""

from abc import ABC, abstractmethod
from typing import Union

from distance_matrix import DistanceMatrix, NegativeCycleDetected
from graph import Graph

AllPairsResult = Union[DistanceMatrix, NegativeCycleDetected]


class AllPairsEngine(ABC):
    """
    Interface for all-pairs best-path computation.
    """

    @abstractmethod
    def compute(self, graph: Graph) -> AllPairsResult:
        """
        Compute the best path weight between every ordered pair of nodes.

        Returns:
            A DistanceMatrix, or NegativeCycleDetected when a cycle improves
            on the identity and the matrix cannot be trusted.
        """
        raise NotImplementedError

    def shortest_path_matrix(self, graph: Graph) -> DistanceMatrix:
        """
        Like compute(), but raises NegativeCycleError instead of returning
        NegativeCycleDetected.
        """
        result = self.compute(graph)
        if isinstance(result, NegativeCycleDetected):
            result.raise_error()
        return result
