"""
Error taxonomy for the all-pairs engine.

Precondition violations are raised before any relaxation work starts.
Negative cycles are normally returned as a value (see distance_matrix);
NegativeCycleError is only raised by the convenience helpers.
"""

from typing import Hashable, Iterable


class FloydWarshallError(Exception):
    """Base class for every error raised by this package."""


class InvalidGraphError(FloydWarshallError, ValueError):
    """
    The graph cannot be processed: empty node set, duplicate nodes, or an
    edge whose endpoint is not part of the node set.
    """


class IncomparableOperandsError(FloydWarshallError, ValueError):
    """The comparison operator could not order two weights (e.g. NaN)."""

    def __init__(self, new: object, old: object) -> None:
        super().__init__(f"cannot compare weights {new!r} and {old!r}")
        self.new = new
        self.old = old


class NegativeCycleError(FloydWarshallError):
    """Raised when a caller asks for a plain matrix but a cycle improves on the identity."""

    def __init__(self, nodes: Iterable[Hashable]) -> None:
        self.nodes = frozenset(nodes)
        shown = ", ".join(sorted(repr(n) for n in self.nodes))
        super().__init__(f"graph contains a negative cycle through: {shown}")


class NextHopsNotTrackedError(FloydWarshallError, RuntimeError):
    """Path queries need an engine built with track_next_hops=True."""


class ConfigError(FloydWarshallError, ValueError):
    """Engine configuration could not be parsed."""
