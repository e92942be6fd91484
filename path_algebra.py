"""
Path algebras: the pluggable arithmetic of the all-pairs engine.

A PathAlgebra bundles the two caller-supplied operators

    combine(a, b)        weight of path segment a followed by segment b
    is_better(new, old)  whether a candidate replaces the current best

with the identity element of ``combine`` (the weight of a zero-length path).
Swapping the algebra turns shortest paths into widest paths, most reliable
paths and so on, without touching the relaxation loop.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict
import math

from errors import IncomparableOperandsError

Combine = Callable[[Any, Any], Any]
IsBetter = Callable[[Any, Any], bool]


def _is_nan(value: Any) -> bool:
    # Only NaN-like values compare unequal to themselves.
    return value != value


def add(a: Any, b: Any) -> Any:
    """Default combine: concatenating segments adds their weights."""
    return a + b


def multiply(a: Any, b: Any) -> Any:
    return a * b


def less_than(new: Any, old: Any) -> bool:
    """
    Default is_better: strictly smaller wins.

    Raises IncomparableOperandsError for NaN operands instead of silently
    answering False.
    """
    if _is_nan(new) or _is_nan(old):
        raise IncomparableOperandsError(new, old)
    return new < old


def greater_than(new: Any, old: Any) -> bool:
    """Strictly larger wins. NaN operands raise like less_than."""
    if _is_nan(new) or _is_nan(old):
        raise IncomparableOperandsError(new, old)
    return new > old


@dataclass(frozen=True)
class PathAlgebra:
    """Operators and identity used by one all-pairs computation."""

    combine: Combine = add
    is_better: IsBetter = less_than
    identity: Any = 0
    name: str = "custom"


SHORTEST_PATH = PathAlgebra(add, less_than, 0, "shortest_path")
# Bottleneck capacity: a path is as wide as its narrowest edge.
WIDEST_PATH = PathAlgebra(min, greater_than, math.inf, "widest_path")
MOST_RELIABLE_PATH = PathAlgebra(multiply, greater_than, 1, "most_reliable_path")
# Only meaningful on acyclic graphs; any positive cycle is reported like a
# negative one under shortest_path.
LONGEST_PATH = PathAlgebra(add, greater_than, 0, "longest_path")

ALGEBRAS: Dict[str, PathAlgebra] = {
    a.name: a for a in (SHORTEST_PATH, WIDEST_PATH, MOST_RELIABLE_PATH, LONGEST_PATH)
}


def get_algebra(name: str) -> PathAlgebra:
    """Look up a preset algebra by name."""
    try:
        return ALGEBRAS[name]
    except KeyError:
        known = ", ".join(sorted(ALGEBRAS))
        raise KeyError(f"unknown path algebra {name!r} (known: {known})") from None
