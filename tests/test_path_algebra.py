import math

import pytest

from errors import IncomparableOperandsError
from path_algebra import (
    ALGEBRAS,
    SHORTEST_PATH,
    WIDEST_PATH,
    PathAlgebra,
    add,
    get_algebra,
    greater_than,
    less_than,
)


def test_default_algebra_is_shortest_path():
    algebra = PathAlgebra()

    assert algebra.combine is add
    assert algebra.is_better is less_than
    assert algebra.identity == 0


def test_comparisons_are_strict():
    assert less_than(1, 2)
    assert not less_than(2, 2)
    assert greater_than(3, 2)
    assert not greater_than(2, 2)


@pytest.mark.parametrize("compare", [less_than, greater_than])
def test_nan_operands_are_rejected(compare):
    with pytest.raises(IncomparableOperandsError):
        compare(math.nan, 1.0)
    with pytest.raises(IncomparableOperandsError):
        compare(1.0, math.nan)


def test_identity_leaves_weights_unchanged():
    for algebra in ALGEBRAS.values():
        assert algebra.combine(algebra.identity, 0.5) == 0.5


def test_get_algebra_by_name():
    assert get_algebra("shortest_path") is SHORTEST_PATH
    assert get_algebra("widest_path") is WIDEST_PATH
    with pytest.raises(KeyError, match="unknown path algebra"):
        get_algebra("cheapest")
