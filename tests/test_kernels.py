"""Tests for the compiled single-trial kernel."""

import numpy as np
import pytest

from square_percolation.kernels import find_root, opened_until_percolation, union_weighted
from square_percolation.stats import open_until_percolation, random_open_order


def test_single_site() -> None:
    assert opened_until_percolation(1, np.array([0], dtype=np.int64)) == 1


def test_stops_as_soon_as_column_connects() -> None:
    order = np.array([0, 2, 1, 3], dtype=np.int64)

    assert opened_until_percolation(2, order) == 2


def test_middle_row_gate() -> None:
    # top and bottom rows first, then the centre site joins them
    order = np.array([0, 1, 2, 6, 7, 8, 4, 3, 5], dtype=np.int64)

    assert opened_until_percolation(3, order) == 7


def test_row_wrap_is_not_a_neighbour() -> None:
    # site 2 is the end of row 0 and site 3 the start of row 1
    order = np.array([2, 3, 6, 0, 1, 4, 5, 7, 8], dtype=np.int64)

    assert opened_until_percolation(3, order) == 4


def test_union_by_size() -> None:
    parent = np.arange(4, dtype=np.int64)
    size = np.ones(4, dtype=np.int64)

    union_weighted(parent, size, 0, 1)
    union_weighted(parent, size, 2, 1)

    assert find_root(parent, 2) == find_root(parent, 0)
    assert size[find_root(parent, 0)] == 3
    assert find_root(parent, 3) == 3


@pytest.mark.parametrize("n", [1, 2, 5, 12])
def test_agrees_with_union_find_model(n: int) -> None:
    for seed in range(5):
        order = random_open_order(n, seed)

        assert opened_until_percolation(n, order) == open_until_percolation(n, order)
