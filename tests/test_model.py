"""Tests for the 1-indexed percolation facade."""

import pytest

from square_percolation import Percolation


def test_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        Percolation(0)


@pytest.mark.parametrize("row, col", [(0, 1), (1, 0), (3, 1), (1, 3)])
def test_coordinates_run_from_one_to_n(row: int, col: int) -> None:
    model = Percolation(2)

    with pytest.raises(IndexError):
        model.open_site(row, col)
    with pytest.raises(IndexError):
        model.isOpen(row, col)
    with pytest.raises(IndexError):
        model.isFull(row, col)


def test_one_by_one_grid() -> None:
    model = Percolation(1)

    assert model.n == 1
    assert not model.isOpen(1, 1)
    assert not model.percolates()

    model.open_site(1, 1)

    assert model.isOpen(1, 1)
    assert model.isFull(1, 1)
    assert model.percolates()


def test_single_column_path_percolates() -> None:
    model = Percolation(2)
    model.open_site(1, 1)
    model.open_site(2, 1)

    assert model.percolates()
    assert not model.isFull(1, 2)
    assert not model.isOpen(1, 2)
    assert model.isFull(2, 1)


def test_blocked_middle_row() -> None:
    model = Percolation(3)
    for row in (1, 3):
        for col in (1, 2, 3):
            model.open_site(row, col)

    assert not model.percolates()
    assert model.numberOfOpenSites() == 6


def test_fully_open_grid() -> None:
    model = Percolation(3)
    for row in range(1, 4):
        for col in range(1, 4):
            model.open_site(row, col)

    assert model.percolates()
    assert all(model.isFull(r, c) for r in range(1, 4) for c in range(1, 4))


@pytest.mark.parametrize("n", [2, 5, 10])
def test_fresh_grid_does_not_percolate(n: int) -> None:
    assert not Percolation(n).percolates()


def test_repeated_open_counts_once() -> None:
    model = Percolation(4)
    model.open_site(2, 3)
    model.open_site(2, 3)

    assert model.numberOfOpenSites() == 1


def test_percolation_is_monotone(rng) -> None:
    n = 6
    model = Percolation(n)
    sites = [(r, c) for r in range(1, n + 1) for c in range(1, n + 1)]
    rng.shuffle(sites)
    seen = False

    for row, col in sites:
        model.open_site(row, col)
        if seen:
            assert model.percolates()
        seen = model.percolates()

    assert seen
