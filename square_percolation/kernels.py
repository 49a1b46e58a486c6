"""
Compiled single-trial kernel.

Runs one percolation trial over flat int64 arrays with the same weighting,
tie-break, virtual wiring and neighbour order as Grid, so for a given
opening order it stops at exactly the same site.
"""
import numpy as np
from numba import njit, config

# Enable Numba disk caching for faster subsequent runs
config.CACHE_DIR = '.numba_cache'


@njit(cache=True)
def find_root(parent, x):
    """Union-find 'find' with full path compression."""
    root = x
    while parent[root] != root:
        root = parent[root]
    while x != root:
        next_x = parent[x]
        parent[x] = root
        x = next_x
    return root


@njit(cache=True)
def union_weighted(parent, size, a, b):
    """Union-find 'union' by size; on a tie b's root goes under a's."""
    ra = find_root(parent, a)
    rb = find_root(parent, b)
    if ra == rb:
        return
    if size[ra] < size[rb]:
        parent[ra] = rb
        size[rb] += size[ra]
    else:
        parent[rb] = ra
        size[ra] += size[rb]


@njit(cache=True)
def opened_until_percolation(n, order):
    """
    Opens the flat site indices in 'order' (row*n + col) one by one and
    returns how many were open when the top and bottom rows first joined.
    """
    total = n * n
    top, bottom = 0, total + 1

    parent = np.arange(total + 2, dtype=np.int64)
    size = np.ones(total + 2, dtype=np.int64)
    open_flags = np.zeros(total, dtype=np.uint8)

    for k in range(order.shape[0]):
        site = order[k]
        row = site // n
        col = site % n
        idx = site + 1
        open_flags[site] = 1

        if row == 0:
            union_weighted(parent, size, top, idx)
        if row == n - 1:
            union_weighted(parent, size, bottom, idx)

        if row > 0 and open_flags[site - n]:
            union_weighted(parent, size, idx, idx - n)
        if row < n - 1 and open_flags[site + n]:
            union_weighted(parent, size, idx, idx + n)
        if col > 0 and open_flags[site - 1]:
            union_weighted(parent, size, idx, idx - 1)
        if col < n - 1 and open_flags[site + 1]:
            union_weighted(parent, size, idx, idx + 1)

        if find_root(parent, top) == find_root(parent, bottom):
            return k + 1

    return order.shape[0]
