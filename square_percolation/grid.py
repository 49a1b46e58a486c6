import numpy as np

from .union_find import WeightedQuickUnionUF


class Grid:
    """
    An n-by-n grid of sites backed by union-find.

    Site (row, col) lives at set index row*n + col + 1. Index 0 is the
    virtual top and index n*n + 1 the virtual bottom; a border site is
    joined to its virtual node when it is opened, never before, so a
    virtual node only ever reaches the grid through open sites.

    Coordinates passed to the public methods count from 'origin' (0 by
    default); they are shifted and range-checked exactly once per call.
    """

    def __init__(self, n: int, origin: int = 0):
        if n <= 0:
            raise ValueError(f"grid size must be > 0, got {n}")

        self.n = n
        self.origin = origin
        self.state = np.zeros((n, n), dtype=bool)

        self.virtualTop = 0
        self.virtualBottom = n * n + 1

        # top and bottom virtual sites
        self.sets = WeightedQuickUnionUF(n * n + 2)
        # top only; answers isFull without backwash through the bottom row
        self.fullSets = WeightedQuickUnionUF(n * n + 1)

        self.openSite = 0

    def _shift(self, row: int, col: int):
        r = row - self.origin
        c = col - self.origin
        if not (0 <= r < self.n and 0 <= c < self.n):
            last = self.origin + self.n - 1
            raise IndexError(
                f"site ({row}, {col}) is outside the grid, "
                f"rows and columns run from {self.origin} to {last}"
            )
        return r, c

    def setIndex(self, row: int, col: int) -> int:
        r, c = self._shift(row, col)
        return r * self.n + c + 1

    def open_site(self, row: int, col: int):
        r, c = self._shift(row, col)
        if self.state[r, c]:
            return

        self.state[r, c] = True
        self.openSite += 1

        n = self.n
        idx = r * n + c + 1

        if r == 0:
            self.sets.union(self.virtualTop, idx)
            self.fullSets.union(self.virtualTop, idx)
        if r == n - 1:
            self.sets.union(self.virtualBottom, idx)

        # up, down, left, right
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if 0 <= nr < n and 0 <= nc < n and self.state[nr, nc]:
                neighbour = nr * n + nc + 1
                self.sets.union(idx, neighbour)
                self.fullSets.union(idx, neighbour)

    def isOpen(self, row: int, col: int) -> bool:
        r, c = self._shift(row, col)
        return bool(self.state[r, c])

    def isFull(self, row: int, col: int) -> bool:
        r, c = self._shift(row, col)
        if not self.state[r, c]:
            return False
        return self.fullSets.connected(self.virtualTop, r * self.n + c + 1)

    def percolates(self) -> bool:
        return self.sets.connected(self.virtualTop, self.virtualBottom)

    def numberOfOpenSites(self) -> int:
        return self.openSite
