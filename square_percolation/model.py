from .grid import Grid


class Percolation:
    """
    Percolation on an n-by-n grid with rows and columns numbered 1..n.

    All sites start blocked. The system percolates once an open path joins
    the top row to the bottom row.
    """

    def __init__(self, n: int):
        self.grid = Grid(n, origin=1)

    @property
    def n(self) -> int:
        return self.grid.n

    # open the site (row, col) if it's not open yet
    def open_site(self, row: int, col: int):
        self.grid.open_site(row, col)

    # is site (row, col) open?
    def isOpen(self, row: int, col: int) -> bool:
        return self.grid.isOpen(row, col)

    # is site (row, col) connected to the top row through open sites?
    def isFull(self, row: int, col: int) -> bool:
        return self.grid.isFull(row, col)

    def percolates(self) -> bool:
        return self.grid.percolates()

    def numberOfOpenSites(self) -> int:
        return self.grid.numberOfOpenSites()
