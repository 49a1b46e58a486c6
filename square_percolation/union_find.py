"""
Weighted quick-union with full path compression.
"""


class WeightedQuickUnionUF:
    """
    Union-find over the integers 0 .. n-1.

    Trees are merged by size (the smaller tree hangs under the larger one)
    and every find flattens the path it walked, so a sequence of operations
    runs in near-constant amortized time per call.
    """

    def __init__(self, n: int):
        """
        Builds n singleton components.

        :param n: The number of elements, at least 1.
        :raises ValueError: if n < 1.
        """
        if n <= 0:
            raise ValueError(f"number of elements must be > 0, got {n}")

        # parent[i] == i marks a root
        self.parent = list(range(n))

        # size[r] = number of elements in the tree rooted at r
        self.size = [1] * n

        self.count = n

    def __len__(self):
        return len(self.parent)

    def get_count(self) -> int:
        """
        Returns the number of disjoint sets.
        """
        return self.count

    def _validate(self, p: int):
        n = len(self.parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n-1}")

    def find(self, p: int) -> int:
        """
        Returns the root of the set containing 'p' and points every node on
        the walked path directly at that root.
        """
        self._validate(p)

        path = []
        while self.parent[p] != p:
            path.append(p)
            p = self.parent[p]

        for node in path:
            self.parent[node] = p
        return p

    def connected(self, p: int, q: int) -> bool:
        """
        Returns True if 'p' and 'q' are in the same set.
        """
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int):
        """
        Merges the sets containing 'p' and 'q'.

        On equal sizes the root of 'q' goes under the root of 'p'.
        """
        a, b = self.find(p), self.find(q)
        if a == b:
            return

        if self.size[a] < self.size[b]:
            a, b = b, a
        self.parent[b] = a
        self.size[a] += self.size[b]
        self.count -= 1
