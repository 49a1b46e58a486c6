"""Pytest configuration and fixtures for test suite."""

import random
import sys
from collections import deque
from pathlib import Path

import pytest

# Add the project root to path for imports
ROOT_PATH = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT_PATH))


def flood_fill_full(state):
    """Reference fullness by breadth-first search from the open top-row sites."""
    n = len(state)
    full = [[False] * n for _ in range(n)]
    queue = deque((0, c) for c in range(n) if state[0][c])
    for r, c in queue:
        full[r][c] = True
    while queue:
        r, c = queue.popleft()
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if 0 <= nr < n and 0 <= nc < n and state[nr][nc] and not full[nr][nc]:
                full[nr][nc] = True
                queue.append((nr, nc))
    return full


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so property tests replay identically."""
    return random.Random(20150210)


@pytest.fixture
def flood_fill():
    """Provide the breadth-first fullness reference."""
    return flood_fill_full
