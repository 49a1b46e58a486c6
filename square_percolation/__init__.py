"""
Monte Carlo estimation of the site percolation threshold on square grids.
"""

from .grid import Grid
from .model import Percolation
from .scaling import Extrapolation, SweepPoint, extrapolate, sweep
from .stats import PercolationStats, run_trial
from .union_find import WeightedQuickUnionUF

__version__ = "1.0.0"

__all__ = [
    "WeightedQuickUnionUF",
    "Grid",
    "Percolation",
    "PercolationStats",
    "run_trial",
    "SweepPoint",
    "Extrapolation",
    "sweep",
    "extrapolate",
]
