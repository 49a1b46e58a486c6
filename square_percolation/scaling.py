"""
Finite-size scaling of the percolation threshold.

The mean threshold of an L-by-L grid approaches its infinite-size limit
roughly as pc(L) = pc(inf) + a * L**(-1/nu), with nu = 4/3 for 2D
percolation. Fitting the means against L**(-3/4) and reading off the
intercept gives an estimate of pc(inf).
"""
from dataclasses import dataclass

import numpy as np
from scipy.stats import linregress

from .stats import PercolationStats

DEFAULT_EXPONENT = -3 / 4


@dataclass(frozen=True)
class SweepPoint:
    n: int
    mean: float
    stddev: float
    lo: float
    hi: float


@dataclass(frozen=True)
class Extrapolation:
    pc_inf: float
    slope: float
    r_squared: float
    exponent: float


def sweep(sizes, trials: int, seed=None, engine: str = "python",
          workers: int = 1, verbose: bool = False) -> list[SweepPoint]:
    """Runs PercolationStats for every grid size in 'sizes'."""
    sizes = [int(n) for n in sizes]
    if not sizes:
        raise ValueError("at least one grid size is required")

    size_seeds = np.random.SeedSequence(seed).spawn(len(sizes))
    points = []
    for n, size_seed in zip(sizes, size_seeds):
        if verbose:
            print(f"simulate n = {n}")
        stats = PercolationStats(n, trials, seed=size_seed, engine=engine,
                                 workers=workers, verbose=verbose)
        if verbose:
            stats.report()
        lo, hi = stats.confidence_interval()
        points.append(SweepPoint(n, stats.mean(), stats.stddev(), lo, hi))
    return points


def extrapolate(sizes, means, exponent: float = DEFAULT_EXPONENT) -> Extrapolation:
    """
    Fits means against sizes**exponent; the intercept at zero is the
    infinite-size threshold.
    """
    sizes = np.asarray(sizes, dtype=float)
    means = np.asarray(means, dtype=float)
    if sizes.shape != means.shape:
        raise ValueError("sizes and means must have the same length")
    if np.unique(sizes).size < 2:
        raise ValueError("extrapolation needs at least two distinct grid sizes")

    fit = linregress(sizes ** exponent, means)
    return Extrapolation(
        pc_inf=float(fit.intercept),
        slope=float(fit.slope),
        r_squared=float(fit.rvalue ** 2),
        exponent=exponent,
    )
