"""
Threshold estimation: repeated percolation trials and their summary
statistics.
"""
import math
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat

import numpy as np
from scipy.stats import norm

from .kernels import opened_until_percolation
from .model import Percolation

DEFAULT_CONFIDENCE = 0.95
PROGRESS_EVERY = 50
ENGINES = ("python", "numba")


def random_open_order(n: int, seed) -> np.ndarray:
    """
    A uniformly random order in which to open the n*n sites, as flat
    indices row*n + col. Every site appears once, so a trial never draws
    a site that is already open.
    """
    rng = np.random.default_rng(seed)
    return rng.permutation(n * n).astype(np.int64)


def open_until_percolation(n: int, order) -> int:
    """
    Opens sites of a fresh n-by-n system in the given order until it
    percolates and returns the number of open sites at that point.
    """
    simulator = Percolation(n)
    sites = iter(order)
    while not simulator.percolates():
        row, col = divmod(int(next(sites)), n)
        simulator.open_site(row + 1, col + 1)
    return simulator.numberOfOpenSites()


def run_trial(n: int, seed, engine: str = "python") -> float:
    """One experiment: the fraction of sites open when percolation first occurs."""
    order = random_open_order(n, seed)
    if engine == "numba":
        opened = int(opened_until_percolation(n, order))
    else:
        opened = open_until_percolation(n, order)
    return opened / (n * n)


def z_value(confidence: float) -> float:
    """Two-sided standard normal quantile, 1.95996... for 0.95."""
    return float(norm.ppf(0.5 + confidence / 2))


class PercolationStats:
    """
    Estimates the percolation threshold of an n-by-n grid from 'trials'
    independent experiments.

    Each trial draws its own random stream from a seed spawned off 'seed',
    so the results do not depend on 'workers' or on the engine.
    """

    def __init__(self, n: int, trials: int, seed=None, engine: str = "python",
                 workers: int = 1, confidence: float = DEFAULT_CONFIDENCE,
                 verbose: bool = False):
        if n <= 0:
            raise ValueError(f"grid size n must be a positive integer, got {n}")
        if trials <= 0:
            raise ValueError(f"trials must be a positive integer, got {trials}")
        if engine not in ENGINES:
            raise ValueError(f"unknown engine {engine!r}, expected one of {ENGINES}")
        if workers <= 0:
            raise ValueError(f"workers must be a positive integer, got {workers}")
        if not 0 < confidence < 1:
            raise ValueError(f"confidence must be between 0 and 1, got {confidence}")

        self.gridSize = n
        self.trialCount = trials
        self.engine = engine
        self.confidence = confidence

        if not isinstance(seed, np.random.SeedSequence):
            seed = np.random.SeedSequence(seed)
        trial_seeds = seed.spawn(trials)

        if workers == 1:
            outcomes = map(run_trial, repeat(n), trial_seeds, repeat(engine))
            self.results = self._collect(outcomes, verbose)
        else:
            with ProcessPoolExecutor(max_workers=workers) as executor:
                chunksize = max(1, trials // (4 * workers))
                outcomes = executor.map(run_trial, repeat(n), trial_seeds,
                                        repeat(engine), chunksize=chunksize)
                self.results = self._collect(outcomes, verbose)

    def _collect(self, outcomes, verbose: bool) -> np.ndarray:
        results = np.empty(self.trialCount, dtype=float)
        for t, threshold in enumerate(outcomes):
            results[t] = threshold
            if verbose and (t + 1) % PROGRESS_EVERY == 0:
                print(f"  Progress: {t+1}/{self.trialCount} trials")
        return results

    def mean(self) -> float:
        return float(np.mean(self.results))

    def stddev(self) -> float:
        # sample standard deviation; undefined for a single trial
        if self.trialCount == 1:
            return math.nan
        return float(np.std(self.results, ddof=1))

    def _half_width(self) -> float:
        return z_value(self.confidence) * self.stddev() / math.sqrt(self.trialCount)

    def confidenceLo(self) -> float:
        return self.mean() - self._half_width()

    def confidenceHi(self) -> float:
        return self.mean() + self._half_width()

    def confidence_interval(self):
        return self.confidenceLo(), self.confidenceHi()

    def report(self):
        level = f"{self.confidence * 100:g}%"
        print("=" * 60)
        print(f"STATS REPORT (n = {self.gridSize}, trials = {self.trialCount})")
        print("=" * 60)

        print(f"mean value of critical value pc = {self.mean(): .6f}")
        print(f"std value of critical value pc = {self.stddev(): .6f}")
        lo, hi = self.confidence_interval()
        print(f"the {level} confidence interval is {lo} ~ {hi}")
        print("=" * 60)
