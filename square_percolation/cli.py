"""
Command-line entry point: `stats` for one grid size, `sweep` for a range
of sizes with extrapolation.
"""
import argparse
import sys

import numpy as np

from .scaling import DEFAULT_EXPONENT, extrapolate, sweep
from .stats import DEFAULT_CONFIDENCE, ENGINES, PercolationStats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="square-percolation",
        description="Run a Monte Carlo simulation for 2D site percolation."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        '--seed', type=int, default=None,
        help="Seed for the random opening order (default: fresh entropy)."
    )
    common.add_argument(
        '--engine', choices=ENGINES, default="python",
        help="'python' runs the union-find model, 'numba' the compiled kernel."
    )
    common.add_argument(
        '--workers', type=int, default=1,
        help="Number of worker processes running trials."
    )

    stats = commands.add_parser(
        'stats', parents=[common],
        help="Estimate the threshold of one N-by-N grid."
    )
    stats.add_argument('N', type=int, help="Size of the square grid (N x N).")
    stats.add_argument('T', type=int, help="The number of Monte Carlo trials to perform.")
    stats.add_argument(
        '--confidence', type=float, default=DEFAULT_CONFIDENCE,
        help="Confidence level of the reported interval."
    )

    scan = commands.add_parser(
        'sweep', parents=[common],
        help="Estimate thresholds over a range of sizes and extrapolate."
    )
    scan.add_argument('--Lmin', type=int, default=50,
                      help="Minimum size of the square grid (N_min x N_min).")
    scan.add_argument('--Lmax', type=int, default=200,
                      help="Maximum size of the square grid (N_max x N_max).")
    scan.add_argument('--Lstep', type=int, default=50,
                      help="Step size for increasing the grid size N.")
    scan.add_argument('--t', type=int, default=500,
                      help="The number of Monte Carlo trials to perform.")
    scan.add_argument('--exponent', type=float, default=DEFAULT_EXPONENT,
                      help="Scaling exponent applied to L in the extrapolation.")
    return parser


def run_stats(args) -> None:
    stats = PercolationStats(args.N, args.T, seed=args.seed, engine=args.engine,
                             workers=args.workers, confidence=args.confidence)
    label = f"{args.confidence * 100:g}% confidence interval"
    print("%-23s = %.16f" % ("mean", stats.mean()))
    print("%-23s = %.16f" % ("stddev", stats.stddev()))
    print("%-23s = %.16f, %.16f" % ((label,) + stats.confidence_interval()))


def run_sweep(args) -> None:
    if args.Lstep <= 0:
        raise ValueError(f"Lstep must be a positive integer, got {args.Lstep}")
    sizes = np.arange(args.Lmin, args.Lmax + 1, args.Lstep)
    if sizes.size == 0:
        raise ValueError(f"no grid sizes between Lmin={args.Lmin} and Lmax={args.Lmax}")

    print("Starting Monte Carlo Percolation Analysis...")
    print(f"System sizes (N): {args.Lmin} to {args.Lmax}, step {args.Lstep}")
    print(f"Trials per size: {args.t}")

    points = sweep(sizes, args.t, seed=args.seed, engine=args.engine,
                   workers=args.workers, verbose=True)

    print("\n--- Simulation Complete ---")
    if len(points) < 2:
        print("Extrapolation skipped: it needs at least two grid sizes.")
        return

    fit = extrapolate([p.n for p in points], [p.mean for p in points], args.exponent)
    print(f"\n--- Extrapolation Results (exponent {fit.exponent:.2f}) ---")
    print(f"pc(infinity) = {fit.pc_inf:.6f}, R^2 = {fit.r_squared:.4f}")
    print("-------------------------------------------------------")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        if args.command == 'stats':
            run_stats(args)
        else:
            run_sweep(args)
    except ValueError as exc:
        parser.error(str(exc))
    return 0
