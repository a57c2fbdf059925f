# -*- coding: utf-8 -*-
"""
Timing demo for the inverse cache.

Builds a big random square matrix, compares a direct inversion with the
first and the second cache_solve call, then replaces the matrix and checks
that the inverse is recomputed.

    python examples/cache_demo.py --size 1000 --plot
"""

import argparse
import sys
import time
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

# ------------------------------------------------------------
# Paths (CacheMatrix/ is in parent directory)
# ------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent if "__file__" in globals() else Path.cwd()
PROJECT_ROOT = BASE_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT))

from CacheMatrix import CacheableMatrix, cache_solve, dense_solve  # noqa: E402

DEFAULT_SIZE = 1000


def timed(func, *args, **kwargs):
    """Call func, return (result, elapsed seconds)."""
    start = time.perf_counter()
    result = func(*args, **kwargs)
    return result, time.perf_counter() - start


def run_demo(size=DEFAULT_SIZE, seed=None):
    """Run the demo and return the measured timings in seconds."""
    rng = np.random.default_rng(seed)

    print(f"Creating a square matrix with {size}x{size} random values")
    mat_square = rng.standard_normal((size, size))

    print("Calculating the inverse with dense_solve()")
    inverse1, t_direct = timed(dense_solve, mat_square)
    print(f"  {t_direct:.4f} s")

    print("---")
    print("Creating the cacheable matrix")
    matx = CacheableMatrix(mat_square, name="random")
    print(f"  {matx!r}")

    print("Calculating the inverse with cache_solve()")
    inverse2, t_first = timed(cache_solve, matx)
    print(f"  {t_first:.4f} s")

    print("Calculating the inverse with cache_solve() for a second time..")
    inverse2_again, t_cached = timed(cache_solve, matx)
    print(f"  {t_cached:.6f} s")

    if inverse2_again is not inverse2:
        raise RuntimeError("second cache_solve did not return the cached inverse")
    print("Cached inverse identical to direct inversion:",
          bool(np.array_equal(inverse1, inverse2)))

    print("---")
    print("Replacing the matrix with new random values")
    matx.set(rng.standard_normal((size, size)))

    print("Calculating the NEW inverse with cache_solve()")
    inverse3, t_new = timed(cache_solve, matx)
    print(f"  {t_new:.4f} s")

    if not np.array_equal(inverse2, inverse3):
        print("Inverse updated!")
    else:
        print("Inverse did not change after replacing the matrix")

    return {
        "direct": t_direct,
        "first cache_solve": t_first,
        "cached cache_solve": t_cached,
        "after replace": t_new,
    }


def plot_timings(timings, title='Inverse cache timings', dpi=None):
    if dpi is None:
        fig, ax = plt.subplots()
    else:
        fig, ax = plt.subplots(dpi=dpi)
    ax.grid(axis='y')
    ax.bar(list(timings), list(timings.values()))
    ax.set_yscale('log')
    ax.set_ylabel('Time, s')
    plt.title(title)
    plt.show()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--plot", action="store_true")
    args = parser.parse_args()

    timings = run_demo(args.size, args.seed)
    if args.plot:
        plot_timings(timings, title=f'Inverse cache timings, {args.size}x{args.size}')


if __name__ == '__main__':
    main()
