"""Benchmarks for k-d tree construction and nearest-neighbor queries.

This module compares torchspatial k-d tree queries against a brute-force
scan and, when available, against scipy's cKDTree.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

# scipy imports - handle optional dependency
try:
    from scipy.spatial import cKDTree

    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False

from torchspatial.space_partitioning import (
    coordinate_dimensions,
    kd_tree,
    nearest_neighbor,
    nearest_neighbors,
    points,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 1,
    iterations: int = 5,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 1.
    iterations : int, optional
        Number of timed iterations. Default is 5.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics ('mean', 'std', 'min', 'max')
        in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_timing(label: str, timing: dict[str, float]) -> None:
    print(
        f"  {label:<14}{format_time(timing['mean'])} +/- "
        f"{format_time(timing['std'])}"
    )


class BenchKdTree:
    """Benchmarks for kd_tree and nearest-neighbor queries."""

    def __init__(self, warmup: int = 1, iterations: int = 5):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(self, func: Callable, *args: Any) -> dict[str, float]:
        return benchmark(
            func, *args, warmup=self.warmup, iterations=self.iterations
        )

    def bench_build(self, n: int = 10000, d: int = 3) -> None:
        """Benchmark tree construction."""
        x = torch.randn(n, d, dtype=torch.float64)
        items = points(x)
        dimensions = coordinate_dimensions(d)

        name = f"kd_tree build (n={n}, d={d})"
        print(f"\n{name}")
        print("-" * len(name))
        print_timing("torchspatial:", self._bench(kd_tree, items, dimensions))
        if SCIPY_AVAILABLE:
            print_timing("scipy:", self._bench(cKDTree, x.numpy()))

    def bench_query(self, n: int = 10000, d: int = 3, m: int = 100) -> None:
        """Benchmark nearest-neighbor queries against a linear scan."""
        x = torch.randn(n, d, dtype=torch.float64)
        queries = torch.randn(m, d, dtype=torch.float64)
        items = points(x)
        tree = kd_tree(items, coordinate_dimensions(d))
        query_points = points(queries)

        def tree_queries():
            for query in query_points:
                nearest_neighbor(tree, query)

        def linear_scan():
            for query in query_points:
                min(items, key=query.distance_to)

        name = f"nearest_neighbor (n={n}, d={d}, m={m})"
        print(f"\n{name}")
        print("-" * len(name))
        tree_time = self._bench(tree_queries)
        scan_time = self._bench(linear_scan)
        print_timing("torchspatial:", tree_time)
        print_timing("linear scan:", scan_time)
        print(f"  Speedup:      {scan_time['mean'] / tree_time['mean']:.2f}x")
        print_timing(
            "batched:", self._bench(nearest_neighbors, tree, queries)
        )
        if SCIPY_AVAILABLE:
            reference = cKDTree(x.numpy())
            print_timing(
                "scipy:", self._bench(reference.query, queries.numpy())
            )

    def run_all(self) -> None:
        print("=" * 60)
        print("K-D TREE BENCHMARKS")
        print("=" * 60)

        self.bench_build()
        self.bench_query()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying point counts."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Point Count Scaling (build) ---")
        for n in [100, 1000, 10000]:
            self.bench_build(n=n)

        print("\n--- Point Count Scaling (query) ---")
        for n in [100, 1000, 10000]:
            self.bench_query(n=n, m=20)


if __name__ == "__main__":
    bench = BenchKdTree(warmup=1, iterations=5)
    bench.run_all()
    print("\n")
    bench.run_scaling()
