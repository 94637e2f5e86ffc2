"""Benchmarks for equispaced cubic splines and the radix-2 transform.

This module benchmarks torchspline functions and compares against
scipy baselines where applicable.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

# scipy imports - handle optional dependency
try:
    from scipy import fft as scipy_fft
    from scipy.interpolate import CubicSpline as ScipyCubicSpline

    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False

import torchspline.spline as S
import torchspline.transform as T


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
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
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with 'mean', 'std', 'min' and 'max' time in seconds.
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


def print_comparison(
    name: str,
    ts_time: dict[str, float],
    baseline_time: dict[str, float] | None = None,
    baseline_name: str = "scipy",
) -> None:
    """Print benchmark comparison results."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  torchspline: {format_time(ts_time['mean'])} +/- {format_time(ts_time['std'])}"
    )
    if baseline_time is not None:
        print(
            f"  {baseline_name}:       {format_time(baseline_time['mean'])} +/- {format_time(baseline_time['std'])}"
        )
        speedup = baseline_time["mean"] / ts_time["mean"]
        if speedup >= 1:
            print(f"  Speedup:     {speedup:.2f}x faster")
        else:
            print(f"  Speedup:     {1 / speedup:.2f}x slower")


class BenchEquispacedCubicSpline:
    """Benchmarks for spline fitting, evaluation and the transform."""

    def __init__(
        self, warmup: int = 3, iterations: int = 10, device: str = "cpu"
    ):
        self.warmup = warmup
        self.iterations = iterations
        self.device = device

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_fit(self, n: int = 1000) -> None:
        """Benchmark equispaced_cubic_spline_fit vs scipy CubicSpline.

        Parameters
        ----------
        n : int, optional
            Number of intervals. Default is 1000.
        """
        x = torch.linspace(0, 1, n + 1, dtype=torch.float64, device=self.device)
        y = torch.sin(8 * x)
        boundary_values = torch.tensor(
            [8.0, 8.0 * np.cos(8.0)], dtype=torch.float64, device=self.device
        )

        ts_time = self._bench(
            S.equispaced_cubic_spline_fit,
            0.0,
            1.0,
            y,
            boundary_values=boundary_values,
        )

        scipy_time = None
        if SCIPY_AVAILABLE and self.device == "cpu":
            x_np, y_np = x.numpy(), y.numpy()
            bc = ((1, 8.0), (1, 8.0 * np.cos(8.0)))
            scipy_time = self._bench(ScipyCubicSpline, x_np, y_np, bc_type=bc)

        print_comparison(f"fit (n={n})", ts_time, scipy_time)

    def bench_evaluate(self, n: int = 100, m: int = 100_000) -> None:
        """Benchmark equispaced_cubic_spline_evaluate vs scipy CubicSpline.

        Parameters
        ----------
        n : int, optional
            Number of intervals. Default is 100.
        m : int, optional
            Number of query points. Default is 100000.
        """
        x = torch.linspace(0, 1, n + 1, dtype=torch.float64, device=self.device)
        y = torch.sin(8 * x)
        spline = S.equispaced_cubic_spline_fit(0.0, 1.0, y)
        t = torch.rand(m, dtype=torch.float64, device=self.device)

        ts_time = self._bench(S.equispaced_cubic_spline_evaluate, spline, t)

        scipy_time = None
        if SCIPY_AVAILABLE and self.device == "cpu":
            baseline = ScipyCubicSpline(
                x.numpy(), y.numpy(), bc_type=((1, 0.0), (1, 0.0))
            )
            scipy_time = self._bench(baseline, t.numpy())

        print_comparison(f"evaluate (n={n}, m={m})", ts_time, scipy_time)

    def bench_fourier_transform(self, n: int = 1024) -> None:
        """Benchmark fourier_transform vs scipy.fft.fft.

        Parameters
        ----------
        n : int, optional
            Signal length, a power of two. Default is 1024.
        """
        x = torch.randn(n, dtype=torch.complex128, device=self.device)

        ts_time = self._bench(T.fourier_transform, x)

        scipy_time = None
        if SCIPY_AVAILABLE and self.device == "cpu":
            scipy_time = self._bench(scipy_fft.fft, x.numpy())

        print_comparison(f"fourier_transform (n={n})", ts_time, scipy_time)

    def run_all(self) -> None:
        """Run all benchmarks with default parameters."""
        print("=" * 60)
        print(f"torchspline Benchmarks (device={self.device})")
        print("=" * 60)

        self.bench_fit()
        self.bench_evaluate()
        self.bench_fourier_transform()

    def run_scaling(self) -> None:
        """Run scaling benchmarks to test performance with input size."""
        print("=" * 60)
        print(f"Scaling Benchmarks (device={self.device})")
        print("=" * 60)

        print("\n--- Fit Interval Count Scaling ---")
        for n in [10, 100, 1000, 10000]:
            self.bench_fit(n=n)

        print("\n--- Evaluate Query Count Scaling ---")
        for m in [1_000, 10_000, 100_000, 1_000_000]:
            self.bench_evaluate(m=m)


def run_cpu_benchmarks() -> None:
    """Run CPU benchmarks."""
    bench = BenchEquispacedCubicSpline(warmup=5, iterations=20, device="cpu")
    bench.run_all()
    print("\n")
    bench.run_scaling()


def run_cuda_benchmarks() -> None:
    """Run CUDA benchmarks if available."""
    if not torch.cuda.is_available():
        print("CUDA not available, skipping GPU benchmarks")
        return

    bench = BenchEquispacedCubicSpline(warmup=5, iterations=20, device="cuda")
    bench.run_all()
    print("\n")
    bench.run_scaling()


if __name__ == "__main__":
    print("Running CPU benchmarks...\n")
    run_cpu_benchmarks()

    if torch.cuda.is_available():
        print("\n" + "=" * 60)
        print("Running CUDA benchmarks...\n")
        run_cuda_benchmarks()
