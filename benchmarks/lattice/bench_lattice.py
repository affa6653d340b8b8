"""Benchmarks for lattice conversion.

Times the lattice converter against a column-by-column NumPy baseline; a
ratio above 1 means torchgabor is faster.
"""

from __future__ import annotations

import math
import time
from typing import Any, Callable

import numpy as np
import torch

import torchgabor.lattice as Lat


def time_call(
    func: Callable, *args: Any, repeats: int = 10, **kwargs: Any
) -> tuple[float, float]:
    """Mean and standard deviation in seconds of ``repeats`` calls after
    one untimed call."""
    func(*args, **kwargs)

    times = np.empty(repeats)
    for i in range(repeats):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times[i] = time.perf_counter() - start

    return float(times.mean()), float(times.std())


def format_time(seconds: float) -> str:
    for scale, unit in ((1.0, "s"), (1e-3, "ms"), (1e-6, "us")):
        if seconds >= scale:
            return f"{seconds / scale:.3f}{unit}"
    return f"{seconds * 1e9:.3f}ns"


def numpy_multiwindow(
    g: np.ndarray, a: int, M: int, lt: tuple[int, int]
) -> np.ndarray:
    """Column-by-column baseline."""
    L = g.shape[0]
    b = L // M
    l = np.arange(L)
    multiwindow = np.empty((L, lt[1]), dtype=np.complex128)
    for w in range(lt[1]):
        wavenumber = ((w * lt[0]) % lt[1]) * b // lt[1]
        multiwindow[:, w] = np.exp(
            2j * np.pi * ((l * wavenumber) % L) / L
        ) * np.roll(g, w * a)
    return multiwindow


def bench_nonseparable_window_to_multiwindow(
    L: int, a: int, M: int, lt: tuple[int, int], device: str = "cpu"
) -> None:
    g = torch.randn(L, dtype=torch.complex128, device=device)

    mean, std = time_call(Lat.nonseparable_window_to_multiwindow, g, a, M, lt)

    print(f"\nnonseparable_window_to_multiwindow L={L} a={a} M={M} lt={lt}")
    print(f"  torchgabor: {format_time(mean)} +/- {format_time(std)}")

    if device == "cpu":
        np_mean, np_std = time_call(numpy_multiwindow, g.numpy(), a, M, lt)
        print(f"  numpy:      {format_time(np_mean)} +/- {format_time(np_std)}")
        print(f"  ratio:      {np_mean / mean:.2f}")


def run_benchmarks(device: str = "cpu") -> None:
    for a, M, lt in [(4, 8, (1, 2)), (8, 16, (1, 3)), (16, 32, (3, 8))]:
        L = math.lcm(a, M) * lt[1] * 256
        bench_nonseparable_window_to_multiwindow(L, a, M, lt, device=device)


if __name__ == "__main__":
    print("Running CPU benchmarks...\n")
    run_benchmarks()

    if torch.cuda.is_available():
        print("\n" + "=" * 60)
        print("Running CUDA benchmarks...\n")
        run_benchmarks("cuda")
