"""Benchmark matrix powers.

Compares repeated squaring (O(log n) matmuls) against naive repeated
multiplication (O(n) matmuls) across exponents, and reports how many
multiplications each needs.
"""

import time

import torch

from fastpower import matrix_power, power
from fastpower.testing import CountingMultiply


def _naive_power(a: torch.Tensor, n: int) -> torch.Tensor:
    result = torch.eye(a.shape[-1], dtype=a.dtype, device=a.device)
    for _ in range(n):
        result = torch.matmul(result, a)
    return result


def benchmark_power(
    n: int,
    size: int = 64,
    n_iterations: int = 20,
    device: str = "cpu",
    method: str = "squaring",
) -> float:
    """Benchmark a matrix power at given exponent.

    Parameters
    ----------
    n : int
        Exponent.
    size : int
        Side length of the square matrix.
    n_iterations : int
        Number of iterations for timing.
    device : str
        Device to run on ('cpu' or 'cuda').
    method : str
        'squaring' or 'naive'.

    Returns
    -------
    float
        Average time per power in milliseconds.
    """
    a = torch.randn(size, size, device=device, dtype=torch.float64)
    a = a / torch.linalg.matrix_norm(a, ord=2)

    if method == "squaring":
        power_fn = matrix_power
    elif method == "naive":
        power_fn = _naive_power
    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    for _ in range(3):
        _ = power_fn(a, n)

    # Synchronize before timing (important for CUDA)
    if device == "cuda":
        torch.cuda.synchronize()

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = power_fn(a, n)

    if device == "cuda":
        torch.cuda.synchronize()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def count_multiplications(n: int) -> int:
    """Number of matmuls repeated squaring uses for exponent n."""
    multiply = CountingMultiply(torch.matmul)
    power(torch.eye(2), n, multiply, torch.eye(2))
    return multiply.count


def main():
    """Run matrix power benchmarks across exponents."""
    exponents = [1, 2, 7, 16, 100, 255, 1000, 4096]

    print("Matrix Power Benchmark")
    print("=" * 70)
    print(
        f"{'n':>8} {'Matmuls':>10} {'Squaring (ms)':>16} {'Naive (ms)':>14}"
    )
    print("-" * 70)

    for n in exponents:
        ms_squaring = benchmark_power(n, method="squaring")
        ms_naive = benchmark_power(n, method="naive")

        print(
            f"{n:>8} {count_multiplications(n):>10} "
            f"{ms_squaring:>16.4f} {ms_naive:>14.4f}"
        )

    print()
    print("Notes:")
    print("- Squaring uses at most 2 * bit_length(n) matmuls")
    print("- Naive uses n matmuls")


if __name__ == "__main__":
    main()
