#!/usr/bin/env python3
"""
Basic usage examples for the ABSCAB numerical core.

This script demonstrates compensated summation and the complete elliptic
integrals used by the field kernels.
"""

import math
import sys

import numpy as np

sys.path.append('..')

from abscab import (
    CompensatedAccumulator,
    compensated_add,
    compensated_sum,
    naive_sum,
    cel,
    elliptic_k,
    elliptic_e,
)


def demonstrate_precision_loss():
    """Show how standard summation loses many tiny contributions."""
    print("=" * 60)
    print("DEMONSTRATION: Precision Loss in Standard Summation")
    print("=" * 60)

    n = 1_000_000
    contribution = 1.0e-20

    acc = CompensatedAccumulator(1.0)
    naive = 1.0
    for _ in range(n):
        compensated_add(acc, contribution)
        naive += contribution

    expected = 1.0 + n * contribution
    print(f"Adding {contribution} to 1.0, {n:,} times")
    print(f"Expected result:      {expected!r}")
    print(f"Naive result:         {naive!r}")
    print(f"Compensated result:   {acc.total()!r}")
    print(f"Accumulator state:    {acc!r}")
    print()


def demonstrate_cancellation():
    """Small terms hidden between large cancelling ones."""
    print("=" * 60)
    print("DEMONSTRATION: Cancellation")
    print("=" * 60)

    rng = np.random.default_rng(42)
    large = rng.uniform(1e15, 1e16, 5000)
    small = rng.uniform(0.0, 1.0, 10000)
    data = np.concatenate([large, -large, small])
    rng.shuffle(data)

    reference = math.fsum(data.tolist())
    print(f"Array size: {len(data):,}")
    print(f"{'Algorithm':<20} {'Result':<25} {'Relative Error':<15}")
    print("-" * 60)
    for name, algorithm in [("Naive", naive_sum), ("NumPy sum", np.sum),
                            ("Compensated", compensated_sum)]:
        result = float(algorithm(data))
        print(f"{name:<20} {result:<25.15g} {abs(result - reference) / reference:.2e}")
    print()


def demonstrate_elliptic_integrals():
    """Tabulate K and E and evaluate a general cel."""
    print("=" * 60)
    print("DEMONSTRATION: Complete Elliptic Integrals")
    print("=" * 60)

    print(f"{'k^2':<12} {'K(k)':<22} {'E(k)':<22}")
    print("-" * 56)
    for k_sq in [0.0, 0.25, 0.5, 0.75, 0.9, 0.99, 1.0 - 1e-12, 1.0]:
        print(f"{k_sq:<12.10g} {elliptic_k(k_sq):<22.17g} {elliptic_e(k_sq):<22.17g}")
    print()

    k_c, p, a, b = 0.5, 2.0, 1.0, 0.3
    print(f"cel({k_c}, {p}, {a}, {b}) = {cel(k_c, p, a, b)!r}")
    print(f"cel(0, 1, 1, 1)          = {cel(0.0, 1.0, 1.0, 1.0)!r}")
    print()


def main():
    demonstrate_precision_loss()
    demonstrate_cancellation()
    demonstrate_elliptic_integrals()


if __name__ == "__main__":
    main()
