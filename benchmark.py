#!/usr/bin/env python3
"""
Benchmark the sieve variants.

Compares:
1. Plain: dense LPF table, bootstrapped
2. Wheel: wheel-indexed LPF table, bootstrapped
3. Linear: single pass, no bootstrap (pure Python, small N only)

The first call of each compiled kernel is excluded (warm-up).
"""

import argparse
import time

from lpfsieve.primes import sieve

LINEAR_MAX = 10**6


def benchmark(N: int, repeat: int = 3):
    """Time every variant at N and check they agree."""
    print("=" * 60)
    print(f"Benchmark: N = {N:,}")
    print("=" * 60)

    variants = ['plain', 'wheel']
    if N <= LINEAR_MAX:
        variants.append('linear')

    results = {}
    for variant in variants:
        best = float('inf')
        for _ in range(repeat):
            t0 = time.time()
            results[variant] = sieve(N, variant)
            best = min(best, time.time() - t0)
        print(f"  {variant:<7} {best:>8.3f}s  {len(results[variant]):,} primes")

    reference = results['plain']
    for variant, primes in results.items():
        status = "✓" if primes == reference else "✗ (differs from plain)"
        print(f"  {variant:<7} {status}")
    print()


def main():
    parser = argparse.ArgumentParser(description='Benchmark LPF sieve variants')
    parser.add_argument('--N', type=float, nargs='+', default=[1e5, 1e6, 1e7],
                        help='Bounds to benchmark')
    parser.add_argument('--repeat', type=int, default=3, help='Runs per variant')
    args = parser.parse_args()

    print("Warming up compiled kernels...", end=" ", flush=True)
    t0 = time.time()
    sieve(100, 'plain')
    sieve(100, 'wheel')
    print(f"{time.time() - t0:.1f}s")
    print()

    for N in args.N:
        benchmark(int(N), args.repeat)


if __name__ == '__main__':
    main()
