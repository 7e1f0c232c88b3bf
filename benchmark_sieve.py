#!/usr/bin/env python3
"""
Benchmark the bit-packed sieve.

Measures:
1. Construction time at 10^1 .. 10^max_exp (O(n log log n) plus memory traffic)
2. Table-lookup primality test
3. Factoring every n in [2, 10^6) with a sieve of 1000

The first Sieve() call also pays numba compilation; it is done once up
front so it does not pollute the timings.

Usage:
    python benchmark_sieve.py
    python benchmark_sieve.py --max-exp 8
"""

import argparse
import time

from src.bit_sieve import Sieve


def time_call(fn, repeat: int) -> float:
    """Average seconds per call over `repeat` calls."""
    t0 = time.perf_counter()
    for _ in range(repeat):
        fn()
    return (time.perf_counter() - t0) / repeat


def benchmark(max_exp: int):
    """Run construction, primality and factoring benchmarks."""
    print("=" * 60)
    print(f"Sieve Benchmark: up to 10^{max_exp}")
    print("=" * 60)

    print("Compiling kernels...", end=" ", flush=True)
    t0 = time.time()
    Sieve(100).factor(97 * 89)
    print(f"{time.time() - t0:.1f}s")
    print()

    print(f"{'limit':>15} {'build (ms)':>12} {'prime (µs)':>12} {'table (KB)':>12}")
    for k in range(1, max_exp + 1):
        n = 10**k
        repeat = max(1, 10**(max_exp - k))
        build = time_call(lambda: Sieve(n), min(repeat, 1000))
        s = Sieve(n)
        test = time_call(lambda: s.is_prime(n - 1), 10000)
        print(f"{n:>15,} {build * 1e3:>12.3f} {test * 1e6:>12.3f} {s.nbytes / 1e3:>12.1f}")

    print()
    root = 1000
    s = Sieve(root)
    hi = root * root
    print(f"Factoring every n in [2, {hi:,}) with Sieve({root})...", end=" ", flush=True)
    t0 = time.time()
    for n in range(2, hi):
        s.factor(n)
    elapsed = time.time() - t0
    print(f"{elapsed:.1f}s ({elapsed / (hi - 2) * 1e6:.2f}µs per factorization)")


def main():
    parser = argparse.ArgumentParser(description='Benchmark the bit-packed sieve')
    parser.add_argument('--max-exp', type=int, default=7, help='Largest power of ten (default: 7)')
    args = parser.parse_args()
    benchmark(args.max_exp)


if __name__ == '__main__':
    main()
