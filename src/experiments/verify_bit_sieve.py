#!/usr/bin/env python3
"""
Verify the bit-packed sieve produces identical results to the reference sieve.

Compares:
1. Primality flags for every n <= N
2. Trial-division primality in (N, N^2] on a sample
3. Factorizations and divisor counts on a sample of n <= N^2

Run at small N first to verify correctness before scaling up.

Usage:
    python -m src.experiments.verify_bit_sieve --N 1e6
"""

import math
import sys
import time
import numpy as np

from ..bit_sieve import Sieve, Primality
from ..primes import prime_flags_upto, is_prime_trial, divisor_count_brute


def verify_flags(N: int, verbose: bool = True) -> bool:
    """Verify primality flags match between implementations."""
    if verbose:
        print(f"\n=== Verifying primality flags for N={N:,} ===")

    t0 = time.time()
    flags_ref = prime_flags_upto(N)
    t_ref = time.time() - t0

    t0 = time.time()
    sieve = Sieve(N)
    t_bit = time.time() - t0

    flags_bit = sieve.prime_flags()

    if verbose:
        print(f"  Reference sieve: {t_ref:.2f}s, size={flags_ref.nbytes/1e6:.1f}MB")
        print(f"  Bit sieve:       {t_bit:.2f}s, size={sieve.nbytes/1e6:.1f}MB")
        print(f"  Memory ratio: {flags_ref.nbytes / sieve.nbytes:.1f}x")

    mismatches = np.flatnonzero(flags_ref != flags_bit)
    for n in mismatches[:10]:
        print(f"  MISMATCH at n={n}: reference={flags_ref[n]}, bit={flags_bit[n]}")

    count_ok = sieve.prime_count() == int(flags_ref.sum())
    if not count_ok:
        print(f"  MISMATCH prime_count: reference={int(flags_ref.sum())}, bit={sieve.prime_count()}")

    if verbose:
        if len(mismatches) == 0 and count_ok:
            print(f"  ✓ All {N + 1:,} flags match, π({N:,}) = {sieve.prime_count():,}")
        else:
            print(f"  ✗ {len(mismatches):,} mismatches found")

    return len(mismatches) == 0 and count_ok


def verify_extended_range(N: int, sample: int = 2000, seed: int = 0,
                          verbose: bool = True) -> bool:
    """Verify trial-division primality for values between N and N^2."""
    if verbose:
        print(f"\n=== Verifying extended primality in ({N:,}, {N*N:,}] ===")

    sieve = Sieve(N)
    rng = np.random.default_rng(seed)
    # keep trial division against every integer affordable
    hi = min(N * N, 10**8)
    if hi <= N:
        return True
    values = rng.integers(N + 1, hi + 1, size=sample)

    errors = 0
    for n in values:
        n = int(n)
        expected = is_prime_trial(n)
        if sieve.is_prime(n) != expected or sieve.classify(n) is Primality.UNKNOWN:
            errors += 1
            if errors <= 10:
                print(f"  MISMATCH at n={n}: expected prime={expected}, got {sieve.classify(n).value}")

    unknown = sieve.classify(N * N + 1) is Primality.UNKNOWN

    if verbose:
        if errors == 0 and unknown:
            print(f"  ✓ All {sample:,} sampled values match")
        else:
            print(f"  ✗ {errors:,} mismatches found")

    return errors == 0 and unknown


def verify_factorizations(N: int, sample: int = 2000, seed: int = 0,
                          verbose: bool = True) -> bool:
    """Verify factorizations multiply back, are prime and are ordered."""
    if verbose:
        print(f"\n=== Verifying factorizations for n <= {N*N:,} ===")

    if N < 2:
        return True

    sieve = Sieve(N)
    rng = np.random.default_rng(seed)
    values = list(range(2, min(N, 1000) + 1))
    values += [int(v) for v in rng.integers(2, N * N + 1, size=sample)]

    errors = 0
    for n in values:
        f = sieve.factor(n)
        product = math.prod(f)
        ok = (
            product == n
            and all(sieve.is_prime(p) for p in f)
            and f == sorted(f)
        )
        expanded = [p for p, k in sieve.factor_unique(n) for _ in range(k)]
        ok = ok and expanded == f
        if n <= 10**4:
            ok = ok and sieve.divisor_count(n) == divisor_count_brute(n)
        if not ok:
            errors += 1
            if errors <= 10:
                print(f"  MISMATCH factor({n}) = {f}")

    if verbose:
        if errors == 0:
            print(f"  ✓ All {len(values):,} factorizations check out")
        else:
            print(f"  ✗ {errors:,} bad factorizations")

    return errors == 0


def main():
    import argparse

    parser = argparse.ArgumentParser(description='Verify bit-packed sieve correctness')
    parser.add_argument('--N', type=float, default=1e6, help='Sieve limit (default: 1e6)')
    parser.add_argument('--sample', type=int, default=2000,
                        help='Random values to test beyond N (default: 2000)')
    parser.add_argument('--seed', type=int, default=0, help='Random seed')
    args = parser.parse_args()

    N = int(args.N)

    print(f"Bit Sieve Verification")
    print(f"N = {N:,}")
    print("=" * 50)

    flags_ok = verify_flags(N)
    extended_ok = verify_extended_range(N, args.sample, args.seed)
    factor_ok = verify_factorizations(N, args.sample, args.seed)

    print("\n" + "=" * 50)
    if flags_ok and extended_ok and factor_ok:
        print("✓ All verifications passed!")
    else:
        print("✗ Some verifications failed!")
        sys.exit(1)


if __name__ == '__main__':
    main()
