"""
Reference prime utilities.

Responsibility: slow, obviously-correct answers used to cross-check the
packed sieve. No bit packing, no sieve object.
"""

from math import isqrt

import numpy as np


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses a byte-per-number Sieve of Eratosthenes.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    flags = np.ones(max(N, 1) + 1, dtype=bool)
    flags[0] = flags[1] = False
    for p in range(2, isqrt(N) + 1 if N > 0 else 0):
        if flags[p]:
            flags[p*p::p] = False
    return flags[:N + 1]


def primes_upto(N: int) -> np.ndarray:
    """Return array of all primes <= N."""
    flags = prime_flags_upto(N)
    return np.nonzero(flags)[0]


def is_prime_trial(n: int) -> bool:
    """Primality by trial division by every integer in [2, sqrt(n)]."""
    if n < 2:
        return False
    for d in range(2, isqrt(n) + 1):
        if n % d == 0:
            return False
    return True


def divisor_count_brute(n: int) -> int:
    """Number of d in [1, n] with n % d == 0."""
    return sum(1 for d in range(1, n + 1) if n % d == 0)
