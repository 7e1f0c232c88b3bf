"""
Prime patterns read off a sieve.

Responsibility: derived counts (constellations, sums, polynomial values).
Everything here goes through the public Sieve API.

A constellation is a tuple of offsets such as (0, 2); it occurs at n when
every n + offset is prime. Only odd starting points n >= 3 are counted, so
(2, 3) is never a twin and (3, 5, 7) is the only 0-2-4 triple.
"""

import numpy as np
from typing import Tuple

from .bit_sieve import Sieve

# Offset patterns
TWIN = (0, 2)
TRIPLE_024 = (0, 2, 4)  # only 3, 5, 7
TRIPLE_026 = (0, 2, 6)
TRIPLE_046 = (0, 4, 6)

CONSTELLATIONS = {
    'twin': TWIN,
    '024': TRIPLE_024,
    '026': TRIPLE_026,
    '046': TRIPLE_046,
}

SQRT2 = 1.4142135623730950488016887242096980785696718753769


def count_constellations(sieve: Sieve, offsets: Tuple[int, ...], upto: int) -> int:
    """
    Count odd n in [3, upto] with n + o prime for every offset o.

    Parameters
    ----------
    sieve : Sieve
        Must satisfy sieve.limit >= upto + max(offsets).
    offsets : tuple
        Non-negative offsets, e.g. TWIN.
    upto : int
        Largest starting point.

    Returns
    -------
    int
        Number of occurrences.
    """
    span = max(offsets)
    if upto + span > sieve.limit:
        raise ValueError(
            f"Sieve limit {sieve.limit:,} too small for n <= {upto:,} with offset {span}"
        )
    if upto < 3:
        return 0

    flags = sieve.prime_flags()
    starts = np.arange(3, upto + 1, 2)
    hits = np.ones(len(starts), dtype=bool)
    for o in offsets:
        hits &= flags[starts + o]
    return int(np.count_nonzero(hits))


def count_twin_primes(sieve: Sieve, upto: int) -> int:
    """Count twin prime pairs (n, n+2) with 3 <= n <= upto."""
    return count_constellations(sieve, TWIN, upto)


def prime_sum(sieve: Sieve, count: int) -> int:
    """
    Sum of the first `count` primes.

    Returns 0 if the sieve holds fewer than `count` primes.
    """
    if count < 1:
        return 0
    primes = sieve.primes()
    if len(primes) < count:
        return 0
    return int(primes[:count].sum())


def count_quadratic_primes(upper: int, verbose: bool = False) -> int:
    """
    Count n in [2, upper] for which 2n^2 - 1 is prime.

    Uses the smallest sieve whose square covers 2 * upper^2, so most
    values are decided by trial division rather than table lookup.
    """
    size = 1 + int(SQRT2 * upper)
    sieve = Sieve(size)
    if verbose:
        print(f"  Sieve of {size:,} for 2n^2-1, n <= {upper:,}")

    count = 0
    for n in range(2, upper + 1):
        if sieve.is_prime(2 * n * n - 1):
            count += 1
    return count
