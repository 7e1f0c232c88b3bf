"""
Factorization utilities.

Responsibility: factor information, cleanly separated.
This file must not know how the sieve stores its bits; it only asks the
sieve for its limit and for the next odd prime factor.

Every function takes the sieve as its last argument and works for
n <= sieve.factor_limit (= limit**2). Larger n get an empty / zero /
False answer, never an exception.
"""

from typing import List, Tuple


def _strip_twos(n: int) -> Tuple[int, int]:
    """Return (n with all factors of 2 removed, number removed)."""
    count = 0
    while n > 1 and n & 1 == 0:
        n >>= 1
        count += 1
    return n, count


def factor_unique(n: int, sieve) -> List[Tuple[int, int]]:
    """
    Factor n into (prime, multiplicity) pairs.

    Parameters
    ----------
    n : int
        Integer to factor.
    sieve : Sieve
        Sieve supplying trial divisors.

    Returns
    -------
    list
        Pairs in ascending prime order, e.g. 360 -> [(2, 3), (3, 2), (5, 1)].
        [(n, 1)] for n <= 3, [] if n > sieve.factor_limit.
    """
    if n > sieve.factor_limit:
        return []
    if n <= 3:
        return [(n, 1)]

    result = []
    n, twos = _strip_twos(n)
    if twos:
        result.append((2, twos))

    d = sieve.smallest_odd_factor(n)
    while d:
        count = 0
        while n % d == 0:
            n //= d
            count += 1
        result.append((d, count))
        d = sieve.smallest_odd_factor(n, d + 2)

    # whatever survives trial division is a single prime
    if n > 1:
        result.append((n, 1))
    return result


def factor(n: int, sieve) -> List[int]:
    """
    Factor n into primes, repeated factors repeated.

    Parameters
    ----------
    n : int
        Integer to factor.
    sieve : Sieve
        Sieve supplying trial divisors.

    Returns
    -------
    list
        Non-decreasing primes whose product is n, e.g. 12 -> [2, 2, 3].
        [n] for n <= 3, [] if n > sieve.factor_limit.
    """
    result = []
    for p, k in factor_unique(n, sieve):
        result.extend([p] * k)
    return result


def divisor_count(n: int, sieve) -> int:
    """
    Total number of positive divisors of n.

    Uses d(n) = prod(k + 1) over the prime powers p**k of n.
    divisor_count(6) == 4, from {1, 2, 3, 6}.

    Returns
    -------
    int
        1 for n == 1, 0 for n < 1 or n > sieve.factor_limit.

    Notes
    -----
    Zero and negative n count as out of domain and give 0. Some sieve
    libraries report 1 for n == 0 and for negative n instead.
    """
    if n > sieve.factor_limit or n < 1:
        return 0
    if n == 1:
        return 1
    m = 1
    for _, k in factor_unique(n, sieve):
        m *= k + 1
    return m


def is_square_free(n: int, sieve) -> bool:
    """
    True iff no prime factor of n repeats (OEIS A005117).

    False for n < 1 and for n > sieve.factor_limit. Zero is divisible by
    every square, so it is not square-free here, although sieves that only
    look for repeated factors in [n] report True for 0 and negative n.
    """
    if n > sieve.factor_limit or n < 1:
        return False
    f = factor(n, sieve)
    for i in range(len(f) - 1):
        if f[i] == f[i + 1]:
            return False
    return True


def factor_string(n: int, sieve) -> str:
    """Render the factorization of n as e.g. '2^3 3^2 5'."""
    parts = []
    for p, k in factor_unique(n, sieve):
        parts.append(f"{p}" if k == 1 else f"{p}^{k}")
    return ' '.join(parts)


def omega(n: int, sieve) -> int:
    """
    Count distinct prime factors of n (little omega).

    Returns
    -------
    int
        Number of distinct prime factors; 0 for n <= 1 or out of range.
    """
    if n <= 1:
        return 0
    return len(factor_unique(n, sieve))


def Omega(n: int, sieve) -> int:
    """
    Count prime factors of n with multiplicity (big Omega).

    Returns
    -------
    int
        Total count of prime factors; 0 for n <= 1 or out of range.
    """
    if n <= 1:
        return 0
    return sum(k for _, k in factor_unique(n, sieve))
