"""
Bit-packed sieve of Eratosthenes.

Responsibility: the Sieve object. Construction, primality, counting and
enumeration. Factoring lives in factorization.py and is exposed here as
thin methods.

The sieve decides primality directly for n <= limit and, by trial
division against its own table, for limit < n <= limit**2. Beyond that
it cannot decide: is_prime() answers False and classify() answers
Primality.UNKNOWN.
"""

import math
from enum import Enum
from typing import Iterator, List, Tuple

import numpy as np

from .packed_bits import (
    count_clear_bits,
    fill_odd_primes,
    last_position,
    new_table,
    nth_clear_bit,
    smallest_odd_divisor,
    strike_composites,
    table_bit,
)
from .metrics import count_limit_estimate
from . import factorization

# cushion added to ceil(sqrt(n)) by Sieve.for_factoring
FACTOR_MARGIN = 32


class Primality(Enum):
    """Tri-state primality answer."""
    PRIME = 'prime'
    COMPOSITE = 'composite'
    UNKNOWN = 'unknown'  # n > limit**2


class Sieve:
    """
    Primes <= limit, one bit per odd number.

    Parameters
    ----------
    limit : int
        Largest number whose primality is read straight from the table.
        Need not be prime.

    Examples
    --------
    >>> s = Sieve(10)
    >>> str(s)
    '2 3 5 7'
    >>> s.factor(12)
    [2, 2, 3]
    """

    def __init__(self, limit: int):
        limit = int(limit)
        if limit < 0:
            raise ValueError(f"Sieve limit must be >= 0, got {limit}")
        self._limit = limit
        self._table = new_table(limit)
        strike_composites(self._table, limit)
        self._count = None
        self._count_scans = 0

    @classmethod
    def for_count(cls, count: int) -> 'Sieve':
        """
        Build a sieve large enough to hold the first `count` primes.

        Size comes from the prime number theorem (see
        metrics.count_limit_estimate). Callers can confirm with
        nth_prime(count) != 0.
        """
        return cls(count_limit_estimate(count))

    @classmethod
    def for_factoring(cls, n: int) -> 'Sieve':
        """Build a sieve able to factor (and test) every integer <= n."""
        root = math.isqrt(max(int(n), 0))
        if root * root < n:
            root += 1
        return cls(root + FACTOR_MARGIN)

    @property
    def limit(self) -> int:
        """Largest number decided by table lookup."""
        return self._limit

    @property
    def factor_limit(self) -> int:
        """Largest number that can be factored or tested by trial division."""
        return self._limit * self._limit

    @property
    def nbytes(self) -> int:
        """Size of the packed table in bytes."""
        return self._table.nbytes

    # ========== Primality ==========

    def classify(self, n: int) -> Primality:
        """
        Decide primality of n, distinguishing "composite" from "can't tell".

        Parameters
        ----------
        n : int
            Integer to test.

        Returns
        -------
        Primality
            PRIME or COMPOSITE when decidable, UNKNOWN when n > limit**2.
        """
        if n < 2:
            return Primality.COMPOSITE
        if n == 2:
            return Primality.PRIME
        if n & 1 == 0:
            return Primality.COMPOSITE
        if n <= self._limit:
            if table_bit(self._table, n):
                return Primality.COMPOSITE
            return Primality.PRIME
        if n <= self.factor_limit:
            root = math.isqrt(n)
            if root * root == n:
                return Primality.COMPOSITE
            if self.smallest_odd_factor(n) != 0:
                return Primality.COMPOSITE
            return Primality.PRIME
        return Primality.UNKNOWN

    def is_prime(self, n: int) -> bool:
        """
        True iff the sieve can prove n prime.

        False for n > limit**2 does not mean composite; use classify()
        when the difference matters.
        """
        return self.classify(n) is Primality.PRIME

    def __contains__(self, n: int) -> bool:
        return self.is_prime(n)

    def smallest_odd_factor(self, n: int, start: int = 3) -> int:
        """
        Smallest odd prime factor d >= start of n with d <= limit and d*d <= n.

        Returns 0 if there is none. Used by trial division in both the
        primality test and the factoring functions.
        """
        return int(smallest_odd_divisor(self._table, n, start, self._limit))

    # ========== Counting and enumeration ==========

    def prime_count(self) -> int:
        """Number of primes <= limit (pi(limit)). Scans the table once."""
        if self._count is None:
            self._count_scans += 1
            count = 1 if self._limit >= 2 else 0
            count += int(count_clear_bits(self._table, last_position(self._limit)))
            self._count = count
        return self._count

    def primes(self) -> np.ndarray:
        """
        Return array of all primes <= limit.

        Returns
        -------
        np.ndarray
            int64 array in ascending order.
        """
        if self._limit < 2:
            return np.zeros(0, dtype=np.int64)
        primes = np.empty(self.prime_count(), dtype=np.int64)
        primes[0] = 2
        fill_odd_primes(self._table, last_position(self._limit), primes[1:])
        return primes

    def prime_flags(self) -> np.ndarray:
        """
        Return boolean array where flags[i] is True iff i is prime.

        Returns
        -------
        np.ndarray
            Boolean array of length limit+1.
        """
        flags = np.zeros(self._limit + 1, dtype=bool)
        flags[self.primes()] = True
        return flags

    def __iter__(self) -> Iterator[int]:
        return (int(p) for p in self.primes())

    def nth_prime(self, n: int) -> int:
        """
        Return the n-th prime (1-indexed), or 0 if the sieve holds fewer.

        Walks the table from 3 and stops at the n-th prime.
        """
        if n < 1:
            return 0
        if n == 1:
            return 2
        return int(nth_clear_bit(self._table, last_position(self._limit), n - 1))

    # ========== Factoring ==========

    def factor(self, n: int) -> List[int]:
        """Prime factors of n with multiplicity, ascending. [] if n > limit**2."""
        return factorization.factor(n, self)

    def factor_unique(self, n: int) -> List[Tuple[int, int]]:
        """(prime, multiplicity) pairs of n, ascending. [] if n > limit**2."""
        return factorization.factor_unique(n, self)

    def factor_string(self, n: int) -> str:
        return factorization.factor_string(n, self)

    def divisor_count(self, n: int) -> int:
        """Number of positive divisors of n. 0 if n > limit**2."""
        return factorization.divisor_count(n, self)

    def is_square_free(self, n: int) -> bool:
        """True iff no prime divides n twice. False if n > limit**2."""
        return factorization.is_square_free(n, self)

    # ========== Display ==========

    def render_primes(self) -> str:
        """Space-separated primes <= limit, e.g. '2 3 5 7'."""
        return ' '.join(str(p) for p in self.primes())

    def __str__(self) -> str:
        return self.render_primes()

    def __repr__(self) -> str:
        return f"Sieve(limit={self._limit})"
