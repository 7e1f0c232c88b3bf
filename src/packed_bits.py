"""
Packed bit table for odd numbers.

Responsibility: storage layout and the compiled inner loops. This file
must not know about sentinels, factoring or display.

Only odd numbers >= 3 are stored, one bit each. A set bit means
"composite", a clear bit means "prime".

Index mapping:
- odd k  → bit position k >> 1      (3 → 1, 5 → 2, 7 → 3, ...)
- position p → word p >> 3, bit p & 7

Position 0 would be the number 1 and is never read. n_to_position and
position_to_n are the public form of this mapping; the kernels inline it.

Scans (counting, n-th prime, enumeration) run bit by bit in compiled
kernels and never unpack the table, so they need no memory beyond it.

Memory: limit/16 bytes, versus limit bytes for a boolean array.
"""

import numpy as np
from numba import njit

WORD_DTYPE = np.uint8
WORD_BITS_LOG2 = 3
WORD_BITS = 1 << WORD_BITS_LOG2
WORD_MASK = WORD_BITS - 1

# odd k lives in word k >> ODD_SHIFT
ODD_SHIFT = 1 + WORD_BITS_LOG2


def n_to_position(n: int) -> int:
    """Convert an odd number to its bit position."""
    if n & 1 == 0:
        raise ValueError(f"{n} is even and has no bit in the table")
    return n >> 1


def position_to_n(p: int) -> int:
    """Convert a bit position back to the odd number it represents."""
    return 2 * p + 1


def last_position(limit: int) -> int:
    """Bit position of the largest odd number <= limit (0 when there is none >= 3)."""
    return max((limit - 1) >> 1, 0)


def new_table(limit: int) -> np.ndarray:
    """Allocate a zeroed table with one bit for every odd number <= limit."""
    return np.zeros((max(limit, 0) >> ODD_SHIFT) + 1, dtype=WORD_DTYPE)


def table_bit(table: np.ndarray, n: int) -> int:
    """Return the stored bit for odd n (1 = composite)."""
    p = n_to_position(n)
    return (int(table[p >> WORD_BITS_LOG2]) >> (p & WORD_MASK)) & 1


# ========== Compiled kernels ==========

@njit
def _bit(table, n):
    return (table[n >> ODD_SHIFT] >> ((n >> 1) & WORD_MASK)) & 1


@njit
def strike_composites(table, limit):
    """
    Mark every odd composite <= limit in place.

    For each odd i with i*i <= limit that is still unmarked, strike its
    odd multiples 3i, 5i, 7i, ... (step 2i skips the even ones).
    """
    i = 3
    while i * i <= limit:
        if _bit(table, i) == 0:
            for j in range(3 * i, limit + 1, 2 * i):
                table[j >> ODD_SHIFT] |= 1 << ((j >> 1) & WORD_MASK)
        i += 2


@njit
def smallest_odd_divisor(table, n, start, limit):
    """
    First table-prime d >= start (odd) with d <= limit, d*d <= n and d | n.

    Returns 0 when no such divisor exists. start must be odd.
    """
    d = start
    while d <= limit and d * d <= n:
        if _bit(table, d) == 0 and n % d == 0:
            return d
        d += 2
    return 0


@njit
def count_clear_bits(table, last):
    """Number of clear bits (odd primes) at positions 1..last."""
    count = 0
    for p in range(1, last + 1):
        if (table[p >> WORD_BITS_LOG2] >> (p & WORD_MASK)) & 1 == 0:
            count += 1
    return count


@njit
def nth_clear_bit(table, last, k):
    """
    Odd number of the k-th clear bit (k >= 1) among positions 1..last.

    Stops at the k-th hit. Returns 0 if there are fewer than k.
    """
    seen = 0
    for p in range(1, last + 1):
        if (table[p >> WORD_BITS_LOG2] >> (p & WORD_MASK)) & 1 == 0:
            seen += 1
            if seen == k:
                return 2 * p + 1
    return 0


@njit
def fill_odd_primes(table, last, out):
    """Write the odd primes at positions 1..last into out, ascending."""
    i = 0
    for p in range(1, last + 1):
        if (table[p >> WORD_BITS_LOG2] >> (p & WORD_MASK)) & 1 == 0:
            out[i] = 2 * p + 1
            i += 1
    return i
