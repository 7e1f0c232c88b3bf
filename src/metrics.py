"""
Definitions of all reported statistics.

Responsibility: quantities that appear in the tables and figures, plus
the prime-number-theorem sizing shared with Sieve.for_count.
"""

import math

import numpy as np
from typing import Dict

# limit ≈ COUNT_SCALE * n * ln(n) holds the first n primes
COUNT_SCALE = 1.25506
MIN_COUNT_LIMIT = 64


def count_limit_estimate(n: int) -> int:
    """
    Sieve limit expected to contain the first n primes.

    Parameters
    ----------
    n : int
        Number of primes wanted.

    Returns
    -------
    int
        1.25506 * n * ln(n), never below 64.
    """
    if n < 2:
        return MIN_COUNT_LIMIT
    size = COUNT_SCALE * n * math.log(n)
    return int(max(size, MIN_COUNT_LIMIT))


def pnt_estimate(x: float) -> float:
    """
    Prime number theorem estimate x / ln(x) of pi(x).

    Returns 0.0 for x < 2.
    """
    if x < 2:
        return 0.0
    return x / math.log(x)


def pnt_ratio(count: int, x: float) -> float:
    """Ratio pi(x) / (x / ln x); tends to 1 from above."""
    estimate = pnt_estimate(x)
    if estimate == 0:
        return np.nan
    return count / estimate


def prime_gaps(primes: np.ndarray) -> np.ndarray:
    """
    Differences between consecutive primes.

    Parameters
    ----------
    primes : np.ndarray
        Ascending primes.

    Returns
    -------
    np.ndarray
        Array of length len(primes) - 1 (empty for fewer than 2 primes).
    """
    if len(primes) < 2:
        return np.array([], dtype=np.int64)
    return np.diff(np.asarray(primes, dtype=np.int64))


def summarize_gaps(primes: np.ndarray) -> Dict[str, float]:
    """
    Summary statistics for prime gaps.

    Returns
    -------
    dict
        Dictionary with mean, max, count and the prime where the max gap starts.
    """
    gaps = prime_gaps(primes)
    if len(gaps) == 0:
        return {
            'mean': np.nan,
            'max': 0,
            'max_start': 0,
            'count': 0
        }

    i = int(np.argmax(gaps))
    return {
        'mean': float(np.mean(gaps)),
        'max': int(gaps[i]),
        'max_start': int(primes[i]),
        'count': len(gaps)
    }
