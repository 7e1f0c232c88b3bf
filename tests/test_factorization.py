"""
Tests for the factor family: factor, factor_unique, divisor_count,
is_square_free, factor_string, omega, Omega.
"""

import math

import pytest

from src.bit_sieve import Sieve
from src.factorization import (
    factor,
    factor_unique,
    divisor_count,
    is_square_free,
    factor_string,
    omega,
    Omega,
)
from src.primes import is_prime_trial, divisor_count_brute


SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]


@pytest.fixture(scope="module")
def sieve10():
    return Sieve(10)


@pytest.fixture(scope="module")
def sieve1000():
    return Sieve(1000)


class TestFactor:
    """factor(n): ascending primes with multiplicity."""

    def test_examples_to_10(self, sieve10):
        expected = {
            2: [2], 3: [3], 4: [2, 2], 5: [5], 6: [2, 3],
            7: [7], 8: [2, 2, 2], 9: [3, 3], 10: [2, 5],
        }
        for n, f in expected.items():
            assert sieve10.factor(n) == f, n

    def test_twelve(self, sieve10):
        assert factor(12, sieve10) == [2, 2, 3]

    def test_degenerate_inputs(self, sieve10):
        assert sieve10.factor(0) == [0]
        assert sieve10.factor(1) == [1]

    def test_out_of_range_is_empty(self, sieve10):
        assert sieve10.factor(101) == []
        assert sieve10.factor_unique(101) == []

    def test_exhaustive_up_to_limit_squared(self):
        """Product, primality and order for every n in [2, limit**2]."""
        for limit in [7, 10, 11, 25]:
            s = Sieve(limit)
            for n in range(2, limit * limit + 1):
                f = s.factor(n)
                assert math.prod(f) == n, (limit, n, f)
                assert all(is_prime_trial(p) for p in f), (limit, n, f)
                assert f == sorted(f), (limit, n, f)

    def test_square_of_limit(self):
        """n = limit**2 with prime limit factors completely."""
        assert Sieve(7).factor(49) == [7, 7]
        assert Sieve(11).factor(121) == [11, 11]

    def test_large_semiprime(self):
        s = Sieve.for_factoring(10**13)
        assert s.factor(999983 * 1000003) == [999983, 1000003]
        assert s.factor(2**40) == [2] * 40

    def test_large_prime_cofactor(self, sieve1000):
        # 9973 > 1000 is left over after trial division
        assert sieve1000.factor(3 * 7 * 9973) == [3, 7, 9973]


class TestFactorUnique:
    """factor_unique(n): (prime, multiplicity) pairs."""

    def test_examples_to_10(self, sieve10):
        expected = {
            2: [(2, 1)], 3: [(3, 1)], 4: [(2, 2)], 5: [(5, 1)],
            6: [(2, 1), (3, 1)], 7: [(7, 1)], 8: [(2, 3)],
            9: [(3, 2)], 10: [(2, 1), (5, 1)],
        }
        for n, f in expected.items():
            assert factor_unique(n, sieve10) == f, n

    def test_consistent_with_factor(self, sieve1000):
        """Expanding the pairs reproduces factor(n) exactly."""
        for n in list(range(0, 5000)) + [999999, 720720, 510510, 2**19 * 3]:
            expanded = [p for p, k in sieve1000.factor_unique(n) for _ in range(k)]
            assert expanded == sieve1000.factor(n), n

    def test_primes_distinct(self, sieve1000):
        for n in range(2, 3000):
            primes = [p for p, _ in sieve1000.factor_unique(n)]
            assert len(primes) == len(set(primes))
            assert primes == sorted(primes)


class TestDivisorCount:
    """divisor_count(n) = prod(k + 1)."""

    def test_six(self, sieve10):
        assert divisor_count(6, sieve10) == 4

    def test_one(self, sieve10):
        assert sieve10.divisor_count(1) == 1

    def test_nonpositive(self, sieve10):
        assert sieve10.divisor_count(0) == 0
        assert sieve10.divisor_count(-6) == 0
        assert sieve10.divisor_count(-1) == 0
        # factor keeps n as-is below 4; divisor_count does not build on that
        assert sieve10.factor(0) == [0]

    def test_out_of_range(self, sieve10):
        assert sieve10.divisor_count(101) == 0

    def test_brute_force(self):
        s = Sieve(40)
        for n in range(1, 1601):
            assert s.divisor_count(n) == divisor_count_brute(n), n

    def test_highly_composite(self, sieve1000):
        assert sieve1000.divisor_count(720720) == 240


class TestSquareFree:
    """is_square_free(n)."""

    def test_examples_to_10(self, sieve10):
        expected = {
            2: True, 3: True, 4: False, 5: True, 6: True,
            7: True, 8: False, 9: False, 10: True,
        }
        for n, sf in expected.items():
            assert is_square_free(n, sieve10) == sf, n

    def test_one_and_zero(self, sieve10):
        assert sieve10.is_square_free(1)
        assert not sieve10.is_square_free(0)

    def test_negative(self, sieve10):
        for n in [-1, -4, -6]:
            assert not sieve10.is_square_free(n)

    def test_out_of_range(self, sieve10):
        assert not sieve10.is_square_free(101)

    def test_matches_repeated_factor(self, sieve1000):
        for n in range(2, 5000):
            f = sieve1000.factor(n)
            repeated = any(f.count(p) >= 2 for p in set(f))
            assert sieve1000.is_square_free(n) == (not repeated), n

    def test_count_to_100(self, sieve10):
        """61 square-free numbers in [1, 100] (OEIS A013928)."""
        assert sum(sieve10.is_square_free(n) for n in range(1, 101)) == 61


class TestFactorString:

    def test_rendering(self, sieve1000):
        assert factor_string(360, sieve1000) == "2^3 3^2 5"
        assert sieve1000.factor_string(97) == "97"
        assert sieve1000.factor_string(1024) == "2^10"

    def test_out_of_range(self, sieve10):
        assert sieve10.factor_string(1000) == ""


class TestOmega:
    """omega / Omega derived from factor_unique."""

    def test_omega_of_primes(self, sieve1000):
        for p in SMALL_PRIMES:
            assert omega(p, sieve1000) == 1
            assert Omega(p, sieve1000) == 1

    def test_omega_of_prime_powers(self, sieve1000):
        for n, big in [(4, 2), (8, 3), (9, 2), (25, 2), (27, 3), (32, 5), (49, 2), (125, 3)]:
            assert omega(n, sieve1000) == 1, n
            assert Omega(n, sieve1000) == big, n

    def test_omega_of_products(self, sieve1000):
        for n, expected in [(6, 2), (10, 2), (30, 3), (210, 4), (720720, 6)]:
            assert omega(n, sieve1000) == expected, n

    def test_small_and_out_of_range(self, sieve10):
        assert omega(1, sieve10) == 0
        assert Omega(0, sieve10) == 0
        assert omega(101, sieve10) == 0


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
