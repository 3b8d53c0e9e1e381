"""
Tests for the public prime sieves.

Every variant must return exactly the primes <= N, increasing, for any
N >= 0, and reject bad bounds before touching the caller's list.
"""

import math

import numpy as np
import pytest

from lpfsieve.errors import InvalidBound, SieveError
from lpfsieve.factorization import linear_primes_up_to
from lpfsieve.intmath import MAX_LIMIT
from lpfsieve.primes import prime_flags_upto, primes_up_to, primes_upto, sieve


VARIANTS = ['plain', 'wheel', 'linear']

BOUNDARY_CASES = [
    (0, []),
    (1, []),
    (2, [2]),
    (3, [2, 3]),
    (4, [2, 3]),
    (10, [2, 3, 5, 7]),
    (30, [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]),
]

# pi(N): number of primes <= N
PRIME_COUNTS = {
    100: 25,
    1000: 168,
    10**4: 1229,
    10**5: 9592,
    10**6: 78498,
}


def trial_division_primes(N: int):
    return [n for n in range(2, N + 1)
            if all(n % d for d in range(2, math.isqrt(n) + 1))]


class TestBoundaryCases:
    """Small bounds, for every variant."""

    @pytest.mark.parametrize("variant", VARIANTS)
    @pytest.mark.parametrize("N,expected", BOUNDARY_CASES)
    def test_small_bounds(self, variant, N, expected):
        assert sieve(N, variant) == expected

    @pytest.mark.parametrize("variant", VARIANTS)
    def test_every_bound_up_to_400(self, variant):
        """Covers every prime square and wheel fold threshold below 400."""
        for N in range(400):
            assert sieve(N, variant) == trial_division_primes(N), f"{variant} wrong at N={N}"


class TestAgainstTrialDivision:
    """Compare with trial division at larger bounds."""

    @pytest.mark.parametrize("wheel", [False, True])
    def test_bootstrapped_sieves(self, wheel):
        N = 20000
        assert primes_up_to(N, wheel=wheel) == trial_division_primes(N)

    def test_single_pass_sieve(self):
        N = 5000
        assert linear_primes_up_to(N) == trial_division_primes(N)

    @pytest.mark.parametrize("wheel", [False, True])
    def test_prime_counts(self, wheel):
        for N, count in PRIME_COUNTS.items():
            assert len(primes_up_to(N, wheel=wheel)) == count, f"pi({N}) wrong"

    def test_strictly_increasing(self):
        for wheel in (False, True):
            primes = primes_up_to(10**5, wheel=wheel)
            assert all(a < b for a, b in zip(primes, primes[1:]))


class TestVariantEquivalence:
    """Wheel, plain and single-pass sieves agree."""

    def test_wheel_matches_plain(self):
        for N in [997, 2310, 2311, 30030, 30031, 510510, 10**6 + 3]:
            assert primes_up_to(N, wheel=True) == primes_up_to(N), f"differ at N={N}"

    def test_linear_matches_plain(self):
        for N in [97, 1000, 4096]:
            assert linear_primes_up_to(N) == primes_up_to(N)


class TestStateAndExtension:
    """In-place extension of a caller-owned list."""

    @pytest.mark.parametrize("wheel", [False, True])
    def test_idempotent(self, wheel):
        assert primes_up_to(5000, wheel=wheel) == primes_up_to(5000, wheel=wheel)

    @pytest.mark.parametrize("wheel", [False, True])
    def test_extends_same_list(self, wheel):
        primes = []
        result = primes_up_to(100, primes, wheel=wheel)

        assert result is primes
        assert len(primes) == 25

    @pytest.mark.parametrize("wheel", [False, True])
    def test_monotonic_extension(self, wheel):
        primes = []
        for N in [10, 50, 51, 1000, 1024, 20000]:
            primes_up_to(N, primes, wheel=wheel)
            assert primes == primes_up_to(N, wheel=wheel), f"extension to {N} differs"

    def test_extension_across_variants(self):
        primes = primes_up_to(1000)
        primes_up_to(50000, primes, wheel=True)
        assert primes == primes_up_to(50000)

    @pytest.mark.parametrize("wheel", [False, True])
    def test_smaller_bound_leaves_list_alone(self, wheel):
        primes = primes_up_to(1000)
        before = list(primes)
        primes_up_to(100, primes, wheel=wheel)

        assert primes == before


class TestInvalidBounds:
    """Bad bounds raise InvalidBound and leave the list untouched."""

    @pytest.mark.parametrize("wheel", [False, True])
    def test_negative(self, wheel):
        primes = [2, 3, 5]
        with pytest.raises(InvalidBound):
            primes_up_to(-1, primes, wheel=wheel)
        assert primes == [2, 3, 5]

    @pytest.mark.parametrize("bad", [-10, 2.5, 10.0, '10', None, True, MAX_LIMIT + 1])
    @pytest.mark.parametrize("variant", VARIANTS)
    def test_rejected(self, bad, variant):
        with pytest.raises(InvalidBound):
            sieve(bad, variant)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            primes_up_to(-5)
        with pytest.raises(SieveError):
            primes_up_to(-5)

    def test_numpy_integers_accepted(self):
        assert primes_up_to(np.int64(30)) == BOUNDARY_CASES[-1][1]
        assert primes_up_to(np.uint16(10), wheel=True) == [2, 3, 5, 7]

    def test_unknown_variant(self):
        with pytest.raises(ValueError, match="unknown variant"):
            sieve(100, 'atkin')


class TestArrays:
    """Test the numpy conveniences."""

    def test_primes_upto(self):
        primes = primes_upto(100)
        assert primes.dtype == np.int64
        assert len(primes) == 25
        assert np.array_equal(primes, primes_upto(100, wheel=True))

    def test_prime_flags_upto(self):
        flags = prime_flags_upto(100)

        assert flags.shape == (101,)
        assert flags.dtype == bool
        assert flags.sum() == 25
        assert not flags[0] and not flags[1]
        assert flags[97] and not flags[91]

    def test_prime_flags_small(self):
        assert prime_flags_upto(0).tolist() == [False]
        assert prime_flags_upto(2).tolist() == [False, False, True]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
