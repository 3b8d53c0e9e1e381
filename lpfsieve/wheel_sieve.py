"""
Wheel-restricted LPF sieve.

Instead of storing the LPF for every integer, only store it for the values
on the wheel (numbers coprime to the folded primes). With 2, 3 and 5 folded
in that is 8/30 of the range.

Every composite n on the wheel has lpf(n) >= the wheel's next_prime, and
its cofactor n / lpf(n) is on the wheel too. So the cofactor loop only
walks wheel cofactors and only sieves with primes >= next_prime, and the
products it marks are all on the wheel. Values off the wheel are multiples
of a folded prime and are never looked at.

The table is wheel-indexed (see lpfsieve.wheel for the index mapping),
with 0 meaning no entry.
"""

import numpy as np
from bisect import bisect_left
from numba import njit
from typing import List, Tuple

from lpfsieve.intmath import check_limit
from lpfsieve.wheel import Wheel, n_to_index, wheel_array, wheel_count, wheel_for


@njit
def _wheel_index(n, circumference, residues):
    """Wheel index of n (must be on the wheel). Kernel helper."""
    q = (n - 1) // circumference
    return q * residues.shape[0] + np.searchsorted(residues, n - q * circumference)


@njit
def mark_wheel_cofactors(limit, circumference, residues, primes, lpf):
    """
    Set lpf[index(p*f)] = p for every wheel cofactor 1 < f <= limit // primes[0].

    Same walk as factorization.mark_cofactors, with f taken from the wheel
    and the table indexed by wheel index.
    """
    n_primes = primes.shape[0]
    if n_primes == 0:
        return
    spokes = residues.shape[0]
    f_max = limit // primes[0]

    i = 1  # index 0 is the value 1
    while True:
        f = (i // spokes) * circumference + residues[i % spokes]
        if f > f_max:
            break
        bound = np.int64(lpf[i])
        if bound == 0:
            bound = f
        for j in range(n_primes):
            p = primes[j]
            if p > bound or f > limit // p:
                break
            lpf[_wheel_index(p * f, circumference, residues)] = p
        i += 1


def wheel_lpf_sieve(limit: int, primes: List[int]) -> Tuple[Wheel, np.ndarray]:
    """
    Compute the wheel-indexed LPF table for the wheel values up to limit.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive).
    primes : list
        Increasing primes, containing at least every prime <= sqrt(limit).
        Primes below the wheel's next_prime are ignored; the wheel already
        excludes their multiples.

    Returns
    -------
    tuple
        (wheel, lpf) where lpf[i] is the least prime factor of the i'th
        wheel value if it is composite, else 0.
    """
    limit = check_limit(limit)
    wheel = wheel_for(limit)

    sieving = primes[bisect_left(primes, wheel.next_prime):]
    lpf = np.zeros(wheel_count(wheel, limit), dtype=np.uint32)
    mark_wheel_cofactors(
        limit,
        wheel.circumference,
        wheel.residues.copy(),
        np.asarray(sieving, dtype=np.int64),
        lpf,
    )
    return wheel, lpf


def assemble_primes(wheel: Wheel, lpf: np.ndarray, limit: int) -> List[int]:
    """
    Gather the primes <= limit from a wheel-indexed LPF table.

    The folded primes come first, then every wheel value > 1 with no entry.
    Both parts are increasing and every folded prime is smaller than any
    wheel value > 1, so the result is ordered.
    """
    values = wheel_array(wheel, limit)
    found = values[(lpf[:len(values)] == 0) & (values > 1)]
    return list(wheel.folded_primes) + found.tolist()


def extend_primes_wheel(limit: int, primes: List[int]) -> List[int]:
    """
    Extend primes in place to every prime <= limit, using a wheel.

    One bootstrap stage: primes must already hold every prime <= sqrt(limit).
    The list is rebuilt from the folded primes and the wheel, so no prime
    is counted twice.
    """
    if limit < 2 or (primes and primes[-1] >= limit):
        return primes
    wheel, lpf = wheel_lpf_sieve(limit, primes)
    primes[:] = assemble_primes(wheel, lpf, limit)
    return primes


def wheel_lpf_lookup(n: int, wheel: Wheel, lpf: np.ndarray) -> int:
    """
    Least prime factor of 2 <= n <= limit using a wheel-indexed table.

    Handles all cases:
    - n divisible by a folded prime → that prime
    - n on the wheel → table lookup (0 means n is prime)
    """
    if n < 2:
        raise ValueError(f"{n} has no prime factors")
    for p in wheel.folded_primes:
        if n % p == 0:
            return p
    p = lpf[n_to_index(n, wheel)]
    return n if p == 0 else int(p)
