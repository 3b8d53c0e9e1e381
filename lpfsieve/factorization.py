"""
Least-prime-factor (LPF) tables.

Responsibility: the dense LPF table and the cofactor loops that fill it.
This file must not know about wheels.

Every composite n is written exactly once, as n = p * f with p = lpf(n)
and f the cofactor. For a fixed cofactor f the primes are walked in
increasing order, stopping after lpf(f), or after f itself when f is
prime. Any larger p would give a product whose least prime factor is
lpf(f), not p.

Table convention: lpf[n] == 0 means no entry (n is prime, or n < 2).
uint32 is enough since every recorded factor is <= sqrt(N).
"""

import numpy as np
from numba import njit
from typing import List

from lpfsieve.intmath import bootstrap_bounds, check_limit, isqrt


@njit
def mark_cofactors(limit, primes, lpf):
    """
    Set lpf[p*f] = p for every cofactor f in 2..limit//2.

    primes must hold every prime <= sqrt(limit), increasing.
    The product test is f > limit // p so p * f is only formed when it fits.
    """
    n_primes = primes.shape[0]
    for f in range(2, limit // 2 + 1):
        bound = np.int64(lpf[f])
        if bound == 0:
            bound = f
        for j in range(n_primes):
            p = primes[j]
            if p > bound or f > limit // p:
                break
            lpf[p * f] = p


def lpf_sieve(limit: int, primes: List[int]) -> np.ndarray:
    """
    Compute the dense LPF table for all integers up to limit.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive).
    primes : list
        Increasing primes, containing at least every prime <= sqrt(limit).

    Returns
    -------
    np.ndarray
        uint32 array of length limit+1; lpf[n] is the least prime factor
        of composite n and 0 everywhere else.
    """
    limit = check_limit(limit)
    lpf = np.zeros(limit + 1, dtype=np.uint32)
    mark_cofactors(limit, np.asarray(primes, dtype=np.int64), lpf)
    return lpf


def collect_primes(lpf: np.ndarray, limit: int, primes: List[int]) -> List[int]:
    """Append every n in (primes[-1], limit] with no LPF entry to primes."""
    start = primes[-1] + 1 if primes else 2
    if start <= limit:
        found = np.flatnonzero(lpf[start:limit + 1] == 0) + start
        primes.extend(found.tolist())
    return primes


def extend_primes(limit: int, primes: List[int]) -> List[int]:
    """
    Extend primes in place to every prime <= limit.

    One bootstrap stage: primes must already hold every prime <= sqrt(limit).
    """
    if limit < 2 or (primes and primes[-1] >= limit):
        return primes
    lpf = lpf_sieve(limit, primes)
    return collect_primes(lpf, limit, primes)


def lpf_table(limit: int) -> np.ndarray:
    """
    Dense LPF table for limit, bootstrapping the primes up to sqrt(limit).
    """
    limit = check_limit(limit)
    primes = []
    for bound in bootstrap_bounds(isqrt(limit)):
        extend_primes(bound, primes)
    return lpf_sieve(limit, primes)


def least_prime_factor(n: int, lpf: np.ndarray) -> int:
    """Least prime factor of 2 <= n < len(lpf), read from a dense table."""
    if n < 2:
        raise ValueError(f"{n} has no prime factors")
    p = lpf[n]
    return n if p == 0 else int(p)


def factorize(n: int, lpf: np.ndarray) -> List[int]:
    """
    Prime factors of n with multiplicity, increasing.

    >>> factorize(360, lpf_table(400))
    [2, 2, 2, 3, 3, 5]
    """
    factors = []
    while n > 1:
        p = least_prime_factor(n, lpf)
        factors.append(p)
        n //= p
    return factors


class PrimeCache:
    """
    Primes by rank, computed on demand: prime(1) = 2, prime(2) = 3, ...

    A rank that is not cached yet is computed from the previous prime by
    scanning the LPF table forward to the next value with no entry. This is
    only valid once every composite up to the answer has been marked; the
    single-pass sieve guarantees it by asking for prime(i) only while
    sieving a cofactor f that is at least that large.
    """

    def __init__(self, lpf: np.ndarray):
        self.lpf = lpf
        self._primes: List[int] = []

    def __len__(self) -> int:
        return len(self._primes)

    def prime(self, i: int) -> int:
        """Return the i'th prime (1-based), computing missing ranks."""
        if i < 1:
            raise ValueError(f"prime rank must be >= 1, got {i}")
        while len(self._primes) < i:
            if not self._primes:
                self._primes.append(2)
                continue
            n = self._primes[-1] + 1
            while self.lpf[n]:
                n += 1
            self._primes.append(n)
        return self._primes[i - 1]


def linear_primes_up_to(limit: int) -> List[int]:
    """
    Single-pass linear sieve: all primes <= limit, without bootstrapping.

    Primes are fetched by rank from a PrimeCache over the table being
    filled. Written for clarity, not speed: loops run in Python.
    """
    limit = check_limit(limit)
    lpf = np.zeros(limit + 1, dtype=np.uint32)
    cache = PrimeCache(lpf)

    for f in range(2, limit // 2 + 1):
        bound = int(lpf[f]) or f
        i = 1
        while True:
            p = cache.prime(i)
            if p * f > limit:
                break
            lpf[p * f] = p
            if p == bound:
                break
            i += 1

    return (np.flatnonzero(lpf[2:] == 0) + 2).tolist()
