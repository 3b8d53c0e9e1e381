"""
Prime generation.

Responsibility: the public entry points and the bootstrap order. The
sieving itself lives in factorization (dense table) and wheel_sieve.

A sieve up to N needs the primes up to sqrt(N) first, which need the primes
up to N**(1/4), and so on. Instead of recursing, the bounds are listed
up front (intmath.bootstrap_bounds) and sieved smallest first, every stage
extending the same working list.
"""

import numpy as np
from typing import List, Optional

from lpfsieve.factorization import extend_primes, linear_primes_up_to
from lpfsieve.intmath import bootstrap_bounds, check_limit
from lpfsieve.wheel_sieve import extend_primes_wheel

VARIANTS = ('plain', 'wheel', 'linear')


def primes_up_to(limit: int, primes: Optional[List[int]] = None,
                 wheel: bool = False) -> List[int]:
    """
    Extend primes in place so it holds every prime <= limit.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive), 0 <= limit <= MAX_LIMIT.
    primes : list, optional
        Increasing list of all primes up to some earlier bound. A new list
        is created when omitted.
    wheel : bool
        Use the wheel-restricted sieve instead of the dense one.

    Returns
    -------
    list
        The same list, extended.

    Raises
    ------
    InvalidBound
        If limit is negative or not an int64 integer.

    Note
    ----
    The caller's list is only updated once every stage has succeeded, so a
    failure never leaves it half-extended.
    """
    limit = check_limit(limit)
    if primes is None:
        primes = []
    stage = extend_primes_wheel if wheel else extend_primes

    work = list(primes)
    for bound in bootstrap_bounds(limit):
        stage(bound, work)
    primes[:] = work
    return primes


def sieve(limit: int, variant: str = 'plain') -> List[int]:
    """All primes <= limit, by variant name ('plain', 'wheel' or 'linear')."""
    if variant == 'linear':
        return linear_primes_up_to(limit)
    if variant not in VARIANTS:
        raise ValueError(f"unknown variant {variant!r}, expected one of {VARIANTS}")
    return primes_up_to(limit, wheel=(variant == 'wheel'))


def primes_upto(N: int, wheel: bool = False) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        int64 array of primes.
    """
    return np.asarray(primes_up_to(N, wheel=wheel), dtype=np.int64)


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    flags = np.zeros(check_limit(N) + 1, dtype=bool)
    flags[primes_upto(N)] = True
    return flags
