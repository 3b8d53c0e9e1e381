"""
Integer helpers shared by every sieve.

Responsibility: square roots, the bootstrap order, bound validation and
overflow-checked products. No sieve logic.
"""

import numbers
from math import isqrt
from typing import List

import numpy as np

from lpfsieve.errors import ArithmeticOverflow, InvalidBound

# Largest bound any sieve accepts (int64 tables and kernels)
MAX_LIMIT = int(np.iinfo(np.int64).max)

__all__ = ['MAX_LIMIT', 'isqrt', 'check_limit', 'checked_mul', 'bootstrap_bounds']


def check_limit(limit) -> int:
    """
    Validate a sieve bound.

    Parameters
    ----------
    limit : int
        Candidate upper bound (inclusive). Python ints and numpy integer
        scalars are accepted; bools and floats are not.

    Returns
    -------
    int
        The bound as a plain Python int.

    Raises
    ------
    InvalidBound
        If the bound is not an integer, is negative, or exceeds MAX_LIMIT.
    """
    if isinstance(limit, bool) or not isinstance(limit, numbers.Integral):
        raise InvalidBound(f"bound must be an integer, got {limit!r}")
    limit = int(limit)
    if limit < 0:
        raise InvalidBound(f"bound must be non-negative, got {limit}")
    if limit > MAX_LIMIT:
        raise InvalidBound(f"bound {limit} exceeds the int64 range")
    return limit


def checked_mul(a: int, b: int, bound: int = MAX_LIMIT) -> int:
    """Return a*b, raising ArithmeticOverflow if it exceeds bound."""
    product = int(a) * int(b)
    if product > bound:
        raise ArithmeticOverflow(f"{a} * {b} exceeds {bound}")
    return product


def bootstrap_bounds(limit: int) -> List[int]:
    """
    Return the bounds a bootstrapped sieve visits, smallest first.

    Each bound is the integer square root of the next one, so sieving the
    bounds in order always has the primes up to sqrt(bound) available.
    Bounds below 2 are dropped since there is nothing to sieve.

    >>> bootstrap_bounds(100)
    [3, 10, 100]
    """
    bounds = []
    while limit >= 2:
        bounds.append(limit)
        limit = isqrt(limit)
    bounds.reverse()
    return bounds
