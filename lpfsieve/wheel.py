"""
Wheels: repeating residue patterns that skip multiples of small primes.

The wheel with k folded primes is the pattern of integers not divisible by
any of the first k primes. It repeats every `circumference` (the product of
the folded primes). With 2, 3 and 5 folded in:

    circumference = 30
    residues      = 1, 7, 11, 13, 17, 19, 23, 29
    next_prime    = 7

Index mapping (s = len(residues), c = circumference):
- Index i → (i // s) * c + residues[i % s]
- Value n → q * s + position of (n - q * c) in residues, q = (n - 1) // c

For the wheel above:
- i=0 → 1, i=1 → 7, i=8 → 31 ✓
- n=31: q=1, 31-30=1 at position 0, index = 8 ✓
"""

import numpy as np
from typing import Iterator, NamedTuple, Tuple

from lpfsieve.intmath import checked_mul


class Wheel(NamedTuple):
    """
    Immutable wheel value. Folding returns a new Wheel.

    Attributes
    ----------
    circumference : int
        Product of the folded primes.
    residues : np.ndarray
        Read-only int64 array of the values in [1, circumference] coprime
        to every folded prime. Always starts with 1.
    folded_primes : tuple
        Primes folded in so far, increasing.
    next_prime : int
        Smallest value > 1 of the rolled pattern. Always prime.
    """
    circumference: int
    residues: np.ndarray
    folded_primes: Tuple[int, ...]
    next_prime: int

    @property
    def spokes(self) -> int:
        return len(self.residues)


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=np.int64)
    arr.flags.writeable = False
    return arr


def new_wheel() -> Wheel:
    """The trivial wheel (1, 2, 3, 4, ...)."""
    return Wheel(1, _frozen([1]), (), 2)


def extend_wheel(wheel: Wheel) -> Wheel:
    """
    Fold wheel.next_prime into the wheel.

    The old pattern is rolled next_prime times to cover the new
    circumference, then the multiples of next_prime are dropped.

    Raises
    ------
    ArithmeticOverflow
        If the new circumference does not fit in int64.
    """
    p = wheel.next_prime
    circ = checked_mul(wheel.circumference, p)

    turns = np.arange(p, dtype=np.int64)[:, None] * wheel.circumference
    vals = (turns + wheel.residues[None, :]).ravel()
    vals = vals[vals % p != 0]

    # Only 1 left (circumference 2): the first value after 1 is circ + 1
    next_prime = int(vals[1]) if len(vals) > 1 else circ + 1
    return Wheel(circ, _frozen(vals), wheel.folded_primes + (p,), next_prime)


def wheel_for(limit: int) -> Wheel:
    """
    Build the wheel used to sieve up to limit.

    Folds while next_prime**2 <= limit and the folded circumference stays
    within limit. The second condition keeps the residue pattern no longer
    than the range it restricts.
    """
    wheel = new_wheel()
    while (wheel.next_prime * wheel.next_prime <= limit
           and wheel.circumference * wheel.next_prime <= limit):
        wheel = extend_wheel(wheel)
    return wheel


def wheel_upto(wheel: Wheel, max_n: int) -> Iterator[int]:
    """
    Yield every positive integer <= max_n on the wheel, increasing.

    Each call starts a fresh traversal.
    """
    residues = wheel.residues.tolist()
    base = 0
    while True:
        for r in residues:
            n = base + r
            if n > max_n:
                return
            yield n
        base += wheel.circumference


def wheel_count(wheel: Wheel, max_n: int) -> int:
    """Number of wheel values in [1, max_n]."""
    if max_n < 1:
        return 0
    q, rem = divmod(int(max_n), wheel.circumference)
    return q * wheel.spokes + int(np.searchsorted(wheel.residues, rem, side='right'))


def wheel_array(wheel: Wheel, max_n: int) -> np.ndarray:
    """
    Return wheel_upto(wheel, max_n) as an int64 array.

    Raises
    ------
    ArithmeticOverflow
        If the rolled pattern would not fit in int64.
    """
    count = wheel_count(wheel, max_n)
    if count == 0:
        return np.zeros(0, dtype=np.int64)
    turns = -(-count // wheel.spokes)
    checked_mul(turns, wheel.circumference)
    bases = np.arange(turns, dtype=np.int64)[:, None] * wheel.circumference
    return (bases + wheel.residues[None, :]).ravel()[:count]


def index_to_n(i: int, wheel: Wheel) -> int:
    """Convert wheel index to actual number."""
    q, j = divmod(i, wheel.spokes)
    return q * wheel.circumference + int(wheel.residues[j])


def n_to_index(n: int, wheel: Wheel) -> int:
    """Convert number (must be on the wheel) to wheel index."""
    if n >= 1:
        q = (n - 1) // wheel.circumference
        r = n - q * wheel.circumference
        pos = int(np.searchsorted(wheel.residues, r))
        if pos < wheel.spokes and wheel.residues[pos] == r:
            return q * wheel.spokes + pos
    raise ValueError(f"{n} is not on the wheel of circumference {wheel.circumference}")
