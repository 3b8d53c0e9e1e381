"""
Sieve errors.

Responsibility: the exceptions raised by the sieves, nothing else.
"""


class SieveError(Exception):
    """Base class for sieve failures."""


class InvalidBound(SieveError, ValueError):
    """The bound is negative, not an integer, or outside the int64 range."""


class ArithmeticOverflow(SieveError, OverflowError):
    """An intermediate product does not fit in a signed 64-bit integer."""
