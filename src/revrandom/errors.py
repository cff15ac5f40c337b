# src/revrandom/errors.py
"""
Failure kinds raised by the generator. Every one is a ValueError so a caller
that only cares "was the input bad" can catch a single type, while tests can
match on the exact cause.
"""

from typing import Optional


class ReversibleRandomError(ValueError):
    """Base class for everything this package raises on bad input."""


class InvalidParameterError(ReversibleRandomError):
    """Malformed (a, c, m) triple: non-positive modulus, negative operands, partial triple."""


class NotCoprimeError(InvalidParameterError):
    def __init__(self, a: int, m: int, gcd: Optional[int] = None):
        self.a = a
        self.m = m
        self.gcd = gcd
        detail = f" (gcd = {gcd})" if gcd is not None else ""
        super().__init__(f"a={a} and m={m} are not coprime{detail}; no inverse of a exists")


class InvalidInverseError(InvalidParameterError):
    def __init__(self, a: int, m: int, inv_a: int):
        self.a = a
        self.m = m
        self.inv_a = inv_a
        super().__init__(f"inv_a={inv_a} is not the inverse of a={a} (mod {m})")


class SeedRangeError(ReversibleRandomError):
    def __init__(self, value: int, lo: int, hi: int, message: Optional[str] = None):
        self.value = value
        self.lo = lo
        self.hi = hi
        super().__init__(message or f"initial value {value} is outside [{lo}, {hi})")


class InvalidRangeError(ReversibleRandomError):
    def __init__(self, lo: int, hi: int):
        self.lo = lo
        self.hi = hi
        super().__init__(f"empty range [{lo}, {hi}): hi must be greater than lo")


class SourceError(ReversibleRandomError):
    def __init__(self, value: int, n: int):
        self.value = value
        self.n = n
        super().__init__(f"uniform source returned {value}, expected a value in [0, {n})")
