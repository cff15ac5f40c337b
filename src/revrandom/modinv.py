# src/revrandom/modinv.py
"""
Modular multiplicative inverse via the Extended Euclidean Algorithm.

Two passes: run Euclid forward and keep the quotients, then unwind them from
the end to rebuild the Bezout coefficient of `a`. Runs once per generator, at
construction, in O(log n).
"""

from typing import List, Tuple

from .errors import InvalidParameterError, NotCoprimeError


def euclid_quotients(a: int, n: int) -> Tuple[int, List[int]]:
    """Return (gcd(a, n), [q_0, q_1, ..., q_k]) from the plain Euclidean loop."""
    quotients: List[int] = []
    while n != 0:
        quotients.append(a // n)
        a, n = n, a % n
    return a, quotients


def inverse(a: int, n: int) -> int:
    """
    Return x in [0, n) with (a * x) % n == 1.

    Raises InvalidParameterError for n <= 0 or a < 0, and NotCoprimeError when
    gcd(a, n) != 1 (no inverse exists).
    """
    if n <= 0:
        raise InvalidParameterError(f"modulus must be positive, got n={n}")
    if a < 0:
        raise InvalidParameterError(f"a must be non-negative, got a={a}")

    g, quotients = euclid_quotients(a, n)
    if g != 1:
        raise NotCoprimeError(a, n, g)

    # Forward pass ended at (g, 0); rebuild each earlier (a, n) pair while
    # rotating the coefficient pair.
    ra, rn = g, 0
    x, y = 1, 0
    for q in reversed(quotients):
        ra, rn = ra * q + rn, ra
        x, y = y, x - q * y

    # (ra, rn) is back to the original (a, n); x is the coefficient of a.
    return x % rn
