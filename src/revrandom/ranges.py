# src/revrandom/ranges.py
"""
Map a raw state into a caller window [lo, hi).

The mapping is a plain `state % (hi - lo) + lo`. When (hi - lo) does not
divide m the low residues come up slightly more often. That bias is kept on
purpose: rejection sampling would consume extra states per value and break the
one state <-> one value correspondence that lets `previous` replay outputs.
"""

from typing import Optional, Tuple

from .errors import InvalidRangeError


def resolve_bounds(m: int, a: Optional[int] = None, b: Optional[int] = None) -> Tuple[int, int]:
    """
    randrange-style argument handling shared by every ranged accessor:
      ()      -> [0, m)
      (a)     -> [0, a)
      (a, b)  -> [a, b)
    """
    if a is None:
        if b is not None:
            raise TypeError("upper bound given without a lower bound")
        return 0, m
    if b is None:
        return 0, a
    return a, b


def check_range(lo: int, hi: int) -> None:
    if hi <= lo:
        raise InvalidRangeError(lo, hi)


def map_to_range(state: int, lo: int, hi: int) -> int:
    check_range(lo, hi)
    return state % (hi - lo) + lo
