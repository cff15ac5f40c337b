# src/revrandom/seeding.py
"""
Initial-state selection.

The only outside collaborator of the generator is a uniform integer source:
any callable `source(n)` returning a value in [0, n). The stdlib
`random.Random().randrange` is the default; tests inject a deterministic one.
"""

import logging
import random
from typing import Callable, Iterable, Optional

from .errors import SeedRangeError, SourceError
from .params import ParameterSet
from .ranges import check_range

logger = logging.getLogger(__name__)

UniformSource = Callable[[int], int]


def default_source() -> UniformSource:
    """A fresh, OS-seeded stdlib generator per call; nothing is shared between generators."""
    return random.Random().randrange


def make_sequence_source(values: Iterable[int]) -> UniformSource:
    """
    Deterministic source for tests: returns the given values in order
    (cycling), each reduced mod n.
    """
    pool = list(values)
    if not pool:
        raise ValueError("make_sequence_source needs at least one value")
    calls = [0]

    def source(n: int) -> int:
        v = pool[calls[0] % len(pool)]
        calls[0] += 1
        return v % n
    return source


def draw(source: UniformSource, n: int) -> int:
    v = source(n)
    if not (0 <= v < n):
        raise SourceError(v, n)
    return v


def unconstrained(p: ParameterSet, source: UniformSource) -> int:
    """Uniform state over [0, m)."""
    state = draw(source, p.m)
    logger.debug("reseeded from source: state=%d", state)
    return state


def exact(p: ParameterSet, i: int) -> int:
    if not (0 <= i < p.m):
        raise SeedRangeError(i, 0, p.m)
    return i


def bounded(p: ParameterSet, i: int, lo: int, hi: int, source: UniformSource) -> int:
    """
    Pick a state whose image under map_to_range(state, lo, hi) is exactly i.

    state = r * length + (i - lo) with r uniform in [0, m // length): the low
    part pins the mapped value, the random high part keeps the state itself
    unpredictable. When length does not divide m the top m % length states are
    never chosen here; the mapped value is unaffected.
    """
    check_range(lo, hi)
    if not (lo <= i < hi):
        raise SeedRangeError(i, lo, hi)
    length = hi - lo
    if length > p.m:
        raise SeedRangeError(
            i, lo, hi,
            f"window [{lo}, {hi}) is longer than the modulus m={p.m}",
        )
    r = draw(source, p.m // length)
    state = r * length + (i - lo)
    logger.debug("bounded seed i=%d in [%d, %d): state=%d", i, lo, hi, state)
    return state


def seed_for(p: ParameterSet, i: int, lo: Optional[int], hi: Optional[int], source: UniformSource) -> int:
    """Dispatch the three set_initial forms: (i), (i, bound), (i, lo, hi)."""
    if lo is None:
        if hi is not None:
            raise TypeError("upper bound given without a lower bound")
        return exact(p, i)
    if hi is None:
        return bounded(p, i, 0, lo, source)
    return bounded(p, i, lo, hi, source)
