# src/revrandom/generator.py
"""
ReversibleRandom: a linear congruential generator that can step backwards.

Given only the current state, `next` computes the following value and
`previous` the one before it, so a stream of values can be rewound (replay,
undo, deterministic simulation stepping) without keeping any history.

This is an LCG. Its output has well-known lattice structure and is trivially
predictable from a few samples: do not use it for statistics that need a good
generator, and never for anything security related.

One instance owns one mutable state and does no locking; give each thread
its own generator or serialize access externally.
"""

from __future__ import annotations

from typing import Optional

from . import engine, seeding
from .errors import InvalidParameterError
from .params import ParameterSet
from .ranges import check_range, map_to_range, resolve_bounds
from .seeding import UniformSource



class ReversibleRandom:
    """
    Construct with the default parameters, an explicit (a, c, m) triple, or
    (a, c, m, inv_a). `source(n)` supplies uniform integers in [0, n) for
    seeding only; it defaults to an OS-seeded stdlib generator.

    Ranged accessors follow randrange: f() is [0, m), f(n) is [0, n),
    f(lo, hi) is [lo, hi).
    """

    def __init__(
        self,
        a: Optional[int] = None,
        c: Optional[int] = None,
        m: Optional[int] = None,
        inv_a: Optional[int] = None,
        *,
        source: Optional[UniformSource] = None,
        params: Optional[ParameterSet] = None,
    ):
        if params is None:
            params = _params_from_args(a, c, m, inv_a)
        elif any(v is not None for v in (a, c, m, inv_a)):
            raise InvalidParameterError("pass either params= or an (a, c, m[, inv_a]) triple, not both")
        self._params = params
        self._source = source if source is not None else seeding.default_source()
        self._current = seeding.unconstrained(params, self._source)

    @property
    def params(self) -> ParameterSet:
        return self._params

    @property
    def state(self) -> int:
        """Raw state in [0, m)."""
        return self._current

    def reset(self) -> None:
        """Reseed uniformly over [0, m); same as building a new instance with these parameters."""
        self._current = seeding.unconstrained(self._params, self._source)

    def set_initial(self, i: int, lo: Optional[int] = None, hi: Optional[int] = None) -> None:
        """
        set_initial(i)         -> state becomes exactly i, 0 <= i < m
        set_initial(i, n)      -> current(n) == i afterwards, 0 <= i < n
        set_initial(i, lo, hi) -> current(lo, hi) == i afterwards, lo <= i < hi
        State is untouched when the value is out of range.
        """
        self._current = seeding.seed_for(self._params, i, lo, hi, self._source)

    def next(self, lo: Optional[int] = None, hi: Optional[int] = None) -> int:
        lo, hi = resolve_bounds(self._params.m, lo, hi)
        check_range(lo, hi)
        self._current = engine.advance(self._current, self._params)
        return map_to_range(self._current, lo, hi)

    def previous(self, lo: Optional[int] = None, hi: Optional[int] = None) -> int:
        lo, hi = resolve_bounds(self._params.m, lo, hi)
        check_range(lo, hi)
        self._current = engine.regress(self._current, self._params)
        return map_to_range(self._current, lo, hi)

    def current(self, lo: Optional[int] = None, hi: Optional[int] = None) -> int:
        lo, hi = resolve_bounds(self._params.m, lo, hi)
        return map_to_range(self._current, lo, hi)

    def skip(self, steps: int) -> int:
        """Move `steps` states (backwards when negative) and return the full-range value."""
        self._current = engine.advance_by(self._current, self._params, steps)
        return self._current

    def get_max_random(self) -> int:
        return self._params.max_random

    def to_dict(self) -> dict:
        d = self._params.to_dict()
        d["current"] = self._current
        return d

    @staticmethod
    def from_dict(d: dict, source: Optional[UniformSource] = None) -> ReversibleRandom:
        rng = ReversibleRandom(params=ParameterSet.from_dict(d), source=source)
        rng.set_initial(d["current"])
        return rng

    def __repr__(self) -> str:
        p = self._params
        return f"ReversibleRandom(a={p.a}, c={p.c}, m={p.m}, state={self._current})"


def _params_from_args(
    a: Optional[int], c: Optional[int], m: Optional[int], inv_a: Optional[int]
) -> ParameterSet:
    triple = (a, c, m)
    if all(v is None for v in triple):
        if inv_a is not None:
            raise InvalidParameterError("inv_a given without an (a, c, m) triple")
        return ParameterSet.default()
    if any(v is None for v in triple):
        raise InvalidParameterError(f"a, c and m must be given together, got a={a} c={c} m={m}")
    return ParameterSet(a, c, m, inv_a)
