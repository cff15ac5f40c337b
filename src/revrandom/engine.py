# src/revrandom/engine.py
"""
Forward and backward state transitions.

advance is the affine bijection x -> a*x + c (mod m); regress is its exact
inverse, which exists because a is invertible mod m. Both are pure: they take
a state in [0, m) and return the neighbouring state in [0, m).
"""

from .params import ParameterSet


def advance(state: int, p: ParameterSet) -> int:
    return (state * p.a + p.c) % p.m


# Undo the increment first (+m keeps it non-negative), then the multiplier.
def regress(state: int, p: ParameterSet) -> int:
    return ((state + p.m - p.c) % p.m) * p.inv_a % p.m


def advance_by(state: int, p: ParameterSet, steps: int) -> int:
    """Apply `steps` transitions; negative steps walk backwards."""
    if steps < 0:
        return regress_by(state, p, -steps)
    for _ in range(steps):
        state = advance(state, p)
    return state


def regress_by(state: int, p: ParameterSet, steps: int) -> int:
    if steps < 0:
        return advance_by(state, p, -steps)
    for _ in range(steps):
        state = regress(state, p)
    return state
