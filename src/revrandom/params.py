# src/revrandom/params.py
"""
Immutable (a, c, m) triple plus the derived inverse multiplier.

Every ParameterSet is validated in __post_init__, so holding one means
gcd(a, m) == 1 and (a * inv_a) % m == 1.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .config import DEFAULTS, INT64_MAX, PRESETS
from .errors import InvalidInverseError, InvalidParameterError, NotCoprimeError
from .modinv import inverse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParameterSet:
    a: int
    c: int
    m: int
    inv_a: Optional[int] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.m <= 0:
            raise InvalidParameterError(f"modulus must be positive, got m={self.m}")
        if self.inv_a is not None:
            if (self.a * self.inv_a) % self.m != 1:
                raise InvalidInverseError(self.a, self.m, self.inv_a)
            inv_a = self.inv_a % self.m
        else:
            inv_a = inverse(self.a, self.m)
            # m == 1 slips through Euclid with gcd 1, but nothing is invertible mod 1.
            if (self.a * inv_a) % self.m != 1:
                raise NotCoprimeError(self.a, self.m)
        object.__setattr__(self, "inv_a", inv_a)

        logger.debug("validated parameters a=%d c=%d m=%d inv_a=%d", self.a, self.c, self.m, inv_a)
        if not self.fits_int64():
            logger.warning(
                "parameters a=%d m=%d can overflow signed 64-bit arithmetic in a fixed-width port",
                self.a, self.m,
            )

    @classmethod
    def default(cls) -> "ParameterSet":
        return cls(DEFAULTS.a, DEFAULTS.c, DEFAULTS.m, DEFAULTS.inv_a)

    @property
    def max_random(self) -> int:
        """Largest full-range output, m - 1."""
        return self.m - 1

    def fits_int64(self) -> bool:
        """
        True when the worst-case intermediate products of advance and regress
        stay within signed 64 bits.
        """
        worst = (self.m - 1) * max(abs(self.a), self.inv_a) + abs(self.c) + self.m
        return worst <= INT64_MAX

    def to_dict(self) -> dict:
        return {"a": self.a, "c": self.c, "m": self.m, "inv_a": self.inv_a}

    @staticmethod
    def from_dict(d: dict) -> ParameterSet:
        return ParameterSet(a=d["a"], c=d["c"], m=d["m"], inv_a=d.get("inv_a"))


def params_for(name: str) -> ParameterSet:
    try:
        preset = PRESETS[name]
    except KeyError:
        known = ", ".join(sorted(PRESETS))
        raise KeyError(f"unknown preset {name!r}; known presets: {known}") from None
    return ParameterSet(preset.a, preset.c, preset.m, preset.inv_a)
