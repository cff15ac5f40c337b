from dataclasses import dataclass
from typing import Dict, Optional

# Largest signed 64-bit value; products above it would overflow a fixed-width port.
INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class GeneratorDefaults:
    # Lehmer / Park-Miller "minimal standard" over the Mersenne prime 2^31-1.
    a: int = 48271
    c: int = 0
    m: int = 0x7FFFFFFF
    # Optional known inverse; recomputed and checked when the params are built.
    inv_a: Optional[int] = None


# Global defaults (can be swapped by a launcher before generators are built)
DEFAULTS = GeneratorDefaults()

# Named parameter triples. "minstd-inv" uses the default's inverse as its
# multiplier, so its forward sequence is the default sequence walked backwards.
PRESETS: Dict[str, GeneratorDefaults] = {
    "minstd": DEFAULTS,
    "minstd-inv": GeneratorDefaults(a=1899818559, c=0, m=0x7FFFFFFF, inv_a=48271),
    "park-miller": GeneratorDefaults(a=16807, c=0, m=0x7FFFFFFF, inv_a=1407677000),
    "numerical-recipes": GeneratorDefaults(a=1664525, c=1013904223, m=2**32),
}
