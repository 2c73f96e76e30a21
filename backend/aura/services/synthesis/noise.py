"""
Deterministic noise source.

sin-hash pseudo-random numbers: frac(sin(seed) * 10000). Not suitable for
anything but reproducible chart noise. The seed is passed around as a
value so two calls with the same inputs always draw the same sequence.
"""

import math
from dataclasses import dataclass


def seeded_random(seed: float) -> tuple[float, float]:
    """Return (value in [0, 1), next seed)."""
    x = math.sin(seed) * 10000
    return x - math.floor(x), seed + 1


@dataclass(frozen=True)
class NoiseStream:
    """Immutable cursor over the seeded sequence."""

    seed: float

    def draw(self) -> tuple[float, "NoiseStream"]:
        value, next_seed = seeded_random(self.seed)
        return value, NoiseStream(next_seed)
