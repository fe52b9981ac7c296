# lenia_sim/sim/rng.py
from __future__ import annotations
from typing import List, Optional
import math
import random

from .models import Vec

class RNG:
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def disc_point(self, radius: float) -> Vec:
        # sqrt keeps the density uniform over the disc area
        r = radius * math.sqrt(self._rng.random())
        theta = self._rng.random() * math.tau
        return (r * math.cos(theta), r * math.sin(theta))

def disc_positions(n: int, radius: float, seed: int, center: Vec = (0.0, 0.0)) -> List[Vec]:
    """Same (n, radius, seed, center) always gives the same positions."""
    if n <= 0:
        raise ValueError(f"need at least one particle, got n={n}")
    rng = RNG(seed)
    cx, cy = center
    out: List[Vec] = []
    for _ in range(n):
        x, y = rng.disc_point(radius)
        out.append((cx + x, cy + y))
    return out
