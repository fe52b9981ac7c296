# lenia_sim/sim/kernels.py
from __future__ import annotations
from typing import Tuple
import math

REPULSION_CUTOFF = 1.0

def repulsion(r: float, c_rep: float) -> Tuple[float, float]:
    """Short-range repulsion (value, d/dr); exactly zero once r >= REPULSION_CUTOFF."""
    t = max(0.0, REPULSION_CUTOFF - r)
    return (0.5 * c_rep * t * t, -c_rep * t)

def radial(x: float, mu: float, sigma: float, w: float) -> Tuple[float, float]:
    """Gaussian bump w * exp(-((x - mu) / sigma)^2) and its derivative in x."""
    t = (x - mu) / sigma
    y = w * math.exp(-t * t)
    return (y, -2.0 * t * y / sigma)
