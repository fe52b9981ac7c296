# lenia_sim/ui/markers.py
from __future__ import annotations

from ..sim.config import RENDER

def display_radius(c_rep: float, r_val: float,
                   scale: float = RENDER.radius_scale,
                   min_r_val: float = RENDER.min_radius_r_val,
                   fallback: float = RENDER.fallback_radius) -> float:
    """
    Marker radius in world units: c_rep / (R_val * scale).

    R_val comes straight from the solver and may be zero or tiny (no
    neighbours in range, or c_rep == 0); those get `fallback` instead of
    blowing up.
    """
    if abs(r_val) < min_r_val:
        return fallback
    return c_rep / (r_val * scale)
