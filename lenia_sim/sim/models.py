# lenia_sim/sim/models.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import FIELDS

Vec = Tuple[float, float]
ZERO: Vec = (0.0, 0.0)

# ---------------- vector helpers ----------------
def vadd(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])

def vsub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])

def vmul(v: Vec, k: float) -> Vec:
    return (v[0] * k, v[1] * k)

def vlen(v: Vec) -> float:
    return (v[0] * v[0] + v[1] * v[1]) ** 0.5


@dataclass(frozen=True)
class Parameters:
    mu_k: float = FIELDS.mu_k
    sigma_k: float = FIELDS.sigma_k
    w_k: float = FIELDS.w_k
    mu_g: float = FIELDS.mu_g
    sigma_g: float = FIELDS.sigma_g
    c_rep: float = FIELDS.c_rep

    def __post_init__(self):
        if self.sigma_k <= 0 or self.sigma_g <= 0:
            raise ValueError(f"kernel widths must be positive (sigma_k={self.sigma_k}, sigma_g={self.sigma_g})")
        if self.c_rep < 0:
            raise ValueError(f"c_rep must be >= 0, got {self.c_rep}")

@dataclass
class Fields:
    """
    Per-particle field accumulators, rebuilt from scratch every step.

    R_val can legitimately be zero or close to it (e.g. c_rep == 0); anything
    dividing by it has to guard against that itself.
    """
    R_val: float = 0.0
    R_grad: Vec = ZERO
    U_val: float = 0.0
    U_grad: Vec = ZERO
    E_grad: Vec = ZERO

@dataclass
class Particle:
    id: int
    x: float
    y: float
    creature_id: Optional[int] = None
    fields: Fields = field(default_factory=Fields)

@dataclass
class Creature:
    id: int
    params: Parameters
    particles: List[Particle] = field(default_factory=list)
