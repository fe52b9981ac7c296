# lenia_sim/sim/engine.py
from __future__ import annotations
from typing import Callable, Dict, Iterable

from .config import INTEGRATOR
from .fields import compute_fields, reset_fields
from .fields_np import compute_fields_np
from .models import Creature, Particle
from .world import World

SOLVERS: Dict[str, Callable[[Creature], int]] = {
    "python": compute_fields,
    "numpy": compute_fields_np,
}

def integrate_positions(particles: Iterable[Particle], step_size: float = INTEGRATOR.step_size) -> None:
    # explicit Euler down the energy gradient
    for p in particles:
        gx, gy = p.fields.E_grad
        p.x -= step_size * gx
        p.y -= step_size * gy

def step_world(world: World, step_size: float = INTEGRATOR.step_size, solver: str = "python") -> int:
    """
    One simulation step: reset every particle, solve fields per creature,
    then move every particle. Creatures never see each other's particles.
    Returns the number of coincident pairs encountered.
    """
    try:
        solve = SOLVERS[solver]
    except KeyError:
        raise ValueError(f"unknown solver {solver!r}; expected one of {sorted(SOLVERS)}") from None

    reset_fields(world)
    coincident = 0
    for creature in world.creatures.values():
        coincident += solve(creature)
    integrate_positions(world.particles(), step_size)
    return coincident
