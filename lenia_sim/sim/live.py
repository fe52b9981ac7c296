# lenia_sim/sim/live.py
from __future__ import annotations
from typing import Optional

from .config import INTEGRATOR, SCENE
from .engine import step_world
from .models import Parameters, vlen
from .world import World

def build_world(seed: int, n_creatures: int = SCENE.n_creatures, n_particles: int = SCENE.n_particles,
                radius: float = SCENE.spawn_radius, spacing: float = SCENE.creature_spacing,
                params: Optional[Parameters] = None) -> World:
    """Creatures laid out along x around the origin, each seeded from `seed + index`."""
    if n_creatures <= 0:
        raise ValueError(f"need at least one creature, got {n_creatures}")
    world = World()
    x0 = -0.5 * spacing * (n_creatures - 1)
    for k in range(n_creatures):
        world.spawn_disc_creature(n_particles, radius, seed + k, params=params,
                                  center=(x0 + k * spacing, 0.0))
    return world

class LiveSim:
    """
    Step-by-step wrapper for the UI.
    Holds the world and a step counter; reset() rebuilds the scene from a new seed.
    """
    def __init__(self, seed: int = 42, n_creatures: int = SCENE.n_creatures,
                 n_particles: int = SCENE.n_particles, solver: str = "python"):
        self.n_creatures = n_creatures
        self.n_particles = n_particles
        self.solver = solver
        self.reset(seed)

    def reset(self, seed: int):
        self.seed = seed
        self.world = build_world(seed, self.n_creatures, self.n_particles)
        self.step_count = 0
        self.last_coincident = 0

    def step(self) -> int:
        self.last_coincident = step_world(self.world, INTEGRATOR.step_size, self.solver)
        self.step_count += 1
        return self.last_coincident

    # UI helpers
    def stat_means(self):
        ps = list(self.world.particles())
        n = len(ps)
        if n == 0:
            return dict(n=0, mean_r_val=float('nan'), mean_u_val=float('nan'), mean_e_grad=float('nan'))
        return dict(
            n=n,
            mean_r_val=sum(p.fields.R_val for p in ps) / n,
            mean_u_val=sum(p.fields.U_val for p in ps) / n,
            mean_e_grad=sum(vlen(p.fields.E_grad) for p in ps) / n,
        )
