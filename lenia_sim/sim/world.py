# lenia_sim/sim/world.py
from __future__ import annotations
from typing import Dict, Iterable, Iterator, Optional

from .models import Creature, Parameters, Particle, Vec
from .rng import disc_positions


class SceneGraphError(RuntimeError):
    """A particle that does not belong to any creature in the world."""


class World:
    def __init__(self):
        self.creatures: Dict[int, Creature] = {}
        self._creature_id = 0
        self._particle_id = 0

    def _next_creature_id(self) -> int:
        self._creature_id += 1
        return self._creature_id

    def _next_particle_id(self) -> int:
        self._particle_id += 1
        return self._particle_id

    # --- spawning ---
    def spawn_creature(self, positions: Iterable[Vec], params: Optional[Parameters] = None) -> Creature:
        creature = Creature(id=self._next_creature_id(), params=params if params is not None else Parameters())
        for x, y in positions:
            creature.particles.append(Particle(
                id=self._next_particle_id(), x=float(x), y=float(y), creature_id=creature.id,
            ))
        self.creatures[creature.id] = creature
        return creature

    def spawn_disc_creature(self, n: int, radius: float, seed: int,
                            params: Optional[Parameters] = None,
                            center: Vec = (0.0, 0.0)) -> Creature:
        return self.spawn_creature(disc_positions(n, radius, seed, center=center), params)

    # --- lookups ---
    def particles(self) -> Iterator[Particle]:
        for c in self.creatures.values():
            yield from c.particles

    def parameters_for(self, particle: Particle, owner: Optional[Creature] = None) -> Parameters:
        c = self.creatures.get(particle.creature_id) if particle.creature_id is not None else None
        if c is None:
            raise SceneGraphError(
                f"particle {particle.id} has no creature (creature_id={particle.creature_id!r})"
            )
        if owner is not None and c is not owner:
            raise SceneGraphError(
                f"particle {particle.id} is held by creature {owner.id} but linked to creature {c.id}"
            )
        return c.params

    @staticmethod
    def centroid(creature: Creature) -> Vec:
        n = len(creature.particles)
        if n == 0:
            return (0.0, 0.0)
        return (sum(p.x for p in creature.particles) / n,
                sum(p.y for p in creature.particles) / n)
