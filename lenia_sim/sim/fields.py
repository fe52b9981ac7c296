# lenia_sim/sim/fields.py
"""
Field solver: reset -> pairwise accumulation -> growth correction.

The pairwise pass is a plain serial loop over i < j, so each pair updates its
two particles with nothing else touching them. Summation order is fixed by
particle order, which keeps results bit-identical between runs on the same
input. Growth must only run after every pair of the creature has been added;
`compute_fields` is that barrier.
"""
from __future__ import annotations
import logging
import math

from .kernels import REPULSION_CUTOFF, radial, repulsion
from .models import ZERO, Creature, Fields, Parameters, vadd, vmul, vsub
from .world import World

logger = logging.getLogger("lenia_sim.fields")


def reset_fields_for(fields: Fields, params: Parameters) -> None:
    # every particle starts from its own zero-distance "self" term
    fields.R_val = repulsion(0.0, params.c_rep)[0]
    fields.R_grad = ZERO
    fields.U_val = radial(0.0, params.mu_k, params.sigma_k, params.w_k)[0]
    fields.U_grad = ZERO
    fields.E_grad = ZERO

def reset_fields(world: World) -> None:
    """Phase 1 for every particle in the world. Raises SceneGraphError for orphaned or mislinked particles."""
    for creature in world.creatures.values():
        for p in creature.particles:
            reset_fields_for(p.fields, world.parameters_for(p, owner=creature))

def accumulate_pairs(creature: Creature) -> int:
    """
    Phase 2: add every unordered pair's repulsion and kernel terms.

    Coincident particles (r == 0) get a zero direction: their value terms
    are still added but they push each other nowhere. Returns how many such
    pairs were seen.
    """
    params = creature.params
    ps = creature.particles
    coincident = 0
    for i in range(len(ps)):
        pi = ps[i]
        fi = pi.fields
        for j in range(i + 1, len(ps)):
            pj = ps[j]
            fj = pj.fields

            dx = pi.x - pj.x
            dy = pi.y - pj.y
            r = math.hypot(dx, dy)
            if r > 0.0:
                d = (dx / r, dy / r)
            else:
                d = ZERO
                coincident += 1

            if r < REPULSION_CUTOFF:
                R, dR = repulsion(r, params.c_rep)
                fi.R_val += R
                fj.R_val += R
                g = vmul(d, dR)
                fi.R_grad = vadd(fi.R_grad, g)
                fj.R_grad = vsub(fj.R_grad, g)

            K, dK = radial(r, params.mu_k, params.sigma_k, params.w_k)
            fi.U_val += K
            fj.U_val += K
            g = vmul(d, dK)
            fi.U_grad = vadd(fi.U_grad, g)
            fj.U_grad = vsub(fj.U_grad, g)
    return coincident

def apply_growth(creature: Creature) -> None:
    """Phase 3: E_grad = R_grad - G'(U_val) * U_grad, per particle."""
    params = creature.params
    for p in creature.particles:
        f = p.fields
        _, dG = radial(f.U_val, params.mu_g, params.sigma_g, 1.0)
        f.E_grad = vsub(f.R_grad, vmul(f.U_grad, dG))

def compute_fields(creature: Creature) -> int:
    coincident = accumulate_pairs(creature)
    apply_growth(creature)
    if coincident:
        logger.debug("creature %d: %d coincident pair(s), zero direction used", creature.id, coincident)
    return coincident
