import math

import pytest

from lenia_sim.sim.fields import accumulate_pairs, apply_growth, compute_fields, reset_fields
from lenia_sim.sim.kernels import radial, repulsion
from lenia_sim.sim.models import Fields, Parameters
from lenia_sim.sim.world import World

PARAMS = Parameters()
R_BASE = repulsion(0.0, PARAMS.c_rep)[0]
U_BASE = radial(0.0, PARAMS.mu_k, PARAMS.sigma_k, PARAMS.w_k)[0]


def _world(*positions, params=None):
    world = World()
    creature = world.spawn_creature(positions, params)
    return world, creature


def test_reset_sets_baseline():
    world, creature = _world((0.0, 0.0), (0.3, 0.1), (5.0, 5.0))
    for p in creature.particles:
        p.fields.R_grad = (3.0, 3.0)
        p.fields.U_val = 42.0
    reset_fields(world)
    for p in creature.particles:
        assert p.fields.R_val == R_BASE == 0.5
        assert p.fields.U_val == U_BASE == pytest.approx(0.022 * math.exp(-16.0))
        assert p.fields.R_grad == (0.0, 0.0)
        assert p.fields.U_grad == (0.0, 0.0)
        assert p.fields.E_grad == (0.0, 0.0)


def test_reset_is_idempotent():
    world, creature = _world((0.0, 0.0), (0.4, 0.0))
    reset_fields(world)
    first = [Fields(**vars(p.fields)) for p in creature.particles]
    reset_fields(world)
    assert [p.fields for p in creature.particles] == first


def test_pair_at_distance_two_only_feels_potential():
    world, creature = _world((0.0, 0.0), (2.0, 0.0))
    reset_fields(world)
    accumulate_pairs(creature)
    a, b = (p.fields for p in creature.particles)

    K, dK = radial(2.0, 4.0, 1.0, 0.022)
    assert a.R_val == b.R_val == R_BASE
    assert a.R_grad == b.R_grad == (0.0, 0.0)
    assert a.U_val == pytest.approx(U_BASE + K, abs=1e-12)
    assert b.U_val == a.U_val
    # direction from b to a is -x
    assert a.U_grad[0] == pytest.approx(-dK, abs=1e-12)
    assert a.U_grad[1] == pytest.approx(0.0, abs=1e-12)
    assert b.U_grad == (-a.U_grad[0], -a.U_grad[1])


def test_pair_at_half_distance_repels():
    world, creature = _world((0.0, 0.0), (0.5, 0.0))
    reset_fields(world)
    accumulate_pairs(creature)
    a, b = (p.fields for p in creature.particles)

    assert a.R_val == b.R_val == R_BASE + 0.125
    assert a.R_grad[0] == pytest.approx(0.5)
    assert b.R_grad[0] == pytest.approx(-0.5)
    assert a.R_grad == (-b.R_grad[0], -b.R_grad[1])


@pytest.mark.parametrize("pi,pj", [
    ((1.2, -0.7), (0.9, -0.3)),
    ((-3.0, 2.0), (1.0, 5.0)),
    ((0.0, 0.0), (0.01, 0.999)),
])
def test_pair_contributions_are_symmetric(pi, pj):
    world, creature = _world(pi, pj)
    reset_fields(world)
    accumulate_pairs(creature)
    a, b = (p.fields for p in creature.particles)
    assert a.R_val == b.R_val
    assert a.U_val == b.U_val
    assert a.R_grad == (-b.R_grad[0], -b.R_grad[1])
    assert a.U_grad == (-b.U_grad[0], -b.U_grad[1])


def test_growth_uses_completed_potential():
    world, creature = _world((0.0, 0.0), (0.6, 0.2), (3.5, -1.0), (4.1, 0.3))
    reset_fields(world)
    accumulate_pairs(creature)
    apply_growth(creature)
    for p in creature.particles:
        f = p.fields
        _, dG = radial(f.U_val, PARAMS.mu_g, PARAMS.sigma_g, 1.0)
        assert f.E_grad[0] == pytest.approx(f.R_grad[0] - dG * f.U_grad[0])
        assert f.E_grad[1] == pytest.approx(f.R_grad[1] - dG * f.U_grad[1])


def test_single_particle_keeps_baseline():
    world, creature = _world((1.0, -2.0))
    reset_fields(world)
    assert compute_fields(creature) == 0
    f = creature.particles[0].fields
    assert f.R_val == R_BASE
    assert f.U_val == U_BASE
    assert f.R_grad == f.U_grad == (0.0, 0.0)
    # growth term is still evaluated on the baseline potential
    _, dG = radial(U_BASE, PARAMS.mu_g, PARAMS.sigma_g, 1.0)
    assert math.isfinite(dG)
    assert f.E_grad == (0.0, 0.0)


def test_coincident_particles_get_zero_direction():
    world, creature = _world((1.0, 1.0), (1.0, 1.0), (1.5, 1.0))
    reset_fields(world)
    assert compute_fields(creature) == 1

    a, b, c = (p.fields for p in creature.particles)
    for f in (a, b, c):
        assert all(math.isfinite(v) for v in (f.R_val, f.U_val, *f.R_grad, *f.U_grad, *f.E_grad))
    # both value terms at r == 0 still count
    assert a.R_val == pytest.approx(R_BASE + repulsion(0.0, 1.0)[0] + repulsion(0.5, 1.0)[0])
    # the coincident pair adds no gradient, only the third particle pushes
    assert a.R_grad == b.R_grad
    assert a.R_grad[0] == pytest.approx(0.5)
    assert c.R_grad[0] == pytest.approx(-1.0)


def test_zero_repulsion_strength_leaves_r_val_zero():
    params = Parameters(c_rep=0.0)
    world, creature = _world((0.0, 0.0), (0.2, 0.0), params=params)
    reset_fields(world)
    compute_fields(creature)
    assert all(p.fields.R_val == 0.0 for p in creature.particles)
