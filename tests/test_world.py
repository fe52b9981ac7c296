import math

import pytest

from lenia_sim.sim.live import LiveSim, build_world
from lenia_sim.sim.models import Parameters
from lenia_sim.sim.rng import disc_positions
from lenia_sim.sim.world import World


def test_disc_positions_are_seeded():
    assert disc_positions(50, 10.0, seed=3) == disc_positions(50, 10.0, seed=3)
    assert disc_positions(50, 10.0, seed=3) != disc_positions(50, 10.0, seed=4)


def test_disc_positions_stay_inside_disc():
    pts = disc_positions(500, 10.0, seed=11, center=(5.0, -2.0))
    assert len(pts) == 500
    assert all(math.hypot(x - 5.0, y + 2.0) <= 10.0 + 1e-9 for x, y in pts)


def test_disc_positions_rejects_empty():
    with pytest.raises(ValueError):
        disc_positions(0, 10.0, seed=1)


def test_spawn_links_particles_to_creature():
    world = World()
    params = Parameters(c_rep=2.0)
    a = world.spawn_creature([(0.0, 0.0), (2.0, 0.0)], params)
    b = world.spawn_disc_creature(5, 1.0, seed=2)
    assert all(p.creature_id == a.id for p in a.particles)
    assert all(p.creature_id == b.id for p in b.particles)
    assert len({p.id for p in world.particles()}) == 7
    assert world.parameters_for(a.particles[0]) is params
    assert world.parameters_for(b.particles[0]) == Parameters()
    assert World.centroid(a) == (1.0, 0.0)


def test_build_world_spaces_creatures():
    world = build_world(5, n_creatures=3, n_particles=20, radius=2.0, spacing=40.0)
    centres = [World.centroid(c)[0] for c in world.creatures.values()]
    assert len(centres) == 3
    assert centres[0] == pytest.approx(-40.0, abs=2.0)
    assert centres[1] == pytest.approx(0.0, abs=2.0)
    assert centres[2] == pytest.approx(40.0, abs=2.0)


def test_live_sim_steps_and_resets():
    live = LiveSim(seed=9, n_creatures=1, n_particles=12)
    start = [(p.x, p.y) for p in live.world.particles()]
    live.step()
    live.step()
    assert live.step_count == 2
    assert live.stat_means()["n"] == 12
    live.reset(9)
    assert live.step_count == 0
    assert [(p.x, p.y) for p in live.world.particles()] == start
