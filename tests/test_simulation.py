import numpy as np
import pytest
from verlet_sim.config import WorldConfig
from verlet_sim.simulation import Simulation
from verlet_sim.profiler import Profiler
from verlet_sim.scenarios import cloth_world, particles_world, sticks_world, default_library
from verlet_sim.types import Particle, Pointer
from verlet_sim.world import World
from verlet_sim.core.integrators import integrate
from verlet_sim.constraints.solver import relax_sticks
from verlet_sim.collision.bounds import apply_bounds, out_of_bounds
from verlet_sim.core.invariants import max_stick_error


def test_step_runs_stages_in_order():
    """integrate -> relax -> bounds, each over the whole world."""
    config = WorldConfig()
    world = sticks_world(config)
    expected = world.copy()

    sim = Simulation(world, config)
    sim.run(20)
    for _ in range(20):
        integrate(expected, config)
        relax_sticks(expected, config.relax_iterations, config.compensate_pinned)
        apply_bounds(expected, config)

    np.testing.assert_array_equal(sim.world.positions, expected.positions)
    np.testing.assert_array_equal(sim.world.previous_positions, expected.previous_positions)
    assert sim.frame == 20


def test_floor_bounce_through_pipeline():
    """Outgoing normal speed is bounce times the incoming one; tangential kept."""
    config = WorldConfig(friction=1.0)
    world = World.build([Particle((250.0, 490.0), (247.0, 480.0))])
    sim = Simulation(world, config)
    sim.step()

    # integration: y = 490 + 10 + 0.5 -> 500.5, vy = 10.5
    vx, vy = sim.world.particle(0).velocity
    assert vy == pytest.approx(-0.9 * 10.5)
    assert vx == pytest.approx(3.0)
    assert sim.world.particle(0).y <= config.height


@pytest.mark.parametrize("boundary", ["mirror", "clamp"])
def test_particles_stay_inside(boundary):
    config = WorldConfig(boundary=boundary)
    sim = Simulation(particles_world(config), config)
    for _ in range(1000):
        sim.step()
        assert not out_of_bounds(sim.world, config.width, config.height).any()


def test_pinned_cloth_points_hold():
    config = WorldConfig()
    world = cloth_world(config, columns=8, rows=6)
    pinned = world.pinned_mask.copy()
    before = world.positions[pinned].copy()

    sim = Simulation(world, config)
    sim.run(200)
    np.testing.assert_array_equal(sim.world.positions[pinned], before)
    # the free part of the cloth fell
    assert sim.world.positions[~pinned][:, 1].mean() > world.positions[~pinned][:, 1].min()


def test_more_relaxation_passes_stretch_less():
    single_cfg = WorldConfig()
    multi_cfg = WorldConfig(relax_iterations=10)
    single = Simulation(cloth_world(single_cfg, columns=12, rows=10), single_cfg)
    multi = Simulation(cloth_world(multi_cfg, columns=12, rows=10), multi_cfg)
    single.run(100)
    multi.run(100)

    assert max_stick_error(multi.world) < max_stick_error(single.world)


def test_load_replaces_world_wholesale():
    config = WorldConfig()
    sim = Simulation(sticks_world(config), config)
    sim.pointer_pressed(Pointer(*sim.world.positions[0]))
    sim.run(5)
    old = sim.world
    old_positions = old.positions.copy()

    new = World.build([Particle((10.0, 10.0))])
    sim.load(new)
    assert sim.world is new
    assert sim.frame == 0
    assert sim.world.dragging is None

    sim.step()
    np.testing.assert_array_equal(old.positions, old_positions)
    assert len(sim.world) == 1
    assert sim.world.particle(0).y == pytest.approx(10.5)


def test_switch_by_scenario_key():
    library = default_library()
    sim = Simulation(particles_world())
    sim.switch("c", library)
    assert len(sim.world.sticks) > 0
    with pytest.raises(KeyError):
        sim.switch("x", library)


def test_profiler_sections():
    prof = Profiler()
    sim = Simulation(cloth_world(columns=4, rows=4), profiler=prof)
    sim.run(7)
    summary = prof.stats.summary()
    for section in ("integrate", "relax", "bounds"):
        assert summary[section]["n"] == 7
        assert summary[section]["max_ms"] >= summary[section]["mean_ms"] >= 0.0
