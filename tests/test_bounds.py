import numpy as np
import pytest
from verlet_sim.config import WorldConfig
from verlet_sim.types import Particle
from verlet_sim.world import World
from verlet_sim.collision.bounds import apply_bounds, mirror_bounds, clamp_bounds, out_of_bounds

W, H = 500.0, 500.0


def _one(position, previous, pinned=False):
    return World.build([Particle(position, previous, pinned=pinned)])


def test_mirror_floor_keeps_tangential_and_damps_normal():
    world = _one((103.0, 510.0), (100.0, 490.0))
    mirror_bounds(world, W, H, 0.9)

    p = world.particle(0)
    assert p.x == pytest.approx(103.0)
    assert p.previous_position[0] == pytest.approx(100.0)
    assert p.y == pytest.approx(491.0)
    vx, vy = p.velocity
    assert vx == pytest.approx(3.0)
    assert vy == pytest.approx(-0.9 * 20.0)


def test_mirror_without_loss_is_exact_reflection():
    world = _one((103.0, 510.0), (100.0, 490.0))
    mirror_bounds(world, W, H, 1.0)

    p = world.particle(0)
    assert p.y == pytest.approx(2 * H - 510.0)
    assert p.previous_position[1] == pytest.approx(2 * H - 490.0)


def test_mirror_ceiling_and_walls():
    world = World.build([
        Particle((50.0, -5.0), (50.0, 5.0)),      # ceiling
        Particle((-5.0, 100.0), (5.0, 100.0)),    # left
        Particle((505.0, 100.0), (495.0, 100.0)), # right
    ])
    mirror_bounds(world, W, H, 0.9)

    ceiling, left, right = world.particles()
    assert ceiling.y == pytest.approx(4.5)
    assert ceiling.velocity[1] == pytest.approx(9.0)
    assert left.x == pytest.approx(4.5)
    assert left.velocity[0] == pytest.approx(9.0)
    assert right.x == pytest.approx(495.5)
    assert right.velocity[0] == pytest.approx(-9.0)
    assert not out_of_bounds(world, W, H).any()


def test_clamp_snaps_to_walls():
    world = World.build([
        Particle((103.0, 510.0), (100.0, 490.0)), # floor
        Particle((50.0, -5.0), (50.0, 5.0)),      # ceiling
        Particle((-5.0, 100.0), (5.0, 100.0)),    # left
        Particle((505.0, 100.0), (495.0, 100.0)), # right
    ])
    clamp_bounds(world, W, H, 0.9)

    np.testing.assert_allclose(
        world.positions, [[103.0, 500.0], [50.0, 0.0], [0.0, 100.0], [500.0, 100.0]]
    )
    np.testing.assert_allclose(
        world.previous_positions, [[100.0, 518.0], [50.0, -9.0], [-9.0, 100.0], [509.0, 100.0]]
    )


def test_pinned_particles_outside_are_left_alone():
    world = _one((600.0, 600.0), (600.0, 600.0), pinned=True)
    for boundary in ("mirror", "clamp"):
        apply_bounds(world, WorldConfig(boundary=boundary))
        assert world.particle(0).position == (600.0, 600.0)


def test_corner_resolves_both_axes():
    world = _one((-5.0, 510.0), (5.0, 490.0))
    clamp_bounds(world, W, H, 0.9)

    p = world.particle(0)
    assert p.position == (0.0, 500.0)
    vx, vy = p.velocity
    assert vx == pytest.approx(9.0)
    assert vy == pytest.approx(-18.0)


def test_particle_sliding_on_floor_cannot_leave_through_wall():
    """Floor and left wall are violated in the same step."""
    world = _one((-1.0, 500.4), (2.0, 500.0))
    mirror_bounds(world, W, H, 0.9)
    assert not out_of_bounds(world, W, H).any()
    assert world.particle(0).velocity[0] > 0


def test_particles_inside_are_untouched():
    world = _one((250.0, 250.0), (240.0, 260.0))
    apply_bounds(world, WorldConfig())
    p = world.particle(0)
    assert p.position == (250.0, 250.0)
    assert p.previous_position == (240.0, 260.0)


def test_bounce_is_outward_even_when_moving_along_the_wall():
    """A particle found below the floor while moving up is still sent up."""
    world = _one((10.0, 502.0), (10.0, 504.0))
    clamp_bounds(world, W, H, 0.5)
    assert world.particle(0).velocity[1] == pytest.approx(-1.0)


def test_apply_bounds_dispatches_on_config():
    mirrored = _one((103.0, 510.0), (100.0, 490.0))
    clamped = _one((103.0, 510.0), (100.0, 490.0))
    apply_bounds(mirrored, WorldConfig(boundary="mirror"))
    apply_bounds(clamped, WorldConfig(boundary="clamp"))

    assert mirrored.particle(0).y == pytest.approx(491.0)
    assert clamped.particle(0).y == 500.0
