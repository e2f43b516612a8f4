# MIT License (see LICENSE)
"""
Position Verlet integration.

No velocity is stored; it is implied by the previous position:
    v      = (x - x_prev) * friction
    x_new  = x + v + g
    x_prev = x

Gravity is applied to y only (y grows downwards, towards the floor).
Pinned particles are left untouched.

Reference:
    https://en.wikipedia.org/wiki/Verlet_integration
"""
from __future__ import annotations

import numpy as np

from ..config import WorldConfig
from ..types import Particle
from ..world import World


def integrate(world: World, config: WorldConfig) -> World:
    """
    Advance every non-pinned particle of the world by one step.

    Vectorised over the particle arrays; the stick topology is not consulted.

    Args:
        world: World to update (modified in-place).
        config: Supplies gravity and friction.

    Returns:
        The same world, for chaining.
    """
    pos, prev, pinned = world.arrays()
    if len(pos) == 0:
        return world

    free = ~pinned
    current = pos[free]
    velocity = (current - prev[free]) * config.friction

    moved = current + velocity
    moved[:, 1] += config.gravity

    prev[free] = current
    pos[free] = moved
    return world


def verlet_step(particle: Particle, config: WorldConfig) -> Particle:
    """
    Single-particle form of integrate(); returns a new Particle.

    A pinned particle is returned unchanged.
    """
    if particle.pinned:
        return particle
    x, y = particle.position
    old_x, old_y = particle.previous_position
    vx = (x - old_x) * config.friction
    vy = (y - old_y) * config.friction
    return Particle(
        position=(x + vx, y + vy + config.gravity),
        previous_position=(x, y),
        pinned=False,
    )


def velocities(world: World) -> np.ndarray:
    """Per-step displacement of every particle, shape (N, 2)."""
    return world.positions - world.previous_positions
