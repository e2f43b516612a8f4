# MIT License (see LICENSE)
"""
Wall collisions for the world rectangle [0, width] x [0, height].

A particle is out of bounds when it crossed the floor (y > height), the
ceiling (y < 0), the left wall (x < 0) or the right wall (x > width). Edges
are tested in that order. On each axis the first violated edge wins; the
two axes are resolved independently, so a particle hitting a corner is
brought back inside in one step (otherwise a particle sliding along the
floor could pass through a side wall).

Velocity is the raw displacement v = position - previous. After a hit the
normal component points away from the wall with magnitude bounce * |v_n|;
the tangential component is not touched.

Two responses are provided:
- mirror_bounds: reflect the step's trajectory off the wall. The
  penetration depth is mirrored (and damped by bounce), so fast particles
  do not visibly stick to the wall for a frame.
- clamp_bounds: snap the coordinate onto the wall.
"""
from __future__ import annotations

import numpy as np

from ..config import WorldConfig
from ..world import World


def _edge_masks(pos: np.ndarray, pinned: np.ndarray, width: float, height: float):
    """Masks (floor, ceiling, left, right); per axis the first violated edge wins."""
    x = pos[:, 0]
    y = pos[:, 1]
    free = ~pinned

    floor = free & (y > height)
    ceiling = free & ~floor & (y < 0.0)
    left = free & (x < 0.0)
    right = free & ~left & (x > width)
    return floor, ceiling, left, right


def mirror_bounds(world: World, width: float, height: float, bounce: float) -> World:
    """
    Reflect particles that crossed a wall during the last step.

    For the floor:
        y'    = height - bounce * (y - height)
        oldy' = y' + bounce * |vy|
    so that the next step moves up by bounce * |vy|. With bounce = 1 this
    is the exact mirror image of the step: y' = 2h - y, oldy' = 2h - oldy.
    The other common form, oldy' = 2h - oldy and y' = oldy' - bounce * vy,
    gives the same rebound velocity but damps the previous point instead of
    the penetration depth; the two agree when bounce = 1.
    The other walls are symmetric.

    Args:
        world: World to update (modified in-place).
        width, height: World size.
        bounce: Fraction of the normal velocity kept.
    """
    pos, prev, pinned = world.arrays()
    if len(pos) == 0:
        return world
    speed = np.abs(pos - prev) * bounce
    floor, ceiling, left, right = _edge_masks(pos, pinned, width, height)

    if floor.any():
        y = height - bounce * (pos[floor, 1] - height)
        pos[floor, 1] = y
        prev[floor, 1] = y + speed[floor, 1]
    if ceiling.any():
        y = -bounce * pos[ceiling, 1]
        pos[ceiling, 1] = y
        prev[ceiling, 1] = y - speed[ceiling, 1]
    if left.any():
        x = -bounce * pos[left, 0]
        pos[left, 0] = x
        prev[left, 0] = x - speed[left, 0]
    if right.any():
        x = width - bounce * (pos[right, 0] - width)
        pos[right, 0] = x
        prev[right, 0] = x + speed[right, 0]
    return world


def clamp_bounds(world: World, width: float, height: float, bounce: float) -> World:
    """
    Snap particles that crossed a wall back onto it.

    For the floor: y' = height, oldy' = height + bounce * |vy|. The other
    walls are symmetric.

    Args:
        world: World to update (modified in-place).
        width, height: World size.
        bounce: Fraction of the normal velocity kept.
    """
    pos, prev, pinned = world.arrays()
    if len(pos) == 0:
        return world
    speed = np.abs(pos - prev) * bounce
    floor, ceiling, left, right = _edge_masks(pos, pinned, width, height)

    if floor.any():
        pos[floor, 1] = height
        prev[floor, 1] = height + speed[floor, 1]
    if ceiling.any():
        pos[ceiling, 1] = 0.0
        prev[ceiling, 1] = -speed[ceiling, 1]
    if left.any():
        pos[left, 0] = 0.0
        prev[left, 0] = -speed[left, 0]
    if right.any():
        pos[right, 0] = width
        prev[right, 0] = width + speed[right, 0]
    return world


def apply_bounds(world: World, config: WorldConfig) -> World:
    """
    Resolve wall collisions using the response selected by config.boundary.

    Raises:
        ValueError: For an unknown boundary mode.
    """
    if config.boundary == "mirror":
        return mirror_bounds(world, config.width, config.height, config.bounce)
    if config.boundary == "clamp":
        return clamp_bounds(world, config.width, config.height, config.bounce)
    raise ValueError(f"Unknown boundary mode: {config.boundary}")


def out_of_bounds(world: World, width: float, height: float) -> np.ndarray:
    """Boolean mask of particles currently outside the world rectangle."""
    pos = world.positions
    return (pos[:, 0] < 0.0) | (pos[:, 0] > width) | (pos[:, 1] < 0.0) | (pos[:, 1] > height)
