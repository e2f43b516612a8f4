# MIT License (see LICENSE)
"""
Stick relaxation.

Each stick pulls (or pushes) its endpoints towards its rest length:

    d        = p_b - p_a,  L = |d|   (L = DISTANCE_EPS if zero)
    fraction = ((rest - L) / L) / 2
    offset   = d * fraction
    p_a     -= offset      (unless pinned)
    p_b     += offset      (unless pinned)

Sticks are processed one after another and every correction is written back
before the next stick is read (Gauss-Seidel order). One pass does not
satisfy a chain of sticks; it tightens over several frames, and the stick
order shapes the transient. Only positions change, so a correction also
injects velocity into the next integration step.
"""
from __future__ import annotations

from ..types import Stick
from ..util import separation
from ..world import World


def relax_stick(world: World, stick: Stick, compensate_pinned: bool = False) -> None:
    """
    Apply one correction for a single stick.

    Args:
        world: World holding the endpoints (modified in-place).
        stick: Constraint to relax.
        compensate_pinned: If exactly one endpoint is pinned, move the free
                           one by the full correction instead of its half.
    """
    pos, _, pinned = world.arrays()
    a, b = stick.a, stick.b
    ax, ay = pos[a]
    bx, by = pos[b]

    dx, dy, distance = separation(ax, ay, bx, by)
    fraction = (stick.rest_length - distance) / distance / 2.0
    off_x = dx * fraction
    off_y = dy * fraction

    pin_a = pinned[a]
    pin_b = pinned[b]
    if compensate_pinned and pin_a != pin_b:
        off_x *= 2.0
        off_y *= 2.0

    if not pin_a:
        pos[a, 0] = ax - off_x
        pos[a, 1] = ay - off_y
    if not pin_b:
        pos[b, 0] = bx + off_x
        pos[b, 1] = by + off_y


def relax_sticks(world: World, iterations: int = 1, compensate_pinned: bool = False) -> World:
    """
    Relax every stick of the world, in stored order.

    Args:
        world: World to update (modified in-place).
        iterations: Number of full passes over the stick list. The default
                    single pass leaves chained sticks visibly stretchy.
        compensate_pinned: See relax_stick().

    Returns:
        The same world, for chaining.
    """
    sticks = world.sticks
    if not sticks:
        return world
    for _ in range(iterations):
        for stick in sticks:
            relax_stick(world, stick, compensate_pinned)
    return world
