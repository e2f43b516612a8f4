# MIT License (see LICENSE)
"""
Stick constraint relaxation.

Typical usage:
    from verlet_sim.constraints import relax_sticks

    relax_sticks(world, iterations=1)
"""
from .solver import relax_stick, relax_sticks

__all__ = [
    "relax_stick",
    "relax_sticks",
]
