# MIT License (see LICENSE)
"""
Diagnostic quantities of a World.

Used by tests and benchmarks to check that structures settle and that
sticks converge towards their rest lengths. Velocities are per-step
displacements and every particle has unit mass.
"""
from __future__ import annotations
import numpy as np

from ..world import World


def kinetic_energy(world: World) -> float:
    """
    Total kinetic energy of the free particles.

    T = Σ 0.5 * |x - x_prev|²   over non-pinned particles
    """
    v = world.positions - world.previous_positions
    free = ~world.pinned_mask
    return float(0.5 * np.sum(v[free] ** 2))


def stick_lengths(world: World) -> np.ndarray:
    """Current length of every stick, in stick order."""
    seg = world.stick_segments()
    d = seg[:, 1] - seg[:, 0]
    return np.hypot(d[:, 0], d[:, 1])


def stick_errors(world: World) -> np.ndarray:
    """Signed stretch of every stick (current - rest)."""
    rest = np.array([s.rest_length for s in world.sticks], dtype=np.float64)
    return stick_lengths(world) - rest


def max_stick_error(world: World) -> float:
    """Largest absolute stretch over all sticks (0 for a world without sticks)."""
    if not world.sticks:
        return 0.0
    return float(np.max(np.abs(stick_errors(world))))
