# MIT License (see LICENSE)
"""
Integration and diagnostics.

Typical usage:
    from verlet_sim.core import integrate, max_stick_error

    integrate(world, config)
    print(max_stick_error(world))
"""
from .integrators import integrate, verlet_step, velocities
from .invariants import kinetic_energy, stick_lengths, stick_errors, max_stick_error

__all__ = [
    # Integrators
    "integrate",
    "verlet_step",
    "velocities",
    # Diagnostics
    "kinetic_energy",
    "stick_lengths",
    "stick_errors",
    "max_stick_error",
]
