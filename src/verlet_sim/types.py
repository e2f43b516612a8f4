# MIT License (see LICENSE)
"""
Value types of the simulation.

- Particle: a point mass whose velocity is implied by its previous position.
- Stick: a distance constraint between two particles of a World.
- Pointer: a pointer-device location, converted explicitly into a particle
  update when dragging.

Inside a World particles are stored as rows of numpy arrays (see world.py);
Particle is the value used to build a world and to read or overwrite a
single entry.
"""
from __future__ import annotations
from dataclasses import dataclass

from .util import as_point


@dataclass
class Particle:
    """
    A point mass integrated with position Verlet.

    Attributes:
        position: Current (x, y).
        previous_position: (x, y) one step earlier. Defaults to position,
                           i.e. a particle at rest.
        pinned: Pinned particles are skipped by integration and wall handling.
    """
    position: tuple[float, float]
    previous_position: tuple[float, float] | None = None
    pinned: bool = False

    def __post_init__(self) -> None:
        self.position = as_point(self.position)
        if self.previous_position is None:
            self.previous_position = self.position
        else:
            self.previous_position = as_point(self.previous_position)
        self.pinned = bool(self.pinned)

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def velocity(self) -> tuple[float, float]:
        """Displacement over the last step (position - previous_position)."""
        return (
            self.position[0] - self.previous_position[0],
            self.position[1] - self.previous_position[1],
        )


@dataclass(frozen=True)
class Stick:
    """
    Distance constraint between particles `a` and `b` (World indices).

    The rest length is fixed at creation; only the endpoints move. Endpoint
    order only decides which end receives the negative offset.
    """
    a: int
    b: int
    rest_length: float

    @property
    def endpoints(self) -> tuple[int, int]:
        return (self.a, self.b)


@dataclass(frozen=True)
class Pointer:
    """
    Pointer location delivered by an input event.

    Attributes:
        x, y: Current pointer location.
        previous: Location at the previous event, if the input layer knows it.
    """
    x: float
    y: float
    previous: tuple[float, float] | None = None

    @property
    def position(self) -> tuple[float, float]:
        return (float(self.x), float(self.y))

    def to_particle(self, keep_velocity: bool = False) -> Particle:
        """
        Particle state for a particle held by this pointer.

        The result is always unpinned. By default the previous position equals
        the current one, so a released particle starts at rest. With
        keep_velocity, the pointer's previous location becomes the previous
        position and the particle carries the pointer motion.
        """
        previous = self.previous if keep_velocity and self.previous is not None else None
        return Particle(position=self.position, previous_position=previous, pinned=False)
