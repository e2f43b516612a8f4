# MIT License (see LICENSE)
"""
The particle store.

A World holds every particle of a scenario in dense numpy arrays (one row
per particle) and the ordered list of sticks connecting them. Sticks and
the drag selection refer to particles by row index; optional string keys
let scenario files keep their symbolic names.

Structure:
    - A loader (scenarios.py, io/json_io.py) builds a World with World.build().
    - The pipeline stages mutate the arrays in place.
    - Renderers read the non-writeable views (positions, stick_segments()).
"""
from __future__ import annotations
from collections.abc import Mapping, Sequence
import math

import numpy as np

from .types import Particle, Stick


class World:
    """
    Simulation state: particles, sticks and the current drag selection.

    Attributes:
        sticks: Stick constraints, relaxed in this order.
        names: Scenario key of each particle (None for unnamed particles).
        dragging: Index of the particle held by the pointer, or None.
    """

    def __init__(
        self,
        positions,
        previous=None,
        pinned=None,
        sticks: Sequence[Stick] = (),
        names: Sequence[str | None] | None = None,
    ) -> None:
        pos = np.array(positions, dtype=np.float64).reshape(-1, 2)
        prev = pos.copy() if previous is None else np.array(previous, dtype=np.float64).reshape(-1, 2)
        pins = np.zeros(len(pos), dtype=bool) if pinned is None else np.array(pinned, dtype=bool).reshape(-1)

        if prev.shape != pos.shape or pins.shape != (len(pos),):
            raise ValueError(
                f"Particle arrays disagree: positions {pos.shape}, previous {prev.shape}, pinned {pins.shape}"
            )
        if not (np.isfinite(pos).all() and np.isfinite(prev).all()):
            raise ValueError("Particle coordinates must be finite")

        self._pos = pos
        self._prev = prev
        self._pinned = pins
        self.names: list[str | None] = list(names) if names is not None else [None] * len(pos)
        if len(self.names) != len(pos):
            raise ValueError(f"Expected {len(pos)} particle names, got {len(self.names)}")
        self._index = {name: i for i, name in enumerate(self.names) if name is not None}
        if len(self._index) != sum(1 for n in self.names if n is not None):
            raise ValueError("Particle names must be unique")

        self.sticks: list[Stick] = []
        for stick in sticks:
            self._check_stick(stick)
            self.sticks.append(stick)

        self.dragging: int | None = None

    @classmethod
    def build(
        cls,
        particles: Mapping[str, Particle] | Sequence[Particle],
        sticks: Sequence = (),
    ) -> "World":
        """
        Build a World from Particle values and stick descriptions.

        Args:
            particles: Either a mapping key -> Particle (keys are kept as
                       names, in mapping order) or a sequence of Particles.
            sticks: Items of the form (a, b) or (a, b, rest_length), or Stick
                    instances. Endpoints are particle keys or indices. A
                    missing rest length is taken from the current distance.

        Raises:
            ValueError: If a stick references an unknown particle or is
                        otherwise malformed.
        """
        if isinstance(particles, Mapping):
            names = [str(k) for k in particles.keys()]
            values = list(particles.values())
        else:
            names = None
            values = list(particles)

        for p in values:
            if not isinstance(p, Particle):
                raise TypeError(f"Expected Particle, got {type(p).__name__}")

        world = cls(
            positions=[p.position for p in values],
            previous=[p.previous_position for p in values],
            pinned=[p.pinned for p in values],
            names=names,
        )
        for item in sticks:
            world.add_stick(item)
        return world

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    def resolve(self, ref) -> int:
        """Translate a particle key or index into an index."""
        if isinstance(ref, (int, np.integer)) and not isinstance(ref, bool):
            i = int(ref)
            if not 0 <= i < len(self._pos):
                raise ValueError(f"Particle index {i} out of range (0..{len(self._pos) - 1})")
            return i
        try:
            return self._index[ref]
        except (KeyError, TypeError):
            raise ValueError(f"Unknown particle '{ref}'") from None

    def add_stick(self, item) -> Stick:
        """
        Append a stick. Accepts a Stick, (a, b) or (a, b, rest_length).

        Returns:
            The stored Stick with resolved indices and rest length.
        """
        if isinstance(item, Stick):
            a, b, length = item.a, item.b, item.rest_length
        else:
            if len(item) == 2:
                (a, b), length = item, None
            elif len(item) == 3:
                a, b, length = item
            else:
                raise ValueError(f"Stick must be (a, b) or (a, b, length), got {item!r}")

        i, j = self.resolve(a), self.resolve(b)
        if length is None:
            length = self.distance(i, j)
        stick = Stick(i, j, float(length))
        self._check_stick(stick)
        self.sticks.append(stick)
        return stick

    def _check_stick(self, stick: Stick) -> None:
        n = len(self._pos)
        for end in stick.endpoints:
            if not 0 <= end < n:
                raise ValueError(f"Stick {stick} references unknown particle index {end}")
        if stick.a == stick.b:
            raise ValueError(f"Stick connects particle {stick.a} to itself")
        if not math.isfinite(stick.rest_length) or stick.rest_length < 0:
            raise ValueError(f"Stick rest length must be a finite non-negative number, got {stick.rest_length}")

    # ------------------------------------------------------------------
    # Particle access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._pos)

    def index_of(self, key: str) -> int:
        """Index of the particle loaded under the given key."""
        return self.resolve(key)

    def key_of(self, index: int) -> str | None:
        return self.names[index]

    def particle(self, index: int) -> Particle:
        """Snapshot of one particle as a Particle value."""
        return Particle(
            position=tuple(self._pos[index]),
            previous_position=tuple(self._prev[index]),
            pinned=bool(self._pinned[index]),
        )

    def particles(self) -> list[Particle]:
        return [self.particle(i) for i in range(len(self))]

    def set_particle(self, index: int, particle: Particle) -> None:
        """Overwrite position, previous position and pin flag of a particle."""
        self._pos[index] = particle.position
        self._prev[index] = particle.previous_position
        self._pinned[index] = particle.pinned

    def pin(self, index: int, pinned: bool = True) -> None:
        """Pin a particle where it is (its velocity is discarded)."""
        self._prev[index] = self._pos[index]
        self._pinned[index] = pinned

    def arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Writable (positions, previous, pinned) arrays.

        Only the pipeline stages and the interaction controller write
        through these; everything else should use the read-only views.
        """
        return self._pos, self._prev, self._pinned

    def distance(self, i: int, j: int) -> float:
        d = self._pos[j] - self._pos[i]
        return float(math.hypot(d[0], d[1]))

    # ------------------------------------------------------------------
    # Read-only views (rendering, tests)
    # ------------------------------------------------------------------

    @staticmethod
    def _frozen(arr: np.ndarray) -> np.ndarray:
        view = arr.view()
        view.flags.writeable = False
        return view

    @property
    def positions(self) -> np.ndarray:
        """Current positions, shape (N, 2), non-writeable."""
        return self._frozen(self._pos)

    @property
    def previous_positions(self) -> np.ndarray:
        """Previous positions, shape (N, 2), non-writeable."""
        return self._frozen(self._prev)

    @property
    def pinned_mask(self) -> np.ndarray:
        """Boolean pin flags, shape (N,), non-writeable."""
        return self._frozen(self._pinned)

    def stick_segments(self) -> np.ndarray:
        """Endpoint positions of every stick, shape (M, 2, 2) (a copy)."""
        if not self.sticks:
            return np.zeros((0, 2, 2), dtype=np.float64)
        idx = np.array([s.endpoints for s in self.sticks], dtype=np.intp)
        return self._pos[idx]

    def copy(self) -> "World":
        """Independent copy (arrays and stick list duplicated)."""
        other = World(self._pos.copy(), self._prev.copy(), self._pinned.copy(), list(self.sticks), list(self.names))
        other.dragging = self.dragging
        return other

    def __repr__(self) -> str:
        return f"<World particles={len(self)} sticks={len(self.sticks)} pinned={int(self._pinned.sum())}>"
