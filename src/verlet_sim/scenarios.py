# MIT License (see LICENSE)
"""
Built-in scenarios and the scenario library.

A scenario is a factory `(config) -> World`. The library maps short keys to
factories so an input layer can request a switch by key; the default
library knows three worlds:

    "p"  particles: free particles thrown in different directions
    "s"  sticks:    a braced box and a pinned rope
    "c"  cloth:     a rectangular mesh hanging from pinned top points
"""
from __future__ import annotations
from typing import Callable

from .config import WorldConfig
from .types import Particle
from .world import World

ScenarioFactory = Callable[[WorldConfig], World]


def particles_world(config: WorldConfig | None = None) -> World:
    """A few unconnected particles with different initial velocities."""
    config = config or WorldConfig()
    w, h = config.width, config.height
    particles = {
        "p0": Particle((0.2 * w, 0.2 * h), (0.2 * w - 5.0, 0.2 * h - 5.0)),
        "p1": Particle((0.5 * w, 0.1 * h), (0.5 * w + 4.0, 0.1 * h)),
        "p2": Particle((0.8 * w, 0.3 * h), (0.8 * w + 2.0, 0.3 * h + 6.0)),
        "p3": Particle((0.3 * w, 0.6 * h), (0.3 * w - 8.0, 0.6 * h + 3.0)),
        "p4": Particle((0.6 * w, 0.5 * h)),
    }
    return World.build(particles)


def sticks_world(config: WorldConfig | None = None) -> World:
    """
    A square box braced by two diagonals, thrown sideways, and a rope of
    five segments hanging from a pinned particle.
    """
    config = config or WorldConfig()
    w, h = config.width, config.height
    x0, y0, side = 0.2 * w, 0.2 * h, 0.2 * min(w, h)

    particles = {
        "b0": Particle((x0, y0), (x0 - 5.0, y0)),
        "b1": Particle((x0 + side, y0)),
        "b2": Particle((x0 + side, y0 + side)),
        "b3": Particle((x0, y0 + side)),
    }
    sticks = [
        ("b0", "b1"), ("b1", "b2"), ("b2", "b3"), ("b3", "b0"),
        ("b0", "b2"), ("b1", "b3"),
    ]

    rope_x, rope_y, link = 0.7 * w, 0.1 * h, 0.05 * h
    for i in range(6):
        # rope starts sideways so it swings down
        particles[f"r{i}"] = Particle((rope_x + i * link, rope_y), pinned=(i == 0))
        if i:
            sticks.append((f"r{i - 1}", f"r{i}"))
    return World.build(particles, sticks)


def cloth_world(
    config: WorldConfig | None = None,
    columns: int = 15,
    rows: int = 10,
    spacing: float = 20.0,
    origin: tuple[float, float] | None = None,
    pin_every: int = 7,
) -> World:
    """
    Rectangular cloth of columns x rows particles.

    Particles are keyed "x,y" in row-major order. Horizontal sticks are
    emitted before the vertical stick of each particle. The top row is
    pinned at every `pin_every`-th column and at the last column.

    Args:
        config: World size used to centre the cloth when origin is None.
        columns, rows: Particle counts (each at least 2).
        spacing: Rest distance between neighbours.
        origin: Top-left particle position.
        pin_every: Pin stride along the top row (0 disables pinning).
    """
    if columns < 2 or rows < 2:
        raise ValueError(f"Cloth needs at least 2x2 particles, got {columns}x{rows}")
    if spacing <= 0:
        raise ValueError(f"Cloth spacing must be positive, got {spacing}")
    config = config or WorldConfig()
    if origin is None:
        origin = ((config.width - (columns - 1) * spacing) / 2.0, 0.1 * config.height)
    ox, oy = origin

    particles = {}
    sticks = []
    for y in range(rows):
        for x in range(columns):
            pinned = y == 0 and pin_every > 0 and (x % pin_every == 0 or x == columns - 1)
            particles[f"{x},{y}"] = Particle((ox + x * spacing, oy + y * spacing), pinned=pinned)
            if x > 0:
                sticks.append((f"{x - 1},{y}", f"{x},{y}", spacing))
            if y > 0:
                sticks.append((f"{x},{y - 1}", f"{x},{y}", spacing))
    return World.build(particles, sticks)


class ScenarioLibrary:
    """
    Registry of scenario factories keyed by switch request.

    Example:
        library = default_library()
        world = library.create("c", config)
    """

    def __init__(self) -> None:
        self._factories: dict[str, ScenarioFactory] = {}

    def register(self, key: str, factory: ScenarioFactory) -> None:
        self._factories[key] = factory

    def register_file(self, key: str, path: str) -> None:
        """Register a JSON scenario file under key (loaded on every create)."""
        from .io.json_io import load_world

        self.register(key, lambda _config: load_world(path))

    def keys(self) -> list[str]:
        return list(self._factories)

    def __contains__(self, key: str) -> bool:
        return key in self._factories

    def create(self, key: str, config: WorldConfig | None = None) -> World:
        """
        Build a fresh World for the scenario.

        Raises:
            KeyError: If no scenario is registered under key.
        """
        try:
            factory = self._factories[key]
        except KeyError:
            raise KeyError(f"Unknown scenario '{key}', known: {sorted(self._factories)}") from None
        return factory(config or WorldConfig())


def default_library() -> ScenarioLibrary:
    library = ScenarioLibrary()
    library.register("p", particles_world)
    library.register("s", sticks_world)
    library.register("c", cloth_world)
    return library
