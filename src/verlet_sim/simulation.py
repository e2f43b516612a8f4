# MIT License (see LICENSE)
"""
The simulation context and frame loop.

The Simulation owns the current World, the configuration and the pointer
controller. Nothing is global: a front end creates one Simulation, feeds it
pointer events and scenario switches, calls step() once per frame and hands
the world to a renderer.

Frame pipeline (step):
    1. Integration     (core/integrators.py)
    2. Stick relaxation (constraints/solver.py), in stored stick order
    3. Wall collisions (collision/bounds.py)

Each stage finishes over all particles before the next starts. Pointer
events are applied between frames and override the pipeline's result for
the held particle.
"""
from __future__ import annotations
import logging

from .config import WorldConfig
from .world import World
from .types import Pointer
from .profiler import Profiler
from .interaction import InteractionController
from .scenarios import ScenarioLibrary
from .core.integrators import integrate
from .constraints.solver import relax_sticks
from .collision.bounds import apply_bounds

logger = logging.getLogger(__name__)


class Simulation:
    """
    Verlet particle simulation.

    Attributes:
        world: Current World; replaced wholesale by load() / switch().
        config: World parameters.
        controller: Pointer interaction state machine.
        profiler: Optional Profiler timing the pipeline stages.
        frame: Frames simulated since the current world was loaded.

    Example:
        sim = Simulation(cloth_world())
        sim.pointer_pressed(Pointer(250, 50))
        sim.pointer_dragged(Pointer(260, 80))
        sim.step()
    """

    def __init__(
        self,
        world: World,
        config: WorldConfig | None = None,
        profiler: Profiler | None = None,
    ) -> None:
        self.config = config or WorldConfig()
        self.profiler = profiler
        self.controller = InteractionController(
            self.config.tolerance, keep_velocity=self.config.drag_keeps_velocity
        )
        self.world = world
        self.frame = 0

    def load(self, world: World) -> None:
        """
        Replace the world. All previous particles, sticks and the drag
        selection are discarded; the next step only sees the new world.
        """
        world.dragging = None
        self.world = world
        self.frame = 0
        logger.debug("World replaced: %r", world)

    def switch(self, key: str, library: ScenarioLibrary) -> None:
        """
        Replace the world by the scenario registered under key.

        Raises:
            KeyError: If the library has no such scenario.
        """
        world = library.create(key, self.config)
        logger.debug("Switching to scenario '%s'", key)
        self.load(world)

    def _stage(self, name: str, fn, *args) -> None:
        if self.profiler:
            with self.profiler.section(name):
                fn(*args)
        else:
            fn(*args)

    def step(self) -> None:
        """Advance the world by one frame."""
        cfg = self.config
        world = self.world
        self._stage("integrate", integrate, world, cfg)
        self._stage("relax", relax_sticks, world, cfg.relax_iterations, cfg.compensate_pinned)
        self._stage("bounds", apply_bounds, world, cfg)
        self.frame += 1

    def run(self, frames: int) -> None:
        """Step the simulation the given number of frames."""
        for _ in range(frames):
            self.step()

    # Pointer events -------------------------------------------------------

    def pointer_pressed(self, pointer: Pointer) -> int | None:
        """Start dragging the particle under the pointer; returns its index."""
        return self.controller.press(self.world, pointer)

    def pointer_dragged(self, pointer: Pointer) -> None:
        self.controller.drag(self.world, pointer)

    def pointer_released(self) -> None:
        self.controller.release(self.world)
