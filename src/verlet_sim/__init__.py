# MIT License (see LICENSE)
"""
verlet_sim - 2D point-mass particles and sticks with Verlet integration.

Particles move under gravity and friction inside a rectangular world,
bounce off its walls and are held together by rigid-length sticks that are
relaxed once per frame. Particles can be pinned and dragged with a pointer.

Main entry points:
    - Simulation: Owns the world and runs the frame pipeline.
    - World: Particle store (numpy arrays) and stick list.
    - Particle, Stick, Pointer: Value types.
    - WorldConfig: Gravity, friction, bounce, world size and solver options.

Submodules:
    - core: Integration and diagnostics.
    - constraints: Stick relaxation.
    - collision: Wall response (mirror or clamp).
    - io: JSON scenario files.
    - renderer: Optional visualization adapters.

Example:
    from verlet_sim import Simulation, WorldConfig
    from verlet_sim.scenarios import cloth_world

    config = WorldConfig(relax_iterations=3)
    sim = Simulation(cloth_world(config), config)
    sim.run(60)
"""
from .config import WorldConfig
from .types import Particle, Stick, Pointer
from .world import World
from .interaction import InteractionController
from .simulation import Simulation
from .scenarios import ScenarioLibrary, default_library

__all__ = [
    # Simulation
    "Simulation",
    "WorldConfig",
    # State
    "World",
    "Particle",
    "Stick",
    "Pointer",
    # Interaction
    "InteractionController",
    # Scenarios
    "ScenarioLibrary",
    "default_library",
]
