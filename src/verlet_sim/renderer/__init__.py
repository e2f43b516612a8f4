# MIT License (see LICENSE)
"""
Rendering adapters.

    - RendererAdapter: Abstract base class defining the drawing interface.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer.
    - BufferedRenderer: Records frames as plain data.

Typical usage:
    from verlet_sim.renderer import DebugRenderer

    DebugRenderer().render_world(sim.world, sim.frame)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
