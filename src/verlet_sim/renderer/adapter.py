# MIT License (see LICENSE)
"""
Renderer adapters.

A renderer receives the world once per frame, after the pipeline ran, and
draws sticks and particles from read-only views. The simulation has no
graphics dependency; a windowed front end implements RendererAdapter.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TextIO
import sys

from ..world import World


class RendererAdapter(ABC):
    """
    Base class for renderers.

    Usage:
        renderer = MyRenderer()
        sim.step()
        renderer.render_world(sim.world, sim.frame)
    """

    @abstractmethod
    def begin_frame(self, frame: int) -> None:
        ...

    @abstractmethod
    def draw_stick(self, p0: tuple[float, float], p1: tuple[float, float]) -> None:
        ...

    @abstractmethod
    def draw_particle(
        self,
        index: int,
        position: tuple[float, float],
        pinned: bool,
        dragged: bool,
    ) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render_world(self, world: World, frame: int = 0) -> None:
        """Draw every stick, then every particle, of the world."""
        self.begin_frame(frame)
        for (x0, y0), (x1, y1) in world.stick_segments():
            self.draw_stick((float(x0), float(y0)), (float(x1), float(y1)))
        pinned = world.pinned_mask
        for i, (x, y) in enumerate(world.positions):
            self.draw_particle(i, (float(x), float(y)), bool(pinned[i]), world.dragging == i)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development.

    Output:
        === Frame 12 ===
        stick (100.00, 50.00) -> (120.00, 50.00)
        [0] (100.00, 50.00) pinned
        [1] (120.00, 51.25)
    """

    def __init__(self, output: TextIO | None = None, sticks: bool = True):
        self.output = output or sys.stdout
        self.sticks = sticks

    def begin_frame(self, frame: int) -> None:
        self.output.write(f"=== Frame {frame} ===\n")

    def draw_stick(self, p0, p1) -> None:
        if self.sticks:
            self.output.write(f"stick ({p0[0]:.2f}, {p0[1]:.2f}) -> ({p1[0]:.2f}, {p1[1]:.2f})\n")

    def draw_particle(self, index, position, pinned, dragged) -> None:
        line = f"[{index}] ({position[0]:.2f}, {position[1]:.2f})"
        if pinned:
            line += " pinned"
        if dragged:
            line += " dragged"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """Renderer that draws nothing (benchmarks, headless runs)."""

    def begin_frame(self, frame: int) -> None:
        pass

    def draw_stick(self, p0, p1) -> None:
        pass

    def draw_particle(self, index, position, pinned, dragged) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records frames as plain data for playback or export.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.step()
            renderer.render_world(sim.world, sim.frame)
        renderer.frames[-1]["particles"][0]["position"]
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current: dict | None = None

    def begin_frame(self, frame: int) -> None:
        self._current = {"frame": frame, "sticks": [], "particles": []}

    def draw_stick(self, p0, p1) -> None:
        if self._current is not None:
            self._current["sticks"].append([list(p0), list(p1)])

    def draw_particle(self, index, position, pinned, dragged) -> None:
        if self._current is None:
            return
        self._current["particles"].append({
            "index": index,
            "position": list(position),
            "pinned": pinned,
            "dragged": dragged,
        })

    def end_frame(self) -> None:
        if self._current is not None:
            self.frames.append(self._current)
            self._current = None

    def clear(self) -> None:
        self.frames.clear()
