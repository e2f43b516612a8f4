# MIT License (see LICENSE)
"""
Pointer interaction.

A two-state machine, Idle or Dragging(index):

- press:   pick the first particle (in world order) whose position lies
           within the tolerance window around the pointer, on both axes.
           No hit means Idle.
- drag:    while dragging, overwrite the held particle with the pointer
           location: position and previous position both, pinned cleared.
           The particle therefore has no velocity when released, unless
           the controller keeps the pointer motion (keep_velocity).
- release: back to Idle.

The selection is stored on the World (world.dragging) so that a scenario
switch, which replaces the World, drops it automatically.
"""
from __future__ import annotations

from .constants import DEFAULT_TOLERANCE
from .types import Pointer
from .util import within_window
from .world import World

IDLE = "idle"
DRAGGING = "dragging"


class InteractionController:
    """
    Translates pointer press/drag/release into particle overrides.

    Usage:
        controller = InteractionController(tolerance=10)
        controller.press(world, Pointer(120, 40))
        controller.drag(world, Pointer(130, 60))
        controller.release(world)
    """

    def __init__(self, tolerance: float = DEFAULT_TOLERANCE, keep_velocity: bool = False):
        self.tolerance = float(tolerance)
        self.keep_velocity = keep_velocity
        self._last: tuple[float, float] | None = None

    @staticmethod
    def state(world: World) -> str:
        return DRAGGING if world.dragging is not None else IDLE

    @staticmethod
    def is_dragging(world: World) -> bool:
        return world.dragging is not None

    def pick(self, world: World, pointer: Pointer) -> int | None:
        """
        Index of the first particle within the pick window, or None.

        Candidates are scanned in world order; the first match wins even if
        another particle is closer.
        """
        px, py = pointer.position
        for i, (x, y) in enumerate(world.positions):
            if within_window(px, py, float(x), float(y), self.tolerance):
                return i
        return None

    def press(self, world: World, pointer: Pointer) -> int | None:
        """Select the particle under the pointer (or clear the selection)."""
        world.dragging = self.pick(world, pointer)
        self._last = pointer.position if world.dragging is not None else None
        return world.dragging

    def drag(self, world: World, pointer: Pointer) -> None:
        """
        Move the held particle to the pointer and unpin it. Idle: no-op.

        With keep_velocity, the previous pointer location (from the event,
        else from the last press/drag) becomes the previous position, so the
        particle keeps moving after release.
        """
        if world.dragging is None:
            return
        if self.keep_velocity and pointer.previous is None and self._last is not None:
            pointer = Pointer(pointer.x, pointer.y, previous=self._last)
        world.set_particle(world.dragging, pointer.to_particle(self.keep_velocity))
        self._last = pointer.position

    def release(self, world: World) -> None:
        world.dragging = None
        self._last = None
