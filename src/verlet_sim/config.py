# MIT License (see LICENSE)
"""
World configuration.

All tunables of the simulation live in one immutable structure so a
Simulation, its scenarios and its tests agree on a single set of numbers.
"""
from __future__ import annotations
from dataclasses import dataclass, replace as _replace
import math
import numbers

from .constants import (
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_GRAVITY,
    DEFAULT_FRICTION,
    DEFAULT_BOUNCE,
    DEFAULT_TOLERANCE,
    BOUNDARY_MODES,
)


@dataclass(frozen=True)
class WorldConfig:
    """
    Parameters of the simulated world.

    Attributes:
        width: World width; particles are kept in [0, width].
        height: World height; particles are kept in [0, height]. The floor
                is at y = height.
        gravity: Downward acceleration added once per step.
        friction: Fraction of velocity kept each step, in [0, 1].
                  1.0 disables air resistance.
        bounce: Fraction of normal velocity kept after a wall hit, in [0, 1].
        tolerance: Pointer pick window half-width (both axes).
        boundary: Wall response, "mirror" (reflect the trajectory) or
                  "clamp" (snap onto the wall).
        relax_iterations: Constraint passes per frame. 1 reproduces the
                          classic stretchy single pass.
        compensate_pinned: If True, a stick with one pinned end moves its
                           free end by the whole correction instead of half.
        drag_keeps_velocity: If True, a dragged particle carries the pointer
                             motion as velocity; otherwise it is held at rest.
    """
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    gravity: float = DEFAULT_GRAVITY
    friction: float = DEFAULT_FRICTION
    bounce: float = DEFAULT_BOUNCE
    tolerance: float = DEFAULT_TOLERANCE
    boundary: str = "mirror"
    relax_iterations: int = 1
    compensate_pinned: bool = False
    drag_keeps_velocity: bool = False

    def __post_init__(self) -> None:
        for name in ("width", "height", "gravity", "friction", "bounce", "tolerance"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"World size must be positive, got ({self.width}, {self.height})")
        if not 0.0 <= self.friction <= 1.0:
            raise ValueError(f"friction must be in [0, 1], got {self.friction}")
        if not 0.0 <= self.bounce <= 1.0:
            raise ValueError(f"bounce must be in [0, 1], got {self.bounce}")
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {self.tolerance}")
        if self.boundary not in BOUNDARY_MODES:
            raise ValueError(
                f"Unknown boundary mode '{self.boundary}', expected one of {BOUNDARY_MODES}"
            )
        iterations = self.relax_iterations
        integral = isinstance(iterations, numbers.Integral) or (
            isinstance(iterations, numbers.Real) and float(iterations).is_integer()
        )
        if isinstance(iterations, bool) or not integral or iterations < 1:
            raise ValueError(f"relax_iterations must be a positive integer, got {iterations!r}")
        # JSON may deliver 2.0 for 2; range() needs a real int
        object.__setattr__(self, "relax_iterations", int(iterations))

    def replace(self, **changes) -> "WorldConfig":
        """Return a copy with the given fields changed (validated again)."""
        return _replace(self, **changes)
