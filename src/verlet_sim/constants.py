# MIT License (see LICENSE)
"""
Default world parameters used throughout the simulation.

Units are world units (pixels) and simulation steps; there is no physical
time step. Velocity is the per-step displacement, gravity the per-step
change of that displacement.
"""
from __future__ import annotations

# World rectangle [0, width] x [0, height]; y grows downwards.
DEFAULT_WIDTH: float = 500.0
DEFAULT_HEIGHT: float = 500.0

# Downward acceleration added once per step (units/step²).
DEFAULT_GRAVITY: float = 0.5

# Velocity retained each step (0.5% loss models air resistance).
DEFAULT_FRICTION: float = 0.995

# Normal velocity retained after hitting a wall (10% loss per bounce).
DEFAULT_BOUNCE: float = 0.9

# Half-width of the square pick window around a pointer press.
DEFAULT_TOLERANCE: float = 10.0

# Substituted for a zero stick length so the correction direction stays defined.
DISTANCE_EPS: float = 1e-13

BOUNDARY_MODES: tuple[str, ...] = ("mirror", "clamp")
