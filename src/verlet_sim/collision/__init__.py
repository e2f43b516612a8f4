# MIT License (see LICENSE)
"""
Wall collisions.

    - apply_bounds: Dispatch on WorldConfig.boundary.
    - mirror_bounds: Reflect the trajectory off the wall (default).
    - clamp_bounds: Snap the particle onto the wall.
"""
from .bounds import apply_bounds, mirror_bounds, clamp_bounds, out_of_bounds

__all__ = [
    "apply_bounds",
    "mirror_bounds",
    "clamp_bounds",
    "out_of_bounds",
]
