# MIT License (see LICENSE)
"""
Small numeric helpers shared by the solver, the loader and the controller.
"""
from __future__ import annotations
import math

import numpy as np

from .constants import DISTANCE_EPS


def f64(x) -> np.ndarray:
    """Convert any array-like to a float64 numpy array."""
    return np.array(x, dtype=np.float64)


def as_point(value) -> tuple[float, float]:
    """
    Coerce a 2-sequence (tuple, list, array) into a float pair.

    Raises:
        ValueError: If the value does not have exactly two finite entries.
    """
    try:
        x, y = value
        point = (float(x), float(y))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Expected an (x, y) pair, got {value!r}") from e
    if not (math.isfinite(point[0]) and math.isfinite(point[1])):
        raise ValueError(f"Coordinates must be finite, got {point}")
    return point


def separation(x0: float, y0: float, x1: float, y1: float) -> tuple[float, float, float]:
    """
    Vector from point 0 to point 1 and its length.

    A zero length is replaced by DISTANCE_EPS so callers can divide by it.

    Returns:
        Tuple (dx, dy, distance).
    """
    dx = x1 - x0
    dy = y1 - y0
    distance = math.sqrt(dx * dx + dy * dy)
    if distance == 0.0:
        distance = DISTANCE_EPS
    return dx, dy, distance


def within_window(x0: float, y0: float, x1: float, y1: float, tolerance: float) -> bool:
    """True if the points differ by strictly less than tolerance on both axes."""
    return abs(x1 - x0) < tolerance and abs(y1 - y0) < tolerance
