# MIT License (see LICENSE)
"""
JSON scenario files.

A scenario file describes the initial particles and sticks of a World and,
optionally, the world configuration.

JSON Schema Overview:
---------------------
{
  "particles": {                   # Required. Mapping key -> particle,
    "p0": {                        # or a list of particles (each may carry
      "x": float, "y": float,      # an "id" used as its key).
      "oldx": float,               # Default: x (particle at rest)
      "oldy": float,               # Default: y
      "pinned": bool               # Default: false
    }
  },
  "sticks": [                      # Optional
    {
      "links": [key, key],         # Particle keys (or list indices)
      "length": float              # Default: distance at load time
    }
  ],
  "config": {                      # Optional, every field optional
    "width": float, "height": float,
    "gravity": float, "friction": float, "bounce": float,
    "tolerance": float,
    "boundary": "mirror" | "clamp",
    "relax_iterations": int,
    "compensate_pinned": bool
  }
}

Malformed files are rejected while loading; a World never starts with a
stick pointing at a missing particle.
"""
from __future__ import annotations
from dataclasses import fields
import json
import logging
from typing import Any

from ..config import WorldConfig
from ..types import Particle
from ..world import World

logger = logging.getLogger(__name__)


def load_world_raw(path: str) -> dict[str, Any]:
    """Read a scenario file without building anything."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_world(path: str) -> World:
    """
    Load the World described by a scenario file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the scenario is malformed (missing particles, unknown
                    stick endpoints, bad coordinates).
    """
    world = world_from_json(load_world_raw(path))
    logger.info("Loaded scenario %s (%d particles, %d sticks)", path, len(world), len(world.sticks))
    return world


def load_scenario(path: str) -> tuple[World, WorldConfig]:
    """Load a scenario file together with its config block (defaults if absent)."""
    data = load_world_raw(path)
    world = world_from_json(data)
    config = config_from_json(data.get("config", {}))
    logger.info("Loaded scenario %s with %s", path, config)
    return world, config


def particle_from_json(d: dict[str, Any]) -> Particle:
    """Parse one particle entry."""
    if not isinstance(d, dict):
        raise ValueError(f"Particle entry must be an object, got {d!r}")
    if "x" not in d or "y" not in d:
        raise ValueError(f"Particle entry missing required 'x'/'y' fields: {d!r}")
    pinned = d.get("pinned", False)
    if not isinstance(pinned, bool):
        raise ValueError(f"Particle 'pinned' must be true or false, got {pinned!r}")
    x, y = float(d["x"]), float(d["y"])
    return Particle(
        position=(x, y),
        previous_position=(float(d.get("oldx", x)), float(d.get("oldy", y))),
        pinned=pinned,
    )


def world_from_json(data: dict[str, Any]) -> World:
    """
    Build a World from parsed scenario data.

    Raises:
        ValueError: On any structural problem.
    """
    if not isinstance(data, dict) or "particles" not in data:
        raise ValueError("Scenario missing required 'particles' field.")

    raw = data["particles"]
    if isinstance(raw, dict):
        particles = {str(key): particle_from_json(p) for key, p in raw.items()}
    elif isinstance(raw, list):
        if all(isinstance(p, dict) and "id" in p for p in raw):
            particles = {str(p["id"]): particle_from_json(p) for p in raw}
            if len(particles) != len(raw):
                raise ValueError("Duplicate particle ids in scenario")
        else:
            particles = [particle_from_json(p) for p in raw]
    else:
        raise ValueError(f"'particles' must be an object or a list, got {type(raw).__name__}")

    sticks = []
    for s in data.get("sticks", []):
        links = s.get("links") if isinstance(s, dict) else None
        if not isinstance(links, list) or len(links) != 2:
            raise ValueError(f"Stick entry needs 'links' with two particle keys: {s!r}")
        a, b = (str(k) if isinstance(particles, dict) else k for k in links)
        length = s.get("length")
        sticks.append((a, b) if length is None else (a, b, float(length)))

    return World.build(particles, sticks)


def config_from_json(d: dict[str, Any]) -> WorldConfig:
    """
    Build a WorldConfig from a JSON object; absent keys keep their defaults.

    Raises:
        ValueError: On unknown keys or invalid values.
    """
    known = {f.name for f in fields(WorldConfig)}
    unknown = set(d) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    return WorldConfig(**d)


def world_to_json(world: World) -> dict[str, Any]:
    """
    Describe a World in the scenario format.

    Unnamed particles are keyed by their index.

    Raises:
        ValueError: If an index key collides with a particle name.
    """
    particles = {}
    keys = []
    for i in range(len(world)):
        p = world.particle(i)
        key = world.key_of(i) or str(i)
        if key in particles:
            raise ValueError(f"Particle key '{key}' is used twice; name the unnamed particles")
        keys.append(key)
        entry = {"x": p.x, "y": p.y}
        if p.previous_position != p.position:
            entry["oldx"], entry["oldy"] = p.previous_position
        if p.pinned:
            entry["pinned"] = True
        particles[key] = entry

    sticks = [
        {"links": [keys[s.a], keys[s.b]], "length": s.rest_length}
        for s in world.sticks
    ]
    return {"particles": particles, "sticks": sticks}
