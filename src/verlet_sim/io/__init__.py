# MIT License (see LICENSE)
"""
Scenario file input/output.

Typical usage:
    from verlet_sim.io import load_world, load_scenario

    world = load_world("cloth.json")
    world, config = load_scenario("cloth.json")
"""
from .json_io import (
    load_world,
    load_world_raw,
    load_scenario,
    world_from_json,
    world_to_json,
    particle_from_json,
    config_from_json,
)

__all__ = [
    # Loading
    "load_world",
    "load_world_raw",
    "load_scenario",
    # Parsing
    "world_from_json",
    "particle_from_json",
    "config_from_json",
    # Export
    "world_to_json",
]
