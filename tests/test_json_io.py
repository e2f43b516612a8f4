import json
import numpy as np
import pytest
from verlet_sim.config import WorldConfig
from verlet_sim.scenarios import cloth_world
from verlet_sim.simulation import Simulation
from verlet_sim.world import World
from verlet_sim.io.json_io import (
    load_world, load_scenario, world_from_json, world_to_json, config_from_json
)


def _write(tmp_path, data, name="scenario.json"):
    p = tmp_path / name
    p.write_text(json.dumps(data), encoding="utf-8")
    return str(p)


def test_load_keyed_particles(tmp_path):
    path = _write(tmp_path, {
        "particles": {
            "p0": {"x": 100, "y": 100, "oldx": 95, "oldy": 95, "pinned": True},
            "p1": {"x": 200, "y": 100},
        },
        "sticks": [{"links": ["p0", "p1"]}],
    })
    world = load_world(path)

    assert len(world) == 2
    p0 = world.particle(world.index_of("p0"))
    assert p0.pinned and p0.previous_position == (95.0, 95.0)
    assert world.particle(1).previous_position == (200.0, 100.0)
    assert world.sticks[0].rest_length == pytest.approx(100.0)


def test_explicit_length_and_particle_list():
    world = world_from_json({
        "particles": [{"x": 0, "y": 0}, {"x": 10, "y": 0}],
        "sticks": [{"links": [0, 1], "length": 4}],
    })
    assert world.sticks[0].rest_length == 4.0
    assert world.key_of(0) is None


def test_particle_list_with_ids():
    world = world_from_json({
        "particles": [{"id": "a", "x": 0, "y": 0}, {"id": "b", "x": 0, "y": 3}],
        "sticks": [{"links": ["b", "a"]}],
    })
    assert world.index_of("b") == 1
    assert world.sticks[0].a == 1


@pytest.mark.parametrize("data", [
    {},
    {"particles": 5},
    {"particles": {"a": {"x": 1}}},
    {"particles": {"a": {"x": 1, "y": 1}}, "sticks": [{"links": ["a", "zzz"]}]},
    {"particles": {"a": {"x": 1, "y": 1}, "b": {"x": 2, "y": 2}}, "sticks": [{"links": ["a"]}]},
    {"particles": [{"id": "a", "x": 0, "y": 0}, {"id": "a", "x": 1, "y": 1}]},
    {"particles": {"a": {"x": 1, "y": 1, "pinned": "false"}}},
    {"particles": [{"x": 1, "y": 1, "pinned": 1}]},
])
def test_malformed_scenarios_fail_fast(data):
    with pytest.raises(ValueError):
        world_from_json(data)


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_world("/nonexistent/world.json")


def test_scenario_config_block(tmp_path):
    path = _write(tmp_path, {
        "particles": {"a": {"x": 1, "y": 1}},
        "config": {"gravity": 0.2, "boundary": "clamp", "relax_iterations": 4},
    })
    world, config = load_scenario(path)
    assert len(world) == 1
    assert config == WorldConfig(gravity=0.2, boundary="clamp", relax_iterations=4)
    assert config.width == 500.0


def test_config_defaults_and_unknown_keys():
    assert config_from_json({}) == WorldConfig()
    with pytest.raises(ValueError):
        config_from_json({"gravty": 1.0})
    with pytest.raises(ValueError):
        config_from_json({"bounce": 2.0})


def test_world_to_json_reloads_identically():
    original = world_from_json({
        "particles": {
            "p0": {"x": 1, "y": 2, "oldx": 0, "oldy": 1, "pinned": True},
            "p1": {"x": 5, "y": 2},
        },
        "sticks": [{"links": ["p0", "p1"], "length": 3.5}],
    })
    data = world_to_json(original)
    assert "oldx" not in data["particles"]["p1"]

    reloaded = world_from_json(json.loads(json.dumps(data)))
    assert reloaded.particles() == original.particles()
    assert reloaded.sticks == original.sticks
    assert reloaded.names == original.names


def test_float_iterations_from_json_run():
    config = config_from_json({"relax_iterations": 2.0})
    sim = Simulation(cloth_world(config, 3, 3), config)
    sim.step()
    assert sim.frame == 1


def test_world_to_json_rejects_key_clash():
    """Particle 0 is unnamed, so it would take the key '0' already in use."""
    world = World([(0.0, 0.0), (1.0, 1.0)], names=[None, "0"])
    with pytest.raises(ValueError):
        world_to_json(world)
