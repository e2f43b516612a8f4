import pytest
from verlet_sim.config import WorldConfig


def test_defaults():
    c = WorldConfig()
    assert (c.width, c.height) == (500.0, 500.0)
    assert c.gravity == 0.5
    assert c.friction == 0.995
    assert c.bounce == 0.9
    assert c.tolerance == 10.0
    assert c.boundary == "mirror"
    assert c.relax_iterations == 1
    assert c.compensate_pinned is False


@pytest.mark.parametrize("changes", [
    {"width": 0},
    {"height": -5},
    {"friction": 1.5},
    {"bounce": -0.1},
    {"tolerance": -1},
    {"boundary": "wrap"},
    {"relax_iterations": 0},
    {"relax_iterations": 1.5},
    {"relax_iterations": True},
    {"relax_iterations": "2"},
    {"relax_iterations": float("inf")},
    {"gravity": float("nan")},
])
def test_invalid_values(changes):
    with pytest.raises(ValueError):
        WorldConfig(**changes)


def test_replace_returns_validated_copy():
    c = WorldConfig()
    d = c.replace(boundary="clamp")
    assert d.boundary == "clamp" and c.boundary == "mirror"
    with pytest.raises(ValueError):
        c.replace(friction=2.0)


def test_whole_float_iterations_are_stored_as_int():
    c = WorldConfig(relax_iterations=2.0)
    assert c.relax_iterations == 2
    assert type(c.relax_iterations) is int
