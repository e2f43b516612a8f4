# examples/falling_cloth.py
from verlet_sim import Simulation, WorldConfig
from verlet_sim.scenarios import cloth_world
from verlet_sim.core import max_stick_error

config = WorldConfig(relax_iterations=3)
sim = Simulation(cloth_world(config, columns=10, rows=8), config)

for _ in range(5):
    sim.run(60)
    print(f"frame {sim.frame:4d}  max stretch {max_stick_error(sim.world):.3f}")
