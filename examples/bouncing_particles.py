# examples/bouncing_particles.py
from verlet_sim import Simulation, WorldConfig
from verlet_sim.scenarios import particles_world

for boundary in ("mirror", "clamp"):
    config = WorldConfig(boundary=boundary)
    sim = Simulation(particles_world(config), config)
    sim.run(200)
    print(boundary)
    for i, (x, y) in enumerate(sim.world.positions):
        print(f"  [{i}] ({x:7.2f}, {y:7.2f})")
